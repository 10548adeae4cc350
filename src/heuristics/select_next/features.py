# -*- coding: utf-8 -*-
"""
Annotator: attach the merit ratio to every item.

Pure and stateless; no mutation or I/O. Validation happens here, eagerly,
so a malformed collection fails before any subset is enumerated.
"""

from __future__ import annotations
from typing import Any, Iterable, List

from src.business_objects.items import Item
from src.planning.state import AnnotatedItem


def annotate_item(item: Any) -> AnnotatedItem:
    """
    Compute the annotated form of a single item.

    `item` may be an Item or a (weight, benefit) pair. Raises InvalidItem
    if weight <= 0, weight or benefit is non-finite, or the value is not a pair.
    """
    return AnnotatedItem.from_item(Item.coerce(item))


def annotate_items(items: Iterable[Any]) -> List[AnnotatedItem]:
    """One-to-one, order-preserving annotation of the whole collection."""
    return [annotate_item(it) for it in items]
