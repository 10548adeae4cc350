# -*- coding: utf-8 -*-
"""
I/O helpers for loading ratio knapsack problem definitions.

JSON formats:
- items file   : [[<weight>, <benefit>], ...]
                 or [{"weight": <number>, "benefit": <number>}, ...]
- problem file : {"items": <items array>, "capacity": <number> | null}

Items map directly to business_objects.items.Item. A null or missing
capacity means unconstrained.
"""

from __future__ import annotations
import json
from typing import Any, List, Optional, Tuple

from src.business_objects.errors import InvalidItem, SchemaError
from src.business_objects.items import Item


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _load(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e


def _parse_items(data: Any, path: str) -> List[Item]:
    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array of items.")

    items: List[Item] = []
    for idx, obj in enumerate(data, start=1):
        try:
            if isinstance(obj, dict):
                items.append(Item(
                    weight=_require(obj, "weight", path),  # type: ignore[arg-type]
                    benefit=_require(obj, "benefit", path),  # type: ignore[arg-type]
                ))
            elif isinstance(obj, list) and len(obj) == 2:
                items.append(Item.coerce(obj))
            else:
                raise SchemaError(f"expected [weight, benefit] or an object, got {obj!r}")
        except (SchemaError, InvalidItem) as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return items


def read_items_json(path: str) -> List[Item]:
    """
    Load items from a JSON array. Each element is either
      - [weight, benefit]
      - {"weight": number, "benefit": number}
    """
    return _parse_items(_load(path), path)


def read_problem_json(path: str) -> Tuple[List[Item], Optional[float]]:
    """
    Load {"items": [...], "capacity": number | null}.
    Returns (items, capacity) with capacity None when unconstrained.
    """
    data = _load(path)
    if not isinstance(data, dict):
        raise SchemaError(f"{path}: expected a JSON object.")

    items = _parse_items(_require(data, "items", path), path)
    raw_cap = data.get("capacity")
    if raw_cap is None:
        return items, None
    if isinstance(raw_cap, bool) or not isinstance(raw_cap, (int, float)):
        raise SchemaError(f"{path}: capacity must be a number or null, got {raw_cap!r}")
    return items, float(raw_cap)
