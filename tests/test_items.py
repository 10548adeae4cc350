import math

import pytest

from src.business_objects import InvalidItem, Item
from src.heuristics.select_next.features import annotate_item, annotate_items


def test_item_accepts_positive_weight_and_any_finite_benefit():
    it = Item(weight=2, benefit=-3)
    assert it.as_pair() == (2, -3)
    assert Item(weight=0.5, benefit=0).benefit == 0


@pytest.mark.parametrize(
    "weight, benefit",
    [
        (0, 1),
        (-1, 1),
        (math.inf, 1),
        (math.nan, 1),
        (1, math.inf),
        (1, -math.inf),
        (1, math.nan),
        ("1", 1),
        (True, 1),
    ],
)
def test_item_rejects_invalid_values(weight, benefit):
    with pytest.raises(InvalidItem):
        Item(weight=weight, benefit=benefit)


def test_coerce_from_pair_and_passthrough():
    it = Item.coerce([3, 5])
    assert it == Item(weight=3, benefit=5)
    assert Item.coerce(it) is it


@pytest.mark.parametrize("raw", [None, 5, [1], [1, 2, 3], "ab"])
def test_coerce_rejects_non_pairs(raw):
    with pytest.raises(InvalidItem):
        Item.coerce(raw)


def test_annotate_item_computes_ratio():
    a = annotate_item((4, 5))
    assert a.ratio == pytest.approx(1.25)
    assert (a.weight, a.benefit) == (4, 5)
    assert a.as_pair() == (4, 5)


def test_annotate_items_is_one_to_one_and_order_preserving():
    raw = [(1, 1), (2, 1), (3, 2)]
    out = annotate_items(raw)
    assert [a.as_pair() for a in out] == raw
    assert [a.ratio for a in out] == pytest.approx([1.0, 0.5, 2 / 3])


def test_annotate_items_fails_fast_on_malformed_collection():
    with pytest.raises(InvalidItem):
        annotate_items([(1, 1), (0, 5), (2, 2)])
