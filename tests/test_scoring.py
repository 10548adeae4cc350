from fractions import Fraction

import pytest

from src.business_objects import NoFeasibleSolution
from src.heuristics.select_next.features import annotate_items
from src.heuristics.select_next.selector import rank_items
from src.heuristics.subsets.choose import is_better, reduce_best, select_best, unwrap
from src.heuristics.subsets.enumerator import iter_subsets
from src.heuristics.subsets.scoring import filter_by_capacity, score_all, score_subset
from src.planning import ScoredSubset


REFERENCE = [(1, 1), (2, 1), (3, 2), (3, 5), (4, 2), (4, 5)]


def _scored(pairs=REFERENCE):
    return list(score_all(iter_subsets(rank_items(annotate_items(pairs)))))


def test_empty_subset_scores_zero():
    s = score_subset(0, ())
    assert (s.total_ratio, s.total_weight, s.members) == (0.0, 0.0, ())


def test_totals_are_sums_of_member_ratios_and_weights():
    for s in _scored():
        assert s.total_weight == pytest.approx(sum(m.weight for m in s.members))
        assert s.total_ratio == pytest.approx(sum(m.ratio for m in s.members))


def test_total_ratio_is_not_total_benefit():
    s = score_subset(1, annotate_items([(4, 5)]))
    assert s.total_ratio == pytest.approx(1.25)
    assert s.total_benefit == 5


def test_filter_keeps_only_fitting_subsets():
    kept = list(filter_by_capacity(_scored(), 5))
    assert kept
    assert all(s.total_weight <= 5 for s in kept)
    dropped = [s for s in _scored() if s.total_weight > 5]
    assert len(kept) + len(dropped) == 64


def test_filter_unconstrained_keeps_everything():
    assert len(list(filter_by_capacity(_scored(), None))) == 64


def test_filter_zero_capacity_keeps_only_empty_subset():
    kept = list(filter_by_capacity(_scored(), 0))
    assert [s.mask for s in kept] == [0]


def test_filter_negative_capacity_keeps_nothing():
    assert list(filter_by_capacity(_scored(), -1)) == []


def test_filter_eps_tolerance():
    (s,) = [x for x in _scored([(0.1, 1), (0.2, 1)]) if x.mask == 3]
    assert s.total_weight > 0.3
    assert list(filter_by_capacity([s], 0.3)) == []
    assert list(filter_by_capacity([s], 0.3, eps=1e-9)) == [s]


def test_is_better_prefers_ratio_then_smaller_mask():
    a = ScoredSubset(total_ratio=2.0, total_weight=1.0, members=(), mask=5)
    b = ScoredSubset(total_ratio=2.0, total_weight=3.0, members=(), mask=2)
    c = ScoredSubset(total_ratio=2.5, total_weight=9.0, members=(), mask=7)
    assert is_better(a, None)
    assert is_better(b, a) and not is_better(a, b)
    assert is_better(c, b) and not is_better(b, c)


def test_reduce_best_is_order_independent():
    subsets = _scored()
    forward = reduce_best(subsets)
    backward = reduce_best(reversed(subsets))
    assert forward == backward
    assert reduce_best([None, None]) is None


def test_select_best_tie_goes_to_earliest_mask():
    # (2, 2) and (1, 1) share ratio 1; heavier ranks first (bit 0)
    kept = filter_by_capacity(_scored([(1, 1), (2, 2)]), 2)
    best = select_best(kept)
    assert best.mask == 1
    assert unwrap(best) == [(2, 2)]


def test_select_best_on_empty_stream_raises():
    with pytest.raises(NoFeasibleSolution):
        select_best(iter(()))


def test_unwrap_returns_pairs_in_ranked_order():
    best = select_best(_scored())
    assert unwrap(best) == [(3, 5), (4, 5), (1, 1), (3, 2), (4, 2), (2, 1)]


def test_filter_negative_capacity_ignores_tolerance():
    assert list(filter_by_capacity(_scored(), -1e-12, eps=1e-9)) == []


def test_exact_members_score_exactly():
    members = annotate_items([(1, Fraction(2, 10)), (1, Fraction(1, 10))])
    s = score_subset(3, members)
    assert s.total_ratio == Fraction(3, 10)
    assert s.total_weight == 2
