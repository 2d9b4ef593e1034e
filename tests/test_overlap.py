from datetime import date
from itertools import permutations

from overlap_core.analysis.overlap import canonical_pair, compute_overlaps, overlap_days
from overlap_core.domain.models import WorkAssignment


def wa(emp, proj, start, end):
    return WorkAssignment(emp, proj, date.fromisoformat(start), date.fromisoformat(end))


def test_overlap_days_is_inclusive():
    a = wa(1, 1, "2024-01-01", "2024-01-10")
    b = wa(2, 1, "2024-01-05", "2024-01-15")
    assert overlap_days(a, b) == 6
    assert overlap_days(b, a) == 6


def test_single_shared_day_counts_as_one():
    a = wa(1, 1, "2024-01-01", "2024-01-05")
    b = wa(2, 1, "2024-01-05", "2024-01-09")
    assert overlap_days(a, b) == 1


def test_disjoint_ranges_do_not_overlap():
    a = wa(1, 1, "2024-01-01", "2024-01-04")
    b = wa(2, 1, "2024-01-05", "2024-01-09")
    assert overlap_days(a, b) == 0


def test_reversed_range_yields_no_overlap():
    a = wa(1, 1, "2024-01-10", "2024-01-01")
    b = wa(2, 1, "2024-01-01", "2024-01-31")
    assert compute_overlaps([a, b]).per_project == {}


def test_canonical_pair():
    assert canonical_pair(9, 3) == (3, 9)
    assert canonical_pair(3, 9) == (3, 9)


def test_example_dataset():
    result = compute_overlaps([
        wa(1, 1, "2024-01-01", "2024-01-10"),
        wa(2, 1, "2024-01-05", "2024-01-15"),
        wa(1, 2, "2024-02-01", "2024-02-05"),
        wa(3, 2, "2024-02-03", "2024-02-10"),
    ])
    assert {k: v.total_days_worked for k, v in result.per_project.items()} == {
        (1, 2, 1): 6,
        (1, 3, 2): 3,
    }
    assert {k: v.total_days_worked for k, v in result.per_pair.items()} == {
        (1, 2): 6,
        (1, 3): 3,
    }


def test_different_projects_never_pair():
    result = compute_overlaps([
        wa(1, 1, "2024-01-01", "2024-01-10"),
        wa(2, 2, "2024-01-01", "2024-01-10"),
    ])
    assert result.per_pair == {}


def test_no_self_pairing():
    result = compute_overlaps([
        wa(1, 1, "2024-01-01", "2024-01-10"),
        wa(1, 1, "2024-01-05", "2024-01-15"),
    ])
    assert result.per_project == {}


def test_repeated_assignments_accumulate():
    result = compute_overlaps([
        wa(1, 1, "2024-01-01", "2024-01-10"),
        wa(1, 1, "2024-01-05", "2024-01-15"),
        wa(2, 1, "2024-01-01", "2024-01-31"),
    ])
    assert result.per_project[(1, 2, 1)].total_days_worked == 10 + 11


def test_pair_total_sums_projects():
    result = compute_overlaps([
        wa(5, 1, "2024-01-01", "2024-01-10"),
        wa(4, 1, "2024-01-01", "2024-01-10"),
        wa(4, 2, "2024-03-01", "2024-03-02"),
        wa(5, 2, "2024-03-01", "2024-03-31"),
    ])
    assert result.per_pair[(4, 5)].total_days_worked == 12
    assert set(result.per_project) == {(4, 5, 1), (4, 5, 2)}


def test_input_order_does_not_change_totals():
    records = [
        wa(2, 1, "2024-01-05", "2024-01-15"),
        wa(1, 1, "2024-01-01", "2024-01-10"),
        wa(3, 1, "2024-01-08", "2024-01-20"),
        wa(1, 2, "2024-02-01", "2024-02-05"),
    ]
    expected = compute_overlaps(records)
    for perm in permutations(records):
        result = compute_overlaps(list(perm))
        assert result.per_project == expected.per_project
        assert result.per_pair == expected.per_pair
