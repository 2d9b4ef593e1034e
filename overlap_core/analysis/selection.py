# overlap_core/analysis/selection.py
from __future__ import annotations

from typing import Iterable, List, Mapping, Set

from overlap_core.domain.models import EmployeePairTotal, PairKey, ProjectPairKey, ProjectPairOverlap


def winning_pairs(totals: Iterable[EmployeePairTotal]) -> Set[PairKey]:
    """合計日数が最大のペア（同点はすべて）"""
    totals = list(totals)
    if not totals:
        return set()
    max_total = max(t.total_days_worked for t in totals)
    return {t.pair for t in totals if t.total_days_worked == max_total}


def select_top_pairs(
    totals: Mapping[PairKey, EmployeePairTotal],
    per_project: Mapping[ProjectPairKey, ProjectPairOverlap],
) -> List[ProjectPairOverlap]:
    winners = winning_pairs(totals.values())
    if not winners:
        return []
    return sorted(
        (o for o in per_project.values() if o.pair in winners),
        key=lambda o: o.key,
    )
