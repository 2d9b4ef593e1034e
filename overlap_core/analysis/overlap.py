# overlap_core/analysis/overlap.py
from __future__ import annotations

import logging
from collections import defaultdict
from typing import DefaultDict, Sequence

from overlap_core.domain.models import (
    EmployeePairTotal,
    OverlapResult,
    PairKey,
    ProjectPairKey,
    ProjectPairOverlap,
    WorkAssignment,
)

logger = logging.getLogger(__name__)


def overlap_days(a: WorkAssignment, b: WorkAssignment) -> int:
    """2つの期間の重なり日数（両端を含む）。重ならなければ 0"""
    start = max(a.date_from, b.date_from)
    end = min(a.date_to, b.date_to)
    if end < start:
        return 0
    return (end - start).days + 1


def canonical_pair(emp_a: int, emp_b: int) -> PairKey:
    return (min(emp_a, emp_b), max(emp_a, emp_b))


def compute_overlaps(assignments: Sequence[WorkAssignment]) -> OverlapResult:
    """
    全レコード対（i < j）を走査し、同一プロジェクト・別社員で期間が重なるものを集計する。
    O(n^2) だが入力は人手で管理される規模なので問題ない。
    """
    per_project_days: DefaultDict[ProjectPairKey, int] = defaultdict(int)
    per_pair_days: DefaultDict[PairKey, int] = defaultdict(int)

    n = len(assignments)
    for i in range(n):
        p1 = assignments[i]
        for j in range(i + 1, n):
            p2 = assignments[j]
            if p1.project_id != p2.project_id or p1.employee_id == p2.employee_id:
                continue
            days = overlap_days(p1, p2)
            if days <= 0:
                continue
            low, high = canonical_pair(p1.employee_id, p2.employee_id)
            per_project_days[(low, high, p1.project_id)] += days
            per_pair_days[(low, high)] += days

    per_project = {
        key: ProjectPairOverlap(
            employee_low=key[0],
            employee_high=key[1],
            project_id=key[2],
            total_days_worked=days,
        )
        for key, days in sorted(per_project_days.items())
    }
    per_pair = {
        key: EmployeePairTotal(employee_low=key[0], employee_high=key[1], total_days_worked=days)
        for key, days in sorted(per_pair_days.items())
    }
    logger.debug("found %d project overlaps across %d employee pairs", len(per_project), len(per_pair))
    return OverlapResult(per_project=per_project, per_pair=per_pair)
