# overlap_core/domain/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple

PairKey = Tuple[int, int]               # (employee_low, employee_high)
ProjectPairKey = Tuple[int, int, int]   # (employee_low, employee_high, project_id)


@dataclass(frozen=True)
class WorkAssignment:
    """入力1行分（検証済み）"""
    employee_id: int
    project_id: int
    date_from: date
    date_to: date


@dataclass(frozen=True)
class ProjectPairOverlap:
    employee_low: int
    employee_high: int
    project_id: int
    total_days_worked: int

    @property
    def key(self) -> ProjectPairKey:
        return (self.employee_low, self.employee_high, self.project_id)

    @property
    def pair(self) -> PairKey:
        return (self.employee_low, self.employee_high)


@dataclass(frozen=True)
class EmployeePairTotal:
    employee_low: int
    employee_high: int
    total_days_worked: int

    @property
    def pair(self) -> PairKey:
        return (self.employee_low, self.employee_high)


@dataclass(frozen=True)
class OverlapResult:
    per_project: Dict[ProjectPairKey, ProjectPairOverlap]
    per_pair: Dict[PairKey, EmployeePairTotal]


@dataclass
class AnalysisResult:
    """1回のバッチ実行結果。失敗時は error のみで結果は空"""
    ok: bool
    error: Optional[str] = None
    assignments: List[WorkAssignment] = field(default_factory=list)
    all_pairs: List[ProjectPairOverlap] = field(default_factory=list)
    top_pairs: List[ProjectPairOverlap] = field(default_factory=list)
    totals: List[EmployeePairTotal] = field(default_factory=list)

    def view(self, name: str) -> List[ProjectPairOverlap]:
        if name == "all_pairs":
            return self.all_pairs
        if name == "top_pairs":
            return self.top_pairs
        raise ValueError(f"unknown result view: {name}")
