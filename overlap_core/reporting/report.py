# overlap_core/reporting/report.py
from __future__ import annotations

from typing import Iterable

import pandas as pd

from overlap_core.domain.models import EmployeePairTotal, ProjectPairOverlap

PAIR_COLUMNS = ["Employee ID #1", "Employee ID #2", "Project ID", "Days worked"]
TOTAL_COLUMNS = ["Employee ID #1", "Employee ID #2", "Total days worked"]

EMPTY_MESSAGE = "None Pairs Found!"


def build_pairs_table(overlaps: Iterable[ProjectPairOverlap]) -> pd.DataFrame:
    rows = [
        {
            "Employee ID #1": o.employee_low,
            "Employee ID #2": o.employee_high,
            "Project ID": o.project_id,
            "Days worked": o.total_days_worked,
        }
        for o in overlaps
    ]
    df = pd.DataFrame(rows, columns=PAIR_COLUMNS)
    if not df.empty:
        df = df.sort_values(["Employee ID #1", "Employee ID #2", "Project ID"]).reset_index(drop=True)
    return df


def build_totals_table(totals: Iterable[EmployeePairTotal]) -> pd.DataFrame:
    rows = [
        {
            "Employee ID #1": t.employee_low,
            "Employee ID #2": t.employee_high,
            "Total days worked": t.total_days_worked,
        }
        for t in totals
    ]
    df = pd.DataFrame(rows, columns=TOTAL_COLUMNS)
    if not df.empty:
        df = df.sort_values(
            ["Total days worked", "Employee ID #1", "Employee ID #2"],
            ascending=[False, True, True],
        ).reset_index(drop=True)
    return df


def count_line(df: pd.DataFrame) -> str:
    return f"Pairs Found: {len(df)}"
