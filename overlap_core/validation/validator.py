# overlap_core/validation/validator.py
from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from overlap_core.config import AppConfig, DEFAULT_CONFIG
from overlap_core.domain.dates import DateNormalizer
from overlap_core.domain.models import WorkAssignment
from overlap_core.validation.errors import InvalidDateError, InvalidFormatError, ValidationError

logger = logging.getLogger(__name__)


_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_id(token: str, row_no: Optional[int], label: str) -> int:
    # int() は "1_0" や全角/アラビア数字も通すので ASCII の数字列に限定する
    if not _INT_RE.fullmatch(token.strip()):
        raise InvalidFormatError(
            f"Invalid data format in CSV: {label} {token!r} is not a number" + _at(row_no),
            row_no=row_no,
            token=token,
        )
    return int(token.strip())


def _at(row_no: Optional[int]) -> str:
    return f" (row {row_no})" if row_no is not None else ""


def validate_row(
    row: Sequence[str],
    normalizer: DateNormalizer,
    cfg: AppConfig = DEFAULT_CONFIG,
    row_no: Optional[int] = None,
) -> Optional[WorkAssignment]:
    """1行を WorkAssignment に変換する。列不足の行は None（読み飛ばし）"""
    if len(row) < cfg.min_row_tokens:
        return None

    employee_id = _parse_id(row[0], row_no, "employee id")
    project_id = _parse_id(row[1], row_no, "project id")

    dates = []
    for token in (row[2], row[3]):
        try:
            dates.append(normalizer.normalize(token))
        except InvalidDateError as e:
            raise InvalidFormatError(
                f"Invalid data format in CSV: {e.message}" + _at(row_no),
                row_no=row_no,
                token=token,
            ) from e

    return WorkAssignment(
        employee_id=employee_id,
        project_id=project_id,
        date_from=dates[0],
        date_to=dates[1],
    )


def validate_rows(
    rows: Sequence[Sequence[str]],
    normalizer: DateNormalizer,
    cfg: AppConfig = DEFAULT_CONFIG,
) -> List[WorkAssignment]:
    # 1行でも不正があればバッチ全体をエラーにする（部分結果は返さない）
    assignments: List[WorkAssignment] = []
    skipped = 0
    for row_no, row in enumerate(rows, start=1):
        a = validate_row(row, normalizer, cfg, row_no=row_no)
        if a is None:
            skipped += 1
            continue
        assignments.append(a)
    logger.debug("validated %d assignments (%d short rows skipped)", len(assignments), skipped)
    return assignments
