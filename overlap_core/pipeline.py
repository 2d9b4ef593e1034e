# overlap_core/pipeline.py
from __future__ import annotations

import logging
from typing import Optional, Sequence

from overlap_core.analysis.overlap import compute_overlaps
from overlap_core.analysis.selection import select_top_pairs
from overlap_core.config import AppConfig, DEFAULT_CONFIG
from overlap_core.domain.dates import Clock, DateNormalizer, today_in
from overlap_core.domain.models import AnalysisResult
from overlap_core.io_layer.csv_reader import read_rows
from overlap_core.io_layer.paths import InputPaths
from overlap_core.validation.errors import ReadError
from overlap_core.validation.validator import ValidationError, validate_rows

logger = logging.getLogger(__name__)


def run_batch(
    rows: Sequence[Sequence[str]],
    cfg: AppConfig = DEFAULT_CONFIG,
    clock: Optional[Clock] = None,
) -> AnalysisResult:
    """
    検証 → 重なり集計 → 最長ペア抽出 を1回分実行する。
    検証エラーは例外ではなく ok=False の結果として返す（部分結果なし）。
    """
    normalizer = DateNormalizer(clock=clock or today_in(cfg.timezone_name))

    try:
        assignments = validate_rows(rows, normalizer, cfg)
    except ValidationError as e:
        logger.info("batch rejected: %s", e.message)
        return AnalysisResult(ok=False, error=e.message)

    overlaps = compute_overlaps(assignments)
    top = select_top_pairs(overlaps.per_pair, overlaps.per_project)

    return AnalysisResult(
        ok=True,
        assignments=list(assignments),
        all_pairs=list(overlaps.per_project.values()),
        top_pairs=top,
        totals=sorted(overlaps.per_pair.values(), key=lambda t: (-t.total_days_worked, t.pair)),
    )


def run_file(
    paths: InputPaths,
    cfg: AppConfig = DEFAULT_CONFIG,
    clock: Optional[Clock] = None,
) -> AnalysisResult:
    try:
        rows = read_rows(paths, cfg.reader)
    except ReadError as e:
        logger.info("read failed: %s", e.message)
        return AnalysisResult(ok=False, error=e.message)
    return run_batch(rows, cfg, clock)
