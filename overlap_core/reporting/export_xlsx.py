# overlap_core/reporting/export_xlsx.py
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Union

import pandas as pd

from overlap_core.config import ExportConfig


def _write(target: Union[str, BinaryIO], pairs_df: pd.DataFrame, totals_df: pd.DataFrame, cfg: ExportConfig) -> None:
    with pd.ExcelWriter(target, engine="openpyxl") as w:
        pairs_df.to_excel(w, sheet_name=cfg.pairs_sheet_name, index=False)
        totals_df.to_excel(w, sheet_name=cfg.totals_sheet_name, index=False)


def export_result_xlsx(
    out_path: str,
    pairs_df: pd.DataFrame,
    totals_df: pd.DataFrame,
    cfg: ExportConfig = ExportConfig(),
) -> str:
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    _write(out_path, pairs_df, totals_df, cfg)
    return out_path


def export_result_bytes(
    pairs_df: pd.DataFrame,
    totals_df: pd.DataFrame,
    cfg: ExportConfig = ExportConfig(),
) -> bytes:
    """Streamlitダウンロード用にxlsxをメモリに書き出す"""
    buf = BytesIO()
    _write(buf, pairs_df, totals_df, cfg)
    return buf.getvalue()
