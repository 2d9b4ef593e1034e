# overlap_core/io_layer/paths.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InputPaths:
    """
    input_file: 社員×プロジェクト×期間の一覧（csv / txt / xlsx）
    output_file: 結果 xlsx（None なら書き出さない）
    """
    input_file: str
    output_file: Optional[str] = None

    # 対応拡張子（運用で増やすならここだけ）
    text_suffixes: tuple = (".csv", ".txt", ".tsv")
    xlsx_suffixes: tuple = (".xlsx", ".xlsm")
