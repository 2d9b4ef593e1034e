# overlap_core/config.py
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReaderConfig:
    """入力ファイルの読み込み設定"""
    delimiter: str = ","
    encoding: str = "utf-8-sig"  # BOM付きCSVもそのまま読める
    sheet_name: str = ""         # xlsx: 空なら先頭シート


@dataclass(frozen=True)
class ExportConfig:
    pairs_sheet_name: str = "pairs"
    totals_sheet_name: str = "totals"


@dataclass(frozen=True)
class AppConfig:
    # 4列未満の行は読み飛ばす（EmpID, ProjectID, DateFrom, DateTo）
    min_row_tokens: int = 4

    # "null"/空欄の日付は処理時点の「今日」として扱う
    timezone_name: str = "UTC"

    # 表示する結果: "top_pairs"（最長ペアのみ） or "all_pairs"
    result_view: str = "top_pairs"

    reader: ReaderConfig = field(default_factory=ReaderConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


DEFAULT_CONFIG = AppConfig()
