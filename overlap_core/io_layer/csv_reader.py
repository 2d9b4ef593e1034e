# overlap_core/io_layer/csv_reader.py
from __future__ import annotations

import logging
import re
import zipfile
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from overlap_core.config import ReaderConfig
from overlap_core.io_layer.paths import InputPaths
from overlap_core.validation.errors import ReadError

logger = logging.getLogger(__name__)

Row = List[str]

_LINE_SPLIT = re.compile(r"\r?\n")


def split_rows(text: str, delimiter: str = ",") -> List[Row]:
    """
    区切り文字テキストを行×列に分割する。
    空行は飛ばし、各列の前後空白は除去。引用符で囲んだ区切り文字には非対応。
    """
    rows: List[Row] = []
    for line in _LINE_SPLIT.split(text):
        if not line.strip():
            continue
        rows.append([col.strip() for col in line.split(delimiter)])
    return rows


def _cell_to_text(value) -> str:
    if value is None:
        return ""
    # datetime は date のサブクラスなので先に判定する
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def read_xlsx_rows(path: str, sheet_name: str = "") -> List[Row]:
    try:
        wb = load_workbook(path, data_only=True, read_only=True)
    except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as e:
        raise ReadError(f"Error reading file: {path} ({e})") from e

    try:
        if sheet_name:
            if sheet_name not in wb.sheetnames:
                raise ReadError(f"Error reading file: sheet {sheet_name!r} not found in {path}")
            ws = wb[sheet_name]
        else:
            ws = wb.worksheets[0]

        rows: List[Row] = []
        for values in ws.iter_rows(values_only=True):
            cols = [_cell_to_text(v) for v in values]
            # 末尾の空セルは落とす（列数判定を csv と揃える）
            while cols and cols[-1] == "":
                cols.pop()
            if not cols:
                continue
            rows.append(cols)
        return rows
    finally:
        wb.close()


def read_text(path: str, encoding: str = "utf-8-sig") -> str:
    try:
        return Path(path).read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise ReadError(f"Failed to read file content: {path} is not valid {encoding} text") from e
    except OSError as e:
        raise ReadError(f"Error reading file: {path} ({e.strerror or e})") from e


def decode_bytes(data: bytes, encoding: str = "utf-8-sig") -> str:
    """アップロードされたバイト列をテキストにする（GUI用）"""
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise ReadError(f"Failed to read file content: not valid {encoding} text") from e


def read_rows(paths: InputPaths, cfg: Optional[ReaderConfig] = None) -> List[Row]:
    cfg = cfg or ReaderConfig()
    suffix = Path(paths.input_file).suffix.lower()

    if suffix in paths.xlsx_suffixes:
        rows = read_xlsx_rows(paths.input_file, cfg.sheet_name)
    elif suffix in paths.text_suffixes or suffix == "":
        delimiter = "\t" if suffix == ".tsv" else cfg.delimiter
        rows = split_rows(read_text(paths.input_file, cfg.encoding), delimiter)
    else:
        raise ReadError(f"Unsupported input file type: {paths.input_file}")

    logger.debug("read %d rows from %s", len(rows), paths.input_file)
    return rows
