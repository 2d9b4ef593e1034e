# overlap_core/validation/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class InvalidDateError(ValidationError):
    token: str = ""


@dataclass(frozen=True)
class InvalidFormatError(ValidationError):
    row_no: Optional[int] = None  # 1始まり（空行除外後）
    token: str = ""


@dataclass(frozen=True)
class ReadError(Exception):
    """ファイル読み込み/デコード失敗（データ検証エラーとは区別する）"""
    message: str

    def __str__(self) -> str:
        return self.message
