# overlap_core/domain/dates.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Callable, List, Optional, Tuple

from dateutil import parser as date_parser
from dateutil import tz

from overlap_core.validation.errors import InvalidDateError

logger = logging.getLogger(__name__)

Clock = Callable[[], date]

# (名前, パターン, 年/月/日のグループ位置)
# 注意: MM/DD/YYYY と DD/MM/YYYY は同じ形なので、先に並ぶ MM/DD/YYYY が常に勝つ。
# DD/MM/YYYY には到達しないが、既存データとの互換のため順序はこのまま。
DATE_FORMATS: List[Tuple[str, "re.Pattern[str]", Tuple[int, int, int]]] = [
    ("YYYY-MM-DD", re.compile(r"^(\d{4})-(\d{2})-(\d{2})$"), (1, 2, 3)),
    ("MM/DD/YYYY", re.compile(r"^(\d{2})/(\d{2})/(\d{4})$"), (3, 1, 2)),
    ("DD-MM-YYYY", re.compile(r"^(\d{2})-(\d{2})-(\d{4})$"), (3, 2, 1)),
    ("DD/MM/YYYY", re.compile(r"^(\d{2})/(\d{2})/(\d{4})$"), (3, 2, 1)),
]


def today_in(timezone_name: str) -> Clock:
    """指定タイムゾーンでの「今日」を返すクロック"""
    zone = tz.gettz(timezone_name)

    def _today() -> date:
        return datetime.now(tz=zone).date()

    return _today


def _match_format(token: str) -> Optional[Tuple[str, Tuple[int, int, int]]]:
    for name, pattern, (yi, mi, di) in DATE_FORMATS:
        m = pattern.match(token)
        if m:
            return name, (int(m.group(yi)), int(m.group(mi)), int(m.group(di)))
    return None


@dataclass(frozen=True)
class DateNormalizer:
    clock: Clock = field(default_factory=lambda: today_in("UTC"))

    def normalize(self, token: Optional[str]) -> date:
        """
        日付トークンを date に変換する。
        - 空欄 / "null"（大文字小文字無視）は今日。前後空白を除いてから判定するので " null " も今日
        - 既知フォーマットを順に試し、最初に形が一致したもので解釈
        - 一致しない / 実在しない日付なら dateutil の汎用パーサにフォールバック
        どれでも解釈できなければ InvalidDateError。
        汎用パーサで欠けた年月日は clock の日付で補う（"5" -> 今月5日）。
        """
        if token is None or not token.strip() or token.strip().lower() == "null":
            return self.clock()

        s = token.strip()
        matched = _match_format(s)
        if matched is not None:
            name, (y, mo, d) = matched
            try:
                return date(y, mo, d)
            except ValueError:
                logger.debug("date %r matched %s but is not a calendar date", s, name)

        return self._fallback(s)

    def _fallback(self, s: str) -> date:
        default = datetime.combine(self.clock(), time.min)
        try:
            return date_parser.parse(s, default=default).date()
        except (ValueError, OverflowError) as e:
            raise InvalidDateError(f"Invalid date: {s!r}", token=s) from e
