# main_cli.py
from __future__ import annotations

import argparse
import dataclasses
import logging
from datetime import datetime

from overlap_core.config import DEFAULT_CONFIG
from overlap_core.io_layer.paths import InputPaths
from overlap_core.pipeline import run_file
from overlap_core.reporting.export_xlsx import export_result_xlsx
from overlap_core.reporting.report import EMPTY_MESSAGE, build_pairs_table, build_totals_table, count_line

VIEW_ALIASES = {"top": "top_pairs", "all": "all_pairs"}


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Employees who worked together on common projects the longest")
    p.add_argument("input", help="EmpID, ProjectID, DateFrom, DateTo の一覧（csv / txt / xlsx）")
    p.add_argument("--delimiter", default=DEFAULT_CONFIG.reader.delimiter, help="区切り文字（既定: ,）")
    p.add_argument("--sheet", default="", help="xlsx のシート名（既定: 先頭シート）")
    p.add_argument("--view", choices=sorted(VIEW_ALIASES), default="top", help="top: 最長ペアのみ / all: 全ペア")
    p.add_argument("--today", default=None, help="null/空欄の日付に使う日付（例: 2024-03-01）")
    p.add_argument("--tz", default=DEFAULT_CONFIG.timezone_name, help="「今日」を決めるタイムゾーン")
    p.add_argument("--out", default=None, help="結果xlsx（省略時は書き出さない）")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = dataclasses.replace(
        DEFAULT_CONFIG,
        timezone_name=args.tz,
        result_view=VIEW_ALIASES[args.view],
        reader=dataclasses.replace(DEFAULT_CONFIG.reader, delimiter=args.delimiter, sheet_name=args.sheet),
    )

    clock = None
    if args.today:
        try:
            fixed_today = datetime.strptime(args.today, "%Y-%m-%d").date()
        except ValueError:
            print(f"[ERROR] --today は YYYY-MM-DD で指定してください: {args.today}")
            return 1
        clock = lambda: fixed_today  # noqa: E731

    paths = InputPaths(input_file=args.input, output_file=args.out)
    result = run_file(paths, cfg, clock)
    if not result.ok:
        print(f"[ERROR] {result.error}")
        return 1

    pairs_df = build_pairs_table(result.view(cfg.result_view))
    totals_df = build_totals_table(result.totals)

    if pairs_df.empty:
        print(EMPTY_MESSAGE)
    else:
        print(count_line(pairs_df))
        print(pairs_df.to_string(index=False))

    if paths.output_file:
        out_path = export_result_xlsx(paths.output_file, pairs_df, totals_df, cfg.export)
        print(f"[RESULT] OK: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
