# overlap_core/gui/app.py
from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st

# Streamlitは実行ディレクトリが変わるため、リポジトリルートをパスに追加する。
ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from overlap_core.config import DEFAULT_CONFIG
from overlap_core.io_layer.csv_reader import decode_bytes, split_rows
from overlap_core.pipeline import run_batch
from overlap_core.reporting.export_xlsx import export_result_bytes
from overlap_core.reporting.report import EMPTY_MESSAGE, build_pairs_table, build_totals_table
from overlap_core.validation.errors import ReadError

VIEW_LABELS = {"top_pairs": "Longest working pair", "all_pairs": "All pairs"}


def main():
    cfg = DEFAULT_CONFIG

    st.title("Employee Project Pairs")

    view = st.radio(
        "Show",
        options=list(VIEW_LABELS),
        format_func=VIEW_LABELS.get,
        index=list(VIEW_LABELS).index(cfg.result_view),
        horizontal=True,
    )
    uploaded = st.file_uploader("CSV file", type=["csv", "txt"])

    if uploaded is None:
        st.stop()

    # 読み込み失敗とデータ不正はどちらも1つのエラーメッセージとして表示する
    try:
        text = decode_bytes(uploaded.getvalue(), cfg.reader.encoding)
    except ReadError as e:
        st.error(e.message)
        st.stop()

    result = run_batch(split_rows(text, cfg.reader.delimiter), cfg)
    if not result.ok:
        st.error(result.error)
        st.stop()

    pairs_df = build_pairs_table(result.view(view))
    if pairs_df.empty:
        st.write(EMPTY_MESSAGE)
        st.stop()

    st.markdown(f"Pairs Found: **{len(pairs_df)}**")
    st.dataframe(pairs_df, use_container_width=True, hide_index=True)

    totals_df = build_totals_table(result.totals)
    with st.expander("Totals per employee pair"):
        st.dataframe(totals_df, use_container_width=True, hide_index=True)

    st.download_button(
        label="Download result xlsx",
        data=export_result_bytes(pairs_df, totals_df, cfg.export),
        file_name="result.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )


if __name__ == "__main__":
    main()
