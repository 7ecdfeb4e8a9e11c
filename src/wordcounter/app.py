from __future__ import annotations
from typing import List, Optional

import streamlit as st

from wordcounter.config import load_config
from wordcounter.render import render_html
from wordcounter.report import Report, build_report
from wordcounter.source import LineReader
from wordcounter.tokenizer import TokenizerError

# streamlit run src/wordcounter/app.py


def _decode(data: bytes, encoding: str) -> List[str]:
    return list(LineReader.from_text(data.decode(encoding, errors="replace")))


def _show_table(report: Report) -> None:
    if not report.counts:
        st.info("No words found.")
        return
    st.dataframe(
        [{"Words": w, "Counts": n} for w, n in report.rows()],
        width="stretch",
        hide_index=True,
    )


st.set_page_config(page_title="Word Counter", layout="wide")
st.markdown("<h1 style='margin:0'>Word Counter</h1>", unsafe_allow_html=True)

with st.sidebar:
    st.header("Settings")
    sep_text = st.text_input("Separators", value=r".-,\s/';:!?\t",
                             help=r"\s = space, \t = tab")
    title_in = st.text_input("Report title", value="")

try:
    cfg = load_config(separators=sep_text, title=title_in or None)
except (TokenizerError, ValueError) as e:
    st.error(f"Bad settings: {e}")
    st.stop()

upload = st.file_uploader("Text file", type=["txt", "md", "csv", "log"])
pasted = st.text_area("…or paste text", height=180)

lines: Optional[List[str]] = None
name: Optional[str] = None
if upload is not None:
    lines = _decode(upload.getvalue(), cfg.encoding)
    name = upload.name
elif pasted.strip():
    lines = list(LineReader.from_text(pasted))
    name = "pasted text"

if lines is None:
    st.caption("Upload a file or paste some text to count its words.")
    st.stop()

report = build_report(lines, cfg.separators, source=name)
c1, c2 = st.columns(2)
c1.metric("Words", report.total)
c2.metric("Distinct", report.unique)
_show_table(report)

st.download_button(
    "Download index.html",
    data=render_html(report, cfg.title),
    file_name="index.html",
    mime="text/html",
)
