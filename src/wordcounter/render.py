from __future__ import annotations
import csv, io, json
from html import escape
from typing import Callable, Dict, List, Optional

from .report import Report

FORMATS = ("html", "csv", "json")

# file suffix per format, used by the CLI for index.<suffix>
SUFFIXES: Dict[str, str] = {"html": ".html", "csv": ".csv", "json": ".json"}


def default_title(report: Report) -> str:
    return f"Words Counted in {report.source}" if report.source else "Words Counted"


def render_html(report: Report, title: Optional[str] = None) -> str:
    """
    Full HTML page: a heading plus a bordered two-column table (Words, Counts),
    one row per word in sorted order. Words are escaped; the table is still
    well-formed when the report is empty.
    """
    t = escape(title if title is not None else default_title(report))
    lines: List[str] = [
        "<html>",
        "<head>",
        f"<title>{t}</title>",
        "</head>",
        "<body>",
        f"<h2>{t}</h2>",
        '<table border="1">',
        "<tbody>",
        "<tr>",
        "<th>Words</th>",
        "<th>Counts</th>",
        "</tr>",
    ]
    for word, n in report.rows():
        lines += ["<tr>", f"<td>{escape(word)}</td>", f"<td>{n}</td>", "</tr>"]
    lines += ["</tbody>", "</table>", "</body>", "</html>"]
    return "\n".join(lines) + "\n"


def render_csv(report: Report, title: Optional[str] = None) -> str:
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(["word", "count"])
    w.writerows(report.rows())
    return buf.getvalue()


def render_json(report: Report, title: Optional[str] = None) -> str:
    payload = {
        "source": report.source,
        "total": report.total,
        "unique": report.unique,
        "words": [{"word": w, "count": n} for w, n in report.rows()],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


_RENDERERS: Dict[str, Callable[..., str]] = {
    "html": render_html,
    "csv": render_csv,
    "json": render_json,
}


def render(report: Report, fmt: str = "html", title: Optional[str] = None) -> str:
    try:
        fn = _RENDERERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown format {fmt!r}; expected one of {', '.join(FORMATS)}") from None
    return fn(report, title=title)
