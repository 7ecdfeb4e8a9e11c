from __future__ import annotations
import argparse, json, sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import CounterConfig, load_config
from .render import SUFFIXES, render
from .report import Report, build_report
from .source import LineReader


def _ask(prompt: str) -> str:
    print(prompt, end="", file=sys.stderr, flush=True)
    return input().strip()


def _fail(msg: str) -> int:
    print(json.dumps({"ok": False, "error": msg}, indent=2))
    return 2


def count_file(path: Path, cfg: CounterConfig) -> Report:
    with LineReader(path, encoding=cfg.encoding) as reader:
        return build_report(reader, cfg.separators, source=str(path))


def write_report(report: Report, out_dir: Path, cfg: CounterConfig) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    outp = out_dir / f"index{SUFFIXES[cfg.fmt]}"
    outp.write_text(render(report, cfg.fmt, cfg.title), encoding=cfg.output_encoding)
    return outp


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="wordcounter",
        description="Count the words in a text file and write an alphabetical table of words and counts.",
    )
    ap.add_argument("input", nargs="?", help="Text file to read (prompted for when omitted)")
    ap.add_argument("-o", "--output", dest="output", type=str, default=None,
                    help="Folder to write index.<format> into (prompted for when omitted)")
    ap.add_argument("--format", dest="fmt", default=None,
                    help="html, csv or json (default $WORDCOUNTER_FORMAT or html)")
    ap.add_argument("--separators", type=str, default=None,
                    help=r"Separator characters; \s = space, \t = tab (default $WORDCOUNTER_SEPARATORS)")
    ap.add_argument("--encoding", type=str, default=None)
    ap.add_argument("--title", type=str, default=None, help="Page heading (default 'Words Counted in <input>')")
    ap.add_argument("--stdout", action="store_true", help="Print the report instead of writing a file")
    ap.add_argument("--quiet", action="store_true", help="No JSON summary")
    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.separators, args.fmt, args.encoding, args.title)
    except ValueError as e:
        return _fail(str(e))

    try:
        src = Path(args.input or _ask("Enter the file to be read: "))
    except EOFError:
        return _fail("no input path given")
    if not src.is_file():
        return _fail(f"Input not found: {src}")

    report = count_file(src, cfg)

    if args.stdout:
        sys.stdout.write(render(report, cfg.fmt, cfg.title))
        return 0

    try:
        out_dir = Path(args.output or _ask("Enter the desired location of the index: ") or ".")
    except EOFError:
        return _fail("no output location given")
    if out_dir.exists() and not out_dir.is_dir():
        return _fail(f"Output location is not a folder: {out_dir}")
    outp = write_report(report, out_dir, cfg)

    if not args.quiet:
        summary: Dict[str, Any] = {
            "ok": True,
            "input": str(src),
            "output": str(outp),
            "format": cfg.fmt,
            "total": report.total,
            "unique": report.unique,
        }
        print(json.dumps(summary, indent=2))
    if not report.counts:
        print(f"warning: no words found in {src}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
