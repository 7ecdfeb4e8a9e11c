from __future__ import annotations
import io
from pathlib import Path
from typing import IO, Iterator, Optional, Union

# utf-8-sig drops a leading byte-order mark (Notepad) and reads plain UTF-8 unchanged
DEFAULT_ENCODING = "utf-8-sig"


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


class LineReader:
    """
    Line source over a file path or an already-open text stream.

    next_line() hands back one line without its terminator; at_eos() turns True
    once the stream has nothing left. Opened paths are closed by close() or on
    leaving a `with` block; streams passed in are left to the caller.
    """

    def __init__(self, source: Union[str, Path, IO[str]], encoding: str = DEFAULT_ENCODING) -> None:
        if isinstance(source, (str, Path)):
            self.name = str(source)
            self._stream: IO[str] = Path(source).open("r", encoding=encoding, newline="")
            self._owned = True
        else:
            self.name = getattr(source, "name", "<stream>")
            self._stream = source
            self._owned = False
        try:
            self._pending: Optional[str] = self._stream.readline()
        except Exception:
            self.close()
            raise

    @classmethod
    def from_text(cls, text: str, name: str = "<text>") -> "LineReader":
        """Read an in-memory string with the same line breaks as a file: \\n, \\r and \\r\\n."""
        reader = cls(io.StringIO(text, newline=""))
        reader.name = name
        return reader

    def at_eos(self) -> bool:
        return not self._pending

    def next_line(self) -> str:
        if self.at_eos():
            raise EOFError(f"no more lines in {self.name}")
        line = self._pending
        self._pending = self._stream.readline()
        return _strip_terminator(line)

    def __iter__(self) -> Iterator[str]:
        while not self.at_eos():
            yield self.next_line()

    def close(self) -> None:
        if self._owned:
            self._stream.close()

    def __enter__(self) -> "LineReader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
