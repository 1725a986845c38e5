"""Output sinks for rendered outlines."""

from __future__ import annotations

import contextlib
import sys
from pathlib import Path
from typing import Iterable, Iterator, Protocol

from orgplan.errors import SinkWriteError


class TextSink(Protocol):
    """Anything with a text ``write`` method: stdout, ``io.StringIO``, open files."""

    def write(self, s: str, /) -> object: ...


def write_fragments(fragments: Iterable[str], sink: TextSink) -> int:
    """Write fragments to ``sink`` in order.

    Returns:
        Number of characters written.

    Raises:
        SinkWriteError: If the sink raises ``OSError``.
    """

    written = 0
    try:
        for fragment in fragments:
            sink.write(fragment)
            written += len(fragment)
    except OSError as e:
        raise SinkWriteError(f"failed writing outline after {written} characters: {e}") from e
    return written


@contextlib.contextmanager
def open_sink(path: Path | str | None) -> Iterator[TextSink]:
    """Yield stdout for ``None``/``-``, otherwise a UTF-8 file opened for writing."""

    if path is None or str(path) == "-":
        yield sys.stdout
        return

    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        f = target.open("w", encoding="utf-8")
    except OSError as e:
        raise SinkWriteError(f"cannot open {target} for writing: {e}") from e
    with f:
        yield f
