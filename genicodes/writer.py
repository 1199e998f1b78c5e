# SPDX-License-Identifier: GPL-3.0-or-later
"""Write generated source to stdout or a file. Output is always UTF-8."""

from __future__ import annotations

import contextlib
import io
import sys
from typing import Iterator, Optional, TextIO

from .errors import OutputError


@contextlib.contextmanager
def _stdout_utf8() -> Iterator[TextIO]:
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        yield sys.stdout
        return

    sys.stdout.flush()
    out = io.TextIOWrapper(buffer, encoding="utf-8", newline="\n", write_through=True)
    try:
        yield out
    finally:
        out.flush()
        # Leave sys.stdout's buffer open
        out.detach()


@contextlib.contextmanager
def open_output(path: Optional[str] = None) -> Iterator[TextIO]:
    """
    Open the destination for writing.

    With no path the stream is stdout, which is left open on exit. A file
    destination is created or truncated and always closed.
    """
    if path is None or path == "-":
        with _stdout_utf8() as out:
            yield out
        return

    try:
        f = open(path, "w", encoding="utf-8", newline="\n")
    except OSError as e:
        raise OutputError(f"cannot create {path}: {e}") from e

    with f:
        yield f


def write_output(text: str, path: Optional[str] = None) -> None:
    """Write ``text`` to the destination in one go."""
    with open_output(path) as out:
        try:
            out.write(text)
            out.flush()
        except (OSError, UnicodeError) as e:
            raise OutputError(f"cannot write {path or '<stdout>'}: {e}") from e
