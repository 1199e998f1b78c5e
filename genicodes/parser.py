# SPDX-License-Identifier: GPL-3.0-or-later
"""
Parse a 'codepoints' file into a Document of Go constant entries.

Each input line looks like::

    gps_fixed e1b1

and becomes ``Entry(name="GpsFixed", value="0xe1b1")``. Blank lines and lines
that don't split into exactly two space-separated tokens are skipped, unless
strict mode is requested.
"""

from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .errors import InputError

HEX_RE = re.compile(r"^[0-9A-Fa-f]+$")


@dataclass(frozen=True)
class Entry:
    """One generated constant."""

    name: str
    value: str


@dataclass
class Document:
    """All entries parsed from one input file, in source order."""

    package: str
    entries: List[Entry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def title_segment(segment: str) -> str:
    """Capitalize the first letter of ``segment``, leaving the rest as is."""
    if segment and segment[0] in string.ascii_lowercase:
        return segment[0].upper() + segment[1:]
    return segment


def normalize_name(raw: str) -> str:
    """
    Convert a raw icon name into a Go identifier.

    Segments separated by underscores are title-cased and joined, and an
    ``N`` is prepended when the result would start with a digit.

    Examples:
        gps_fixed -> GpsFixed
        24_hours  -> N24Hours
        3d_rotation -> N3dRotation

    Returns an empty string when the name has no characters besides
    underscores.
    """
    name = "".join(title_segment(part) for part in raw.split("_"))
    if name and name[0] in string.digits:
        name = "N" + name
    return name


def parse_line(line: str, lineno: int = 0, strict: bool = False) -> Optional[Entry]:
    """
    Parse one line into an Entry.

    Args:
        line: Raw input line, with or without its terminator
        lineno: 1-based line number used in messages
        strict: Raise InputError for malformed lines instead of skipping them

    Returns:
        The Entry, or None for blank or skipped lines
    """
    line = line.strip()
    if not line:
        return None

    parts = line.split(" ")
    # A tab inside a field would otherwise leak into the generated name
    count = len(parts) if len(parts) != 2 else len(line.split())
    if count != 2:
        return _reject(f"expected 2 fields, got {count}", line, lineno, strict)

    raw_name, code = parts
    name = normalize_name(raw_name)
    if not name:
        return _reject(f"name {raw_name!r} is empty after normalization", line, lineno, strict)

    # Codes are emitted verbatim; only strict mode checks them
    if strict and not HEX_RE.match(code):
        return _reject(f"code {code!r} is not hexadecimal", line, lineno, strict)

    return Entry(name=name, value="0x" + code)


def _reject(reason: str, line: str, lineno: int, strict: bool) -> None:
    if strict:
        raise InputError(f"line {lineno}: {reason}: {line!r}")
    logging.debug(f"genicodes: Skipping line {lineno} ({reason}): {line!r}")
    return None


def parse_lines(lines: Iterable[str], package: str, strict: bool = False) -> Document:
    """
    Build a Document from an iterable of lines.

    Raises:
        InputError: if reading or decoding the stream fails, or a line is
            malformed in strict mode
    """
    doc = Document(package=package)
    lineno = 0
    try:
        for lineno, line in enumerate(lines, start=1):
            entry = parse_line(line, lineno, strict)
            if entry is not None:
                doc.entries.append(entry)
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"read error after line {lineno}: {e}") from e

    logging.debug(f"genicodes: Parsed {len(doc)} entries from {lineno} lines")
    return doc


def parse_file(path: str, package: str, strict: bool = False) -> Document:
    """Open ``path`` and parse it with parse_lines()."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return parse_lines(f, package, strict)
    except OSError as e:
        raise InputError(f"cannot read {path}: {e}") from e
