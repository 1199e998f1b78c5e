# SPDX-License-Identifier: GPL-3.0-or-later
"""
Format generated Go source with gofmt.

gofmt also acts as the syntax check for the generator: if the rendered text
is not valid Go (bad package name, non-hex code, ...) it exits non-zero and
the run aborts before anything is written.
"""

import logging
import subprocess

from .errors import GenerationError

DEFAULT_GOFMT = "gofmt"


def format_source(source: str, gofmt: str = DEFAULT_GOFMT) -> str:
    """
    Run ``source`` through gofmt and return the canonical text.

    Args:
        source: Rendered Go source
        gofmt: gofmt executable name or path

    Raises:
        GenerationError: if gofmt is missing or rejects the source
    """
    try:
        result = subprocess.run(
            [gofmt],
            input=source,
            capture_output=True,
            encoding="utf-8",
        )
    except OSError as e:
        raise GenerationError(f"cannot run {gofmt}: {e}") from e

    if result.returncode != 0:
        raise GenerationError(f"{gofmt} failed: {result.stderr.strip()}")

    logging.debug(f"genicodes: Formatted {len(result.stdout)} bytes with {gofmt}")
    return result.stdout
