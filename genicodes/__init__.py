# SPDX-License-Identifier: GPL-3.0-or-later
"""
genicodes - generate Go constants from an icon font 'codepoints' file.

Reads lines of the form ``<name> <hex>`` and writes a gofmt-formatted Go
source file with one constant per line.
"""

from __future__ import annotations

PROGNAME = "genicodes"
VMAJOR = 0
VMINOR = 1

__version__ = f"{VMAJOR}.{VMINOR}"
