# SPDX-License-Identifier: GPL-3.0-or-later
"""Errors raised by the generation pipeline."""


class GenicodesError(Exception):
    """Base error for this package."""


class InputError(GenicodesError):
    """Raised when the input file cannot be read or a line is rejected."""


class ConfigError(GenicodesError):
    """Raised when a configuration file is unreadable or invalid."""


class GenerationError(GenicodesError):
    """Raised when the rendered source cannot be formatted."""


class OutputError(GenicodesError):
    """Raised when the destination cannot be opened or written."""
