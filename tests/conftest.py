# SPDX-License-Identifier: GPL-3.0-or-later
"""Shared fixtures for genicodes tests."""

import logging
import shutil
import subprocess
from unittest.mock import MagicMock, patch

import pytest

CODEPOINTS = """\
10k e951
24_hours ab12
3d_rotation e84d
gps_fixed e1b1

justoneword
too many tokens here
zoom_out_map e56b
"""

requires_gofmt = pytest.mark.skipif(
    shutil.which("gofmt") is None, reason="gofmt not installed"
)


def _echo_run(cmd, input=None, **kwargs):
    """Stand-in for subprocess.run that returns its input unchanged."""
    return subprocess.CompletedProcess(cmd, 0, stdout=input, stderr="")


@pytest.fixture
def codepoints_file(tmp_path):
    """Write a small codepoints file and return its path."""
    path = tmp_path / "codepoints"
    path.write_text(CODEPOINTS, encoding="utf-8")
    return path


@pytest.fixture
def fake_gofmt():
    """Patch the formatter subprocess so tests don't need a Go toolchain."""
    with patch("genicodes.formatter.subprocess.run", side_effect=_echo_run) as mock_run:
        yield mock_run


@pytest.fixture
def failing_gofmt():
    """Patch the formatter subprocess to report a syntax error."""
    result = MagicMock(returncode=2, stdout="", stderr="<standard input>:6:9: expected 'IDENT'\n")
    with patch("genicodes.formatter.subprocess.run", return_value=result) as mock_run:
        yield mock_run


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop handlers that main() installs on the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
