# SPDX-License-Identifier: GPL-3.0-or-later
"""
Unit tests for the gofmt wrapper.

Most tests mock subprocess.run; the TestRealGofmt tests run only when gofmt
is installed.
"""

from unittest.mock import patch

import pytest

from conftest import requires_gofmt
from genicodes.errors import GenerationError
from genicodes.formatter import format_source
from genicodes.parser import Document, Entry
from genicodes.template import HEADER, render


# ============================================================================
# Mocked gofmt Tests
# ============================================================================

class TestFormatSource:
    """Tests for format_source() with a mocked subprocess."""

    def test_passes_source_on_stdin(self, fake_gofmt):
        out = format_source("package assets\n")

        assert out == "package assets\n"
        args, kwargs = fake_gofmt.call_args
        assert args[0] == ["gofmt"]
        assert kwargs["input"] == "package assets\n"
        assert kwargs["encoding"] == "utf-8"

    def test_custom_executable(self, fake_gofmt):
        format_source("package assets\n", gofmt="/opt/go/bin/gofmt")
        assert fake_gofmt.call_args[0][0] == ["/opt/go/bin/gofmt"]

    def test_syntax_error_raises(self, failing_gofmt):
        with pytest.raises(GenerationError, match="expected 'IDENT'"):
            format_source("package 1x\n")

    def test_missing_executable_raises(self):
        with patch("genicodes.formatter.subprocess.run",
                   side_effect=FileNotFoundError("No such file or directory: 'gofmt'")):
            with pytest.raises(GenerationError, match="cannot run gofmt"):
                format_source("package assets\n")


# ============================================================================
# Real gofmt Tests
# ============================================================================

@requires_gofmt
class TestRealGofmt:
    """Round-trip tests against the installed gofmt."""

    def test_generated_source_is_valid_go(self):
        doc = Document("assets", [Entry("N24Hours", "0xab12"), Entry("GpsFixed", "0xe1b1")])
        out = format_source(render(doc))

        assert "package assets\n\nconst (\n" in out
        assert "\tN24Hours = 0xab12\n" in out
        assert "\tGpsFixed = 0xe1b1\n" in out

    def test_header_survives_formatting(self):
        out = format_source(render(Document("assets", [Entry("Home", "0xe88a")])))
        assert out.startswith(HEADER + "\npackage assets\n")

    def test_non_ascii_name_round_trips(self):
        out = format_source(render(Document("assets", [Entry("Café", "0xe001")])))
        assert "\tCafé = 0xe001\n" in out

    def test_formatting_is_idempotent(self):
        doc = Document("assets", [Entry("Home", "0xe88a"), Entry("ZoomOutMap", "0xe56b")])
        once = format_source(render(doc))
        assert format_source(once) == once

    def test_invalid_package_rejected(self):
        with pytest.raises(GenerationError):
            format_source(render(Document("my-icons", [Entry("Home", "0xe88a")])))

    def test_non_hex_code_rejected(self):
        with pytest.raises(GenerationError):
            format_source(render(Document("assets", [Entry("Home", "0xzz")])))
