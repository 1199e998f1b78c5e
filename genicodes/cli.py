# SPDX-License-Identifier: GPL-3.0-or-later
"""
Command-line entry point.

Usage:
    genicodes [options] <input file> [output file]

Example:
    genicodes -p icons codepoints icons/codepoints.go
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from . import PROGNAME, VMAJOR, VMINOR
from .config import DEFAULT_PACKAGE, Config, load_config
from .errors import GenicodesError
from .formatter import format_source
from .parser import parse_file
from .template import render
from .writer import write_output


def get_arg_parser() -> argparse.ArgumentParser:
    """Create the parser"""
    parser = argparse.ArgumentParser(
        prog=PROGNAME,
        description=f"{PROGNAME} v{VMAJOR}.{VMINOR}: generate Go constants from an icon font codepoints file",
    )
    parser.add_argument("input", help="codepoints file with '<name> <hex>' lines")
    parser.add_argument(
        "output", nargs="?", default=None, help="generated Go file (default: stdout)"
    )
    parser.add_argument(
        "-p", "--package", default=None,
        help=f"package name of the generated file (default: {DEFAULT_PACKAGE})",
    )
    parser.add_argument("-c", "--config", default=None, help="YAML configuration file")
    strictness = parser.add_mutually_exclusive_group()
    strictness.add_argument(
        "--strict", dest="strict", action="store_true", default=None,
        help="fail on malformed lines instead of skipping them",
    )
    strictness.add_argument(
        "--no-strict", dest="strict", action="store_false", default=None,
        help="skip malformed lines even if the config file sets strict",
    )
    parser.add_argument("--gofmt", default=None, help="gofmt executable (default: gofmt)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument(
        "--version", action="version", version=f"{PROGNAME} v{VMAJOR}.{VMINOR}"
    )
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )


def generate(input_path: str, config: Config) -> str:
    """Parse, render and format ``input_path``; returns the final source."""
    doc = parse_file(input_path, config.package, config.strict)
    source = render(doc)
    return format_source(source, config.gofmt)


def run(input_path: str, output_path: Optional[str], config: Config) -> None:
    """Run the whole pipeline. Nothing is written unless every stage succeeds."""
    text = generate(input_path, config)
    write_output(text, output_path)
    if output_path:
        logging.info(f"genicodes: Generated {output_path} (package {config.package})")


def main(argv: Optional[List[str]] = None) -> int:
    args = get_arg_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config) if args.config else Config()
        config = config.replace(package=args.package, strict=args.strict, gofmt=args.gofmt)
        run(args.input, args.output, config)
    except GenicodesError as e:
        logging.error(f"genicodes: {e}")
        return 1
    return 0
