#!/usr/bin/env python3
"""
Command line entry point for chuk-mcp-chords.

Runs the MCP server (stdio or http), or with --check expands chord
symbols on the spot and exits without starting a server:

    chuk-mcp-chords --check CM7 --check BM7 --octave 3
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from chuk_mcp_chords.constants import MAX_OCTAVE, MIN_OCTAVE
from chuk_mcp_chords.core import NotationError, chord_notes, chord_notes_with_octave

logger = logging.getLogger(__name__)


def _octave(value: str) -> int:
    octave = int(value)
    if not MIN_OCTAVE <= octave <= MAX_OCTAVE:
        raise argparse.ArgumentTypeError(f"octave should be {MIN_OCTAVE} to {MAX_OCTAVE}")
    return octave


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-chords",
        description="Resolve chord symbols, or serve them as MCP tools",
    )
    parser.add_argument(
        "--check",
        metavar="CHORD",
        action="append",
        default=[],
        help="Expand a chord symbol and print its notes (repeatable); no server is started",
    )
    parser.add_argument(
        "--octave",
        type=_octave,
        default=None,
        help="Starting octave for --check, -1 to 9",
    )
    parser.add_argument("--transport", choices=["stdio", "http"], default="stdio")
    parser.add_argument("--port", type=int, default=8000, help="HTTP port (http transport)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def check_chords(symbols: Sequence[str], octave: int | None = None) -> int:
    """
    Print each chord's notes, one line per symbol.

    Returns:
        0 if every symbol resolved, 1 otherwise
    """
    status = 0
    for symbol in symbols:
        try:
            if octave is None:
                notes = chord_notes(symbol)
            else:
                notes = chord_notes_with_octave(symbol, octave)
        except NotationError as e:
            print(f"{symbol}\t{type(e).__name__}: {e}", file=sys.stderr)
            status = 1
            continue
        print(f"{symbol}\t{' '.join(notes)}")
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    if args.check:
        return check_chords(args.check, args.octave)

    # The server registers its tools at import time
    from chuk_mcp_chords.async_server import mcp

    logger.info("Starting CHUK Chords MCP Server (%s)", args.transport)
    if args.transport == "stdio":
        asyncio.run(mcp.run_stdio())
    else:
        asyncio.run(mcp.run_http(port=args.port))
    return 0


if __name__ == "__main__":
    sys.exit(main())
