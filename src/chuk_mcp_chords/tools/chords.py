"""
Chord tools - MCP tools for the chord catalog and chord expansion.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.core import NotationError, chord_intervals, list_chord_kinds
from chuk_mcp_chords.models import ChordResult

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_list_chord_kinds() -> str:
        """
        List all supported chord kinds.

        Kinds are the part of a chord symbol after the root, e.g. 'M7' in
        'CM7'. 'base' is the plain major triad. Kinds are case-sensitive.

        Returns:
            JSON string with the kind list and count
        """
        kinds = sorted(list_chord_kinds())
        return json.dumps({"status": "success", "kinds": kinds, "count": len(kinds)})

    tools["chords_list_chord_kinds"] = chords_list_chord_kinds

    @mcp.tool  # type: ignore[arg-type]
    async def chords_get_chord_intervals(kind: str) -> str:
        """
        Get the semitone offsets for a chord kind.

        Offsets above 11 are compound intervals (9th = 14, 13th = 21).

        Args:
            kind: Chord kind, e.g. 'M7', 'm7b5', '7(9, 13)'. Empty for major.

        Returns:
            JSON string with the offsets

        Example:
            chords_get_chord_intervals(kind="M7")
        """
        try:
            intervals = chord_intervals(kind)
            return json.dumps({"status": "success", "kind": kind, "intervals": list(intervals)})
        except NotationError as e:
            logger.debug("Unknown chord kind %r", kind)
            return json.dumps({"status": "error", "error": type(e).__name__, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to look up chord kind")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_get_chord_intervals"] = chords_get_chord_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def chords_get_chord(
        chord: str,
        octave: int | None = None,
        as_numbers: bool = False,
    ) -> str:
        """
        Expand a chord symbol into its notes.

        Notes keep the chord's voicing order. With an octave, each note gets
        an octave suffix and the octave goes up each time the voicing wraps
        past B. Notes above G9 are rejected.

        Args:
            chord: Chord symbol, e.g. 'C', 'BM7', 'C#m7b5', 'Ebsus4'
            octave: Optional starting octave, -1 to 9
            as_numbers: Also return note numbers (requires octave)

        Returns:
            JSON string with the chord's notes

        Example:
            chords_get_chord(chord="FM7", octave=4, as_numbers=True)
        """
        try:
            result = ChordResult.from_symbol(chord, octave=octave, as_numbers=as_numbers)
            return json.dumps(
                {"status": "success", "chord": result.model_dump(exclude_none=True)}
            )
        except NotationError as e:
            logger.debug("Could not expand chord %r: %s", chord, e)
            return json.dumps({"status": "error", "error": type(e).__name__, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to expand chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_get_chord"] = chords_get_chord

    return tools
