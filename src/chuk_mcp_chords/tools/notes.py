"""
Note tools - MCP tools for resolving note names.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.core import NotationError
from chuk_mcp_chords.models import NoteResult

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_note_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register note resolution tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_get_note_number(note: str, octave: int | None = None) -> str:
        """
        Resolve a note name to a note number.

        Without an octave, a bare spelling ('Eb', 'H') gives its pitch class
        (0-11) and an octave-suffixed name ('C4', 'Db-1') gives an absolute
        note number (0-127). With an octave, note must be a bare spelling.

        Args:
            note: Note name, e.g. 'C', 'Db', 'H', 'C4', 'A#-1'
            octave: Optional octave, -1 to 9

        Returns:
            JSON string with the resolved note

        Example:
            chords_get_note_number(note="C4")
            chords_get_note_number(note="Eb", octave=3)
        """
        try:
            result = NoteResult.from_token(note, octave)
            return json.dumps({"status": "success", "note": result.model_dump()})
        except NotationError as e:
            logger.debug("Could not resolve note %r: %s", note, e)
            return json.dumps({"status": "error", "error": type(e).__name__, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to resolve note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_get_note_number"] = chords_get_note_number

    return tools
