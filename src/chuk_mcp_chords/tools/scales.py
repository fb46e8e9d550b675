"""
Scale tools - MCP tools for the scale catalog and scale expansion.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.core import NotationError, list_scale_kinds
from chuk_mcp_chords.models import ScaleResult

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_list_scale_kinds() -> str:
        """
        List all supported scale names.

        Returns:
            JSON string with the scale names and count
        """
        kinds = sorted(list_scale_kinds())
        return json.dumps({"status": "success", "kinds": kinds, "count": len(kinds)})

    tools["chords_list_scale_kinds"] = chords_list_scale_kinds

    @mcp.tool  # type: ignore[arg-type]
    async def chords_get_scale(scale: str, root: str | None = None) -> str:
        """
        Get a scale's offsets, or its note numbers from a root note.

        Scale names are case-insensitive. With a root like 'D4', every
        offset is added to the root's note number (D4 ionian -> 62, 64, ...).

        Args:
            scale: Scale name, e.g. 'ionian', 'dorian', 'blues-minor'
            root: Optional root note, e.g. 'D4', 'Eb3', 'C'

        Returns:
            JSON string with offsets, and note numbers when root is given

        Example:
            chords_get_scale(scale="ionian", root="D4")
        """
        try:
            result = ScaleResult.from_name(scale, root)
            return json.dumps(
                {"status": "success", "scale": result.model_dump(exclude_none=True)}
            )
        except NotationError as e:
            logger.debug("Could not resolve scale %r from %r: %s", scale, root, e)
            return json.dumps({"status": "error", "error": type(e).__name__, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to resolve scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_get_scale"] = chords_get_scale

    return tools
