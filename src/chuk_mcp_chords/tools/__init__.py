"""
MCP tool implementations.

Tools are organized by domain:
- notes - Note name resolution
- chords - Chord catalog and chord expansion
- scales - Scale catalog and scale expansion
- catalog - Catalog export
"""

from chuk_mcp_chords.tools.catalog import register_catalog_tools
from chuk_mcp_chords.tools.chords import register_chord_tools
from chuk_mcp_chords.tools.notes import register_note_tools
from chuk_mcp_chords.tools.scales import register_scale_tools

__all__ = [
    "register_catalog_tools",
    "register_chord_tools",
    "register_note_tools",
    "register_scale_tools",
]
