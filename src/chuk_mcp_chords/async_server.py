#!/usr/bin/env python3
"""
Async Chords MCP Server using chuk-mcp-server

This server provides MCP tools for turning music notation into pitch data:
- Resolving note names ('C4', 'Eb', 'H') to note numbers
- Expanding chord symbols ('CM7', 'C#m7b5') into notes, optionally per octave
- Expanding scales ('ionian', 'blues-minor') from a root note
- Listing and exporting the chord and scale catalogs
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.tools import (
    register_catalog_tools,
    register_chord_tools,
    register_note_tools,
    register_scale_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chords")

# Register all tools
note_tools = register_note_tools(mcp)
chord_tools = register_chord_tools(mcp)
scale_tools = register_scale_tools(mcp)
catalog_tools = register_catalog_tools(mcp)

# Export tool functions for direct access
chords_get_note_number = note_tools["chords_get_note_number"]

chords_list_chord_kinds = chord_tools["chords_list_chord_kinds"]
chords_get_chord_intervals = chord_tools["chords_get_chord_intervals"]
chords_get_chord = chord_tools["chords_get_chord"]

chords_list_scale_kinds = scale_tools["chords_list_scale_kinds"]
chords_get_scale = scale_tools["chords_get_scale"]

chords_export_catalog = catalog_tools["chords_export_catalog"]

logger.info("CHUK Chords MCP Server initialized")
