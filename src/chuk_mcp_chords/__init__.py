"""
Chord, scale and note-name resolution, with an MCP server front end.

    >>> from chuk_mcp_chords import chord_notes, note_number
    >>> chord_notes("CM7")
    ['C', 'E', 'G', 'B']
    >>> note_number("C4")
    60
"""

from chuk_mcp_chords.core import (
    ChordSymbol,
    NotationError,
    ParsedNote,
    PitchClass,
    chord_intervals,
    chord_notes,
    chord_notes_with_octave,
    list_chord_kinds,
    list_scale_kinds,
    note_number,
    note_number_with_octave,
    parse_note,
    scale_from_root,
    scale_intervals,
)

__version__ = "0.1.0"

__all__ = [
    "ChordSymbol",
    "NotationError",
    "ParsedNote",
    "PitchClass",
    "chord_intervals",
    "chord_notes",
    "chord_notes_with_octave",
    "list_chord_kinds",
    "list_scale_kinds",
    "note_number",
    "note_number_with_octave",
    "parse_note",
    "scale_from_root",
    "scale_intervals",
]
