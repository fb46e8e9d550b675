"""
Core notation primitives.

Pure lookups over static catalogs:
- PitchClass: The 12 chromatic pitch classes (0-11) and accepted spellings
- ParsedNote: A note token resolved to a pitch class or absolute note number
- ChordSymbol: Root + chord kind, expands to note names
- Scale catalog: Scale names to offsets, expanded from a root note
"""

from chuk_mcp_chords.core.chord import (
    CHORD_INTERVALS,
    ChordSymbol,
    chord_intervals,
    chord_note_numbers,
    chord_notes,
    chord_notes_with_octave,
    list_chord_kinds,
    split_chord,
)
from chuk_mcp_chords.core.errors import (
    CouldNotGetDegree,
    CouldNotGetOctave,
    InvalidOctave,
    NotationError,
    NotFoundChord,
    NotFoundChordKind,
    NotFoundNote,
    NotFoundScale,
    NotFoundScaleKind,
    OutOfRange,
)
from chuk_mcp_chords.core.note import (
    ParsedNote,
    absolute_pitch,
    note_number,
    note_number_with_octave,
    parse_note,
)
from chuk_mcp_chords.core.pitch import BASE_TONES, NOTE_NAME_DEGREES, PitchClass, lookup_pitch_class
from chuk_mcp_chords.core.scale import (
    SCALE_INTERVALS,
    list_scale_kinds,
    scale_from_root,
    scale_intervals,
)

__all__ = [
    # Pitch
    "BASE_TONES",
    "NOTE_NAME_DEGREES",
    "PitchClass",
    "lookup_pitch_class",
    # Note
    "ParsedNote",
    "absolute_pitch",
    "note_number",
    "note_number_with_octave",
    "parse_note",
    # Chord
    "CHORD_INTERVALS",
    "ChordSymbol",
    "chord_intervals",
    "chord_note_numbers",
    "chord_notes",
    "chord_notes_with_octave",
    "list_chord_kinds",
    "split_chord",
    # Scale
    "SCALE_INTERVALS",
    "list_scale_kinds",
    "scale_from_root",
    "scale_intervals",
    # Errors
    "NotationError",
    "NotFoundNote",
    "NotFoundChord",
    "NotFoundChordKind",
    "NotFoundScale",
    "NotFoundScaleKind",
    "CouldNotGetOctave",
    "CouldNotGetDegree",
    "InvalidOctave",
    "OutOfRange",
]
