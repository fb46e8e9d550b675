"""
Constants for note, chord and scale resolution.

No magic numbers - the pitch ranges and catalog sizes live here.
"""

# Absolute note numbers (piano-key style, C-1 = 0)
MIN_NOTE_NUMBER = 0
MAX_NOTE_NUMBER = 127

# Octaves accepted by any call that takes an explicit octave
MIN_OCTAVE = -1
MAX_OCTAVE = 9

SEMITONES_PER_OCTAVE = 12

# Chord expansion with octaves rejects anything above G9
CHORD_OCTAVE_CEILING_PITCH_CLASS = 7

# Empty chord kind ("C") resolves to the plain major triad
DEFAULT_CHORD_KIND = "base"

# Catalog sizes
ALL_CHORD_COUNT = 75
ALL_SCALE_COUNT = 29



class ErrorMessages:
    """Standardized error messages. Tokens are embedded in backticks."""

    NOT_FOUND_NOTE = "Not found note. `{token}`"
    NOT_FOUND_CHORD = "Not found chord. `{token}`"
    NOT_FOUND_CHORD_KIND = "Not found chord kind. `{token}`"
    NOT_FOUND_SCALE = "Not found scale. `{token}`"
    COULD_NOT_GET_OCTAVE = "Could not get octave. `{token}`"
    COULD_NOT_GET_DEGREE = "Could not get degree. `{token}`"
    INVALID_OCTAVE = "`octave` should be -1 to 9, got `{token}`"
    OUT_OF_RANGE = "Out of range. `{token}`"
    UNKNOWN_EXPORT_FORMAT = "Unknown export format: '{format}'. Expected 'yaml' or 'json'."
