"""
Note parsing - note tokens to pitch classes and absolute note numbers.

A note token is either a bare spelling ('Eb', 'H') which resolves to a
pitch class, or a spelling with an octave suffix ('C4', 'Eb-1', 'G9')
which resolves to an absolute note number: (octave + 1) * 12 + pitch class.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chuk_mcp_chords.constants import (
    MAX_NOTE_NUMBER,
    MAX_OCTAVE,
    MIN_NOTE_NUMBER,
    MIN_OCTAVE,
    SEMITONES_PER_OCTAVE,
)

from .errors import CouldNotGetDegree, CouldNotGetOctave, InvalidOctave, NotFoundNote, OutOfRange
from .pitch import BASE_TONES, lookup_pitch_class

# Full note grammar. Matches 'A9' too; the range check happens later.
NOTE_PATTERN = re.compile(r"[A-H][#b]?(-1|[0-9])?")


@dataclass(frozen=True)
class ParsedNote:
    """
    Result of parsing a note token.

    octave is None for bare spellings ('Db'), in which case the token
    names a pitch class only and number is that pitch class. Otherwise
    number is an absolute note number, already range-checked.
    """

    pitch_class: int
    number: int
    octave: int | None = None

    @property
    def is_absolute(self) -> bool:
        return self.octave is not None

    def __str__(self) -> str:
        name = BASE_TONES[self.pitch_class]
        return name if self.octave is None else f"{name}{self.octave}"


def is_valid_octave(octave: int) -> bool:
    """Octave number should be between -1 and 9."""
    return MIN_OCTAVE <= octave <= MAX_OCTAVE


def absolute_pitch(octave: int, pitch_class: int, token: str | None = None) -> int:
    """
    Combine an octave and a pitch class into an absolute note number.

    Args:
        octave: Octave, -1 to 9
        pitch_class: Pitch class, 0 to 11
        token: Name reported by OutOfRange (defaults to the number)

    Returns:
        Note number, 0 to 127 (C4 = 60)

    Raises:
        InvalidOctave: octave outside -1..9
        OutOfRange: result outside 0..127 (never clamped)
    """
    if not is_valid_octave(octave):
        raise InvalidOctave(octave)

    note_number = (octave + 1) * SEMITONES_PER_OCTAVE + pitch_class
    if not MIN_NOTE_NUMBER <= note_number <= MAX_NOTE_NUMBER:
        raise OutOfRange(note_number if token is None else token)
    return note_number


def _octave_from_name(name: str) -> int:
    """Get octave 1 from 'C1'. Tries the two-char '-1' suffix before one digit."""
    if len(name) > 1:
        if name[-2:] == "-1":
            return -1

        try:
            octave = int(name[-1])
        except ValueError as e:
            # last char is '#' or 'b'
            raise CouldNotGetOctave(name) from e
        if is_valid_octave(octave):
            return octave

    raise CouldNotGetOctave(name)


def _degree_from_name(name: str) -> int:
    """Get pitch class 1 from 'Db2'. Tries the two-char prefix before one char."""
    degree = lookup_pitch_class(name[:2])
    if degree is not None:
        return degree  # 'Db2' or 'D#2'

    degree = lookup_pitch_class(name[:1])
    if degree is not None:
        return degree  # 'D2'

    raise CouldNotGetDegree(name)


def parse_note(name: str) -> ParsedNote:
    """
    Parse a note token into a pitch class with an optional octave.

    Args:
        name: 'Eb', 'H', 'C4', 'Db-1', ...

    Returns:
        ParsedNote (octave is None for bare spellings)

    Raises:
        NotFoundNote: token does not match the note grammar
        CouldNotGetOctave / CouldNotGetDegree: grammar matched, extraction failed
        OutOfRange: octave-bearing name above G9
    """
    degree = lookup_pitch_class(name)
    if degree is not None:
        return ParsedNote(degree, degree)

    if NOTE_PATTERN.fullmatch(name) is None:
        raise NotFoundNote(name)

    octave = _octave_from_name(name)
    degree = _degree_from_name(name)
    return ParsedNote(degree, absolute_pitch(octave, degree, name), octave)


def note_number(name: str) -> int:
    """
    Get note number 3 from 'Eb', or note number 60 from 'C4'.

    Raises:
        NotFoundNote, CouldNotGetOctave, CouldNotGetDegree, OutOfRange
    """
    return parse_note(name).number


def note_number_with_octave(name: str, octave: int) -> int:
    """
    Get absolute note number 60 from a bare spelling 'C' and octave 4.

    Raises:
        NotFoundNote: name is not a bare spelling
        InvalidOctave: octave outside -1..9
        OutOfRange: result above 127
    """
    degree = lookup_pitch_class(name)
    if degree is None:
        raise NotFoundNote(name)
    return absolute_pitch(octave, degree, f"{name}{octave}")
