"""
Chord primitives - the chord catalog, ChordSymbol, and chord expansion.

Chords are interval offsets from the root, in the order they are voiced.
Offsets above 11 are compound intervals (9th = 14, 11th = 17, 13th = 21)
and fold back into a single octave only when combined with a root.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from chuk_mcp_chords.constants import (
    CHORD_OCTAVE_CEILING_PITCH_CLASS,
    DEFAULT_CHORD_KIND,
    MAX_OCTAVE,
)

from .errors import InvalidOctave, NotFoundChord, NotFoundChordKind, OutOfRange
from .note import is_valid_octave, note_number, parse_note
from .pitch import BASE_TONES, PitchClass

# Chord kind -> offsets from the root. Synonyms share identical offsets.
CHORD_INTERVALS: Mapping[str, tuple[int, ...]] = MappingProxyType(
    {
        "base": (0, 4, 7),
        "-5": (0, 4, 6),
        "-6": (0, 4, 7, 8),
        "6": (0, 4, 7, 9),
        "6(9)": (0, 4, 7, 9, 14),
        "69": (0, 4, 7, 9, 14),
        "M7": (0, 4, 7, 11),
        "M7(9)": (0, 4, 7, 11, 14),
        "M79": (0, 4, 7, 11, 14),
        "M9": (0, 4, 7, 11, 14),
        "M11": (0, 4, 7, 11, 14, 17),
        "M13": (0, 4, 7, 11, 14, 17, 21),
        "7": (0, 4, 7, 10),
        "7(b5)": (0, 4, 6, 10),
        "7b5": (0, 4, 6, 10),
        "7(-5)": (0, 4, 6, 10),
        "7-5": (0, 4, 6, 10),
        "7(#5)": (0, 4, 7, 8, 10),
        "7#5": (0, 4, 7, 8, 10),
        "7(b9)": (0, 4, 7, 10, 13),
        "7b9": (0, 4, 7, 10, 13),
        "7(-9)": (0, 4, 7, 10, 13),
        "7-9": (0, 4, 7, 10, 13),
        "-9": (0, 4, 7, 10, 13),
        "-9(#5)": (0, 4, 8, 10, 13),
        "-9#5": (0, 4, 8, 10, 13),
        "7(b9, 13)": (0, 4, 7, 10, 13, 21),
        "7(-9, 13)": (0, 4, 7, 10, 13, 21),
        "7(9, 13)": (0, 4, 7, 10, 14, 21),
        "7(#9)": (0, 4, 7, 10, 15),
        "7#9": (0, 4, 7, 10, 15),
        "7(#11)": (0, 4, 7, 10, 15, 18),
        "7#11": (0, 4, 7, 10, 15, 18),
        "7(#13)": (0, 4, 10, 21),
        "7#13": (0, 4, 10, 21),
        "9": (0, 4, 7, 10, 14),
        "9(b5)": (0, 4, 6, 10, 14),
        "9b5": (0, 4, 6, 10, 14),
        "9(-5)": (0, 4, 6, 10, 14),
        "9-5": (0, 4, 6, 10, 14),
        "11": (0, 4, 7, 10, 14, 17),
        "13": (0, 4, 7, 10, 14, 17, 21),
        "m": (0, 3, 7),
        "madd4": (0, 3, 5, 7),
        "m6": (0, 3, 7, 9),
        "m6(9)": (0, 3, 7, 9, 14),
        "m69": (0, 3, 7, 9, 14),
        "mM7": (0, 3, 7, 11),
        "m7": (0, 3, 7, 10),
        "m7(b5)": (0, 3, 6, 10),
        "m7b5": (0, 3, 6, 10),
        "m7(-5)": (0, 3, 6, 10),
        "m7-5": (0, 3, 6, 10),
        "m7(#5)": (0, 3, 8, 10),
        "m7#5": (0, 3, 8, 10),
        "m7(9)": (0, 3, 7, 10, 14),
        "m79": (0, 3, 7, 10, 14),
        "m9": (0, 3, 7, 10, 14),
        "m7(9, 11)": (0, 3, 7, 10, 14, 17),
        "m11": (0, 3, 7, 10, 14, 17),
        "m13": (0, 3, 7, 10, 14, 17, 21),
        "dim": (0, 3, 6),
        "dim7": (0, 3, 6, 9),
        "dim6": (0, 3, 6, 9),
        "aug": (0, 4, 8),
        "aug7": (0, 4, 8, 10),
        "augM7": (0, 4, 8, 11),
        "aug9": (0, 4, 8, 10, 14),
        "sus2": (0, 2, 7),
        "sus": (0, 5, 7),
        "sus4": (0, 5, 7),
        "7sus4": (0, 5, 7, 10),
        "add2": (0, 2, 4, 7),
        "add4": (0, 4, 5, 7),
        "add9": (0, 4, 7, 14),
    }
)

# Chord roots are A-G only; 'H' is a note spelling but never a chord root
CHORD_PATTERN = re.compile(r"([A-G][b#]?)(.*)")


def list_chord_kinds() -> list[str]:
    """All chord kinds in the catalog (order not significant)."""
    return list(CHORD_INTERVALS)


def chord_intervals(kind: str) -> tuple[int, ...]:
    """
    Get offsets (0, 4, 7, 11) from a chord kind 'M7'.

    Lookup is case-sensitive ('M7' and 'm7' differ). An empty kind is
    the plain major triad.

    Raises:
        NotFoundChordKind: kind is not in the catalog
    """
    if kind == "":
        kind = DEFAULT_CHORD_KIND

    try:
        return CHORD_INTERVALS[kind]
    except KeyError:
        raise NotFoundChordKind(kind) from None


@dataclass(frozen=True)
class ChordSymbol:
    """
    A chord symbol split into root spelling and kind.

    'C#m7b5' -> ChordSymbol(root='C#', kind='m7b5')
    """

    root: str
    kind: str = ""

    @classmethod
    def parse(cls, symbol: str) -> ChordSymbol:
        """
        Split a full chord symbol like 'CM7' into root 'C' and kind 'M7'.

        Raises:
            NotFoundChord: symbol does not start with A-G[#b]
        """
        match = CHORD_PATTERN.fullmatch(symbol)
        if match is None:
            raise NotFoundChord(symbol)
        return cls(match.group(1), match.group(2))

    @property
    def root_pitch_class(self) -> PitchClass:
        return PitchClass(parse_note(self.root).pitch_class)

    @property
    def intervals(self) -> tuple[int, ...]:
        return chord_intervals(self.kind)

    def pitch_classes(self) -> list[PitchClass]:
        """Pitch classes in voicing order (not sorted)."""
        root = self.root_pitch_class
        return [root.transpose(offset) for offset in self.intervals]

    def notes(self) -> list[str]:
        """Canonical note names, e.g. ['C', 'E', 'G', 'B'] for 'CM7'."""
        return [pitch.spell() for pitch in self.pitch_classes()]

    def notes_with_octave(self, octave: int) -> list[str]:
        """
        Octave-suffixed names, e.g. ['F4', 'A4', 'C5', 'E5'] for 'FM7' at 4.

        Walking left to right, the octave goes up whenever a pitch class is
        lower than the previous one. Anything above G9 is rejected.

        Raises:
            InvalidOctave: octave outside -1..9
            OutOfRange: a chord tone lands above G9
        """
        if not is_valid_octave(octave):
            raise InvalidOctave(octave)

        notes: list[str] = []
        last_position = -1
        for pitch in self.pitch_classes():
            if pitch < last_position:
                octave += 1
            name = f"{BASE_TONES[pitch]}{octave}"
            if octave > MAX_OCTAVE or (
                octave == MAX_OCTAVE and pitch > CHORD_OCTAVE_CEILING_PITCH_CLASS
            ):
                raise OutOfRange(name)
            notes.append(name)
            last_position = pitch

        return notes

    def __str__(self) -> str:
        return f"{self.root}{self.kind}"


def split_chord(symbol: str) -> tuple[str, str]:
    """Split 'CM7' into ('C', 'M7'). Raises NotFoundChord."""
    chord = ChordSymbol.parse(symbol)
    return chord.root, chord.kind


def chord_notes(symbol: str) -> list[str]:
    """
    Get note names ['C', 'E', 'G', 'B'] from a full chord symbol 'CM7'.

    Raises:
        NotFoundChord, NotFoundChordKind
    """
    return ChordSymbol.parse(symbol).notes()


def chord_notes_with_octave(symbol: str, octave: int) -> list[str]:
    """
    Get ['F4', 'A4', 'C5', 'E5'] from chord symbol 'FM7' and octave 4.

    Raises:
        NotFoundChord, NotFoundChordKind, InvalidOctave, OutOfRange
    """
    return ChordSymbol.parse(symbol).notes_with_octave(octave)


def chord_note_numbers(symbol: str, octave: int) -> list[int]:
    """Absolute note numbers for chord_notes_with_octave, e.g. [65, 69, 72, 76]."""
    return [note_number(name) for name in chord_notes_with_octave(symbol, octave)]
