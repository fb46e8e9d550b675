"""
Pitch primitives - PitchClass and the spelling table.

PitchClass represents the 12 chromatic pitches (octave-independent).
Input accepts many spellings per pitch class (enharmonics, legacy H/Hb);
output always uses the single sharp spelling in BASE_TONES.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from chuk_mcp_chords.constants import SEMITONES_PER_OCTAVE

#     1   3       6   8   10
# |  | | | |  |  | | | | | |  |
# |  |_| |_|  |  |_| |_| |_|  |
# |___|___|___|___|___|___|___|
#   0   2   4   5   7   9   11

# Canonical output names, indexed by pitch class
BASE_TONES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

# Every accepted spelling -> pitch class
NOTE_NAME_DEGREES: Mapping[str, int] = MappingProxyType(
    {
        "C": 0,
        "B#": 0,
        "C#": 1,
        "Db": 1,
        "D": 2,
        "D#": 3,
        "Eb": 3,
        "E": 4,
        "Fb": 4,
        "F": 5,
        "E#": 5,
        "F#": 6,
        "Gb": 6,
        "G": 7,
        "G#": 8,
        "Ab": 8,
        "A": 9,
        "A#": 10,
        "Bb": 10,
        "B": 11,
        "Cb": 11,
        # German naming
        "Hb": 10,
        "H": 11,
    }
)


def lookup_pitch_class(spelling: str) -> int | None:
    """Get the pitch class for a bare spelling like 'Db', or None if unknown."""
    return NOTE_NAME_DEGREES.get(spelling)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled at serialization.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def spell(self) -> str:
        """Get the canonical (sharp) name."""
        return BASE_TONES[self.value]

