"""
Scale primitives - the scale catalog and scale expansion.

Scales are offsets from the root within one octave. Scale names are
case-insensitive ('Ionian' == 'ionian').
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .errors import NotFoundScale
from .note import parse_note

#    1   3     6   8   10       Db  Eb    Gb  Ab  Bb       C#  D#    F#  G#  A#
# | | | | | | | | | | | | |  | | | | | | | | | | | | |  | | | | | | | | | | | | |
# | |_| |_| | |_| |_| |_| |  | |_| |_| | |_| |_| |_| |  | |_| |_| | |_| |_| |_| |
# |__|___|__|__|___|___|__|  |__|___|__|__|___|___|__|  |__|___|__|__|___|___|__|
#  0   2  4   5  7   9  11    C   D  E   F  G   A   B    C   D  E   F  G   A   B

SCALE_INTERVALS: Mapping[str, tuple[int, ...]] = MappingProxyType(
    {
        # Major
        "ionian": (0, 2, 4, 5, 7, 9, 11),  # C D E F G A B
        # Church modes
        "dorian": (0, 2, 3, 5, 7, 9, 10),  # C D Eb F G A Bb
        "phrigian": (0, 1, 3, 5, 7, 8, 10),  # C Db Eb F G Ab Bb
        "lydian": (0, 2, 4, 6, 7, 9, 11),  # C D E F# G A B
        "mixolydian": (0, 2, 4, 5, 7, 9, 10),  # C D E F G A Bb
        "aeolian": (0, 2, 3, 5, 7, 8, 10),  # C D Eb F G Ab Bb
        "locrian": (0, 1, 3, 5, 6, 8, 10),  # C Db Eb F Gb Ab Bb
        # Harmonic minor modes
        "harmonic-minor": (0, 2, 3, 5, 7, 8, 11),  # C D Eb F G Ab B
        "locrian#6": (0, 1, 3, 5, 6, 9, 10),  # C Db Eb F Gb A Bb
        "ionian#5": (0, 2, 4, 5, 8, 9, 11),  # C D E F G# A B
        "dorian#4": (0, 2, 3, 6, 7, 9, 10),  # C D Eb F# G A Bb
        "phrigian-major": (0, 1, 4, 5, 7, 8, 10),  # C Db E F G Ab Bb
        "lydian#2": (0, 3, 4, 6, 7, 9, 11),  # C D# E F# G A B
        "super-locrianb7": (0, 1, 3, 4, 6, 8, 9),  # C Db Eb Fb Gb Ab Bbb
        # Melodic minor modes
        "super-ionian": (0, 2, 3, 5, 7, 9, 11),  # C D Eb F G A B
        "super-dorian": (0, 1, 3, 5, 7, 9, 10),  # C Db Eb F G A Bb
        "super-phrigian": (0, 2, 4, 6, 8, 9, 11),  # C D E F# G# A B
        "super-lydian": (0, 2, 4, 6, 7, 9, 10),  # C D E F# G A Bb
        "super-mixolydian": (0, 2, 4, 5, 7, 8, 10),  # C D E F G Ab Bb
        "super-aeolian": (0, 2, 3, 5, 6, 8, 10),  # C D Eb F Gb Ab Bb
        "super-locrian": (0, 1, 3, 4, 6, 8, 10),  # C Db Eb Fb Gb Ab Bb
        # Symmetrical
        "whole-tone": (0, 2, 4, 6, 8, 10),  # C D E F# G# A#
        "diminished": (0, 2, 3, 5, 6, 8, 9, 11),  # C D Eb F Gb G# A B
        "chromatic": (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11),
        # Pentatonic
        "pentatonic-minor": (0, 3, 5, 7, 10),  # C Eb F G Bb
        "pentatonic-major": (0, 3, 4, 7, 9),
        # Blues
        "blues-minor": (0, 3, 5, 6, 7, 10),  # C Eb F Gb G Bb
        "blues-major": (0, 2, 3, 4, 7, 9),  # C D Eb E G A
        "blue-note": (0, 2, 3, 4, 5, 6, 7, 9, 10, 11),  # C D Eb E F Gb G A Bb B
    }
)


def list_scale_kinds() -> list[str]:
    """All scale kinds in the catalog (order not significant)."""
    return list(SCALE_INTERVALS)


def scale_intervals(kind: str) -> tuple[int, ...]:
    """
    Get scale offsets (0, 2, 4, 5, 7, 9, 11) from scale name 'ionian'.

    Raises:
        NotFoundScale: kind is not in the catalog (case-insensitive)
    """
    try:
        return SCALE_INTERVALS[kind.lower()]
    except KeyError:
        raise NotFoundScale(kind) from None


def scale_from_root(kind: str, root: str) -> list[int]:
    """
    Get scale note numbers from a scale name and a root note.

    'ionian', 'D4' -> [62, 64, 66, 67, 69, 71, 73]

    Offsets are added straight to the root's number. A bare root ('D')
    counts as its pitch class, so the result stays in the lowest octaves.

    Raises:
        NotFoundScale, NotFoundNote, CouldNotGetOctave, CouldNotGetDegree, OutOfRange
    """
    offsets = scale_intervals(kind)
    root_number = parse_note(root).number
    return [root_number + offset for offset in offsets]
