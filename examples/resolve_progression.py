#!/usr/bin/env python3
"""
Example: Resolve a chord progression to note numbers.

Shows the path a sequencer would take: chord symbols in, note numbers out,
with a scale from the same root for a melody line.

Usage:
    python examples/resolve_progression.py
"""

from chuk_mcp_chords import NotationError, chord_notes, chord_notes_with_octave, scale_from_root
from chuk_mcp_chords.core.chord import chord_note_numbers


def main() -> None:
    """Print a ii-V-I in D plus a couple of bad symbols."""
    progression = ["Em7", "A7", "DM7"]

    print("ii-V-I in D major (octave 3):")
    for symbol in progression:
        names = chord_notes_with_octave(symbol, 3)
        numbers = chord_note_numbers(symbol, 3)
        print(f"  {symbol:<6} {' '.join(names):<18} {numbers}")

    print("\nD ionian from D4:")
    print(f"  {scale_from_root('ionian', 'D4')}")

    print("\nExtended chord, pitch classes only:")
    print(f"  C13 -> {chord_notes('C13')}")

    print("\nErrors:")
    for symbol in ["HM7", "Cxyz"]:
        try:
            chord_notes(symbol)
        except NotationError as e:
            print(f"  {symbol:<6} {type(e).__name__}: {e}")


if __name__ == "__main__":
    main()
