"""
Resolution errors.

Every failure is a ValueError subclass carrying the offending token, so
callers can either catch ValueError broadly or match on the exact cause.
"""

from __future__ import annotations

from typing import ClassVar

from chuk_mcp_chords.constants import ErrorMessages


class NotationError(ValueError):
    """Base class for note, chord and scale resolution failures."""

    template: ClassVar[str] = "{token}"

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(self.template.format(token=token))


class NotFoundNote(NotationError):
    """Token does not match the note grammar."""

    template = ErrorMessages.NOT_FOUND_NOTE


class NotFoundChord(NotationError):
    """Chord symbol does not start with a root in A-G (optionally # or b)."""

    template = ErrorMessages.NOT_FOUND_CHORD


class NotFoundChordKind(NotationError):
    """Chord kind is not in the chord catalog."""

    template = ErrorMessages.NOT_FOUND_CHORD_KIND


class NotFoundScale(NotationError):
    """Scale kind is not in the scale catalog."""

    template = ErrorMessages.NOT_FOUND_SCALE


NotFoundScaleKind = NotFoundScale


class CouldNotGetOctave(NotationError):
    """Note matched the grammar but no octave suffix could be read."""

    template = ErrorMessages.COULD_NOT_GET_OCTAVE


class CouldNotGetDegree(NotationError):
    """Note matched the grammar but no pitch class prefix could be read."""

    template = ErrorMessages.COULD_NOT_GET_DEGREE


class InvalidOctave(NotationError):
    """Explicit octave argument outside -1..9."""

    template = ErrorMessages.INVALID_OCTAVE


class OutOfRange(NotationError):
    """Computed pitch falls outside the ceiling for the call path."""

    template = ErrorMessages.OUT_OF_RANGE
