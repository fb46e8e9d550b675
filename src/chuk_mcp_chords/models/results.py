"""
Result models - what the tools hand back to MCP clients.

Thin pydantic wrappers over the core lookups. Construction goes through
the from_* classmethods so a model only ever exists for a successful
resolution; core errors propagate unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_chords.core import (
    BASE_TONES,
    CHORD_INTERVALS,
    SCALE_INTERVALS,
    ChordSymbol,
    note_number,
    note_number_with_octave,
    parse_note,
    scale_from_root,
    scale_intervals,
)


class NoteResult(BaseModel):
    """A resolved note token."""

    note: str = Field(..., description="Note token as given")
    name: str = Field(..., description="Canonical spelling (sharps)")
    pitch_class: int = Field(..., ge=0, le=11, description="Pitch class, C = 0")
    octave: int | None = Field(None, ge=-1, le=9, description="Octave, None for bare spellings")
    number: int = Field(..., ge=0, le=127, description="Note number (pitch class if bare)")

    @classmethod
    def from_token(cls, note: str, octave: int | None = None) -> NoteResult:
        """
        Resolve a note token, optionally against an explicit octave.

        With an explicit octave the token must be a bare spelling ('C', 'Db').
        """
        if octave is not None:
            number = note_number_with_octave(note, octave)
            pitch_class = number % 12
        else:
            parsed = parse_note(note)
            number = parsed.number
            pitch_class = parsed.pitch_class
            octave = parsed.octave

        return cls(
            note=note,
            name=BASE_TONES[pitch_class],
            pitch_class=pitch_class,
            octave=octave,
            number=number,
        )


class ChordResult(BaseModel):
    """An expanded chord symbol."""

    chord: str = Field(..., description="Chord symbol as given")
    root: str = Field(..., description="Root spelling from the symbol")
    kind: str = Field("", description="Chord kind from the symbol")
    intervals: list[int] = Field(..., description="Offsets from the root, in voicing order")
    notes: list[str] = Field(..., description="Note names, octave-suffixed if octave given")
    octave: int | None = Field(None, description="Starting octave, if any")
    numbers: list[int] | None = Field(None, description="Note numbers (with octave only)")

    @classmethod
    def from_symbol(
        cls,
        chord: str,
        octave: int | None = None,
        as_numbers: bool = False,
    ) -> ChordResult:
        """Expand a chord symbol, optionally voiced upward from an octave."""
        symbol = ChordSymbol.parse(chord)
        if octave is None:
            notes = symbol.notes()
            numbers = None
        else:
            notes = symbol.notes_with_octave(octave)
            numbers = [note_number(name) for name in notes] if as_numbers else None

        return cls(
            chord=chord,
            root=symbol.root,
            kind=symbol.kind,
            intervals=list(symbol.intervals),
            notes=notes,
            octave=octave,
            numbers=numbers,
        )


class ScaleResult(BaseModel):
    """A scale, either as bare offsets or expanded from a root note."""

    scale: str = Field(..., description="Scale name as given")
    intervals: list[int] = Field(..., description="Offsets from the root")
    root: str | None = Field(None, description="Root note token, if any")
    numbers: list[int] | None = Field(None, description="Root number plus each offset")
    notes: list[str] = Field(default_factory=list, description="Canonical names of the result")

    @classmethod
    def from_name(cls, scale: str, root: str | None = None) -> ScaleResult:
        """Look up a scale, expanding it from root when given."""
        intervals = scale_intervals(scale)
        if root is None:
            return cls(
                scale=scale,
                intervals=list(intervals),
                notes=[BASE_TONES[offset % 12] for offset in intervals],
            )

        numbers = scale_from_root(scale, root)
        return cls(
            scale=scale,
            intervals=list(intervals),
            root=root,
            numbers=numbers,
            notes=[BASE_TONES[number % 12] for number in numbers],
        )


class CatalogExport(BaseModel):
    """The chord and scale catalogs, as plain data."""

    chords: dict[str, list[int]] = Field(default_factory=dict)
    scales: dict[str, list[int]] = Field(default_factory=dict)

    @classmethod
    def build(cls) -> CatalogExport:
        return cls(
            chords={kind: list(offsets) for kind, offsets in CHORD_INTERVALS.items()},
            scales={kind: list(offsets) for kind, offsets in SCALE_INTERVALS.items()},
        )

    def to_yaml_dict(self) -> dict[str, Any]:
        """Dictionary for YAML export, with flow-style friendly lists."""
        return {
            "chords": self.chords,
            "scales": self.scales,
        }
