"""
Pydantic models for tool responses.

This module provides:
- NoteResult: A resolved note token
- ChordResult: An expanded chord symbol
- ScaleResult: A scale, optionally expanded from a root
- CatalogExport: The static chord and scale catalogs
"""

from chuk_mcp_chords.models.results import CatalogExport, ChordResult, NoteResult, ScaleResult

__all__ = [
    "CatalogExport",
    "ChordResult",
    "NoteResult",
    "ScaleResult",
]
