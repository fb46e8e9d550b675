"""
Tests for MCP tools.

Tests the note, chord, scale and catalog tools against a mock server.
"""

import json

import pytest
import yaml

from chuk_mcp_chords.tools import (
    register_catalog_tools,
    register_chord_tools,
    register_note_tools,
    register_scale_tools,
)


class TestNoteTools:
    """Tests for note tools."""

    @pytest.mark.asyncio
    async def test_get_note_number(self, mcp):
        """Resolve an octave-bearing note."""
        tools = register_note_tools(mcp)

        result = await tools["chords_get_note_number"](note="C4")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["note"]["number"] == 60

    @pytest.mark.asyncio
    async def test_get_note_number_with_octave(self, mcp):
        """Explicit octave."""
        tools = register_note_tools(mcp)

        result = await tools["chords_get_note_number"](note="G", octave=9)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["note"]["number"] == 127

    @pytest.mark.asyncio
    async def test_get_note_number_errors(self, mcp):
        """Errors name their cause."""
        tools = register_note_tools(mcp)

        data = json.loads(await tools["chords_get_note_number"](note="A9"))
        assert data["status"] == "error"
        assert data["error"] == "OutOfRange"

        data = json.loads(await tools["chords_get_note_number"](note="C-5"))
        assert data["error"] == "NotFoundNote"
        assert "`C-5`" in data["message"]

    def test_tools_registered(self, mcp):
        """Registration puts tools on the server."""
        register_note_tools(mcp)
        assert "chords_get_note_number" in mcp.tools


class TestChordTools:
    """Tests for chord tools."""

    @pytest.mark.asyncio
    async def test_list_chord_kinds(self, mcp):
        """All kinds are listed."""
        tools = register_chord_tools(mcp)

        data = json.loads(await tools["chords_list_chord_kinds"]())
        assert data["status"] == "success"
        assert data["count"] == 75
        assert "M7" in data["kinds"]
        assert "base" in data["kinds"]

    @pytest.mark.asyncio
    async def test_get_chord_intervals(self, mcp):
        """Offsets for a kind."""
        tools = register_chord_tools(mcp)

        data = json.loads(await tools["chords_get_chord_intervals"](kind="m7"))
        assert data["intervals"] == [0, 3, 7, 10]

        data = json.loads(await tools["chords_get_chord_intervals"](kind="nope"))
        assert data["status"] == "error"
        assert data["error"] == "NotFoundChordKind"

    @pytest.mark.asyncio
    async def test_get_chord_intervals_unexpected_error(self, mcp):
        """Non-notation failures still return an error envelope."""
        tools = register_chord_tools(mcp)

        data = json.loads(await tools["chords_get_chord_intervals"](kind=["M7"]))
        assert data["status"] == "error"
        assert "error" not in data

    @pytest.mark.asyncio
    async def test_get_chord(self, mcp):
        """Expand a chord symbol to names."""
        tools = register_chord_tools(mcp)

        data = json.loads(await tools["chords_get_chord"](chord="BM7"))
        assert data["status"] == "success"
        assert data["chord"]["notes"] == ["B", "D#", "F#", "A#"]
        assert "octave" not in data["chord"]
        assert "numbers" not in data["chord"]

    @pytest.mark.asyncio
    async def test_get_chord_with_octave(self, mcp):
        """Expand with an octave and numbers."""
        tools = register_chord_tools(mcp)

        data = json.loads(
            await tools["chords_get_chord"](chord="BM7", octave=-1, as_numbers=True)
        )
        assert data["chord"]["notes"] == ["B-1", "D#0", "F#0", "A#0"]
        assert data["chord"]["numbers"] == [11, 15, 18, 22]

    @pytest.mark.asyncio
    async def test_get_chord_errors(self, mcp):
        """H-rooted chords and high voicings fail."""
        tools = register_chord_tools(mcp)

        data = json.loads(await tools["chords_get_chord"](chord="Hm"))
        assert data["error"] == "NotFoundChord"

        data = json.loads(await tools["chords_get_chord"](chord="CM7", octave=9))
        assert data["error"] == "OutOfRange"

        data = json.loads(await tools["chords_get_chord"](chord="C", octave=10))
        assert data["error"] == "InvalidOctave"


class TestScaleTools:
    """Tests for scale tools."""

    @pytest.mark.asyncio
    async def test_list_scale_kinds(self, mcp):
        """All scales are listed."""
        tools = register_scale_tools(mcp)

        data = json.loads(await tools["chords_list_scale_kinds"]())
        assert data["count"] == 29
        assert "ionian" in data["kinds"]

    @pytest.mark.asyncio
    async def test_get_scale_from_root(self, mcp):
        """Scale expanded from a root."""
        tools = register_scale_tools(mcp)

        data = json.loads(await tools["chords_get_scale"](scale="ionian", root="D4"))
        assert data["status"] == "success"
        assert data["scale"]["numbers"] == [62, 64, 66, 67, 69, 71, 73]

    @pytest.mark.asyncio
    async def test_get_scale_offsets(self, mcp):
        """Scale without root."""
        tools = register_scale_tools(mcp)

        data = json.loads(await tools["chords_get_scale"](scale="Dorian"))
        assert data["scale"]["intervals"] == [0, 2, 3, 5, 7, 9, 10]
        assert "numbers" not in data["scale"]

    @pytest.mark.asyncio
    async def test_get_scale_errors(self, mcp):
        """Unknown scale and bad root."""
        tools = register_scale_tools(mcp)

        data = json.loads(await tools["chords_get_scale"](scale="major"))
        assert data["error"] == "NotFoundScale"

        data = json.loads(await tools["chords_get_scale"](scale="ionian", root="I9"))
        assert data["error"] == "NotFoundNote"


class TestCatalogTools:
    """Tests for catalog export."""

    @pytest.mark.asyncio
    async def test_export_yaml(self, mcp):
        """YAML export loads back to the catalogs."""
        tools = register_catalog_tools(mcp)

        data = json.loads(await tools["chords_export_catalog"]())
        assert data["status"] == "success"
        catalog = yaml.safe_load(data["yaml"])
        assert catalog["chords"]["M7"] == [0, 4, 7, 11]
        assert catalog["chords"]["7(b9, 13)"] == [0, 4, 7, 10, 13, 21]
        assert len(catalog["scales"]) == 29

    @pytest.mark.asyncio
    async def test_export_json(self, mcp):
        """JSON export."""
        tools = register_catalog_tools(mcp)

        data = json.loads(await tools["chords_export_catalog"](format="json"))
        assert data["catalog"]["scales"]["ionian"] == [0, 2, 4, 5, 7, 9, 11]

    @pytest.mark.asyncio
    async def test_export_unknown_format(self, mcp):
        """Unknown format is an error."""
        tools = register_catalog_tools(mcp)

        data = json.loads(await tools["chords_export_catalog"](format="xml"))
        assert data["status"] == "error"
