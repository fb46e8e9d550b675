"""
Tests for the command line entry point.

Only the --check path is exercised; it never starts a server.
"""

import pytest

from chuk_mcp_chords.server import build_parser, check_chords, main


class TestCheckChords:
    """Tests for chord expansion from the command line."""

    def test_names(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Each symbol prints on its own line."""
        assert main(["--check", "CM7", "--check", "Csus4"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["CM7\tC E G B", "Csus4\tC F G"]

    def test_with_octave(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--octave voices the chord upward."""
        assert main(["--check", "BM7", "--octave", "-1"]) == 0
        assert capsys.readouterr().out == "BM7\tB-1 D#0 F#0 A#0\n"

    def test_bad_symbol_sets_status(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Failures go to stderr, good symbols still print."""
        assert check_chords(["HM7", "C"]) == 1
        captured = capsys.readouterr()
        assert captured.out == "C\tC E G\n"
        assert "NotFoundChord" in captured.err
        assert "`HM7`" in captured.err

    def test_above_ceiling(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Octave expansion errors are reported per symbol."""
        assert check_chords(["CM7"], octave=9) == 1
        assert "OutOfRange" in capsys.readouterr().err

    def test_octave_validated(self) -> None:
        """--octave outside -1..9 is rejected by the parser."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--check", "C", "--octave", "10"])

    def test_defaults(self) -> None:
        """Without --check the server options apply."""
        args = build_parser().parse_args([])
        assert args.check == []
        assert args.transport == "stdio"
        assert args.port == 8000
