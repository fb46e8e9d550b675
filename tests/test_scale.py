"""
Tests for the scale catalog and scale expansion.
"""

import pytest

from chuk_mcp_chords.constants import ALL_SCALE_COUNT
from chuk_mcp_chords.core import (
    SCALE_INTERVALS,
    NotFoundNote,
    NotFoundScale,
    NotFoundScaleKind,
    OutOfRange,
    list_scale_kinds,
    scale_from_root,
    scale_intervals,
)


class TestScaleCatalog:
    """Tests for the scale catalog."""

    def test_count(self) -> None:
        """All 29 scales are listed."""
        kinds = list_scale_kinds()
        assert len(kinds) == ALL_SCALE_COUNT
        assert len(set(kinds)) == ALL_SCALE_COUNT

    @pytest.mark.parametrize("kind", sorted(SCALE_INTERVALS))
    def test_every_scale_starts_at_root(self, kind: str) -> None:
        """Each scale is non-empty and starts at 0."""
        intervals = scale_intervals(kind)
        assert intervals
        assert intervals[0] == 0

    def test_case_insensitive(self) -> None:
        """Scale names ignore case."""
        assert scale_intervals("Ionian") == scale_intervals("ionian") == (0, 2, 4, 5, 7, 9, 11)
        assert scale_intervals("BLUES-MINOR") == (0, 3, 5, 6, 7, 10)

    def test_unknown_scale(self) -> None:
        """Unknown names keep the original spelling in the error."""
        with pytest.raises(NotFoundScale) as exc_info:
            scale_intervals("Major")
        assert exc_info.value.token == "Major"
        assert NotFoundScaleKind is NotFoundScale


class TestScaleFromRoot:
    """Tests for scale_from_root()."""

    def test_ionian_from_d4(self) -> None:
        """D4 ionian."""
        assert scale_from_root("ionian", "D4") == [62, 64, 66, 67, 69, 71, 73]

    def test_bare_root(self) -> None:
        """A bare root counts as its pitch class."""
        assert scale_from_root("IONIAN", "D") == [2, 4, 6, 7, 9, 11, 13]

    def test_lowest_root(self) -> None:
        """Octave -1 root."""
        assert scale_from_root("dorian", "C-1") == [0, 2, 3, 5, 7, 9, 10]

    def test_no_range_check_past_root(self) -> None:
        """Offsets are added straight to the root number."""
        numbers = scale_from_root("chromatic", "G9")
        assert numbers[0] == 127
        assert numbers[-1] == 138

    def test_scale_checked_before_root(self) -> None:
        """Unknown scale is reported even when the root is bad too."""
        with pytest.raises(NotFoundScale):
            scale_from_root("nope", "X")

    def test_bad_root(self) -> None:
        """Root errors come through unchanged."""
        with pytest.raises(NotFoundNote):
            scale_from_root("ionian", "X4")
        with pytest.raises(OutOfRange):
            scale_from_root("ionian", "A9")
