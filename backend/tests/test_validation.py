"""
Unit tests for color validation and insertion decisions.
"""

import pytest

from colorbox.errors import Rejection
from colorbox.services.colors.validation import is_valid_color, try_add


class TestIsValidColor:
    """Test the validity predicate."""

    @pytest.mark.parametrize("value", [
        "#fff", "#ffff", "#ff8800", "#ff880080", "red", "rebeccapurple",
        "rgb(255, 0, 0)", "rgb(255 0 0 / 0.5)", "hsl(120 50% 50%)", "oklch(0.7 0.1 200)",
    ])
    def test_valid(self, value):
        assert is_valid_color(value)

    @pytest.mark.parametrize("value", ["", "   ", "#12345", "notacolor", "rgb(", "#ff0000 extra"])
    def test_invalid(self, value):
        assert not is_valid_color(value)

    def test_non_string(self):
        assert not is_valid_color(None)


class TestTryAdd:
    """Test insertion decisions."""

    def test_accepts_and_normalizes(self):
        """Bare hex is accepted in its canonical # form."""
        result = try_add("ffffff", [])
        assert result.accepted
        assert result.color == "#ffffff"
        assert result.rejection is None

    def test_duplicate(self):
        """Second insertion of the same canonical string is refused."""
        result = try_add("#ffffff", ["#ffffff"])
        assert not result.accepted
        assert result.rejection is Rejection.DUPLICATE
        assert result.message == "This color is already in your list"

    def test_duplicate_after_normalization(self):
        """Duplicate detection compares normalized strings."""
        result = try_add("  ffffff ", ["#ffffff"])
        assert result.rejection is Rejection.DUPLICATE

    def test_exact_match_only(self):
        """Perceptually equal colors in other spellings are not duplicates."""
        assert try_add("#FFFFFF", ["#ffffff"]).accepted
        assert try_add("white", ["#ffffff"]).accepted

    def test_invalid(self):
        result = try_add("not a color", [])
        assert result.rejection is Rejection.INVALID_SYNTAX
        assert result.message == "Please enter a valid color code"

    def test_does_not_mutate_existing(self):
        existing = ["#000000"]
        try_add("#ffffff", existing)
        assert existing == ["#000000"]
