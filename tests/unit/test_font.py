"""Unit tests for the font shorthand codec."""

import pytest

from shapeplot.config import FontConfig
from shapeplot.core.font import FontCodec
from shapeplot.domain import FontParts

CANONICAL = "italic small-caps bold 12px serif"
DEFAULT = "normal normal normal 10px sans-serif"


@pytest.fixture
def codec() -> FontCodec:
    """Create a codec with library defaults."""
    return FontCodec()


class TestParse:
    """Tests for FontCodec.parse."""

    def test_five_tokens(self, codec: FontCodec) -> None:
        """Test a canonical string splits into five fields."""
        assert codec.parse(CANONICAL) == FontParts("italic", "small-caps", "bold", "12px", "serif")

    def test_family_keeps_spaces(self, codec: FontCodec) -> None:
        """Test the family takes the remainder of the string."""
        parts = codec.parse("normal normal normal 12px Times New Roman")
        assert parts is not None
        assert parts.family == "Times New Roman"

    @pytest.mark.parametrize("font", ["", "serif", "12px serif", "bold 12px serif", "a b c d"])
    def test_insufficient_parts(self, codec: FontCodec, font: str) -> None:
        """Test fewer than five tokens is reported as None."""
        assert codec.parse(font) is None
        assert not codec.is_well_formed(font)

    def test_round_trip(self, codec: FontCodec) -> None:
        """Test format(parse(s)) is s for a canonical string."""
        assert codec.format(codec.parse(CANONICAL)) == CANONICAL


class TestFormat:
    """Tests for FontCodec.format."""

    def test_parts_single_spaced(self, codec: FontCodec) -> None:
        """Test FontParts are joined with single spaces."""
        parts = FontParts("normal", "normal", "bold", "12px", "Times  New Roman")
        assert codec.format(parts) == "normal normal bold 12px Times New Roman"

    def test_native_default_canonicalized(self, codec: FontCodec) -> None:
        """Test a surface's native default font gains the keyword fields."""
        assert codec.format("10px sans-serif") == DEFAULT

    def test_redundant_whitespace(self, codec: FontCodec) -> None:
        """Test redundant whitespace is trimmed."""
        assert codec.format("  italic   small-caps  bold 12px   serif ") == CANONICAL

    def test_empty_is_default(self, codec: FontCodec) -> None:
        """Test an empty string formats to the default font."""
        assert codec.format("") == DEFAULT
        assert codec.format("   ") == DEFAULT

    @pytest.mark.parametrize(
        ("font", "expected"),
        [
            ("bold 12px Arial", "normal normal bold 12px Arial"),
            ("small-caps italic 12px serif", "italic small-caps normal 12px serif"),
            ("normal 700 2em serif", "normal normal 700 2em serif"),
            ("oblique large serif", "oblique normal normal large serif"),
            ("12px/1.5 Helvetica Neue", "normal normal normal 12px/1.5 Helvetica Neue"),
            ("12px / 1.5 serif", "normal normal normal 12px/1.5 serif"),
        ],
    )
    def test_partial_shorthand(self, codec: FontCodec, font: str, expected: str) -> None:
        """Test missing keyword fields are filled with defaults."""
        assert codec.format(font) == expected

    def test_outside_grammar_normalized_only(self, codec: FontCodec) -> None:
        """Test strings outside the shorthand grammar keep their tokens."""
        assert codec.format("  12   serif ") == "12 serif"

    def test_fixed_point(self, codec: FontCodec) -> None:
        """Test canonical output formats to itself."""
        once = codec.format("bold 12px serif")
        assert codec.format(once) == once


class TestMutators:
    """Tests for the field mutators."""

    def test_each_field(self, codec: FontCodec) -> None:
        """Test each mutator replaces exactly one field."""
        assert codec.with_style(CANONICAL, "oblique") == "oblique small-caps bold 12px serif"
        assert codec.with_variant(CANONICAL, "normal") == "italic normal bold 12px serif"
        assert codec.with_weight(CANONICAL, "lighter") == "italic small-caps lighter 12px serif"
        assert codec.with_size(CANONICAL, "2em") == "italic small-caps bold 2em serif"
        assert codec.with_family(CANONICAL, "Fira Code") == "italic small-caps bold 12px Fira Code"

    @pytest.mark.parametrize(("size", "expected"), [(20, "20px"), (12.5, "12.5px"), (14.0, "14px")])
    def test_numeric_size_gets_unit(self, codec: FontCodec, size: float, expected: str) -> None:
        """Test numeric sizes are suffixed with the length unit."""
        assert codec.with_size(CANONICAL, size) == f"italic small-caps bold {expected} serif"

    def test_numeric_weight(self, codec: FontCodec) -> None:
        """Test numeric weights are stringified."""
        assert codec.with_weight(CANONICAL, 700) == "italic small-caps 700 12px serif"

    def test_falsy_restores_field_default(self, codec: FontCodec) -> None:
        """Test a falsy value restores that field's default."""
        assert codec.with_style(CANONICAL, None) == "normal small-caps bold 12px serif"
        assert codec.with_family(CANONICAL, "") == "italic small-caps bold 12px sans-serif"

    def test_malformed_resets_to_default(self, codec: FontCodec) -> None:
        """Test a malformed current font resets instead of raising."""
        assert codec.with_style("bold 12px", "italic") == DEFAULT
        assert codec.with_size("", 30) == DEFAULT

    def test_custom_unit(self) -> None:
        """Test the configured size unit."""
        codec = FontCodec(FontConfig(size_unit="pt"))
        assert codec.with_size(CANONICAL, 9) == "italic small-caps bold 9pt serif"

    def test_custom_defaults(self) -> None:
        """Test configured default fields."""
        codec = FontCodec(FontConfig(default_family="serif", default_size="16px"))
        assert codec.default_font == "normal normal normal 16px serif"
        assert codec.with_weight("bad", "bold") == "normal normal normal 16px serif"


class TestGetters:
    """Tests for the field getters."""

    def test_fields(self, codec: FontCodec) -> None:
        """Test each getter returns its field."""
        assert codec.style_of(CANONICAL) == "italic"
        assert codec.variant_of(CANONICAL) == "small-caps"
        assert codec.weight_of(CANONICAL) == "bold"
        assert codec.family_of(CANONICAL) == "serif"

    @pytest.mark.parametrize(
        ("size", "expected"),
        [("12px", 12.0), ("12.5px", 12.5), ("12px/1.5", 12.0), (".5em", 0.5), ("medium", None)],
    )
    def test_size_of(self, codec: FontCodec, size: str, expected: float | None) -> None:
        """Test the numeric part of the size field."""
        assert codec.size_of(f"normal normal normal {size} serif") == expected

    def test_malformed_returns_none(self, codec: FontCodec) -> None:
        """Test getters on a malformed font return None."""
        assert codec.style_of("12px serif") is None
        assert codec.size_of("12px serif") is None
        assert codec.family_of("") is None
