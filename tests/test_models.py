"""Unit tests for color and configuration models."""

import pytest
from pydantic import ValidationError

from huesync.colors import COLORS, PRESET_COLORS, preset_name
from huesync.exceptions import InvalidHexColorError
from huesync.models import DEFAULT_PRESETS, HSL, Color, ColorSnapshot, EngineConfig


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create(self):
        """Test creating a color."""
        color = Color(r=102, g=126, b=234)
        assert color.to_rgb_tuple() == (102, 126, 234)

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["r", "g", "b"])
    @pytest.mark.parametrize("value", [-1, 256])
    def test_channel_range(self, field, value):
        """Test that channels outside 0-255 are rejected."""
        kwargs = {"r": 0, "g": 0, "b": 0, field: value}
        with pytest.raises(ValidationError):
            Color(**kwargs)

    @pytest.mark.unit
    def test_frozen(self):
        """Test that colors cannot be modified."""
        color = Color(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 10

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["#667eea", "#667EEA", "667eea"])
    def test_from_hex(self, text):
        """Test parsing HEX text in any case, with or without '#'."""
        assert Color.from_hex(text) == Color(r=102, g=126, b=234)

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["#667ee", "#667eeaa", "#zz7eea", "", None])
    def test_from_hex_invalid(self, text):
        """Test that malformed HEX raises InvalidHexColorError."""
        with pytest.raises(InvalidHexColorError) as exc_info:
            Color.from_hex(text)
        assert exc_info.value.value == text
        assert exc_info.value.recoverable

    @pytest.mark.unit
    def test_conversions(self):
        """Test derived representations."""
        color = Color(r=102, g=126, b=234)
        assert color.to_hex() == "#667eea"
        assert color.to_hsl() == HSL(h=229, s=76, l=66)
        assert color.to_css() == "rgb(102, 126, 234)"

    @pytest.mark.unit
    def test_hashable(self):
        """Test that colors can be used as dict keys."""
        lookup = {Color(r=0, g=0, b=0): "black"}
        assert lookup[Color(r=0, g=0, b=0)] == "black"


class TestHSL:
    """Test HSL model."""

    @pytest.mark.unit
    def test_tuple_round_trip(self):
        """Test tuple helpers."""
        assert HSL.from_tuple((249, 78, 73)).to_tuple() == (249, 78, 73)

    @pytest.mark.unit
    def test_out_of_range_values_allowed(self):
        """Test that HSL keeps values as given."""
        assert HSL(h=400, s=0, l=100).h == 400

    @pytest.mark.unit
    def test_to_css(self):
        """Test CSS formatting."""
        assert HSL(h=229, s=76, l=66).to_css() == "hsl(229, 76%, 66%)"


class TestColorSnapshot:
    """Test ColorSnapshot model."""

    def _snapshot(self, hex_value: str) -> ColorSnapshot:
        return ColorSnapshot(
            hsl=HSL(h=229, s=76, l=66),
            rgb=Color(r=102, g=126, b=234),
            hex=hex_value,
        )

    @pytest.mark.unit
    def test_complete(self):
        """Test a snapshot holding a full color."""
        snapshot = self._snapshot("#667eea")
        assert snapshot.is_complete
        assert snapshot.display_hex == "#667EEA"
        assert snapshot.css_rgb() == "rgb(102, 126, 234)"
        assert snapshot.css_hsl() == "hsl(229, 76%, 66%)"

    @pytest.mark.unit
    def test_partial(self):
        """Test a snapshot holding partial HEX text."""
        snapshot = self._snapshot("#66")
        assert not snapshot.is_complete
        assert snapshot.display_hex == "#66"

    @pytest.mark.unit
    def test_hex_requires_hash(self):
        """Test that HEX display text must start with '#'."""
        with pytest.raises(ValidationError):
            self._snapshot("667eea")

    @pytest.mark.unit
    def test_json(self):
        """Test JSON serialization."""
        data = self._snapshot("#667eea").model_dump()
        assert data == {
            "hsl": {"h": 229, "s": 76, "l": 66},
            "rgb": {"r": 102, "g": 126, "b": 234},
            "hex": "#667eea",
        }


class TestEngineConfig:
    """Test EngineConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test default configuration."""
        config = EngineConfig()
        assert config.default_color == "#667eea"
        assert config.presets == DEFAULT_PRESETS
        assert len(config.presets) == 12

    @pytest.mark.unit
    def test_default_presets_are_not_shared(self):
        """Test that each config gets its own preset list."""
        first = EngineConfig()
        first.presets.append("#000000")
        assert len(EngineConfig().presets) == 12

    @pytest.mark.unit
    def test_default_color_normalized(self):
        """Test that the default color is stored in lowercase."""
        assert EngineConfig(default_color="#ABCDEF").default_color == "#abcdef"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["abcdef", "#abc", "#abcdeg", ""])
    def test_invalid_default_color(self, value):
        """Test that the default color must be '#RRGGBB'."""
        with pytest.raises(ValidationError):
            EngineConfig(default_color=value)

    @pytest.mark.unit
    def test_presets_keep_case(self):
        """Test that presets are stored as written."""
        config = EngineConfig(presets=["#AbCdEf", "#000000"])
        assert config.presets == ["#AbCdEf", "#000000"]

    @pytest.mark.unit
    def test_empty_presets(self):
        """Test that an empty palette is allowed."""
        assert EngineConfig(presets=[]).presets == []

    @pytest.mark.unit
    @pytest.mark.parametrize("preset", ["000000", "#00000", "#00000g"])
    def test_invalid_preset(self, preset):
        """Test that every preset must be '#RRGGBB'."""
        with pytest.raises(ValidationError):
            EngineConfig(presets=["#ffffff", preset])


class TestNamedColors:
    """Test the named color palette."""

    @pytest.mark.unit
    def test_default_matches_config(self):
        """Test that COLORS.DEFAULT is the configured default color."""
        assert COLORS.DEFAULT.to_hex() == EngineConfig().default_color

    @pytest.mark.unit
    def test_palette_matches_default_presets(self):
        """Test that every default preset has a name."""
        assert [color.to_hex() for color in PRESET_COLORS.values()] == [
            preset.lower() for preset in DEFAULT_PRESETS
        ]

    @pytest.mark.unit
    def test_preset_name(self):
        """Test case-insensitive name lookup."""
        assert preset_name("#4ECDC4") == "Turquoise"
        assert preset_name("#8e44ad") == "Purple"
        assert preset_name("#123456") is None
