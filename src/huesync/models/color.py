"""Color models: canonical RGB, the HSL view and engine snapshots."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from huesync.conversions import hex_to_rgb, rgb_to_hex, rgb_to_hsl
from huesync.exceptions import InvalidHexColorError


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    This is the canonical storage form of a color. HEX is always derived
    from it, and HSL is derived from it whenever RGB or HEX was edited.

    The model is frozen so instances can be shared safely with observers
    and used as dictionary keys.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Create a color from '#RRGGBB' text.

        Raises:
            InvalidHexColorError: If the text is not a 6-digit HEX color

        Example:
            >>> Color.from_hex("#667EEA")
            Color(r=102, g=126, b=234)
        """
        rgb = hex_to_rgb(text) if isinstance(text, str) else None
        if rgb is None:
            raise InvalidHexColorError(text)
        return cls(r=rgb[0], g=rgb[1], b=rgb[2])

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to lowercase hex color string (e.g., '#667eea')."""
        return rgb_to_hex(self.r, self.g, self.b)

    def to_hsl(self) -> "HSL":
        """Derive the integer HSL view of this color."""
        return HSL.from_tuple(rgb_to_hsl(self.r, self.g, self.b))

    def to_css(self) -> str:
        """Format as CSS 'rgb(r, g, b)'."""
        return f"rgb({self.r}, {self.g}, {self.b})"


class HSL(BaseModel):
    """Integer Hue/Saturation/Lightness triple.

    Values are stored as given. Hue outside 0-360 is legal input for
    ``hsl_to_rgb``; saturation and lightness are trusted to be 0-100.
    """

    model_config = ConfigDict(frozen=True)

    h: int = Field(description="Hue in degrees")
    s: int = Field(description="Saturation in percent")
    l: int = Field(description="Lightness in percent")  # noqa: E741

    @classmethod
    def from_tuple(cls, hsl: tuple[int, int, int]) -> "HSL":
        """Create from an (h, s, l) tuple."""
        return cls(h=hsl[0], s=hsl[1], l=hsl[2])

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to (h, s, l) tuple."""
        return (self.h, self.s, self.l)

    def to_css(self) -> str:
        """Format as CSS 'hsl(h, s%, l%)'."""
        return f"hsl({self.h}, {self.s}%, {self.l}%)"


class ColorSnapshot(BaseModel):
    """Immutable view of the engine's current color.

    ``hex`` is the HEX display text. It equals ``rgb.to_hex()`` except while
    the user is part-way through typing a HEX value, when it holds the
    partial text (e.g. '#4') and ``is_complete`` is False.
    """

    model_config = ConfigDict(frozen=True)

    hsl: HSL
    rgb: Color
    hex: str

    @field_validator("hex")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        """HEX display text must start with '#'."""
        if not v.startswith("#"):
            raise ValueError("HEX display text must start with '#'")
        return v

    @property
    def is_complete(self) -> bool:
        """True when the HEX text is a full color consistent with RGB."""
        return len(self.hex) == 7

    @property
    def display_hex(self) -> str:
        """HEX text in upper case, as shown on the preview swatch."""
        return self.hex.upper()

    def css_rgb(self) -> str:
        """Format RGB as 'rgb(r, g, b)'."""
        return self.rgb.to_css()

    def css_hsl(self) -> str:
        """Format HSL as 'hsl(h, s%, l%)'."""
        return self.hsl.to_css()
