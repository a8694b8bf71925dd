"""Engine configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from huesync.conversions import hex_to_rgb, rgb_to_hex
from huesync.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".huesync" / "config.json"

DEFAULT_PRESETS = [
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#FFA07A",
    "#98D8C8", "#F7DC6F", "#BB8FCE", "#85C1E2",
    "#F1948A", "#52BE80", "#F39C12", "#8E44AD",
]


class EngineConfig(BaseModel):
    """Color engine configuration and settings."""

    default_color: str = Field(
        default="#667eea",
        description="Color the engine starts with, as '#RRGGBB'",
    )
    presets: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PRESETS),
        description="Preset swatches offered to the user, as '#RRGGBB'",
    )

    @field_validator("default_color")
    @classmethod
    def validate_default_color(cls, v: str) -> str:
        """Require a complete color and store it in canonical lowercase form."""
        rgb = hex_to_rgb(v)
        if rgb is None or not v.startswith("#"):
            raise ValueError(f"'{v}' is not a '#RRGGBB' color")
        return rgb_to_hex(*rgb)

    @field_validator("presets")
    @classmethod
    def validate_presets(cls, v: list[str]) -> list[str]:
        """Every preset must be a complete '#RRGGBB' color; case is kept."""
        for preset in v:
            if not preset.startswith("#") or hex_to_rgb(preset) is None:
                raise ValueError(f"Preset '{preset}' is not a '#RRGGBB' color")
        return v

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "EngineConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.huesync/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
