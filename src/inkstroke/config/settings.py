"""Configuration settings for Inkstroke."""

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from PIL import ImageColor
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Background(str, Enum):
    """Background of a raster export."""

    OPAQUE = "opaque"
    TRANSPARENT = "transparent"


class DrawingConfig(BaseModel):
    """Pen behavior: width range, color, smoothing and velocity response.

    Smoothness values weight the previous filtered value in an exponential
    moving average, so 0.0 follows every sample and 1.0 never changes.
    """

    model_config = ConfigDict(frozen=True)

    min_width: float = Field(
        default=4.0,
        gt=0.0,
        description="Thinnest stroke width in pixels (fast movement)",
    )
    max_width: float = Field(
        default=7.0,
        gt=0.0,
        description="Thickest stroke width in pixels (slow movement)",
    )
    color: str = Field(
        default="black",
        description="Stroke color (any color name or hex string Pillow understands)",
    )
    velocity_smoothness: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="EMA weight of the previous velocity",
    )
    width_smoothness: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="EMA weight of the previous width",
    )
    min_velocity: float = Field(
        default=0.0,
        ge=0.0,
        description="Velocity (px/ms) at or below which width is maximal",
    )
    max_velocity: float = Field(
        default=10.0,
        ge=0.0,
        description="Velocity (px/ms) at or above which width is minimal",
    )
    width_variation: float = Field(
        default=1.5,
        ge=0.5,
        le=3.0,
        description="Gamma exponent of the pressure response (1.0 is linear)",
    )
    input_noise_threshold: float = Field(
        default=1.0,
        ge=0.0,
        description="Minimum distance in pixels between accepted samples",
    )

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        ImageColor.getrgb(value)
        return value

    @model_validator(mode="after")
    def _check_ranges(self) -> "DrawingConfig":
        if self.min_width > self.max_width:
            raise ValueError(
                f"min_width ({self.min_width}) must not exceed max_width ({self.max_width})"
            )
        if self.max_velocity < self.min_velocity:
            raise ValueError(
                f"max_velocity ({self.max_velocity}) must not be below "
                f"min_velocity ({self.min_velocity})"
            )
        return self

    @classmethod
    def fountain_pen(cls, color: str = "black") -> "DrawingConfig":
        """Fountain pen: elegant with moderate contrast (1-4.5px)."""
        return cls(
            min_width=1.0,
            max_width=4.5,
            color=color,
            velocity_smoothness=0.15,
            width_smoothness=0.3,
            min_velocity=0.0,
            max_velocity=8.0,
            width_variation=1.5,
            input_noise_threshold=0.8,
        )

    @classmethod
    def bic_pen(cls, color: str = "black") -> "DrawingConfig":
        """Ballpoint pen: uniform and consistent (2-2.5px)."""
        return cls(
            min_width=2.0,
            max_width=2.5,
            color=color,
            velocity_smoothness=0.05,
            width_smoothness=0.2,
            min_velocity=0.0,
            max_velocity=12.0,
            width_variation=1.0,
            input_noise_threshold=1.0,
        )

    @classmethod
    def marker(cls, color: str = "black") -> "DrawingConfig":
        """Marker: thick and uniform (3-4px)."""
        return cls(
            min_width=3.0,
            max_width=4.0,
            color=color,
            velocity_smoothness=0.08,
            width_smoothness=0.15,
            min_velocity=0.0,
            max_velocity=15.0,
            width_variation=1.2,
            input_noise_threshold=1.2,
        )

    @classmethod
    def edding(cls, color: str = "black") -> "DrawingConfig":
        """Permanent marker: very bold (5-6.5px)."""
        return cls(
            min_width=5.0,
            max_width=6.5,
            color=color,
            velocity_smoothness=0.07,
            width_smoothness=0.12,
            min_velocity=0.0,
            max_velocity=18.0,
            width_variation=1.1,
            input_noise_threshold=1.5,
        )


PRESETS: dict[str, Callable[[str], DrawingConfig]] = {
    "fountain_pen": DrawingConfig.fountain_pen,
    "bic_pen": DrawingConfig.bic_pen,
    "marker": DrawingConfig.marker,
    "edding": DrawingConfig.edding,
}


def get_preset(name: str, color: str = "black") -> DrawingConfig:
    """Build a preset pen configuration by name.

    Args:
        name: Preset name (fountain_pen, bic_pen, marker, edding)
        color: Stroke color

    Returns:
        DrawingConfig for the preset

    Raises:
        ValueError: If the preset name is unknown
    """
    try:
        factory = PRESETS[name.lower()]
    except KeyError:
        valid = ", ".join(PRESETS)
        raise ValueError(f"Unknown preset '{name}'. Valid presets: {valid}") from None
    return factory(color)


class ExportConfig(BaseModel):
    """Configuration for raster export."""

    background: Background = Field(
        default=Background.OPAQUE,
        description="Opaque fill or fully transparent background",
    )
    background_color: str = Field(
        default="white",
        description="Fill color for opaque backgrounds",
    )
    crop: bool = Field(
        default=False,
        description="Crop the image to the drawn content",
    )
    crop_padding: int = Field(
        default=0,
        ge=0,
        description="Padding in pixels kept around cropped content",
    )

    @field_validator("background_color")
    @classmethod
    def _check_background_color(cls, value: str) -> str:
        ImageColor.getrgb(value)
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class InkSettings(BaseModel):
    """Main application settings."""

    drawing: DrawingConfig = Field(default_factory=DrawingConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> InkSettings:
    """Get default application settings."""
    return InkSettings()
