"""Velocity-to-width model simulating pen pressure.

Slow movement reads as high pressure and produces a thick line; fast
movement reads as low pressure and produces a thin one:

    W = W_min + (W_max - W_min) * (1 - v_norm) ** gamma

Smoothing over time is applied by the stroke assembler with `ema`; the width
function itself is stateless.
"""

from inkstroke.config import DrawingConfig

# Normalized velocity used when the velocity range collapses to a point
DEGENERATE_RANGE_VELOCITY = 0.5


def normalize_velocity(velocity: float, config: DrawingConfig) -> float:
    """Map a velocity onto [0, 1] within the configured velocity range."""
    velocity_range = config.max_velocity - config.min_velocity
    if velocity_range <= 0:
        return DEGENERATE_RANGE_VELOCITY
    normalized = (velocity - config.min_velocity) / velocity_range
    return min(1.0, max(0.0, normalized))


def width_for(velocity: float, config: DrawingConfig) -> float:
    """Calculate the target stroke width for a velocity.

    Args:
        velocity: Pointer velocity in pixels per millisecond
        config: Pen configuration

    Returns:
        Width in pixels within [config.min_width, config.max_width]

    Examples:
        >>> config = DrawingConfig(min_width=2, max_width=10, max_velocity=2, width_variation=1.0)
        >>> width_for(1.0, config)
        6.0
    """
    pressure = 1.0 - normalize_velocity(velocity, config)
    curved = pressure**config.width_variation
    return config.min_width + (config.max_width - config.min_width) * curved


def ema(previous: float, sample: float, weight: float) -> float:
    """Exponential moving average step.

    Args:
        previous: Previous filtered value
        sample: New raw sample
        weight: Weight of the previous value in [0, 1]

    Returns:
        weight * previous + (1 - weight) * sample
    """
    return weight * previous + (1.0 - weight) * sample
