"""Color arithmetic and formatting for the mixer.

Every operation here is a pure function of its arguments. A color that
cannot be resolved into three finite channel values never raises: each
operation substitutes a fixed default instead (black, ``#000000`` or
"not dark") so the rendering side always gets a usable value.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

logger = logging.getLogger(__name__)

DARK_THRESHOLD = 0.5
FALLBACK_HEX = "#000000"

Channels = Tuple[float, float, float]


@dataclass(frozen=True)
class Color:
    """Immutable RGB color with channels normalized to [0.0, 1.0]."""

    red: float
    green: float
    blue: float

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#RRGGBB`` or ``#RGB`` (either case).

        Raises ValueError for anything else.
        """
        if not isinstance(value, str):
            raise ValueError(f"hex color must be a string, got {type(value).__name__}")
        text = value.strip()
        if not text.startswith("#"):
            raise ValueError(f"hex color must start with '#': {value!r}")
        digits = text[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            raise ValueError(f"invalid hex color length: {value!r}")
        try:
            r, g, b = int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
        except ValueError:
            raise ValueError(f"invalid hex digits: {value!r}") from None
        return cls.from_rgb255(r, g, b)

    def as_tuple(self) -> Channels:
        return (self.red, self.green, self.blue)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)


def _components(color: Any) -> Optional[Channels]:
    """Return the color's channels as floats, or None if they can't be resolved."""
    raw = color.as_tuple() if isinstance(color, Color) else color
    if isinstance(raw, (str, bytes)):
        return None
    try:
        values = tuple(float(c) for c in raw)
    except (TypeError, ValueError):
        return None
    if len(values) != 3 or not all(math.isfinite(v) for v in values):
        return None
    return values


def clamp_ratio(value: float) -> float:
    """Clamp a mix ratio into [0.0, 1.0]."""
    return max(0.0, min(1.0, float(value)))


def mix(color_a: Any, color_b: Any, ratio: float) -> Color:
    """Linearly interpolate two colors; ``ratio`` is the weight of ``color_b``.

    The ratio is used as given. Values outside [0, 1] extrapolate and may
    produce out-of-gamut channels, so callers clamp first (see
    :func:`clamp_ratio`).

    Falls back to :data:`BLACK` when either color can't be resolved.
    """
    a = _components(color_a)
    b = _components(color_b)
    if a is None or b is None:
        logger.warning("Cannot resolve color components for mix(%r, %r); using black", color_a, color_b)
        return BLACK
    inverse = 1 - ratio
    r = a[0] * inverse + b[0] * ratio
    g = a[1] * inverse + b[1] * ratio
    bl = a[2] * inverse + b[2] * ratio
    return Color(r, g, bl)


def to_hex(color: Any) -> str:
    """Format a color as uppercase ``#RRGGBB``.

    Channels are scaled by 255 and truncated, not rounded, so 0.5 becomes
    ``7F``. Out-of-gamut channels are clamped to 00..FF.
    """
    channels = _components(color)
    if channels is None:
        logger.warning("Cannot resolve color components for to_hex(%r); using %s", color, FALLBACK_HEX)
        return FALLBACK_HEX
    r, g, b = (int(max(0.0, min(1.0, c)) * 255) for c in channels)
    return f"#{r:02X}{g:02X}{b:02X}"


def is_dark(color: Any) -> bool:
    """Return True when perceived brightness is below :data:`DARK_THRESHOLD`.

    Unresolvable colors count as light.
    """
    channels = _components(color)
    if channels is None:
        logger.warning("Cannot resolve color components for is_dark(%r); treating as light", color)
        return False
    r, g, b = channels
    brightness = (r * 299 + g * 587 + b * 114) / 1000
    return brightness < DARK_THRESHOLD


def contrast_color(color: Any) -> Color:
    """Foreground color readable on top of ``color``."""
    return WHITE if is_dark(color) else BLACK


def ratio_percent(ratio: float) -> str:
    return f"{int(ratio * 100)}%"
