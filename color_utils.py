"""
Color conversion helpers shared by the palette extractor and the mood engine.

Hex strings are `#RRGGBB`; RGB channels are 0-255 ints; HSL is hue in
degrees [0, 360) with saturation and lightness in [0, 1].
"""

import string
from typing import NamedTuple, Optional

import numpy as np


class HSL(NamedTuple):
    h: float
    s: float
    l: float


# =============================================================================
# Quantization
# =============================================================================

def quantize_channels(rgb: np.ndarray, step: int) -> np.ndarray:
    """Round each channel to the nearest multiple of step (half rounds up).

    Results are clamped to 255 so every bucket still encodes to 6 hex digits.
    """
    binned = np.floor(rgb.astype(np.float64) / step + 0.5) * step
    return np.clip(binned, 0, 255).astype(np.int32)


# =============================================================================
# Hex / RGB
# =============================================================================

def rgb_to_hex(rgb) -> str:
    """Convert an RGB triple to an uppercase hex string."""
    r, g, b = (int(c) for c in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_rgb(hex_color: str) -> Optional[tuple]:
    """Parse `#RRGGBB` (leading '#' optional) into an RGB tuple.

    Returns None for anything that is not exactly six hex digits.
    """
    if not isinstance(hex_color, str):
        return None
    digits = hex_color.strip().removeprefix('#')
    if len(digits) != 6 or any(c not in string.hexdigits for c in digits):
        return None
    value = int(digits, 16)
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


# =============================================================================
# HSL
# =============================================================================

def rgb_to_hsl(rgb) -> HSL:
    """Convert an RGB triple (0-255) to HSL."""
    r, g, b = (c / 255.0 for c in rgb)
    mx = max(r, g, b)
    mn = min(r, g, b)
    lightness = (mx + mn) / 2

    if mx == mn:
        return HSL(0.0, 0.0, lightness)

    d = mx - mn
    if lightness > 0.5:
        saturation = d / (2 - mx - mn)
    else:
        saturation = d / (mx + mn)

    if mx == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif mx == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4

    return HSL((hue * 60) % 360, saturation, lightness)


def hex_to_hsl(hex_color: str) -> Optional[HSL]:
    """Convert a hex string to HSL, or None if it does not parse."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hsl(rgb)


def text_color_for_background(hex_color: str) -> str:
    """Pick black or white label text for a swatch."""
    hsl = hex_to_hsl(hex_color)
    if hsl is None:
        return '#000'
    return '#000' if hsl.l > 0.55 else '#fff'
