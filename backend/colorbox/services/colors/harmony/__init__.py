"""
Colorbox Harmony Engine

Hue-rotation color schemes (complementary, analogous, triadic) and the
monochromatic palette, computed in HSL with coloraide.
"""

import math
from typing import Dict, List, Tuple

from coloraide import Color

SCHEME_TYPES = ("analogous", "complementary", "triadic")
PALETTE_TYPES = ("analogous", "monochromatic", "complementary", "triadic")
DEFAULT_SCHEME_TYPE = "complementary"
DEFAULT_PALETTE_TYPE = "analogous"

# Hue offsets in degrees, in output order; 0 is the base color itself.
SCHEME_ROTATIONS: Dict[str, Tuple[int, ...]] = {
    "analogous": (-30, 0, 30),
    "complementary": (0, 180),
    "triadic": (0, 120, 240),
}

MONOCHROMATIC_SIZE = 6
MONOCHROMATIC_MAX_LIGHTNESS = 0.80


def color_to_hsl(color: str) -> Tuple[float, float, float]:
    """
    Convert any CSS color to HSL.

    Args:
        color: CSS color string

    Returns:
        Tuple of (H, S, L) where H ∈ [0, 360), S ∈ [0, 1], L ∈ [0, 1]

    Raises:
        ValueError: If the color cannot be parsed
    """
    hsl = Color(color).convert("srgb").fit().convert("hsl")
    h = hsl["hue"]
    h = 0.0 if math.isnan(h) else h % 360
    return h, hsl["saturation"], hsl["lightness"]


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """
    Convert HSL to a lowercase hex string.

    Args:
        h: Hue in degrees
        s: Saturation [0, 1]
        l: Lightness [0, 1]
    """
    return Color("hsl", [h % 360, s, l]).convert("srgb").fit().to_string(hex=True)


def rotate_hue(h: float, degrees: float) -> float:
    """
    Rotate hue by specified degrees.

    Args:
        h: Original hue in degrees
        degrees: Rotation in degrees (can be negative)

    Returns:
        Rotated hue in [0, 360) with wraparound
    """
    return (h + degrees) % 360.0


def get_hue_separation(h1: float, h2: float) -> float:
    """
    Calculate the minimum angular separation between two hues.

    Returns:
        Minimum separation in degrees [0, 180]
    """
    diff = abs(h1 - h2) % 360.0
    return min(diff, 360.0 - diff)


def generate_scheme(base_color: str, scheme_type: str = DEFAULT_SCHEME_TYPE) -> List[str]:
    """
    Generate a harmonic scheme by rotating the base hue.

    Unknown scheme types fall back to complementary.

    Args:
        base_color: Any CSS color
        scheme_type: analogous, complementary or triadic

    Returns:
        Hex colors in scheme order, base color included
    """
    if scheme_type not in SCHEME_ROTATIONS:
        scheme_type = DEFAULT_SCHEME_TYPE

    h, s, l = color_to_hsl(base_color)
    return [hsl_to_hex(rotate_hue(h, degrees), s, l) for degrees in SCHEME_ROTATIONS[scheme_type]]


def generate_monochromatic(base_color: str, size: int = MONOCHROMATIC_SIZE) -> List[str]:
    """
    Generate a monochromatic palette, light to dark.

    Hue and saturation of the base are kept; lightness steps down from 80%
    in equal increments.
    """
    h, s, _ = color_to_hsl(base_color)
    step = MONOCHROMATIC_MAX_LIGHTNESS / size
    return [hsl_to_hex(h, s, step * index) for index in range(size, 0, -1)]


def generate_palette(base_color: str, palette_type: str = DEFAULT_PALETTE_TYPE) -> List[str]:
    """
    Generate a palette from a base color.

    Only monochromatic has its own algorithm; analogous, complementary and
    triadic palettes are the schemes of the same name.
    """
    if palette_type == "monochromatic":
        return generate_monochromatic(base_color)
    return generate_scheme(base_color, palette_type)
