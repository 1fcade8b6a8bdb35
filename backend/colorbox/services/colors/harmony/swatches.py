"""
Colorbox Harmony Engine: Tonal Swatches

Builds an 11-step light-to-dark ramp around a base color in OKLCH, keyed by
the familiar 50..950 scale.
"""

import math
from typing import Dict, List, Tuple

from coloraide import Color

# (step, OKLCH lightness, chroma scale relative to the base)
SWATCH_STEPS: Tuple[Tuple[int, float, float], ...] = (
    (50, 0.97, 0.25),
    (100, 0.93, 0.40),
    (200, 0.87, 0.60),
    (300, 0.79, 0.80),
    (400, 0.71, 0.95),
    (500, 0.63, 1.00),
    (600, 0.55, 0.95),
    (700, 0.47, 0.85),
    (800, 0.39, 0.70),
    (900, 0.31, 0.55),
    (950, 0.23, 0.45),
)


def generate_swatch(base_color: str) -> Dict[int, str]:
    """
    Generate a tonal ramp for a base color.

    Args:
        base_color: Any CSS color

    Returns:
        Mapping of step (50..950) to hex, in light-to-dark order
    """
    base = Color(base_color).convert("oklch")
    chroma = base["chroma"]
    chroma = 0.0 if math.isnan(chroma) else chroma
    hue = base["hue"]
    hue = 0.0 if math.isnan(hue) else hue

    swatch = {}
    for step, lightness, chroma_scale in SWATCH_STEPS:
        tone = Color("oklch", [lightness, chroma * chroma_scale, hue])
        swatch[step] = tone.fit("srgb").convert("srgb").to_string(hex=True)
    return swatch


def flatten_swatch(swatch: Dict[int, str]) -> List[str]:
    """Drop the step labels, keeping light-to-dark order."""
    return [swatch[step] for step in sorted(swatch)]
