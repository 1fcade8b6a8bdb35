"""
Color Format Conversion Module

Renders a color in the four formats surfaced to users (hex, rgb, hsl, oklch)
and provides a structured parse/format path for CSS output with modern
(space separated) syntax and optional alpha.

Colors are never cached as numbers: every request re-parses the canonical
string with coloraide.
"""
import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from coloraide import Color
from loguru import logger

from colorbox.errors import InvalidColorError

FORMATS = ("hex", "rgb", "hsl", "oklch")


@dataclass(frozen=True)
class ColorFormats:
    """A color rendered in every supported format."""
    hex: str
    rgb: str
    hsl: str
    oklch: str

    def as_dict(self) -> Dict[str, str]:
        return {"hex": self.hex, "rgb": self.rgb, "hsl": self.hsl, "oklch": self.oklch}


@dataclass(frozen=True)
class CssChannels:
    """
    Parsed channel values of a color in one CSS space.

    rgb: red/green/blue in [0, 255]
    hsl: hue in degrees, saturation/lightness in percent
    alpha is None for fully opaque colors.
    """
    space: str
    values: Tuple[float, float, float]
    alpha: Optional[float] = None


def _fmt(value: float, precision: int) -> str:
    """Round and strip trailing zeros: 50.0 -> '50', 0.62796 -> '0.628'."""
    if value is None or math.isnan(value):
        value = 0.0
    rounded = round(value, precision)
    if rounded == 0:
        return "0"
    text = f"{rounded:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _fmt_hue(value: float) -> str:
    """Hue in degrees with 2 decimals, wrapped after rounding so 359.999 -> '0'."""
    if value is None or math.isnan(value):
        return "0"
    return _fmt(round(value, 2) % 360, 2)


def _parse(color: str) -> Color:
    try:
        return Color(color)
    except (ValueError, TypeError) as e:
        raise InvalidColorError(f"Unrecognized color: {color!r}") from e


def _srgb(color: str) -> Color:
    return _parse(color).convert("srgb").fit()


def _rgb8(srgb: Color) -> Tuple[int, int, int]:
    """8-bit channels read back from the hex rendering, so rgb and hex always agree."""
    text = srgb.to_string(hex=True)
    return tuple(int(text[i:i + 2], 16) for i in (1, 3, 5))


def _alpha(c: Color) -> Optional[float]:
    alpha = c["alpha"]
    if math.isnan(alpha) or alpha >= 1:
        return None
    return alpha


def parse_css(color: str, space: str) -> CssChannels:
    """
    Parse a color into channel values of an rgb or hsl space.

    Raises:
        InvalidColorError: If the color cannot be parsed
        ValueError: If the space is not rgb or hsl
    """
    srgb = _srgb(color)
    alpha = _alpha(srgb)

    if space == "rgb":
        values = tuple(float(v) for v in _rgb8(srgb))
        return CssChannels("rgb", values, alpha)

    if space == "hsl":
        hsl = srgb.convert("hsl")
        hue = hsl["hue"]
        values = (
            0.0 if math.isnan(hue) else hue % 360,
            hsl["saturation"] * 100,
            hsl["lightness"] * 100,
        )
        return CssChannels("hsl", values, alpha)

    raise ValueError(f"Structured parsing supports rgb and hsl, not {space!r}")


def format_css(channels: CssChannels, modern: bool = True, include_alpha: bool = False) -> str:
    """
    Serialize parsed channels as a CSS color function.

    Args:
        channels: Output of parse_css
        modern: Space separated syntax ("rgb(255 0 0)") instead of commas
        include_alpha: Always emit an alpha component, 1 when opaque

    Returns:
        CSS color string
    """
    if channels.space == "rgb":
        # half up, matching coloraide's hex serialization
        parts = [str(math.floor(v + 0.5)) for v in channels.values]
    elif channels.space == "hsl":
        h, s, l = channels.values
        parts = [_fmt_hue(h), f"{_fmt(s, 2)}%", f"{_fmt(l, 2)}%"]
    else:
        raise ValueError(f"Cannot format channels of space {channels.space!r}")

    alpha = channels.alpha
    if alpha is None and include_alpha:
        alpha = 1.0

    name = channels.space
    if modern:
        body = " ".join(parts)
        if alpha is not None:
            body += f" / {_fmt(alpha, 3)}"
        return f"{name}({body})"

    if alpha is not None:
        return f"{name}a({', '.join(parts + [_fmt(alpha, 3)])})"
    return f"{name}({', '.join(parts)})"


def to_hex(color: str) -> str:
    """Render a color as lowercase hex, with an alpha byte when translucent."""
    return _srgb(color).to_string(hex=True)


def to_oklch(color: str) -> str:
    """Render a color as oklch(L C H)."""
    oklch = _parse(color).convert("oklch")
    chroma = _fmt(oklch["chroma"], 4)
    # achromatic colors carry a meaningless hue
    hue = "0" if chroma == "0" else _fmt_hue(oklch["hue"])
    parts = [_fmt(oklch["lightness"], 4), chroma, hue]
    alpha = _alpha(oklch)
    if alpha is not None:
        return f"oklch({' '.join(parts)} / {_fmt(alpha, 3)})"
    return f"oklch({' '.join(parts)})"


def to_rgb_tuple(color: str) -> Tuple[int, int, int]:
    """8-bit sRGB channels of a color."""
    return _rgb8(_srgb(color))


def convert(color: str, target: str) -> str:
    """
    Convert a color to one of the supported formats.

    rgb and hsl use the legacy comma syntax: "rgb(255, 255, 255)",
    "hsl(0, 0%, 100%)".

    Raises:
        InvalidColorError: If the color cannot be parsed
        ValueError: If the target format is unknown
    """
    if target == "hex":
        return to_hex(color)
    if target == "oklch":
        return to_oklch(color)
    if target in ("rgb", "hsl"):
        return format_css(parse_css(color, target), modern=False)
    raise ValueError(f"Unsupported color format: {target!r}")


def formats(color: str) -> ColorFormats:
    """Render a color in hex, rgb, hsl and oklch."""
    return ColorFormats(
        hex=convert(color, "hex"),
        rgb=convert(color, "rgb"),
        hsl=convert(color, "hsl"),
        oklch=convert(color, "oklch"),
    )


def format_color(color: str, target: str, modern: bool = True, include_alpha: bool = False) -> str:
    """
    Render a color for CSS output.

    hex and oklch go through the plain converter. rgb and hsl use the
    structured parse/format path and fall back to the plain converter when
    that path fails.
    """
    if target in ("hex", "oklch"):
        return convert(color, target)

    try:
        return format_css(parse_css(color, target), modern=modern, include_alpha=include_alpha)
    except (ValueError, TypeError, KeyError) as e:
        logger.warning(f"Structured formatting failed for {color!r} as {target}: {e}")
        return convert(color, target)
