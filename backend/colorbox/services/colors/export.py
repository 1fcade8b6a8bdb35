"""
CSS and Tailwind export.

Serializes an ordered color list into text blocks ready to paste into a
stylesheet or a tailwind.config.js. Output is byte-stable: two-space
indentation, one entry per line, 1-indexed names in list order.
"""
from typing import List, Sequence

from colorbox.config import config
from colorbox.utils.metrics import get_metrics
from .formats import convert, format_color


def serialize_css_variables(colors: Sequence[str], fmt: str = "hex", *,
                            modern: bool = config.CSS_MODERN_SYNTAX,
                            include_alpha: bool = False,
                            prefix: str = config.CSS_PREFIX) -> str:
    """
    Render colors as CSS custom properties on :root.

    Args:
        colors: Canonical color strings in display order
        fmt: hex, rgb, hsl or oklch
        modern: Space separated rgb/hsl syntax instead of commas
        include_alpha: Force an alpha component on rgb/hsl values
        prefix: Custom property prefix, "--<prefix>-<n>"

    Returns:
        The :root block, or "" for an empty list
    """
    if not colors:
        return ""

    lines: List[str] = [":root {"]
    for index, color in enumerate(colors, start=1):
        value = format_color(color, fmt, modern=modern, include_alpha=include_alpha)
        lines.append(f"  --{prefix}-{index}: {value};")
    lines.append("}")

    get_metrics().increment_export_count(f"css-{fmt}")
    return "\n".join(lines)


def serialize_tailwind_config(colors: Sequence[str]) -> str:
    """
    Render colors as a Tailwind theme extension, hex values only.

    Returns:
        The module.exports snippet, or "" for an empty list
    """
    if not colors:
        return ""

    lines: List[str] = [
        "module.exports = {",
        "  theme: {",
        "    extend: {",
        "      colors: {",
    ]
    for index, color in enumerate(colors, start=1):
        lines.append(f'        color{index}: "{convert(color, "hex")}",')
    lines.extend([
        "      },",
        "    },",
        "  },",
        "}",
    ])

    get_metrics().increment_export_count("tailwind")
    return "\n".join(lines)


def serialize(colors: Sequence[str], target: str, **css_options) -> str:
    """
    Dispatch an export menu target.

    Args:
        colors: Canonical color strings
        target: "tailwind" or "css-<format>"
        **css_options: modern / include_alpha / prefix for CSS targets
    """
    if target == "tailwind":
        return serialize_tailwind_config(colors)
    if target.startswith("css-"):
        fmt = target[len("css-"):]
        if config.validate_format(fmt):
            return serialize_css_variables(colors, fmt, **css_options)
    raise ValueError(f"Unsupported export target: {target!r}")
