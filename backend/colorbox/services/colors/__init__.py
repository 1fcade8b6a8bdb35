"""
Colorbox Colors Module

Normalizes and validates user color input, converts colors between hex,
rgb, hsl and oklch, derives palettes, schemes and tonal swatches, exports
CSS/Tailwind snippets and extracts dominant colors from images.
"""

from .normalize import normalize
from .validation import AddResult, is_valid_color, try_add
from .formats import ColorFormats, convert, formats
from .harmony.orchestrator import generate
from .export import serialize, serialize_css_variables, serialize_tailwind_config

__all__ = [
    "normalize",
    "AddResult", "is_valid_color", "try_add",
    "ColorFormats", "convert", "formats",
    "generate",
    "serialize", "serialize_css_variables", "serialize_tailwind_config",
]
