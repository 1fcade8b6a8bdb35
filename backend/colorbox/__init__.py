"""
Colorbox

Color list management backend: input normalization, format conversion,
palette/scheme/swatch generation, CSS and Tailwind export, and dominant
color extraction from images.
"""

__version__ = "1.0.0"
