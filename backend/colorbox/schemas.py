"""
Colorbox API Schemas
Pydantic models for color, generation, export and session request/response validation.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

ColorFormat = Literal["hex", "rgb", "hsl", "oklch"]
GeneratorType = Literal["palette", "scheme", "swatch"]
ExportTarget = Literal["tailwind", "css-hex", "css-rgb", "css-hsl", "css-oklch"]


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("colorbox", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


# ============================================================================
# COLOR SCHEMAS
# ============================================================================

class ColorInput(BaseModel):
    """A single raw color entry as typed by the user."""
    value: str = Field(..., max_length=200, description="Color in any CSS syntax or bare channel values")


class NormalizeResponse(BaseModel):
    """Normalization result."""
    input: str = Field(..., description="Raw input")
    normalized: str = Field(..., description="Input wrapped in functional CSS syntax")
    valid: bool = Field(..., description="Whether the normalized string parses as a color")


class ColorFormatsResponse(BaseModel):
    """A color rendered in every supported format."""
    color: str = Field(..., description="Canonical color string")
    hex: str = Field(..., description="Hex, e.g. #ffffff")
    rgb: str = Field(..., description="rgb(), e.g. rgb(255, 255, 255)")
    hsl: str = Field(..., description="hsl(), e.g. hsl(0, 0%, 100%)")
    oklch: str = Field(..., description="oklch(), e.g. oklch(1 0 0)")


class GenerateRequest(BaseModel):
    """Generator request: base color, kind and sub-type options."""
    base_color: str = Field(..., max_length=200, description="Base color in any CSS syntax")
    generator_type: GeneratorType = Field("palette", description="palette, scheme or swatch")
    palette_type: Optional[str] = Field(
        None,
        description="analogous, monochromatic, complementary or triadic (palette only)"
    )
    scheme_type: Optional[str] = Field(
        None,
        description="analogous, complementary or triadic; anything else means complementary (scheme only)"
    )


class GenerateResponse(BaseModel):
    """Generated color set, not yet merged into any list."""
    base_color: str
    generator_type: GeneratorType
    colors: List[str] = Field(..., description="Generated hex colors in order")


# ============================================================================
# EXPORT SCHEMAS
# ============================================================================

class CssExportRequest(BaseModel):
    """CSS custom property export options."""
    colors: List[str] = Field(default_factory=list, description="Canonical colors in order")
    format: ColorFormat = Field("hex", description="Value format")
    modern: bool = Field(True, description="Space separated rgb/hsl syntax")
    include_alpha: bool = Field(False, description="Always emit an alpha component for rgb/hsl")
    prefix: str = Field("color", min_length=1, max_length=40, pattern=r"^[A-Za-z0-9_-]+$")


class TailwindExportRequest(BaseModel):
    """Tailwind config export."""
    colors: List[str] = Field(default_factory=list, description="Canonical colors in order")


class ExportResponse(BaseModel):
    """Exported text block."""
    target: ExportTarget
    content: str = Field(..., description="Text ready to copy; empty for an empty list")


# ============================================================================
# SESSION SCHEMAS
# ============================================================================

class ColorEntryResponse(BaseModel):
    """A committed color with its label and formats."""
    id: str = Field(..., description="Stable color id")
    index: int = Field(..., ge=0, description="Display position")
    name: str = Field(..., description="User label or 'color <n>'")
    value: str = Field(..., description="Canonical color string")
    formats: ColorFormatsResponse


class SessionResponse(BaseModel):
    """State of a color collection."""
    session_id: str
    colors: List[ColorEntryResponse] = Field(default_factory=list)
    extracting: bool = False
    uploaded_image: Optional[str] = None


class AddColorResponse(BaseModel):
    """Outcome of adding one color."""
    accepted: bool
    color: str = Field(..., description="Normalized color string")
    rejection: Optional[str] = Field(None, description="invalid_syntax or duplicate")
    message: str
    entry: Optional[ColorEntryResponse] = None


class MergeRequest(BaseModel):
    """Generated colors to merge into a collection."""
    colors: List[str] = Field(..., description="Colors to add in order")


class MergeResponse(BaseModel):
    """Per-color outcome of a merge."""
    results: List[AddColorResponse]
    added: int


class RenameRequest(BaseModel):
    """New display label."""
    name: str = Field(..., min_length=1, max_length=80)


class ExtractResponse(BaseModel):
    """Outcome of an image extraction."""
    extracted: List[str] = Field(..., description="Dominant colors found in the image")
    added: List[str] = Field(..., description="Colors that were added to the list")
    message: str
