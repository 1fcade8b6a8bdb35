"""
Colorbox Harmony Engine: Generator Orchestrator

Single entry point turning a generator request (base color, kind, options)
into a generated color set. Validates the base color, dispatches to the
palette, scheme or swatch generator and translates library failures into
the Colorbox error taxonomy.
"""

import time
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from colorbox.errors import GenerationError, InvalidBaseColorError
from colorbox.utils.logging import get_logger
from colorbox.utils.metrics import get_metrics
from ..validation import is_valid_color
from . import (
    DEFAULT_PALETTE_TYPE, DEFAULT_SCHEME_TYPE, generate_palette, generate_scheme,
)
from .swatches import flatten_swatch, generate_swatch

GENERATOR_TYPES = ("palette", "scheme", "swatch")


@dataclass(frozen=True)
class GeneratorRequest:
    """Ephemeral description of a generation to run."""
    base_color: str
    generator_type: str
    palette_type: str = DEFAULT_PALETTE_TYPE
    scheme_type: str = DEFAULT_SCHEME_TYPE

    @classmethod
    def from_options(cls, base_color: str, generator_type: str,
                     options: Optional[Mapping[str, Any]] = None) -> "GeneratorRequest":
        options = options or {}
        return cls(
            base_color=base_color,
            generator_type=generator_type,
            palette_type=options.get("palette_type") or DEFAULT_PALETTE_TYPE,
            scheme_type=options.get("scheme_type") or DEFAULT_SCHEME_TYPE,
        )


def run_generator(request: GeneratorRequest) -> List[str]:
    """
    Execute a generator request.

    Returns:
        Generated hex colors; an empty list for an unknown generator type

    Raises:
        InvalidBaseColorError: If the base color does not parse
        GenerationError: If the underlying generator fails
    """
    logger = get_logger()

    if not is_valid_color(request.base_color):
        raise InvalidBaseColorError()

    kind = request.generator_type
    start_time = time.time()

    try:
        if kind == "palette":
            colors = generate_palette(request.base_color, request.palette_type)
        elif kind == "scheme":
            colors = generate_scheme(request.base_color, request.scheme_type)
        elif kind == "swatch":
            colors = flatten_swatch(generate_swatch(request.base_color))
        else:
            logger.warning(f"Unknown generator type {kind!r}")
            return []
    except (ValueError, TypeError, ArithmeticError) as e:
        logger.error(f"Error generating {kind}", extra={"base_color": request.base_color, "error": str(e)})
        raise GenerationError(f"Error generating {kind}") from e

    duration_ms = (time.time() - start_time) * 1000
    metrics = get_metrics()
    metrics.increment_generation_count(kind)
    metrics.record_timing("generate", duration_ms)

    logger.debug(f"Generated {len(colors)} colors", extra={
        "generator_type": kind,
        "base_color": request.base_color,
        "duration_ms": round(duration_ms, 2)
    })
    return colors


def generate(base_color: str, generator_type: str,
             options: Optional[Mapping[str, Any]] = None) -> List[str]:
    """
    Derive related colors from a base color.

    Args:
        base_color: Any valid CSS color
        generator_type: palette, scheme or swatch
        options: Optional palette_type / scheme_type

    Returns:
        Ordered list of hex colors
    """
    return run_generator(GeneratorRequest.from_options(base_color, generator_type, options))
