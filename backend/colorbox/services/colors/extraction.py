"""
Dominant color extraction from images.

Decodes an uploaded image with Pillow, asks ColorThief for its dominant
palette, drops candidates too close to colors already in the list and feeds
the survivors through the normal insertion path.
"""

import asyncio
import io
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np
from colorthief import ColorThief
from loguru import logger
from PIL import Image, UnidentifiedImageError

from colorbox.config import config
from colorbox.errors import ExtractionError, ExtractionInProgressError, ImageLoadError
from colorbox.utils.metrics import get_metrics
from .formats import to_rgb_tuple
from .store import ColorCollection

RGBColor = Tuple[int, int, int]


@dataclass
class ExtractionOutcome:
    """Result of one extraction run."""
    extracted: List[str] = field(default_factory=list)
    added: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"extracted {len(self.added)} colors from image"


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """Convert an 8-bit RGB triplet to a lowercase hex string."""
    r, g, b = [int(x) for x in rgb]
    return f"#{r:02x}{g:02x}{b:02x}"


def load_image(image_bytes: bytes) -> Image.Image:
    """
    Decode image bytes into an RGB image, flattening transparency onto white.

    Raises:
        ImageLoadError: If the bytes are not a decodable image
    """
    if len(image_bytes) > config.MAX_FILE_MB * 1024 * 1024:
        raise ImageLoadError(f"File too large. Maximum size: {config.MAX_FILE_MB}MB")

    try:
        img = Image.open(io.BytesIO(image_bytes))
        img.load()
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageLoadError(f"error loading image: {e}") from e

    img = img.convert("RGBA")
    background = Image.new("RGBA", img.size, (255, 255, 255, 255))
    background.paste(img, mask=img.split()[3])
    return background.convert("RGB")


def extract_palette(image: Image.Image, color_count: int = config.EXTRACT_COLOR_COUNT,
                    quality: int = config.EXTRACT_QUALITY) -> List[RGBColor]:
    """
    Dominant colors of an image via ColorThief.

    Raises:
        ExtractionError: If ColorThief cannot build a palette
    """
    with io.BytesIO() as buffer:
        image.save(buffer, format="PNG")
        buffer.seek(0)
        try:
            palette = ColorThief(buffer).get_palette(color_count=color_count, quality=quality)
        except Exception as e:
            raise ExtractionError(f"error extracting colors: {e}") from e

    if not palette:
        raise ExtractionError("error extracting colors: empty palette")
    return [tuple(int(c) for c in rgb) for rgb in palette]


def extract_dominant_colors(image_bytes: bytes,
                            color_count: int = config.EXTRACT_COLOR_COUNT) -> List[str]:
    """Decode an image and return up to color_count dominant colors as hex."""
    image = load_image(image_bytes)
    palette = extract_palette(image, color_count=color_count)
    return [rgb_to_hex(rgb) for rgb in palette[:color_count]]


def filter_distinct(candidates: Sequence[str], existing: Sequence[str],
                    threshold: float = config.EXTRACT_DISTANCE_THRESHOLD) -> List[str]:
    """
    Drop candidates close to any existing color.

    A candidate survives when its Euclidean RGB distance to every existing
    color is at least the threshold. Candidates are not compared with each
    other.
    """
    if not existing:
        return list(candidates)

    existing_rgb = np.array([to_rgb_tuple(color) for color in existing], dtype=np.float64)
    kept = []
    for candidate in candidates:
        rgb = np.array(to_rgb_tuple(candidate), dtype=np.float64)
        distances = np.linalg.norm(existing_rgb - rgb, axis=1)
        if np.all(distances >= threshold):
            kept.append(candidate)
        else:
            logger.debug(f"Dropped {candidate}: min distance {distances.min():.1f} < {threshold}")
    return kept


async def extract_into(collection: ColorCollection, image_bytes: bytes,
                       color_count: int = config.EXTRACT_COLOR_COUNT, *,
                       filename: Optional[str] = None) -> ExtractionOutcome:
    """
    Extract dominant colors from an image and add the distinct ones.

    The collection's extracting flag is checked and set before work is
    submitted and is always cleared afterwards, including on failure or
    cancellation. The uploaded image name is recorded only once the run is
    admitted.

    Raises:
        ExtractionInProgressError: If the collection is already extracting
        ImageLoadError: If the image cannot be decoded
        ExtractionError: If no palette could be built
    """
    if collection.extracting:
        raise ExtractionInProgressError()

    collection.extracting = True
    if filename is not None:
        collection.uploaded_image = filename
    metrics = get_metrics()
    start_time = time.time()

    try:
        extracted = await asyncio.to_thread(extract_dominant_colors, image_bytes, color_count)
    except (ImageLoadError, ExtractionError) as e:
        metrics.increment_extraction_count(e.rejection.value)
        logger.warning(f"Extraction failed for session {collection.session_id}: {e}")
        raise
    finally:
        collection.extracting = False

    outcome = ExtractionOutcome(extracted=extracted)
    for color in filter_distinct(extracted, collection.values()):
        result = collection.add(color)
        if result.accepted:
            outcome.added.append(result.color)

    duration_ms = (time.time() - start_time) * 1000
    metrics.increment_extraction_count("success")
    metrics.record_timing("extraction", duration_ms)
    logger.info(f"Extraction finished for session {collection.session_id}: {outcome.message}")
    return outcome
