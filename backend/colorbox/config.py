"""
Colorbox Configuration
Manages environment variables and defaults for the color services.
"""
import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuration class for Colorbox services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("COLORBOX_LOG_LEVEL", "INFO")
    LOG_JSON: bool = bool(int(os.environ.get("COLORBOX_LOG_JSON", "0")))

    # Uploads
    MAX_FILE_MB: int = int(os.environ.get("COLORBOX_MAX_FILE_MB", "10"))

    # Image extraction
    EXTRACT_COLOR_COUNT: int = int(os.environ.get("COLORBOX_EXTRACT_COLOR_COUNT", "8"))
    EXTRACT_QUALITY: int = int(os.environ.get("COLORBOX_EXTRACT_QUALITY", "10"))
    EXTRACT_DISTANCE_THRESHOLD: float = float(os.environ.get("COLORBOX_EXTRACT_DISTANCE_THRESHOLD", "30"))

    # Export defaults
    CSS_PREFIX: str = os.environ.get("COLORBOX_CSS_PREFIX", "color")
    CSS_MODERN_SYNTAX: bool = bool(int(os.environ.get("COLORBOX_CSS_MODERN_SYNTAX", "1")))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("COLORBOX_ALLOWED_ORIGINS", "http://localhost:3000")

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("COLORBOX_METRICS_ENABLED", "1")))

    # Supported values
    COLOR_FORMATS = ["hex", "rgb", "hsl", "oklch"]
    GENERATOR_TYPES = ["palette", "scheme", "swatch"]
    EXPORT_TARGETS = ["tailwind", "css-hex", "css-rgb", "css-hsl", "css-oklch"]
    SUPPORTED_MIME_TYPES = ["image/jpeg", "image/png", "image/gif", "image/webp"]

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Split the comma separated origin list."""
        return [o.strip() for o in cls.ALLOWED_ORIGINS.split(",") if o.strip()]

    @classmethod
    def validate_format(cls, fmt: str) -> bool:
        """Validate color format parameter."""
        return fmt in cls.COLOR_FORMATS

    @classmethod
    def validate_generator_type(cls, kind: str) -> bool:
        """Validate generator type parameter."""
        return kind in cls.GENERATOR_TYPES

    @classmethod
    def validate_prefix(cls, prefix: Optional[str]) -> bool:
        """CSS custom property prefixes must be non-empty identifiers."""
        if not prefix:
            return False
        return all(ch.isalnum() or ch in "-_" for ch in prefix)


# Global config instance
config = Config()
