"""
Colorbox error taxonomy.

Every failure the color services can report is a ColorboxError tagged with a
Rejection, so API handlers can map them to status codes and user-facing
messages without inspecting library exceptions.
"""
from enum import Enum


class Rejection(str, Enum):
    """Reasons a color operation can be refused."""
    INVALID_SYNTAX = "invalid_syntax"
    DUPLICATE = "duplicate"
    INVALID_BASE_COLOR = "invalid_base_color"
    GENERATION_FAILURE = "generation_failure"
    IMAGE_LOAD_FAILURE = "image_load_failure"
    EXTRACTION_FAILURE = "extraction_failure"
    EXTRACTION_IN_PROGRESS = "extraction_in_progress"


USER_MESSAGES = {
    Rejection.INVALID_SYNTAX: "Please enter a valid color code",
    Rejection.DUPLICATE: "This color is already in your list",
    Rejection.INVALID_BASE_COLOR: "Invalid base color",
    Rejection.GENERATION_FAILURE: "Error generating colors",
    Rejection.IMAGE_LOAD_FAILURE: "error loading image",
    Rejection.EXTRACTION_FAILURE: "error extracting colors",
    Rejection.EXTRACTION_IN_PROGRESS: "Already extracting colors",
}


class ColorboxError(ValueError):
    """Base class for recoverable color service errors."""
    rejection: Rejection = Rejection.INVALID_SYNTAX

    def __init__(self, message: str = ""):
        super().__init__(message or USER_MESSAGES[self.rejection])

    @property
    def user_message(self) -> str:
        return USER_MESSAGES[self.rejection]


class InvalidColorError(ColorboxError):
    rejection = Rejection.INVALID_SYNTAX


class DuplicateColorError(ColorboxError):
    rejection = Rejection.DUPLICATE


class InvalidBaseColorError(ColorboxError):
    rejection = Rejection.INVALID_BASE_COLOR


class GenerationError(ColorboxError):
    rejection = Rejection.GENERATION_FAILURE


class ImageLoadError(ColorboxError):
    rejection = Rejection.IMAGE_LOAD_FAILURE


class ExtractionError(ColorboxError):
    rejection = Rejection.EXTRACTION_FAILURE


class ExtractionInProgressError(ColorboxError):
    rejection = Rejection.EXTRACTION_IN_PROGRESS
