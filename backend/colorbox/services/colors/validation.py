"""
Color validation and canonicalization.

Decides whether a raw entry can join a color list: normalize it, check it
parses as a CSS color, and refuse exact duplicates. The functions here are
pure; committing the result is left to the caller.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

from coloraide import Color
from loguru import logger

from colorbox.errors import Rejection, USER_MESSAGES
from .normalize import normalize


def is_valid_color(value: str) -> bool:
    """Return True when the string is a complete CSS color the parser accepts."""
    if not isinstance(value, str) or not value.strip():
        return False
    return Color.match(value, fullmatch=True) is not None


@dataclass(frozen=True)
class AddResult:
    """Outcome of an insertion attempt."""
    raw: str
    color: str  # normalized string, even when rejected
    rejection: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @property
    def message(self) -> str:
        if self.rejection is None:
            return "Color added"
        return USER_MESSAGES[self.rejection]


def try_add(raw: str, existing: Iterable[str]) -> AddResult:
    """
    Decide whether a raw entry may be appended to a color list.

    Args:
        raw: User input
        existing: Canonical strings already in the list

    Returns:
        AddResult carrying the canonical string and, if refused, the reason
    """
    color = normalize(raw)

    if not is_valid_color(color):
        logger.debug(f"Rejected invalid color input {raw!r} (normalized {color!r})")
        return AddResult(raw=raw, color=color, rejection=Rejection.INVALID_SYNTAX)

    if color in existing:
        logger.debug(f"Rejected duplicate color {color}")
        return AddResult(raw=raw, color=color, rejection=Rejection.DUPLICATE)

    return AddResult(raw=raw, color=color)
