"""
Input normalization for free-form color entries.

Users paste bare channel values copied from design tools ("0.7 0.15 180",
"210deg 40% 50%", "255, 128, 0", "ff8800"). These are wrapped into the
matching functional CSS syntax so the parser can recognize them. Anything
else is returned trimmed and untouched; validity is decided downstream.
"""
import re

_NUMBER = r"\d*\.?\d+"

# Order matters: a bare triplet of plain numbers is read as OKLCH before the
# HSL and RGB shapes get a chance.
OKLCH_BARE_RE = re.compile(rf"^{_NUMBER}\s+{_NUMBER}\s+{_NUMBER}$", re.ASCII)
HSL_BARE_RE = re.compile(
    r"^\d+(?:\.\d+)?(?:deg|turn|rad|grad)?\s+\d+(?:\.\d+)?%?\s+\d+(?:\.\d+)?%?$",
    re.ASCII,
)
RGB_BARE_RE = re.compile(r"^\d+\s*[,\s]\s*\d+\s*[,\s]\s*\d+$", re.ASCII)
HEX_BARE_RE = re.compile(r"^(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.ASCII | re.IGNORECASE)

_RGB_SEPARATOR_RE = re.compile(r"[\s,]+")


def detect_bare_syntax(value: str) -> str:
    """
    Classify a trimmed string by its bare-value shape.

    Returns:
        One of "oklch", "hsl", "rgb", "hex", or "" when no shape matches
    """
    if OKLCH_BARE_RE.match(value):
        return "oklch"
    if HSL_BARE_RE.match(value):
        return "hsl"
    if RGB_BARE_RE.match(value):
        return "rgb"
    if HEX_BARE_RE.match(value):
        return "hex"
    return ""


def normalize(raw: str) -> str:
    """
    Wrap bare channel values into functional CSS color syntax.

    Args:
        raw: User input as typed or pasted

    Returns:
        The wrapped color string, or the trimmed input when it does not look
        like a bare value
    """
    value = (raw or "").strip()
    syntax = detect_bare_syntax(value)

    if syntax == "oklch":
        return f"oklch({value})"
    if syntax == "hsl":
        return f"hsl({value})"
    if syntax == "rgb":
        channels = _RGB_SEPARATOR_RE.split(value)
        return f"rgb({' '.join(channels)})"
    if syntax == "hex":
        return f"#{value}"
    return value
