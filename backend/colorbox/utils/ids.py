"""
Colorbox ID Utilities
Generate unique identifiers for requests, sessions and color entries.
"""
import uuid
from datetime import datetime


def generate_request_id() -> str:
    """
    Generate a unique request ID for tracking.

    Returns:
        Unique request ID string
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = str(uuid.uuid4())[:8]
    return f"req-{timestamp}-{short_uuid}"


def generate_session_id() -> str:
    """Generate an opaque session identifier."""
    return uuid.uuid4().hex


def generate_color_id() -> str:
    """
    Generate a stable identifier for a color entry.

    The identifier is assigned once at insertion and never reused, so labels
    keyed by it survive removal of other entries.
    """
    return f"c-{uuid.uuid4().hex[:12]}"

