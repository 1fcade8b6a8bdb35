"""
Test configuration and fixtures for Colorbox tests.
"""
import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

# Import the main app
from main import app


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    from colorbox.utils.metrics import reset_metrics
    reset_metrics()


@pytest.fixture(autouse=True)
def reset_sessions():
    """Forget sessions created by earlier tests."""
    from colorbox.services.colors.store import get_session_store
    get_session_store().reset()


@pytest.fixture
def four_block_png():
    """PNG bytes of a 100x100 image split into four solid color blocks."""
    img = Image.new("RGB", (100, 100))
    blocks = [
        ((0, 0, 50, 50), (220, 20, 60)),
        ((50, 0, 100, 50), (30, 60, 200)),
        ((0, 50, 50, 100), (40, 160, 70)),
        ((50, 50, 100, 100), (30, 30, 30)),
    ]
    for box, rgb in blocks:
        img.paste(rgb, box)

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def white_png():
    """PNG bytes of a plain white image."""
    buffer = io.BytesIO()
    Image.new("RGB", (40, 40), (255, 255, 255)).save(buffer, format="PNG")
    return buffer.getvalue()
