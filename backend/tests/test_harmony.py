"""
Unit tests for the palette, scheme and swatch generators.

Tests the hue rotations behind each scheme, the shared palette/scheme
behavior, the tonal swatch ramp and the generator error taxonomy.
"""

import pytest
from coloraide import Color

from colorbox.errors import GenerationError, InvalidBaseColorError
from colorbox.services.colors import harmony
from colorbox.services.colors.harmony import (
    color_to_hsl, generate_monochromatic, generate_palette, generate_scheme,
    get_hue_separation, hsl_to_hex, rotate_hue,
)
from colorbox.services.colors.harmony import orchestrator
from colorbox.services.colors.harmony.orchestrator import GeneratorRequest, generate
from colorbox.services.colors.harmony.swatches import SWATCH_STEPS, flatten_swatch, generate_swatch


def _hue(color):
    return color_to_hsl(color)[0]


class TestHueMath:
    """Test hue rotation mathematics."""

    def test_rotation_wraps(self):
        assert rotate_hue(350, 30) == pytest.approx(20)
        assert rotate_hue(10, -30) == pytest.approx(340)
        assert rotate_hue(0, 360) == pytest.approx(0)

    def test_separation(self):
        assert get_hue_separation(0, 180) == pytest.approx(180)
        assert get_hue_separation(350, 10) == pytest.approx(20)
        assert get_hue_separation(10, 350) == pytest.approx(20)

    def test_hsl_roundtrip(self):
        for color in ["#ff0000", "#00ff00", "#0000ff", "#ffff00"]:
            assert hsl_to_hex(*color_to_hsl(color)) == color

    def test_achromatic_hue_is_zero(self):
        h, s, l = color_to_hsl("#ffffff")
        assert h == 0.0
        assert s == pytest.approx(0.0, abs=1e-6)
        assert l == pytest.approx(1.0)


class TestScheme:
    """Test scheme generation."""

    def test_complementary(self):
        """Two colors, 180° apart."""
        colors = generate_scheme("#ff0000", "complementary")
        assert colors == ["#ff0000", "#00ffff"]
        assert get_hue_separation(_hue(colors[0]), _hue(colors[1])) == pytest.approx(180, abs=1)

    def test_triadic(self):
        assert generate_scheme("#ff0000", "triadic") == ["#ff0000", "#00ff00", "#0000ff"]

    def test_analogous(self):
        colors = generate_scheme("#ff0000", "analogous")
        assert len(colors) == 3
        assert colors[1] == "#ff0000"
        assert get_hue_separation(_hue(colors[0]), 330) < 1
        assert get_hue_separation(_hue(colors[2]), 30) < 1

    def test_unknown_type_falls_back_to_complementary(self):
        assert generate_scheme("#ff0000", "tetradic") == generate_scheme("#ff0000", "complementary")

    def test_default_is_complementary(self):
        assert generate_scheme("#336699") == generate_scheme("#336699", "complementary")

    def test_accepts_any_css_syntax(self):
        assert generate_scheme("rgb(255 0 0)", "complementary") == ["#ff0000", "#00ffff"]


class TestPalette:
    """Test palette generation."""

    @pytest.mark.parametrize("palette_type", ["analogous", "complementary", "triadic"])
    def test_shares_scheme_implementation(self, palette_type):
        assert generate_palette("#336699", palette_type) == generate_scheme("#336699", palette_type)

    def test_monochromatic(self):
        colors = generate_monochromatic("#ff0000")
        assert len(colors) == 6
        assert colors[0] == "#ff9999"
        lightness = [color_to_hsl(c)[2] for c in colors]
        assert lightness == sorted(lightness, reverse=True)
        assert all(get_hue_separation(_hue(c), 0) < 1 for c in colors)

    def test_palette_monochromatic_dispatch(self):
        assert generate_palette("#ff0000", "monochromatic") == generate_monochromatic("#ff0000")


class TestSwatch:
    """Test tonal swatch ramps."""

    def test_keys_and_order(self):
        swatch = generate_swatch("#3b82f6")
        assert list(swatch) == [step for step, _, _ in SWATCH_STEPS]
        assert list(swatch)[0] == 50 and list(swatch)[-1] == 950

    def test_light_to_dark(self):
        colors = flatten_swatch(generate_swatch("#3b82f6"))
        assert len(colors) == 11
        lightness = [Color(c).convert("oklch")["lightness"] for c in colors]
        assert all(a > b for a, b in zip(lightness, lightness[1:]))

    def test_values_are_hex(self):
        for value in generate_swatch("#ff0000").values():
            assert value.startswith("#") and len(value) == 7

    def test_gray_base(self):
        colors = flatten_swatch(generate_swatch("#808080"))
        for color in colors:
            r, g, b = Color(color).convert("srgb").coords()
            assert abs(r - g) < 0.01 and abs(g - b) < 0.01


class TestGenerate:
    """Test the generator entry point."""

    def test_scheme_request(self):
        colors = generate("#ff0000", "scheme", {"scheme_type": "complementary"})
        assert len(colors) == 2
        assert get_hue_separation(_hue(colors[0]), _hue(colors[1])) == pytest.approx(180, abs=1)

    def test_unknown_scheme_type(self):
        assert generate("#ff0000", "scheme", {"scheme_type": "square"}) == ["#ff0000", "#00ffff"]

    def test_palette_default_is_analogous(self):
        assert generate("#ff0000", "palette") == generate_scheme("#ff0000", "analogous")

    def test_swatch_flattened(self):
        assert generate("#3b82f6", "swatch") == flatten_swatch(generate_swatch("#3b82f6"))

    def test_unknown_generator_type(self):
        assert generate("#ff0000", "gradient") == []

    def test_invalid_base_color(self):
        with pytest.raises(InvalidBaseColorError):
            generate("notacolor", "scheme")

    def test_library_failure(self, monkeypatch):
        def broken(*args, **kwargs):
            raise ValueError("library failure")

        monkeypatch.setattr(orchestrator, "generate_scheme", broken)
        with pytest.raises(GenerationError) as excinfo:
            generate("#ff0000", "scheme")
        assert "scheme" in str(excinfo.value)

    def test_request_from_options(self):
        request = GeneratorRequest.from_options("#fff", "palette", {"palette_type": None})
        assert request.palette_type == harmony.DEFAULT_PALETTE_TYPE
        assert request.scheme_type == harmony.DEFAULT_SCHEME_TYPE
