"""
Unit tests for colour-model conversions.
"""
import dataclasses

import pytest

from palettekit.converters import (
    brighten,
    darken,
    desaturate,
    format_hex,
    hex_to_rgb,
    lab_to_lch,
    lab_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
)
from palettekit.errors import InvalidColorError
from palettekit.types import BLACK_FALLBACK, ColorItem, PaletteResult


class TestHex:
    def test_rgb_to_hex(self):
        assert rgb_to_hex((255, 87, 51)) == "#ff5733"
        assert rgb_to_hex((0, 0, 0)) == "#000000"

    def test_none_maps_to_white(self):
        assert rgb_to_hex(None) == "#ffffff"

    def test_float_channels_are_rounded_and_clipped(self):
        assert format_hex((127.5, -3.0, 300.0)) == "#8000ff"

    @pytest.mark.parametrize("value, expected", [
        ("#ff5733", (255, 87, 51)),
        ("FF5733", (255, 87, 51)),
        ("#fff", (255, 255, 255)),
        ("#ff573380", (255, 87, 51)),
        ("red", (255, 0, 0)),
        ("rgb(1, 2, 3)", (1, 2, 3)),
    ])
    def test_hex_to_rgb(self, value, expected):
        assert hex_to_rgb(value) == expected

    @pytest.mark.parametrize("value", ["notacolor", "#12", "#gggggg", "", 123, None])
    def test_invalid_colour_raises(self, value):
        with pytest.raises(InvalidColorError):
            hex_to_rgb(value)

    @pytest.mark.parametrize("value", ["#ff5733", "#000000", "#ffffff", "#0a0b0c", "#7F3AB2"])
    def test_round_trip(self, value):
        assert rgb_to_hex(hex_to_rgb(value)) == value.lower()


class TestHsl:
    @pytest.mark.parametrize("gray", range(0, 256, 17))
    def test_achromatic_hue_is_zero(self, gray):
        assert rgb_to_hsl((gray, gray, gray))[0] == 0

    @pytest.mark.parametrize("rgb, expected", [
        ((255, 0, 0), (0, 100, 50)),
        ((0, 255, 0), (120, 100, 50)),
        ((0, 0, 255), (240, 100, 50)),
        ((255, 87, 51), (11, 100, 60)),
        ((255, 255, 255), (0, 0, 100)),
    ])
    def test_known_values(self, rgb, expected):
        assert rgb_to_hsl(rgb) == expected


class TestCmyk:
    @pytest.mark.parametrize("rgb, expected", [
        ((255, 0, 0), (0, 100, 100, 0)),
        ((0, 0, 0), (0, 0, 0, 100)),
        ((255, 255, 255), (0, 0, 0, 0)),
        ((255, 87, 51), (0, 66, 80, 0)),
    ])
    def test_known_values(self, rgb, expected):
        assert rgb_to_cmyk(rgb) == expected


class TestLab:
    @pytest.mark.parametrize("value", ["#ff5733", "#123456", "#808080", "#00ff00"])
    def test_lab_round_trip(self, value):
        rgb = hex_to_rgb(value)
        assert format_hex(lab_to_rgb(rgb_to_lab(rgb))) == value

    def test_darken_lowers_lightness_by_eighteen(self):
        gray = (128, 128, 128)
        before = rgb_to_lab(gray)[0]
        after = rgb_to_lab(darken(gray, 1))[0]
        assert after == pytest.approx(before - 18, abs=0.01)

    def test_brighten_undoes_darken(self):
        gray = (128, 128, 128)
        assert format_hex(brighten(darken(gray, 1), 1)) == "#808080"

    def test_desaturate_reduces_chroma(self):
        red = (255, 0, 0)
        before = lab_to_lch(rgb_to_lab(red))[1]
        after = lab_to_lch(rgb_to_lab(desaturate(red, 1)))[1]
        assert after < before

    def test_desaturate_gray_is_noop(self):
        assert format_hex(desaturate((128, 128, 128), 2)) == "#808080"


class TestColorItem:
    def test_encodings_agree(self):
        item = ColorItem.from_rgb((255, 87, 51))
        assert item.hex == "#ff5733"
        assert item.rgb == (255, 87, 51)
        assert item.hsl == (11, 100, 60)
        assert item.cmyk == (0, 66, 80, 0)
        assert item.name is None

    def test_to_dict_uses_lists(self):
        data = ColorItem.from_rgb((0, 0, 0)).to_dict()
        assert data == {
            "name": None,
            "hex": "#000000",
            "rgb": [0, 0, 0],
            "hsl": [0, 0, 0],
            "cmyk": [0, 0, 0, 100],
        }


class TestPaletteResult:
    def test_is_immutable(self):
        result = PaletteResult(dominant=BLACK_FALLBACK)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.dominant = ColorItem.from_rgb((1, 2, 3))
        assert result.palette == []
