# Copyright (c) 2026 col2xy
# SPDX-License-Identifier: MIT

"""Tests for the scalar RGB -> xy conversion chain."""

import logging
import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from col2xy import (
    RGBA64,
    WHITE_POINT,
    BlackInputError,
    BlackPolicy,
    apply_gamma_correction,
    color_to_xy,
    normalize_color,
    normalize_rgb,
    normalized_to_xy,
    rgb_to_xy,
)
from col2xy.convert import (
    color_string_to_xy,
    hex_to_xy,
    linear_rgb_to_xyz,
    parse_hex,
    rgb_to_xyz,
    xyz_to_xy,
)


KNOWN_VECTORS = {
    "red": ((0xff, 0x00, 0x00), (0.7350000000000004, 0.26499999999999957)),
    "green": ((0x00, 0xff, 0x00), (0.11499999999999991, 0.8260000000000001)),
    "blue": ((0x00, 0x00, 0xff), (0.157, 0.017999999999999964)),
    "white": ((0xff, 0xff, 0xff), (0.3125000000000004, 0.3289473684210514)),
}


class TestNormalize:

    def test_byte_extremes(self):
        assert normalize_rgb(0, 128, 255) == (0.0, 128 / 255.0, 1.0)

    def test_wide_extremes(self):
        assert normalize_color(RGBA64(0, 0x8000, 0xffff)) == (0.0, 0x8000 / 65535.0, 1.0)

    def test_wide_discards_alpha(self):
        assert normalize_color(RGBA64(1, 2, 3, 0)) == normalize_color(RGBA64(1, 2, 3, 0xffff))

    def test_duck_typed_color(self):
        class Pixel:
            def rgba(self):
                return (0xffff, 0, 0, 0xffff)

        assert normalize_color(Pixel()) == (1.0, 0.0, 0.0)

    def test_non_color_rejected(self):
        with pytest.raises(TypeError):
            normalize_color((255, 0, 0))


class TestGammaCorrection:

    def test_zero_and_one(self):
        assert apply_gamma_correction(0.0) == 0.0
        assert apply_gamma_correction(1.0) == 1.0

    def test_threshold_uses_linear_segment(self):
        assert apply_gamma_correction(0.04045) == 0.04045 / 12.92

    def test_above_threshold_uses_power_segment(self):
        c = math.nextafter(0.04045, 1.0)
        assert apply_gamma_correction(c) == ((c + 0.055) / 1.055) ** 2.4

    def test_near_continuous_at_threshold(self):
        below = apply_gamma_correction(0.04045)
        above = apply_gamma_correction(math.nextafter(0.04045, 1.0))
        assert above == pytest.approx(below, abs=1e-6)

    def test_mid_gray(self):
        assert apply_gamma_correction(0.5) == pytest.approx(0.21404114, abs=1e-8)

    def test_monotonic(self):
        values = [apply_gamma_correction(i / 255.0) for i in range(256)]
        assert all(a < b for a, b in zip(values, values[1:]))


class TestLinearTransform:

    def test_black_is_zero(self):
        assert linear_rgb_to_xyz(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)

    def test_red_column(self):
        assert linear_rgb_to_xyz(1.0, 0.0, 0.0) == (0.6491852651246980, 0.2340599935483600, 0.0)

    def test_white_luminance(self):
        _, Y, _ = rgb_to_xyz(255, 255, 255)
        assert Y == pytest.approx(1.0, abs=1e-6)

    def test_projection(self):
        assert xyz_to_xy(2.0, 1.0, 1.0) == (0.5, 0.25)


class TestKnownVectors:

    @pytest.mark.parametrize("name", sorted(KNOWN_VECTORS))
    def test_rgb_to_xy(self, name):
        rgb, expected = KNOWN_VECTORS[name]
        assert rgb_to_xy(*rgb) == expected

    @pytest.mark.parametrize("name", sorted(KNOWN_VECTORS))
    def test_color_to_xy(self, name):
        rgb, expected = KNOWN_VECTORS[name]
        wide = RGBA64(*(c * 0x101 for c in rgb), 0xffff)
        assert color_to_xy(wide) == expected

    @pytest.mark.parametrize("name", sorted(KNOWN_VECTORS))
    def test_normalized_to_xy(self, name):
        rgb, expected = KNOWN_VECTORS[name]
        assert normalized_to_xy(*(c / 255.0 for c in rgb)) == expected

    def test_white_point_constant(self):
        assert rgb_to_xy(255, 255, 255) == WHITE_POINT.to_tuple()


class TestProperties:

    def test_deterministic(self):
        assert rgb_to_xy(200, 50, 120) == rgb_to_xy(200, 50, 120)

    def test_deterministic_across_threads(self):
        samples = [(r, g, b) for r in range(0, 256, 85) for g in range(0, 256, 85)
                   for b in range(1, 256, 85)]
        expected = [rgb_to_xy(*s) for s in samples]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda s: rgb_to_xy(*s), samples))
        assert results == expected

    def test_range_for_non_black(self):
        for r in range(0, 256, 51):
            for g in range(0, 256, 51):
                for b in range(0, 256, 51):
                    if r == g == b == 0:
                        continue
                    x, y = rgb_to_xy(r, g, b)
                    assert 0.0 < x < 1.0
                    assert 0.0 < y < 1.0

    def test_darkest_non_black(self):
        x, y = rgb_to_xy(0, 0, 1)
        assert math.isfinite(x) and math.isfinite(y)

    def test_alpha_independence(self):
        results = {color_to_xy(RGBA64(0x1234, 0xabcd, 0x5678, a)) for a in (0, 0x8000, 0xffff)}
        assert len(results) == 1

    def test_proportional_inputs_agree(self):
        assert rgb_to_xy(255, 128, 0) == color_to_xy(RGBA64(0xffff, 0x8080, 0x0000))

    def test_luminance_independent(self):
        # Scaling linear RGB scales XYZ and leaves xy unchanged.
        x1, y1 = xyz_to_xy(*linear_rgb_to_xyz(0.2, 0.4, 0.1))
        x2, y2 = xyz_to_xy(*linear_rgb_to_xyz(0.1, 0.2, 0.05))
        assert x1 == pytest.approx(x2, abs=1e-12)
        assert y1 == pytest.approx(y2, abs=1e-12)


class TestBlackInput:

    def test_raises_by_default(self):
        with pytest.raises(BlackInputError):
            rgb_to_xy(0, 0, 0)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            color_to_xy(RGBA64(0, 0, 0, 0xffff))

    def test_nan_policy(self):
        x, y = rgb_to_xy(0, 0, 0, black=BlackPolicy.NAN)
        assert math.isnan(x)
        assert math.isnan(y)

    def test_nan_policy_wide(self):
        x, y = color_to_xy(RGBA64(0, 0, 0), black=BlackPolicy.NAN)
        assert math.isnan(x) and math.isnan(y)

    def test_white_point_policy(self):
        assert rgb_to_xy(0, 0, 0, black=BlackPolicy.WHITE_POINT) == WHITE_POINT.to_tuple()

    def test_white_point_policy_logs(self, caplog):
        caplog.set_level(logging.DEBUG, logger="col2xy.convert.xyz")
        normalized_to_xy(0.0, 0.0, 0.0, black=BlackPolicy.WHITE_POINT)
        assert "white point" in caplog.text

    def test_policy_ignored_for_non_black(self):
        for policy in BlackPolicy:
            assert rgb_to_xy(255, 0, 0, black=policy) == KNOWN_VECTORS["red"][1]

    def test_transparent_black_is_black(self):
        with pytest.raises(BlackInputError):
            color_to_xy(RGBA64(0, 0, 0, 0))


class TestHexInput:

    def test_long_form(self):
        assert hex_to_xy("#FF0000") == KNOWN_VECTORS["red"][1]

    def test_without_hash(self):
        assert hex_to_xy("00ff00") == KNOWN_VECTORS["green"][1]

    def test_short_form(self):
        assert parse_hex("#0af") == (0x00, 0xaa, 0xff)

    def test_whitespace_stripped(self):
        assert parse_hex("  #123456 ") == (0x12, 0x34, 0x56)

    @pytest.mark.parametrize("bad", ["", "#12345", "#GGGGGG", "red", "#1234567"])
    def test_invalid(self, bad):
        with pytest.raises(ValueError):
            hex_to_xy(bad)

    def test_black_hex_follows_policy(self):
        x, y = hex_to_xy("#000", black=BlackPolicy.NAN)
        assert math.isnan(x) and math.isnan(y)


class TestColorStrings:

    @pytest.fixture(autouse=True)
    def _require_pillow(self):
        pytest.importorskip("PIL")

    def test_named_color(self):
        assert color_string_to_xy("red") == KNOWN_VECTORS["red"][1]

    def test_functional_notation(self):
        assert color_string_to_xy("rgb(0, 0, 255)") == KNOWN_VECTORS["blue"][1]

    def test_hex_string(self):
        assert color_string_to_xy("#ffffff") == KNOWN_VECTORS["white"][1]

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            color_string_to_xy("not-a-color")
