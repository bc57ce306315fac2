import numpy as np

from colorscape.conversions import hsb_to_unit_rgb, np_hsb_to_unit_rgb
from tests.samples import samples_rgb_hsb
from tests.utils import assert_close


def test_hsb_to_rgb_samples():
    for rgb_expected, hsb in samples_rgb_hsb.items():
        h, s, b = hsb
        assert_close(hsb_to_unit_rgb(h / 360.0, s, b), rgb_expected, tol=1e-9)


def test_pure_red():
    assert_close(hsb_to_unit_rgb(0.0, 1.0, 1.0), (1.0, 0.0, 0.0))


def test_full_turn_is_red():
    assert_close(hsb_to_unit_rgb(1.0, 1.0, 1.0), (1.0, 0.0, 0.0))


def test_zero_saturation_is_grey():
    assert hsb_to_unit_rgb(0.4, 0.0, 0.3) == (0.3, 0.3, 0.3)


def test_hue_beyond_full_turn_is_black():
    assert hsb_to_unit_rgb(1.5, 1.0, 1.0) == (0.0, 0.0, 0.0)


def test_hue_beyond_full_turn_grey_keeps_brightness():
    assert hsb_to_unit_rgb(1.5, 0.0, 0.6) == (0.6, 0.6, 0.6)


def test_output_is_clamped():
    r, g, b = hsb_to_unit_rgb(0.0, 1.0, 1.5)
    assert (r, g, b) == (1.0, 0.0, 0.0)

    r, g, b = hsb_to_unit_rgb(0.5, 0.0, -0.5)
    assert (r, g, b) == (0.0, 0.0, 0.0)


def test_sector_boundaries():
    # each boundary hue belongs to the sector that starts there
    assert_close(hsb_to_unit_rgb(60 / 360, 1.0, 1.0), (1.0, 1.0, 0.0))
    assert_close(hsb_to_unit_rgb(120 / 360, 1.0, 1.0), (0.0, 1.0, 0.0))
    assert_close(hsb_to_unit_rgb(180 / 360, 1.0, 1.0), (0.0, 1.0, 1.0))
    assert_close(hsb_to_unit_rgb(240 / 360, 1.0, 1.0), (0.0, 0.0, 1.0))
    assert_close(hsb_to_unit_rgb(300 / 360, 1.0, 1.0), (1.0, 0.0, 1.0))


def test_np_hsb_to_rgb_matches_scalar():
    rng = np.random.default_rng(9)
    hsb = rng.uniform(0.0, 1.0, size=(60, 3))
    extra = np.array([
        [0.0, 0.0, 0.5],
        [1.0, 1.0, 1.0],
        [1.2, 1.0, 1.0],
        [1.2, 0.0, 0.4],
        [0.3, 1.0, 1.7],
    ])
    hsb = np.concatenate([hsb, extra])

    result = np_hsb_to_unit_rgb(hsb[..., 0], hsb[..., 1], hsb[..., 2])
    expected = np.array([hsb_to_unit_rgb(*c) for c in hsb])

    assert result.shape == hsb.shape
    np.testing.assert_allclose(result, expected, atol=1e-12)
