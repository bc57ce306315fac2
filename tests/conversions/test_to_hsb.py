import numpy as np

from colorscape.conversions import unit_rgb_to_hsb, np_unit_rgb_to_hsb
from tests.samples import samples_rgb_hsb, samples_degenerate


def test_rgb_to_hsb_samples():
    for rgb, hsb_expected in samples_rgb_hsb.items():
        h_exp, s_exp, b_exp = hsb_expected

        h, s, b = unit_rgb_to_hsb(*rgb)
        assert abs(h * 360.0 - h_exp) < 1e-9
        assert abs(s - s_exp) < 1e-9
        assert abs(b - b_exp) < 1e-9


def test_rgb_to_hsb_hue_range():
    rng = np.random.default_rng(3)
    for r, g, b in rng.uniform(0.0, 1.0, size=(300, 3)):
        h, _, _ = unit_rgb_to_hsb(r, g, b)
        assert 0.0 <= h < 1.0


def test_black_is_all_zero():
    assert unit_rgb_to_hsb(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)


def test_non_positive_max_is_black():
    assert unit_rgb_to_hsb(-0.2, -0.5, -0.1) == (0.0, 0.0, 0.0)


def test_grey_has_zero_hue_and_saturation():
    for rgb in samples_degenerate[1:]:
        h, s, b = unit_rgb_to_hsb(*rgb)
        assert h == 0.0
        assert s == 0.0
        assert b == rgb[0]


def test_green_wins_ties_with_red():
    # yellow: red and green both max, hue measured from the green formula
    h, _, _ = unit_rgb_to_hsb(1.0, 1.0, 0.0)
    assert abs(h * 360.0 - 60.0) < 1e-9


def test_np_rgb_to_hsb_matches_scalar():
    rng = np.random.default_rng(5)
    rgb = rng.uniform(0.0, 1.0, size=(50, 3))
    rgb = np.concatenate([rgb, np.array(list(samples_rgb_hsb) + samples_degenerate)])

    result = np_unit_rgb_to_hsb(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    expected = np.array([unit_rgb_to_hsb(*c) for c in rgb])

    assert result.shape == rgb.shape
    np.testing.assert_allclose(result, expected, atol=1e-12)


def test_np_rgb_to_hsb_black_and_negative():
    result = np_unit_rgb_to_hsb(
        np.array([0.0, -0.3]),
        np.array([0.0, -0.1]),
        np.array([0.0, -0.2]),
    )
    np.testing.assert_array_equal(result, np.zeros((2, 3)))
