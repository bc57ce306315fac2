def assert_close(actual, expected, tol=1e-9):
    """Component-wise absolute tolerance check for tuples or colors."""
    actual = tuple(actual)
    expected = tuple(expected)
    assert len(actual) == len(expected), f"{actual} vs {expected}"
    for a, e in zip(actual, expected):
        assert abs(float(a) - float(e)) < tol, f"{actual} != {expected}"


def hue_distance(h1, h2):
    """Distance between two hues given as fractions of a turn."""
    d = abs(h1 - h2) % 1.0
    return min(d, 1.0 - d)
