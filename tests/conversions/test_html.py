from colorscape.conversions import unit_rgba_to_html, channel_to_hex


def test_channel_to_hex_floors():
    assert channel_to_hex(1.0) == "ff"
    assert channel_to_hex(0.5) == "7f"
    assert channel_to_hex(0.0) == "00"
    assert channel_to_hex(0.03) == "07"


def test_rgba_to_html():
    assert unit_rgba_to_html((1.0, 0.0, 0.0, 1.0)) == "#ff0000"
    assert unit_rgba_to_html((1.0, 0.0, 0.0, 1.0), with_alpha=True) == "#ff0000ff"
    assert unit_rgba_to_html((0.0, 0.5, 1.0, 0.0), with_alpha=True) == "#007fff00"


def test_out_of_range_is_not_clamped():
    assert channel_to_hex(-0.1) == "-1a"
    assert channel_to_hex(1.5) == "17e"
    assert unit_rgba_to_html((-0.1, 0.0, 0.0, 1.0)) == "#-1a0000"
