import pytest
from svgdoc.color import NONE, NoColor, Rgb, Rgba, render_color


def test_none_color():
    assert render_color(NONE) == "none"
    assert render_color(NoColor()) == "none"
    assert str(NONE) == "none"


def test_named_color_is_verbatim():
    assert render_color("red") == "red"
    assert render_color("") == ""
    assert render_color("not <a> color") == "not <a> color"


def test_rgb():
    c = Rgb(10, 20, 30)
    assert c.red == 10
    assert c.green == 20
    assert c.blue == 30
    assert render_color(c) == "rgb(10,20,30)"
    assert str(c) == "rgb(10,20,30)"


def test_rgb_defaults():
    assert render_color(Rgb()) == "rgb(0,0,0)"


def test_rgba():
    assert render_color(Rgba(1, 2, 3, 0.52)) == "rgba(1,2,3,0.52)"
    assert render_color(Rgba(3, 2, 1, 0.4)) == "rgba(3,2,1,0.4)"


def test_rgba_integral_alpha():
    assert render_color(Rgba(255, 128, 0)) == "rgba(255,128,0,1)"
    assert render_color(Rgba(0, 0, 0, 0.0)) == "rgba(0,0,0,0)"


def test_no_clamping():
    # Out-of-range channels are written as given.
    assert render_color(Rgb(300, -1, 0)) == "rgb(300,-1,0)"
    assert render_color(Rgba(1, 2, 3, 1.5)) == "rgba(1,2,3,1.5)"


def test_colors_are_values():
    assert Rgb(1, 2, 3) == Rgb(1, 2, 3)
    assert Rgba(1, 2, 3, 0.5) != Rgba(1, 2, 3, 0.6)
    assert NoColor() == NONE


def test_unsupported_color():
    with pytest.raises(TypeError):
        render_color(42)
