"""
Tests for the plain-text scene description parser.
"""

import random

import pytest

from planetgen.models import PlanetParameters
from planetgen.scene import SceneParseError, load_scene, parse_scene

MARS = """
R 3389.5
M 6.4171e23
D 24.6229
S 0.08
T -60
W 0.0
C color 193 68 14
"""


def test_units_are_converted():
    p = parse_scene(MARS)
    assert p.radius == pytest.approx(3389500.0)
    assert p.mass == pytest.approx(6.4171e23)
    assert p.day == pytest.approx(24.6229 * 3600)
    assert p.terrain_scale == pytest.approx(0.08)
    assert p.temperature == pytest.approx(-60.0)
    assert p.water == 0.0


def test_color_directive_makes_tinted_world():
    p = parse_scene(MARS)
    assert p.terrestrial is False
    assert p.base_color == pytest.approx((193 / 255, 68 / 255, 14 / 255))


def test_terrestrial_directive():
    p = parse_scene("C terrestrial\nW 0.4\n")
    assert p.terrestrial is True
    assert p.water == pytest.approx(0.4)
    assert p.base_color == (0.0, 0.0, 0.0)


def test_random_color_uses_injected_source():
    a = parse_scene("C random", rng=random.Random(5))
    b = parse_scene("C random", rng=random.Random(5))
    assert a == b
    assert a.terrestrial is False
    for channel in a.base_color:
        assert 0.0 <= channel <= 0.99


def test_missing_values_keep_defaults():
    p = parse_scene("T 30\n")
    defaults = PlanetParameters()
    assert p.temperature == 30.0
    assert p.radius == defaults.radius
    assert p.mass == defaults.mass
    assert p.terrestrial is True


def test_whitespace_blank_lines_and_unknown_keys():
    p = parse_scene("\n   R    100   \n\tX ignored\nZ 12\n\n  D\t2 \n")
    assert p.radius == pytest.approx(100000.0)
    assert p.day == pytest.approx(7200.0)


def test_first_letter_selects_the_field():
    p = parse_scene("Radius 10\nWater 0.25\n")
    assert p.radius == pytest.approx(10000.0)
    assert p.water == pytest.approx(0.25)


def test_later_lines_override():
    assert parse_scene("T 10\nT 20\n").temperature == 20.0


def test_bad_number_raises():
    with pytest.raises(SceneParseError, match="line 2"):
        parse_scene("R 10\nM lots\n")


def test_load_scene_from_file(tmp_path):
    path = tmp_path / "mars.txt"
    path.write_text(MARS)
    assert load_scene(path) == parse_scene(MARS)


def test_missing_file_falls_back_to_earth(tmp_path, caplog):
    with caplog.at_level("WARNING"):
        p = load_scene(tmp_path / "nope.txt")
    assert p == PlanetParameters()
    assert "Unable to open scene file" in caplog.text
