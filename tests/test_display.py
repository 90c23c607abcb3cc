import sys
from pathlib import Path

import pytest

# Allow importing the package from the repository root
sys.path.append(str(Path(__file__).resolve().parents[1]))

from orientation import Angle
from orientation.display import AngleText, DisplaySettings, format_angle


def test_default_rendering_uses_degree_suffix():
    assert format_angle(Angle.from_degrees(90.0)) == "90.0deg"
    assert format_angle(Angle.from_degrees(270.0)) == "-90.0deg"


def test_precision_and_radians():
    a = Angle.from_degrees(90.0)
    assert format_angle(a, DisplaySettings(precision=2)) == "90.00deg"
    assert format_angle(a, DisplaySettings(unit="radians", precision=4)) == "1.5708rad"
    assert format_angle(a, DisplaySettings(precision=0, suffix="°")) == "90°"


def test_fixed_precision_rounds_boundary_text():
    edge = Angle.from_degrees(180.0)
    assert edge.to_degrees() < 180.0
    assert format_angle(edge, DisplaySettings(precision=2)) == "180.00deg"
    assert format_angle(-edge, DisplaySettings(precision=1)) == "-180.0deg"
    assert format_angle(edge) == "179.99999999999997deg"


def test_settings_validation():
    with pytest.raises(ValueError):
        DisplaySettings(unit="gradians")
    with pytest.raises(ValueError):
        DisplaySettings(precision=-1)


def test_settings_from_env():
    settings = DisplaySettings.from_env(
        {
            "ORIENTATION_DISPLAY_UNIT": " Radians ",
            "ORIENTATION_DISPLAY_PRECISION": "3",
        }
    )
    assert settings == DisplaySettings(unit="radians", precision=3)
    assert settings.unit_suffix == "rad"

    assert DisplaySettings.from_env({}) == DisplaySettings()

    with pytest.raises(ValueError):
        DisplaySettings.from_env({"ORIENTATION_DISPLAY_PRECISION": "two"})


def test_settings_from_process_environment(monkeypatch):
    monkeypatch.setenv("ORIENTATION_DISPLAY_SUFFIX", " degrees")
    monkeypatch.setenv("ORIENTATION_DISPLAY_PRECISION", "1")
    monkeypatch.delenv("ORIENTATION_DISPLAY_UNIT", raising=False)
    settings = DisplaySettings.from_env()
    assert format_angle(Angle.from_degrees(-45.0), settings) == "-45.0 degrees"


def test_angle_text_adapter():
    text = AngleText(Angle.from_degrees(30.0), DisplaySettings(precision=1))
    assert str(text) == "30.0deg"
    assert f"{text:>9}" == "  30.0deg"
    assert str(AngleText(Angle.from_degrees(390.0))) == "30.0deg"
