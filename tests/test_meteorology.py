"""Tests for the pybufkit.meteorology library"""

from metpy.units import units

from pybufkit import meteorology
from pybufkit.models.bufkit import WindUV


def test_drct():
    """Test calculation of drct"""
    assert meteorology.drct(units("m/s") * 10, units("m/s") * 0) == 270
    assert meteorology.drct(units("m/s") * 0, units("m/s") * 10) == 180
    assert meteorology.drct(units("m/s") * 0, units("m/s") * -10) == 360


def test_drct_calm():
    """A calm wind has no direction."""
    assert meteorology.drct(units("m/s") * 0, units("m/s") * 0) == 0


def test_wind_spd_dir():
    """Test the conversion to speed and direction."""
    wind = WindUV(u=units("m/s") * 1.47, v=units("m/s") * -0.53)
    res = meteorology.wind_spd_dir(wind)
    assert abs(res.speed.m_as("knot") - 3.0375) < 0.001
    assert str(res.speed.units) == "knot"
    assert abs(res.direction - 289.83) < 0.05


def test_wind_spd_dir_units():
    """Test asking for other speed units."""
    wind = WindUV(u=units("m/s") * 3.0, v=units("m/s") * 4.0)
    res = meteorology.wind_spd_dir(wind, "m/s")
    assert abs(res.speed.m - 5.0) < 0.001
