"""
We do meteorological things, when necessary
"""

import metpy.calc as mcalc
import numpy as np
from metpy.units import units

from pybufkit.models.bufkit import WindSpdDir, WindUV


def drct(u, v) -> float:
    """
    Compute the wind direction given a u and v wind speed

    Args:
      u (pint.Quantity): u component wind speed
      v (pint.Quantity): v component wind speed

    Returns:
      float direction the wind blows from, degrees, zero for calm winds
    """
    return float(np.asarray(mcalc.wind_direction(u, v).m_as("degree")))


def wind_spd_dir(wind: WindUV, speed_units: str = "knot") -> WindSpdDir:
    """Convert a u and v wind into a speed and direction.

    Args:
      wind (WindUV): the wind components
      speed_units (str): the units to provide the speed in, default knots

    Returns:
      WindSpdDir
    """
    speed = mcalc.wind_speed(wind.u, wind.v).to(units(speed_units))
    return WindSpdDir(speed=speed, direction=drct(wind.u, wind.v))
