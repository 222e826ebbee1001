"""Data Model for BUFKIT soundings.

Values with physical units are carried as metpy (pint) quantities, a value of
``None`` means the BUFKIT file had the missing value or lacked the column.
"""

from datetime import datetime
from typing import Optional

from metpy.units import units
from pydantic import BaseModel, ConfigDict, Field
from shapely.geometry import Point

Quantity = units.Quantity


class WindSpdDir(BaseModel):
    """A wind as speed and the direction it blows from."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    speed: Quantity = Field(..., description="Wind Speed")
    direction: float = Field(..., description="Wind Direction (degrees)")


class WindUV(BaseModel):
    """A wind as zonal and meridional components."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    u: Quantity = Field(..., description="Zonal Wind Component")
    v: Quantity = Field(..., description="Meridional Wind Component")


class StationInfo(BaseModel):
    """The station info preamble of an upper air record."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: Optional[str] = Field(None, description="Station Identifier")
    station_num: Optional[int] = Field(None, description="Station Number")
    valid: datetime
    lead_time: Optional[int] = Field(
        None, description="Hours since model initialization"
    )
    lat: Optional[float] = Field(None, description="Latitude")
    lon: Optional[float] = Field(None, description="Longitude")
    elevation: Optional[Quantity] = Field(None, description="Elevation")

    @property
    def geom(self) -> Optional[Point]:
        """The station location, only when both lat and lon are known."""
        if self.lat is None or self.lon is None:
            return None
        return Point(self.lon, self.lat)


class StabilityIndexes(BaseModel):
    """Stability indexes provided with each upper air record."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    show: Optional[Quantity] = Field(None, description="Showalter Index")
    li: Optional[Quantity] = Field(None, description="Lifted Index")
    swet: Optional[float] = Field(None, description="SWEAT Index")
    kinx: Optional[Quantity] = Field(None, description="K Index")
    lclp: Optional[Quantity] = Field(None, description="LCL Pressure")
    pwat: Optional[Quantity] = Field(None, description="Precipitable Water")
    totl: Optional[float] = Field(None, description="Total Totals")
    cape: Optional[Quantity] = Field(None, description="CAPE")
    lclt: Optional[Quantity] = Field(None, description="LCL Temperature")
    cins: Optional[Quantity] = Field(None, description="CIN")
    eqlv: Optional[Quantity] = Field(None, description="Equilibrium Level")
    lfc: Optional[Quantity] = Field(None, description="LFC Pressure")
    brch: Optional[float] = Field(
        None, description="Bulk Richardson Number"
    )


class Profile(BaseModel):
    """Upper air values, one list entry per vertical level."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    pressure: list[Optional[Quantity]] = Field(default_factory=list)
    temperature: list[Optional[Quantity]] = Field(default_factory=list)
    wet_bulb: list[Optional[Quantity]] = Field(default_factory=list)
    dew_point: list[Optional[Quantity]] = Field(default_factory=list)
    theta_e: list[Optional[Quantity]] = Field(default_factory=list)
    wind: list[Optional[WindSpdDir]] = Field(default_factory=list)
    omega: list[Optional[Quantity]] = Field(default_factory=list)
    height: list[Optional[Quantity]] = Field(default_factory=list)
    cloud_fraction: list[Optional[float]] = Field(default_factory=list)


class UpperAirRecord(BaseModel):
    """One upper air record, a sounding valid at one time."""

    station: StationInfo
    indexes: StabilityIndexes
    profile: Profile

    @property
    def valid(self) -> datetime:
        """The valid time of this record."""
        return self.station.valid


class SurfaceRecord(BaseModel):
    """One row of the surface table."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    station_num: int
    valid: datetime
    mslp: Optional[Quantity] = Field(None, description="Sea Level Pressure")
    station_pres: Optional[Quantity] = Field(
        None, description="Station Pressure"
    )
    low_cloud: Optional[Quantity] = None
    mid_cloud: Optional[Quantity] = None
    hi_cloud: Optional[Quantity] = None
    wind: Optional[WindUV] = Field(None, description="10 meter Wind")
    temperature: Optional[Quantity] = Field(None, description="2m Temp")
    dewpoint: Optional[Quantity] = Field(None, description="2m Dew Point")
    spec_humidity: Optional[Quantity] = None
    skin_temp: Optional[Quantity] = None
    lyr_1_soil_temp: Optional[Quantity] = None
    lyr_2_soil_temp: Optional[Quantity] = None
    snow_1hr: Optional[Quantity] = None
    soil_moisture: Optional[Quantity] = None
    p01: Optional[Quantity] = Field(None, description="1 Hour Precip")
    c01: Optional[Quantity] = Field(None, description="1 Hour Conv Precip")
    p03: Optional[Quantity] = Field(None, description="3 Hour Precip")
    c03: Optional[Quantity] = Field(None, description="3 Hour Conv Precip")
    snow_ratio: Optional[Quantity] = None
    visibility: Optional[Quantity] = None
    srh: Optional[Quantity] = Field(
        None, description="Storm Relative Helicity"
    )
    cloud_base_pres: Optional[Quantity] = None
    wx_sym_cod: Optional[float] = Field(
        None, description="Weather Symbol Code"
    )
    storm_motion: Optional[WindUV] = None
    snow_type: Optional[bool] = None
    ice_pellets_type: Optional[bool] = None
    fzra_type: Optional[bool] = None
    rain_type: Optional[bool] = None


class BufkitSounding(BaseModel):
    """An upper air record merged with the surface record of the same time."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source_description: Optional[str] = None
    station: StationInfo
    valid: datetime
    lead_time: Optional[int] = None
    profile: Profile
    mslp: Optional[Quantity] = None
    station_pres: Optional[Quantity] = None
    temperature: Optional[Quantity] = None
    dewpoint: Optional[Quantity] = None
    low_cloud: Optional[Quantity] = None
    mid_cloud: Optional[Quantity] = None
    hi_cloud: Optional[Quantity] = None
    sfc_wind: Optional[WindSpdDir] = None
    bufkit_anal: dict[str, float] = Field(
        default_factory=dict,
        description="Auxiliary values keyed by name",
    )
