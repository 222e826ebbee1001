"""A BUFKIT File Reader.

A BUFKIT file is an upper air section, one record per forecast hour, followed
by a surface table that starts with the ``STN YYMMDD/HHMM`` header.  The two
sections are decoded lazily and merged on their valid times.
"""

import os
from io import StringIO
from typing import Iterator, Optional

import numpy as np
import pandas as pd

from pybufkit.exceptions import SectionBoundaryNotFound
from pybufkit.meteorology import wind_spd_dir
from pybufkit.models.bufkit import (
    BufkitSounding,
    SurfaceRecord,
    UpperAirRecord,
)
from pybufkit.reference import (
    INDEX_ANAL_NAMES,
    INDEX_ATTRS,
    SURFACE_ANAL_NAMES,
    SURFACE_ATTRS,
    SURFACE_FLAG_ANAL_NAMES,
    SURFACE_FLAGS,
    SURFACE_MARKER,
)
from pybufkit.surface import SurfaceSection
from pybufkit.upperair import PROFILE_ATTRS, UpperAirSection
from pybufkit.util import LOG


def _magnitude(value) -> float:
    """Strip the units from a value, None becomes NaN."""
    if value is None:
        return np.nan
    return float(getattr(value, "m", value))


def merge_records(upper_air, surface) -> Iterator[tuple]:
    """Pair upper air and surface records with the same valid time.

    Both inputs must be in time order.  Records without an exact match on
    the other side are dropped and the merge stops once either side runs
    out.

    Args:
      upper_air (iterable): UpperAirRecord instances.
      surface (iterable): SurfaceRecord instances.

    Yields:
      (UpperAirRecord, SurfaceRecord)
    """
    ua_iter = iter(upper_air)
    sfc_iter = iter(surface)
    ua = next(ua_iter, None)
    sd = next(sfc_iter, None)
    while ua is not None and sd is not None:
        if sd.valid < ua.valid:
            sd = next(sfc_iter, None)
        elif ua.valid < sd.valid:
            ua = next(ua_iter, None)
        else:
            yield ua, sd
            ua = next(ua_iter, None)
            sd = next(sfc_iter, None)


def combine(
    ua: UpperAirRecord,
    sd: SurfaceRecord,
    source_description: Optional[str] = None,
) -> BufkitSounding:
    """Build a sounding from an upper air and surface record pair.

    Args:
      ua (UpperAirRecord): The upper air record.
      sd (SurfaceRecord): The surface record valid at the same time.
      source_description (str): Where the data came from, a file name.

    Returns:
      BufkitSounding
    """
    anal = {}
    for attr, name in INDEX_ANAL_NAMES.items():
        val = getattr(ua.indexes, attr)
        if val is not None:
            anal[name] = _magnitude(val)
    for attr, name in SURFACE_ANAL_NAMES.items():
        val = getattr(sd, attr)
        if val is not None:
            anal[name] = _magnitude(val)
    for attr, name in SURFACE_FLAG_ANAL_NAMES.items():
        val = getattr(sd, attr)
        if val is not None:
            anal[name] = 1.0 if val else 0.0
    if sd.storm_motion is not None:
        anal["StormMotionUMps"] = float(sd.storm_motion.u.m_as("m/s"))
        anal["StormMotionVMps"] = float(sd.storm_motion.v.m_as("m/s"))

    return BufkitSounding(
        source_description=source_description,
        station=ua.station,
        valid=ua.valid,
        lead_time=ua.station.lead_time,
        profile=ua.profile,
        mslp=sd.mslp,
        station_pres=sd.station_pres,
        temperature=sd.temperature,
        dewpoint=sd.dewpoint,
        low_cloud=sd.low_cloud,
        mid_cloud=sd.mid_cloud,
        hi_cloud=sd.hi_cloud,
        sfc_wind=None if sd.wind is None else wind_spd_dir(sd.wind),
        bufkit_anal=anal,
    )


class BufkitData:
    """The upper air and surface sections of one BUFKIT text.

    Iterating yields a `BufkitSounding` for each valid time found in both
    sections.
    """

    def __init__(self, text: str, source_description: Optional[str] = None):
        """Constructor

        Args:
          text (str): The BUFKIT file content.
          source_description (str): Attached to each sounding.
        """
        self.text = text.replace("\r", "")
        self.source_description = source_description
        pos = self.text.find(SURFACE_MARKER)
        if pos < 0:
            raise SectionBoundaryNotFound(
                f"Failed to find `{SURFACE_MARKER}` surface table header"
            )
        self.upper_air = UpperAirSection(self.text, 0, pos)
        self.surface = SurfaceSection(self.text, pos)

    def validate(self):
        """Decode both sections, raising the first error found."""
        nua = self.upper_air.validate_section()
        nsfc = self.surface.validate_section()
        LOG.info("Validated %s upper air and %s surface records", nua, nsfc)

    def pairs(self) -> Iterator[tuple]:
        """Yield the (UpperAirRecord, SurfaceRecord) with matching times."""
        return merge_records(self.upper_air, self.surface)

    def __iter__(self) -> Iterator[BufkitSounding]:
        for ua, sd in self.pairs():
            yield combine(ua, sd, self.source_description)


class BufkitFile:
    """A BUFKIT file loaded into memory."""

    def __init__(self, text: str, file_name: Optional[str] = None):
        self.raw_text = text
        self.file_name = file_name

    @classmethod
    def load(cls, path: str) -> "BufkitFile":
        """Read a BUFKIT file.

        Args:
          path (str): The file to read.

        Returns:
          BufkitFile
        """
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
        return cls(text, os.path.basename(path))

    def data(self) -> BufkitData:
        """The sections of this file."""
        return BufkitData(self.raw_text, self.file_name)

    def validate_file_format(self):
        """Decode the whole file, raising the first error found."""
        self.data().validate()


def validate(text: str):
    """Decode both sections of a BUFKIT text, raising the first error.

    The surface check is stricter than iteration, a bad or partial surface
    row raises here while `parse_soundings` skips it.
    """
    BufkitData(text).validate()


def parse_soundings(
    text: str, source_description: Optional[str] = None
) -> Iterator[BufkitSounding]:
    """Generate the merged soundings found in a BUFKIT text.

    Args:
      text (str): The BUFKIT file content.
      source_description (str): Attached to each sounding.

    Returns:
      generator of BufkitSounding
    """
    return iter(BufkitData(text, source_description))


def _profile_rows(ua: UpperAirRecord) -> list[dict]:
    """One dict per level of the upper air profile."""
    prof = ua.profile
    rows = []
    for i in range(len(prof.pressure)):
        row = {"STIM": ua.station.lead_time}
        for attr, col in PROFILE_ATTRS.items():
            vals = getattr(prof, attr)
            if vals:
                row[col] = _magnitude(vals[i])
        if prof.wind:
            wind = prof.wind[i]
            row["DRCT"] = np.nan if wind is None else wind.direction
            row["SKNT"] = np.nan if wind is None else _magnitude(wind.speed)
        rows.append(row)
    return rows


def _station_row(ua: UpperAirRecord, sd: SurfaceRecord) -> dict:
    """The station info, indexes and surface values for one time."""
    stn = ua.station
    row = {
        "STIM": stn.lead_time,
        "STID": stn.id,
        "STNM": stn.station_num,
        "SLAT": np.nan if stn.lat is None else stn.lat,
        "SLON": np.nan if stn.lon is None else stn.lon,
        "SELV": _magnitude(stn.elevation),
        "utc_valid": ua.valid,
    }
    for key, attr in INDEX_ATTRS.items():
        row[key] = _magnitude(getattr(ua.indexes, attr))
    for key, attr in {**SURFACE_ATTRS, **SURFACE_FLAGS}.items():
        row[key] = _magnitude(getattr(sd, attr))
    for (ukey, vkey), wind in zip(
        [("UWND", "VWND"), ("USTM", "VSTM")], [sd.wind, sd.storm_motion]
    ):
        row[ukey] = np.nan if wind is None else _magnitude(wind.u)
        row[vkey] = np.nan if wind is None else _magnitude(wind.v)
    return row


def read_bufkit(mixedobj):
    """Read a BUFKIT file and return two pandas dataframes.

    The first dataframe is the sounding values with a column called `STIM`,
    which can be joined against the index of the station_dataframe.  Only
    the valid times found in both sections are included and missing values
    are NaN.

    Args:
      mixedobj (str or filelike): What to read.

    Returns:
      (profile_dataframe, station_dataframe)
    """
    if isinstance(mixedobj, str):
        with open(mixedobj, encoding="utf8") as fh:
            text = fh.read()
    elif isinstance(mixedobj, StringIO):
        text = mixedobj.getvalue()
    else:
        raise ValueError("Provided mixedobj should be str or StringIO")
    try:
        data = BufkitData(text)
    except SectionBoundaryNotFound as exp:
        raise ValueError("Failed to find station data delimiter") from exp
    profile_rows = []
    station_rows = []
    for ua, sd in data.pairs():
        profile_rows.extend(_profile_rows(ua))
        station_rows.append(_station_row(ua, sd))
    sndf = pd.DataFrame(profile_rows)
    stndf = pd.DataFrame(station_rows)
    if not stndf.empty:
        stndf["utc_valid"] = pd.to_datetime(stndf["utc_valid"], utc=True)
        stndf = stndf.set_index("STIM")
    return sndf, stndf
