"""Decoding of the upper air section of a BUFKIT file.

Each upper air record consists of three blocks separated by blank lines, the
station info, the stability indexes and the profile table::

    STID = KMSO STNM = 727730 TIME = 170401/0100
    SLAT = 46.87 SLON = -114.16 SELV = 1335.0
    STIM = 1

    SHOW = 8.12 LIFT = 8.00 SWET = 39.08 KINX = 14.88
    LCLP = 780.77 PWAT = 9.28 TOTL = 39.55 CAPE = 0.00
    LCLT = 272.88 CINS = 0.00 EQLV = -9999.00 LFCT = -9999.00
    BRCH = 0.00

    PRES TMPC TMWC DWPC THTE DRCT SKNT OMEG
    CFRL HGHT
    906.70 10.54 6.12 1.52 305.69 270.00 2.14 -2.00
    0.00 994.01

"""

import re
from typing import Iterator, Optional

from metpy.units import units

from pybufkit.exceptions import (
    InconsistentProfileLength,
    InvalidNumber,
    MalformedKeyValue,
    MissingRequiredField,
    SectionBoundaryNotFound,
    UnrecognizedColumn,
)
from pybufkit.models.bufkit import (
    Profile,
    StabilityIndexes,
    StationInfo,
    UpperAirRecord,
    WindSpdDir,
)
from pybufkit.parse_util import (
    TOKEN_RE,
    check_missing,
    find_key_value,
    find_section_boundary,
    parse_datetime_kv,
    parse_f64_kv,
    parse_float,
    parse_i32_kv,
    to_quantity,
)
from pybufkit.reference import (
    INDEX_ATTRS,
    INDEX_UNITS,
    PROFILE_UNITS,
    STATION_ID_KEY,
    STATION_NUM_KEY,
)
from pybufkit.util import LOG

# The profile values start with the first number
PROFILE_VALUES_RE = re.compile(r"[0-9\-]")
# Attribute and column of the per level profiles, wind handled apart
PROFILE_ATTRS = {
    "pressure": "PRES",
    "temperature": "TMPC",
    "wet_bulb": "TMWC",
    "dew_point": "DWPC",
    "theta_e": "THTE",
    "omega": "OMEG",
    "height": "HGHT",
    "cloud_fraction": "CFRL",
}
_UNITS = {
    key: None if val is None else units.Unit(val)
    for key, val in {**PROFILE_UNITS, **INDEX_UNITS}.items()
}


def _required(parser, text: str, key: str):
    """Run the key value parser, the key must exist."""
    try:
        return parser(text, key)
    except MalformedKeyValue as exp:
        raise MissingRequiredField(f"Station info lacks `{key}`") from exp


def _optional_f64(text: str, key: str):
    """Parse an optional float, (None, text) if not found."""
    try:
        (val, remaining) = parse_f64_kv(text, key)
    except (MalformedKeyValue, InvalidNumber):
        return None, text
    return check_missing(val), remaining


def parse_station_info(text: str) -> StationInfo:
    """Parse the station info block of an upper air record.

    The keys are assumed to always be in the same order, so each search
    starts where the last one ended.

    Args:
      text (str): The station info block.

    Returns:
      StationInfo
    """
    station_id = None
    head = text
    try:
        (val, remaining) = find_key_value(
            text, STATION_ID_KEY, str.isalnum, str.isspace
        )
        # An empty STID runs straight into the STNM key
        if val != STATION_NUM_KEY:
            station_id = val
            head = remaining
    except MalformedKeyValue:
        LOG.debug("No %s found in station info", STATION_ID_KEY)

    (station_num, head) = _required(parse_i32_kv, head, STATION_NUM_KEY)
    (valid, head) = _required(parse_datetime_kv, head, "TIME")
    (lat, head) = _optional_f64(head, "SLAT")
    (lon, head) = _optional_f64(head, "SLON")
    (elevation, head) = _optional_f64(head, "SELV")
    (lead_time, _) = _required(parse_i32_kv, head, "STIM")

    return StationInfo(
        id=station_id,
        station_num=check_missing(station_num),
        valid=valid,
        lead_time=check_missing(lead_time),
        lat=lat,
        lon=lon,
        elevation=to_quantity(elevation, units.m),
    )


def parse_indexes(text: str) -> StabilityIndexes:
    """Parse the stability index block of an upper air record.

    Any index can be missing, which leaves it as None.
    """
    values = {}
    head = text
    for key, attr in INDEX_ATTRS.items():
        (val, head) = _optional_f64(head, key)
        values[attr] = to_quantity(val, _UNITS[key])
    return StabilityIndexes(**values)


def parse_profile_columns(header: str) -> list[str]:
    """Get the column tags of the profile table."""
    columns = header.split()
    for col in columns:
        if col not in PROFILE_UNITS:
            raise UnrecognizedColumn(f"Unknown profile column `{col}`")
    if not columns:
        raise UnrecognizedColumn("Profile table has no column header")
    return columns


def parse_profile(text: str) -> Profile:
    """Parse the profile table of an upper air record.

    Args:
      text (str): The column header followed by rows of values.

    Returns:
      Profile
    """
    m = PROFILE_VALUES_RE.search(text)
    if m is None:
        raise MalformedKeyValue("Failed to find profile values")
    columns = parse_profile_columns(text[: m.start()])
    ncols = len(columns)
    values = {col: [] for col in columns}
    for i, token in enumerate(TOKEN_RE.finditer(text, m.start())):
        col = columns[i % ncols]
        values[col].append(check_missing(parse_float(token.group())))

    # A wind needs both the speed and the direction
    drcts = values.get("DRCT", [])
    sknts = values.get("SKNT", [])
    wind = [
        (
            None
            if drct is None or sknt is None
            else WindSpdDir(
                speed=units.Quantity(sknt, _UNITS["SKNT"]), direction=drct
            )
        )
        for drct, sknt in zip(drcts, sknts)
    ]
    return Profile(
        wind=wind,
        **{
            attr: [to_quantity(v, _UNITS[col]) for v in values.get(col, [])]
            for attr, col in PROFILE_ATTRS.items()
        },
    )


def check_profile_lengths(profile: Profile):
    """Each profile must be empty or the same length as pressure."""
    size = len(profile.pressure)
    if size == 0:
        raise InconsistentProfileLength("Pressure profile is empty")
    for attr in [*PROFILE_ATTRS, "wind"]:
        length = len(getattr(profile, attr))
        if length not in (0, size):
            raise InconsistentProfileLength(
                f"{attr} has {length} levels, pressure has {size}"
            )


def parse_upper_air(text: str) -> UpperAirRecord:
    """Parse the text of one upper air record.

    Args:
      text (str): Station info, indexes and profile blocks.

    Returns:
      UpperAirRecord
    """
    brk1 = find_section_boundary(text)
    if brk1 is None:
        raise SectionBoundaryNotFound("Failed to find end of station info")
    brk2 = find_section_boundary(text, brk1)
    if brk2 is None:
        raise SectionBoundaryNotFound("Failed to find end of indexes")
    record = UpperAirRecord(
        station=parse_station_info(text[:brk1]),
        indexes=parse_indexes(text[brk1:brk2]),
        profile=parse_profile(text[brk2:]),
    )
    check_profile_lengths(record.profile)
    return record


class UpperAirSection:
    """The upper air section of a BUFKIT file.

    The section is the text between ``start`` and ``end`` of the full file
    text, which is not copied.  Iterating yields one `UpperAirRecord` at a
    time and any decoding error stops the iteration.
    """

    def __init__(self, text: str, start: int = 0, end: Optional[int] = None):
        """Constructor

        Args:
          text (str): The full text of the BUFKIT file.
          start (int): Offset of the section start.
          end (int): Offset of the section end, default end of text.
        """
        self.text = text
        self.start = start
        self.end = len(text) if end is None else end
        # Records start with STID, unless a file has none
        self.marker = STATION_ID_KEY
        if text.find(STATION_ID_KEY, start, self.end) < 0:
            self.marker = STATION_NUM_KEY

    def chunks(self) -> Iterator[str]:
        """Yield the text of each upper air record."""
        pos = self.text.find(self.marker, self.start, self.end)
        while pos > -1:
            nextpos = self.text.find(
                self.marker, pos + len(self.marker), self.end
            )
            yield self.text[pos : (self.end if nextpos < 0 else nextpos)]
            pos = nextpos

    def __iter__(self) -> Iterator[UpperAirRecord]:
        for chunk in self.chunks():
            yield parse_upper_air(chunk)

    def validate_section(self) -> int:
        """Decode every record, returning the count."""
        count = sum(1 for _ in self)
        LOG.info("Validated %s upper air records", count)
        return count
