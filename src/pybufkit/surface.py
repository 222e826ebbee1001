"""Decoding of the surface section of a BUFKIT file.

The surface section is a single table.  The header lists the column tags and
the values follow as whitespace delimited tokens, which may wrap over any
number of lines per row::

    STN YYMMDD/HHMM PMSL PRES SKTC STC1 SNFL WTNS
    P01M C01M STC2 LCLD MCLD HCLD SNRA UWND VWND
    727730 170401/0000 1011.80 869.60 9.35 279.95 0.00 1.00
    0.00 0.00 277.55 0.00 0.00 0.00 0.00 1.47 -0.53

Since the tokens per row equal the number of header tags, rows are found by
counting tokens rather than by lines.
"""

import re
from typing import Iterator, Optional

from metpy.units import units

from pybufkit.exceptions import (
    InvalidNumber,
    InvalidTimestamp,
    MissingRequiredColumn,
    RowDecodeError,
    TokenCountError,
)
from pybufkit.models.bufkit import SurfaceRecord, WindUV
from pybufkit.parse_util import (
    check_missing,
    find_next_n_tokens,
    parse_datetime,
    parse_float,
    parse_int,
    to_quantity,
)
from pybufkit.reference import (
    SFC_IGNORE,
    SFC_STATION,
    SFC_VALID,
    SURFACE_ATTRS,
    SURFACE_FLAGS,
    SURFACE_UNITS,
)
from pybufkit.util import LOG

# The header ends where the first number starting a token is found
HEADER_END_RE = re.compile(r"\s[0-9]")
KNOWN_COLUMNS = {SFC_STATION, SFC_VALID, *SURFACE_UNITS}
_UNITS = {
    key: None if val is None else units.Unit(val)
    for key, val in SURFACE_UNITS.items()
}


class SurfaceColumns:
    """The ordered column tags of the surface table."""

    def __init__(self, names: list[str]):
        self.names = list(names)

    def num_cols(self) -> int:
        """The number of tokens in each row."""
        return len(self.names)

    def __repr__(self):
        return f"SurfaceColumns({self.names})"


def parse_columns(header: str) -> SurfaceColumns:
    """Build the column layout from the surface table header.

    Unknown tags are kept as placeholders so that the token count of a row
    stays right.

    Args:
      header (str): The whitespace delimited column tags.

    Returns:
      SurfaceColumns
    """
    names = []
    for tag in header.split():
        if tag not in KNOWN_COLUMNS:
            LOG.debug("Ignoring unknown surface column `%s`", tag)
            tag = SFC_IGNORE
        names.append(tag)
    for required in (SFC_STATION, SFC_VALID):
        if required not in names:
            raise MissingRequiredColumn(
                f"Surface table header lacks `{required}`"
            )
    return SurfaceColumns(names)


def _wind_uv(u, v) -> Optional[WindUV]:
    """Build a wind only when both components are present."""
    if u is None or v is None:
        return None
    return WindUV(
        u=units.Quantity(u, _UNITS["UWND"]),
        v=units.Quantity(v, _UNITS["VWND"]),
    )


def parse_values(text: str, columns: SurfaceColumns) -> SurfaceRecord:
    """Decode the tokens of one surface table row.

    Args:
      text (str): The text holding the tokens of one row.
      columns (SurfaceColumns): The column layout.

    Returns:
      SurfaceRecord
    """
    tokens = text.split()
    if len(tokens) < columns.num_cols():
        raise RowDecodeError(
            f"Row has {len(tokens)} tokens, expected {columns.num_cols()}"
        )
    raw = {}
    station_num = None
    valid = None
    try:
        for tag, token in zip(columns.names, tokens):
            if tag == SFC_STATION:
                station_num = parse_int(token)
            elif tag == SFC_VALID:
                valid = parse_datetime(token)
            elif tag == SFC_IGNORE:
                parse_float(token)
            else:
                raw[tag] = check_missing(parse_float(token))
    except (InvalidNumber, InvalidTimestamp) as exp:
        raise RowDecodeError(f"Failed to decode surface row: {exp}") from exp

    values = {
        attr: to_quantity(raw.get(tag), _UNITS[tag])
        for tag, attr in SURFACE_ATTRS.items()
    }
    for tag, attr in SURFACE_FLAGS.items():
        val = raw.get(tag)
        values[attr] = None if val is None else val != 0
    return SurfaceRecord(
        station_num=station_num,
        valid=valid,
        wind=_wind_uv(raw.get("UWND"), raw.get("VWND")),
        storm_motion=_wind_uv(raw.get("USTM"), raw.get("VSTM")),
        **values,
    )


class SurfaceSection:
    """The surface section of a BUFKIT file.

    The section runs from ``start`` to the end of the full file text.
    Iterating is lenient, a row that fails to decode is skipped.
    """

    def __init__(self, text: str, start: int = 0):
        """Constructor

        Args:
          text (str): The full text of the BUFKIT file.
          start (int): Offset of the surface table header.
        """
        self.text = text
        m = HEADER_END_RE.search(text, start)
        # A header without any rows
        header_end = len(text) if m is None else m.start() + 1
        self.columns = parse_columns(text[start:header_end])
        self.start = header_end

    def chunks(self) -> Iterator[str]:
        """Yield the text of each row, a partial last row raises."""
        ncols = self.columns.num_cols()
        pos = self.start
        while True:
            brk = find_next_n_tokens(self.text, ncols, pos)
            if brk is None:
                return
            yield self.text[pos:brk]
            pos = brk

    def __iter__(self) -> Iterator[SurfaceRecord]:
        try:
            for chunk in self.chunks():
                try:
                    record = parse_values(chunk, self.columns)
                except RowDecodeError as exp:
                    LOG.debug("Skipping surface row: %s", exp)
                    continue
                yield record
        except TokenCountError as exp:
            LOG.debug("Surface section ends with a partial row: %s", exp)

    def validate_section(self) -> int:
        """Decode every row, any failure raises, returning the count."""
        count = 0
        for chunk in self.chunks():
            parse_values(chunk, self.columns)
            count += 1
        LOG.info("Validated %s surface records", count)
        return count
