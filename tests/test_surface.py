"""Test the surface section decoding."""

import logging

import pytest

from pybufkit import surface
from pybufkit.exceptions import (
    MissingRequiredColumn,
    RowDecodeError,
    TokenCountError,
)
from pybufkit.util import utc

HEADER = (
    "STN YYMMDD/HHMM PMSL PRES SKTC STC1 SNFL WTNS\n"
    "P01M C01M STC2 LCLD MCLD HCLD SNRA UWND VWND\n"
    "R01M BFGR T2MS Q2MS WXTS WXTP WXTZ WXTR USTM\n"
    "VSTM HLCY SLLH WSYM CDBP VSBK TD2M\n"
)
ROW = (
    "727730 170401/0100 1011.90 869.60 9.35 279.95 0.00 1.00\n"
    "0.00 0.00 277.55 0.00 0.00 0.00 0.00 1.47 -0.53\n"
    "0.00 0.00 10.62 4.51 0.00 0.00 0.00 1.00 2.30\n"
    "-1.10 25.00 0.00 0.00 -9999.00 20.00 1.52\n"
)


def test_parse_columns():
    """Test the header decoding."""
    cols = surface.parse_columns(HEADER)
    assert cols.num_cols() == 33
    assert cols.names[:3] == ["STN", "YYMMDD/HHMM", "PMSL"]
    # R01M, BFGR and SLLH are not decoded
    assert cols.names.count("IGNORE") == 3


def test_parse_columns_required():
    """Test that the station and time columns are required."""
    with pytest.raises(MissingRequiredColumn):
        surface.parse_columns("YYMMDD/HHMM PMSL")
    with pytest.raises(MissingRequiredColumn):
        surface.parse_columns("STN PMSL PRES")
    with pytest.raises(MissingRequiredColumn):
        surface.parse_columns("PMSL PRES")


def test_parse_values():
    """Test decoding a row."""
    sd = surface.parse_values(ROW, surface.parse_columns(HEADER))
    assert sd.station_num == 727730
    assert sd.valid == utc(2017, 4, 1, 1)
    assert sd.mslp.m == 1011.9
    assert sd.station_pres.m == 869.6
    assert sd.temperature.m == 10.62
    assert sd.dewpoint.m == 1.52
    assert sd.skin_temp.m == 9.35
    assert sd.lyr_2_soil_temp.m == 277.55
    assert sd.spec_humidity.m == 4.51
    assert sd.srh.m == 25
    assert sd.visibility.m == 20
    assert sd.wx_sym_cod == 0
    assert sd.cloud_base_pres is None
    assert sd.wind.u.m == 1.47
    assert sd.wind.v.m == -0.53
    assert sd.storm_motion.u.m == 2.3
    assert sd.storm_motion.v.m == -1.1
    assert sd.rain_type is True
    assert sd.snow_type is False


def test_parse_values_missing_wind():
    """Test that a wind needs both components."""
    row = ROW.replace("1.47 -0.53", "1.47 -9999.00")
    sd = surface.parse_values(row, surface.parse_columns(HEADER))
    assert sd.wind is None
    assert sd.storm_motion is not None


def test_parse_values_absent_columns():
    """Test a table with only a few columns."""
    cols = surface.parse_columns("STN YYMMDD/HHMM T2MS WXTS")
    sd = surface.parse_values("727730 170401/0100 -9999.00 2.00", cols)
    assert sd.temperature is None
    assert sd.snow_type is True
    assert sd.mslp is None
    assert sd.wind is None
    assert sd.rain_type is None


def test_parse_values_errors():
    """Test rows that fail to decode."""
    cols = surface.parse_columns(HEADER)
    with pytest.raises(RowDecodeError):
        surface.parse_values(ROW.replace("1011.90", "1O11.90"), cols)
    with pytest.raises(RowDecodeError):
        surface.parse_values(ROW.replace("170401/0100", "170401"), cols)
    with pytest.raises(RowDecodeError):
        surface.parse_values(ROW.replace("727730", "KMSO"), cols)
    # A placeholder column must still be a number
    row = ROW.replace("0.00 0.00 10.62", "X 0.00 10.62")
    with pytest.raises(RowDecodeError):
        surface.parse_values(row, cols)
    with pytest.raises(RowDecodeError):
        surface.parse_values("727730 170401/0100", cols)


def test_section(surface_text):
    """Test iterating the surface section."""
    section = surface.SurfaceSection(surface_text)
    assert section.columns.num_cols() == 33
    records = list(section)
    assert [r.valid.hour for r in records] == [0, 1, 2]
    assert records[2].mslp.m == 1012
    assert section.validate_section() == 3


def test_section_offset(kmso_text):
    """Test a section that starts within the full text."""
    pos = kmso_text.find("STN YYMMDD/HHMM")
    section = surface.SurfaceSection(kmso_text, pos)
    assert len(list(section)) == 3


def test_section_skips_bad_row(surface_text, caplog):
    """Test that a bad row is skipped and the next one still decoded."""
    caplog.set_level(logging.DEBUG, logger="pybufkit")
    text = surface_text.replace("1011.90", "1O11.90")
    section = surface.SurfaceSection(text)
    records = list(section)
    assert [r.valid.hour for r in records] == [0, 2]
    assert "Skipping surface row" in caplog.text
    with pytest.raises(RowDecodeError):
        section.validate_section()


def test_section_partial_row(surface_text):
    """Test a partial row at the end of the text."""
    text = surface_text + "727730 170401/0300 1013.00\n"
    section = surface.SurfaceSection(text)
    assert len(list(section)) == 3
    with pytest.raises(TokenCountError):
        section.validate_section()


def test_section_no_rows():
    """Test a header without any rows."""
    section = surface.SurfaceSection("STN YYMMDD/HHMM PMSL\n")
    assert section.columns.num_cols() == 3
    assert list(section) == []
    assert section.validate_section() == 0


def test_section_no_required_columns():
    """Test a header lacking the required columns."""
    with pytest.raises(MissingRequiredColumn):
        surface.SurfaceSection("PMSL PRES\n1011.0 869.0\n")
