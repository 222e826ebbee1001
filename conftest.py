"""Centralized Testing Stuff."""

# third party
import pytest

# This repo
from pybufkit.util import get_test_file


@pytest.fixture()
def kmso_text():
    """The text of a three hour KMSO BUFKIT file."""
    return get_test_file("BUFKIT/kmso_short.buf")


@pytest.fixture()
def surface_text(kmso_text):
    """Just the surface section of the KMSO file."""
    return kmso_text[kmso_text.find("STN YYMMDD/HHMM") :]
