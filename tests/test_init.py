"""Test pybufkit module level stuff."""

import importlib
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import pybufkit


def test_version_not_installed():
    with patch("importlib.metadata.version", side_effect=PackageNotFoundError):
        importlib.reload(pybufkit)
        assert pybufkit.__version__ == "dev"


def test_version_dev():
    with patch("os.path.dirname", return_value="/path/to/source"):
        importlib.reload(pybufkit)
        assert pybufkit.__version__.endswith("dev")


def test_version():
    """Test that version works."""
    assert pybufkit.__version__ is not None
