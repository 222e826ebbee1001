"""Custom Exceptions."""


class BufkitError(Exception):
    """Base Exception for BUFKIT Parsing Issues."""


class InconsistentProfileLength(BufkitError):
    """Upper air profile arrays do not share the pressure array length."""


class InvalidNumber(BufkitError):
    """A token failed to convert to the expected numeric type."""


class InvalidTimestamp(BufkitError):
    """A timestamp was not of the YYMMDD/HHMM form."""


class MalformedKeyValue(BufkitError):
    """A KEY = VALUE pair could not be found."""


class MissingRequiredColumn(BufkitError):
    """The surface table header lacks a mandatory column."""


class MissingRequiredField(BufkitError):
    """The station info block lacks a mandatory key."""


class RowDecodeError(BufkitError):
    """A surface table row failed to decode."""


class SectionBoundaryNotFound(BufkitError):
    """Raised when a section delimiter can not be found."""


class TokenCountError(BufkitError):
    """Text ran out in the middle of a group of tokens."""


class UnrecognizedColumn(BufkitError):
    """A profile table header token is not a known column."""
