"""
Value types shared by the tags and the small decoders turning raw attribute
text into them. Every decoder takes the raw text and returns the typed value,
or raises one of the errors of `errors.py`.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Optional, Type, TypeVar, Union
import binascii
import re

import isodate

from .errors import (
    InvalidDateTime,
    InvalidEnumValue,
    InvalidNumber,
    InvalidQuotedString,
    InvalidResolution,
)

E = TypeVar("E", bound=Enum)

_uint_re = re.compile(r"[0-9]+")
_float_re = re.compile(r"[0-9]+(\.[0-9]*)?")
_signed_float_re = re.compile(r"-?[0-9]+(\.[0-9]*)?")
_hex_re = re.compile(r"0[xX][0-9A-Fa-f]{32}")


class ProtocolVersion(IntEnum):
    V1 = 1
    V2 = 2
    V3 = 3
    V4 = 4
    V5 = 5
    V6 = 6
    V7 = 7

    def __str__(self):
        return str(self.value)


def required_version(*items) -> ProtocolVersion:
    """
    The highest version needed by any of `items`.

    An item may be a ProtocolVersion, anything with a `required_version()`
    method, a list/tuple of those, or None/False which stand for an absent
    feature and count as V1.
    """
    version = ProtocolVersion.V1
    for item in items:
        if item is None or item is False:
            continue
        if isinstance(item, ProtocolVersion):
            needed = item
        elif isinstance(item, (list, tuple)):
            needed = required_version(*item)
        else:
            needed = item.required_version()
        if needed > version:
            version = needed
    return version


def parse_uint(value: str) -> int:
    if not _uint_re.fullmatch(value):
        raise InvalidNumber(f"{value!r} is not a decimal-integer")
    return int(value)


def parse_float(value: str, signed: bool = False) -> float:
    regex = _signed_float_re if signed else _float_re
    if not regex.fullmatch(value):
        raise InvalidNumber(f"{value!r} is not a decimal-floating-point")
    return float(value)


def format_float(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    # never in exponent notation, parse_float would not read it back
    return format(Decimal(repr(value)), "f")


def quote(value: str) -> str:
    return f'"{value}"'


def unquote(value: str) -> str:
    if len(value) < 2 or value[0] != '"' or value[-1] != '"' or '"' in value[1:-1]:
        raise InvalidQuotedString(f"{value!r} is not a quoted-string")
    return value[1:-1]


def parse_hex(value: str) -> bytes:
    """128-bit hexadecimal-sequence, as used by the IV attribute."""
    if not _hex_re.fullmatch(value):
        raise InvalidNumber(f"{value!r} is not a 128-bit hexadecimal-sequence")
    return binascii.unhexlify(value[2:])


def format_hex(value: bytes) -> str:
    return "0x" + binascii.hexlify(value).decode("ascii")


def parse_datetime(value: str) -> datetime:
    try:
        return isodate.parse_datetime(value)
    except (isodate.ISO8601Error, ValueError) as e:
        raise InvalidDateTime(f"{value!r} is not an ISO/IEC 8601:2004 date-time") from e


def format_datetime(value: datetime) -> str:
    if value.microsecond == 0:
        text = value.isoformat(timespec="seconds")
    elif value.microsecond % 1000 == 0:
        text = value.isoformat(timespec="milliseconds")
    else:
        text = value.isoformat(timespec="microseconds")
    if value.utcoffset() == timedelta(0):
        # UTC is written the short way
        text = text[: -len("+00:00")] + "Z"
    return text


def parse_enum(enum_class: Type[E], value: str) -> E:
    try:
        return enum_class(value)
    except ValueError:
        choices = ", ".join(str(member.value) for member in enum_class)
        raise InvalidEnumValue(f"{value!r} is not one of {choices}") from None


def parse_yes_no(value: str) -> bool:
    if value == "YES":
        return True
    if value == "NO":
        return False
    raise InvalidEnumValue(f"{value!r} is not one of YES, NO")


class EncryptionMethod(Enum):
    NONE = "NONE"
    AES_128 = "AES-128"
    SAMPLE_AES = "SAMPLE-AES"

    def __str__(self):
        return self.value


class HdcpLevel(Enum):
    TYPE_0 = "TYPE-0"
    TYPE_1 = "TYPE-1"
    NONE = "NONE"

    def __str__(self):
        return self.value


class PlaylistType(Enum):
    EVENT = "EVENT"
    VOD = "VOD"

    def __str__(self):
        return self.value


class KeyFormat(Enum):
    IDENTITY = "identity"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value: str) -> Union["KeyFormat", str]:
        """Unknown key formats are kept as plain strings."""
        try:
            return cls(value)
        except ValueError:
            return value


class ClosedCaptions(Enum):
    NONE = "NONE"

    def __str__(self):
        return self.value


@dataclass
class Resolution:
    width: int
    height: int

    @classmethod
    def parse(cls, value: str) -> "Resolution":
        width, sep, height = value.partition("x")
        if not sep or not _uint_re.fullmatch(width) or not _uint_re.fullmatch(height):
            raise InvalidResolution(f"{value!r} is not a decimal-resolution")
        return cls(int(width), int(height))

    def __str__(self):
        return f"{self.width}x{self.height}"


@dataclass
class ByteRange:
    """
    `length` bytes starting at `start`. A range without `start` continues
    right after the range of the previous segment.
    """

    length: int
    start: Optional[int] = None

    @classmethod
    def parse(cls, value: str) -> "ByteRange":
        length, sep, start = value.partition("@")
        if sep:
            return cls(parse_uint(length), parse_uint(start))
        return cls(parse_uint(length))

    @classmethod
    def from_range(cls, start: int, end: int) -> "ByteRange":
        """Byte range covering start..end, end excluded."""
        if end < start:
            raise ValueError(f"range end {end} is before start {start}")
        return cls(end - start, start)

    @property
    def end(self) -> Optional[int]:
        if self.start is None:
            return None
        return self.start + self.length

    def __str__(self):
        if self.start is None:
            return str(self.length)
        return f"{self.length}@{self.start}"
