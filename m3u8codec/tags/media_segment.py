"""
Tags that apply to the media segment following them (RFC 8216, 4.3.2).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Union

from ..errors import MissingAttribute
from ..tag import Attribute, AttributeCodec, Tag, TagWithAttrList, tag_manager
from ..types import (
    ByteRange,
    EncryptionMethod,
    KeyFormat,
    ProtocolVersion,
    format_datetime,
    format_float,
    format_hex,
    parse_datetime,
    parse_enum,
    parse_float,
    parse_hex,
    parse_uint,
    parse_yes_no,
    quote,
    unquote,
)


@tag_manager.register
@dataclass
class ExtInf(Tag):
    """Duration of a media segment in seconds, with an optional title."""

    PREFIX = "#EXTINF:"

    duration: float
    title: Optional[str] = None

    @classmethod
    def _decode(cls, body: str) -> "ExtInf":
        duration, _, title = body.partition(",")
        return cls(parse_float(duration), title or None)

    def encode(self) -> str:
        return f"{self.PREFIX}{format_float(self.duration)},{self.title or ''}"

    def required_version(self) -> ProtocolVersion:
        # integer durations are all a V1 client understands
        if float(self.duration).is_integer():
            return ProtocolVersion.V1
        return ProtocolVersion.V3


@tag_manager.register
@dataclass
class ExtXByteRange(Tag):
    PREFIX = "#EXT-X-BYTERANGE:"
    VERSION = ProtocolVersion.V4

    byte_range: ByteRange

    @classmethod
    def from_range(cls, start: int, end: int) -> "ExtXByteRange":
        return cls(ByteRange.from_range(start, end))

    @classmethod
    def _decode(cls, body: str) -> "ExtXByteRange":
        return cls(ByteRange.parse(body))

    def encode(self) -> str:
        return f"{self.PREFIX}{self.byte_range}"


@tag_manager.register
@dataclass
class ExtXDiscontinuity(Tag):
    PREFIX = "#EXT-X-DISCONTINUITY"


def _parse_key_format_versions(value: str) -> Tuple[int, ...]:
    return tuple(parse_uint(version) for version in unquote(value).split("/"))


def _format_key_format_versions(value: Tuple[int, ...]) -> str:
    return quote("/".join(str(version) for version in value))


@tag_manager.register
@dataclass
class ExtXKey(TagWithAttrList):
    """
    How to decrypt the segments that follow. METHOD=NONE is the empty key:
    the following segments are not encrypted.
    """

    PREFIX = "#EXT-X-KEY:"
    ATTRIBUTES = (
        AttributeCodec(
            "METHOD",
            "method",
            lambda v: parse_enum(EncryptionMethod, v),
            required=True,
        ),
        AttributeCodec("URI", "uri", unquote, quote),
        AttributeCodec("IV", "iv", parse_hex, format_hex),
        AttributeCodec(
            "KEYFORMAT", "key_format", lambda v: KeyFormat.parse(unquote(v)), quote
        ),
        AttributeCodec(
            "KEYFORMATVERSIONS",
            "key_format_versions",
            _parse_key_format_versions,
            _format_key_format_versions,
        ),
    )

    method: EncryptionMethod
    uri: Optional[str] = None
    iv: Optional[bytes] = None
    key_format: Optional[Union[KeyFormat, str]] = None
    key_format_versions: Optional[Tuple[int, ...]] = None

    @classmethod
    def empty(cls) -> "ExtXKey":
        return cls(EncryptionMethod.NONE)

    @classmethod
    def from_attributes(cls, values: Dict[str, Any], extra: List[Attribute]):
        key = cls(**values)
        if not key.is_empty() and key.uri is None:
            raise MissingAttribute("URI")
        return key

    def is_empty(self) -> bool:
        return self.method is EncryptionMethod.NONE

    def required_version(self) -> ProtocolVersion:
        if self.key_format is not None or self.key_format_versions is not None:
            return ProtocolVersion.V5
        if self.iv is not None:
            return ProtocolVersion.V2
        return ProtocolVersion.V1


def _parse_quoted_byte_range(value: str) -> ByteRange:
    return ByteRange.parse(unquote(value))


@tag_manager.register
@dataclass
class ExtXMap(TagWithAttrList):
    """Where to find the media initialization section of the following segments."""

    PREFIX = "#EXT-X-MAP:"
    VERSION = ProtocolVersion.V6
    ATTRIBUTES = (
        AttributeCodec("URI", "uri", unquote, quote, required=True),
        AttributeCodec(
            "BYTERANGE",
            "byte_range",
            _parse_quoted_byte_range,
            lambda v: quote(str(v)),
        ),
    )

    uri: str
    byte_range: Optional[ByteRange] = None


@tag_manager.register
@dataclass
class ExtXProgramDateTime(Tag):
    PREFIX = "#EXT-X-PROGRAM-DATE-TIME:"

    date_time: datetime

    @classmethod
    def _decode(cls, body: str) -> "ExtXProgramDateTime":
        return cls(parse_datetime(body))

    def encode(self) -> str:
        return f"{self.PREFIX}{format_datetime(self.date_time)}"


def _parse_quoted_datetime(value: str) -> datetime:
    return parse_datetime(unquote(value))


def _format_quoted_datetime(value: datetime) -> str:
    return quote(format_datetime(value))


@tag_manager.register
@dataclass
class ExtXDateRange(TagWithAttrList):
    """
    A range of time with attribute/value pairs attached to it.

    Client attributes (names starting with ``X-``) are kept with their raw
    value, in the order they were declared, and written out between
    PLANNED-DURATION and the SCTE35 attributes.
    """

    PREFIX = "#EXT-X-DATERANGE:"
    ATTRIBUTES = (
        AttributeCodec("ID", "id", unquote, quote, required=True),
        AttributeCodec("CLASS", "class_name", unquote, quote),
        AttributeCodec(
            "START-DATE",
            "start_date",
            _parse_quoted_datetime,
            _format_quoted_datetime,
            required=True,
        ),
        AttributeCodec(
            "END-DATE", "end_date", _parse_quoted_datetime, _format_quoted_datetime
        ),
        AttributeCodec("DURATION", "duration", parse_float, format_float),
        AttributeCodec("PLANNED-DURATION", "planned_duration", parse_float, format_float),
        AttributeCodec("SCTE35-CMD", "scte35_cmd", str),
        AttributeCodec("SCTE35-OUT", "scte35_out", str),
        AttributeCodec("SCTE35-IN", "scte35_in", str),
        AttributeCodec(
            "END-ON-NEXT", "end_on_next", parse_yes_no, lambda v: "YES", default=False
        ),
    )

    id: str
    start_date: datetime
    class_name: Optional[str] = None
    end_date: Optional[datetime] = None
    duration: Optional[float] = None
    planned_duration: Optional[float] = None
    client_attributes: Dict[str, str] = field(default_factory=dict)
    scte35_cmd: Optional[str] = None
    scte35_out: Optional[str] = None
    scte35_in: Optional[str] = None
    end_on_next: bool = False

    @classmethod
    def keeps_attribute(cls, key: str) -> bool:
        return key.startswith("X-")

    @classmethod
    def from_attributes(cls, values: Dict[str, Any], extra: List[Attribute]):
        return cls(**values, client_attributes={attr.key: attr.value for attr in extra})

    def attributes(self) -> List[Attribute]:
        attrs = super().attributes()
        position = len(attrs)
        for i, attr in enumerate(attrs):
            if attr.key.startswith("SCTE35-") or attr.key == "END-ON-NEXT":
                position = i
                break
        attrs[position:position] = [
            Attribute(key, value) for key, value in self.client_attributes.items()
        ]
        return attrs
