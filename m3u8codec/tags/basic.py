from dataclasses import dataclass

from ..tag import AttributeCodec, Tag, TagWithAttrList, tag_manager
from ..types import (
    ProtocolVersion,
    format_float,
    parse_enum,
    parse_float,
    parse_uint,
    parse_yes_no,
)


@tag_manager.register
@dataclass
class ExtM3u(Tag):
    PREFIX = "#EXTM3U"


@tag_manager.register
@dataclass
class ExtXVersion(Tag):
    PREFIX = "#EXT-X-VERSION:"

    version: ProtocolVersion = ProtocolVersion.V1

    @classmethod
    def _decode(cls, body: str) -> "ExtXVersion":
        return cls(parse_enum(ProtocolVersion, parse_uint(body)))

    def encode(self) -> str:
        return f"{self.PREFIX}{self.version}"


@tag_manager.register
@dataclass
class ExtXIndependentSegments(Tag):
    PREFIX = "#EXT-X-INDEPENDENT-SEGMENTS"


@tag_manager.register
@dataclass
class ExtXStart(TagWithAttrList):
    """Preferred point at which to start playing, relative to the playlist."""

    PREFIX = "#EXT-X-START:"
    ATTRIBUTES = (
        AttributeCodec(
            "TIME-OFFSET",
            "time_offset",
            lambda v: parse_float(v, signed=True),
            format_float,
            required=True,
        ),
        AttributeCodec(
            "PRECISE", "precise", parse_yes_no, lambda v: "YES", default=False
        ),
    )

    time_offset: float
    precise: bool = False
