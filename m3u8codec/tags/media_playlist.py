from dataclasses import dataclass

from ..tag import Tag, tag_manager
from ..types import PlaylistType, ProtocolVersion, parse_enum, parse_uint


@tag_manager.register
@dataclass
class ExtXTargetDuration(Tag):
    """Upper bound of every segment duration, in whole seconds."""

    PREFIX = "#EXT-X-TARGETDURATION:"

    duration: int

    @classmethod
    def _decode(cls, body: str) -> "ExtXTargetDuration":
        return cls(parse_uint(body))

    def encode(self) -> str:
        return f"{self.PREFIX}{self.duration}"


@tag_manager.register
@dataclass
class ExtXMediaSequence(Tag):
    """Number of the first segment of the playlist."""

    PREFIX = "#EXT-X-MEDIA-SEQUENCE:"

    number: int = 0

    @classmethod
    def _decode(cls, body: str) -> "ExtXMediaSequence":
        return cls(parse_uint(body))

    def encode(self) -> str:
        return f"{self.PREFIX}{self.number}"


@tag_manager.register
@dataclass
class ExtXDiscontinuitySequence(Tag):
    PREFIX = "#EXT-X-DISCONTINUITY-SEQUENCE:"

    number: int = 0

    @classmethod
    def _decode(cls, body: str) -> "ExtXDiscontinuitySequence":
        return cls(parse_uint(body))

    def encode(self) -> str:
        return f"{self.PREFIX}{self.number}"


@tag_manager.register
@dataclass
class ExtXEndList(Tag):
    PREFIX = "#EXT-X-ENDLIST"


@tag_manager.register
@dataclass
class ExtXPlaylistType(Tag):
    PREFIX = "#EXT-X-PLAYLIST-TYPE:"

    playlist_type: PlaylistType

    @classmethod
    def _decode(cls, body: str) -> "ExtXPlaylistType":
        return cls(parse_enum(PlaylistType, body))

    def encode(self) -> str:
        return f"{self.PREFIX}{self.playlist_type}"


@tag_manager.register
@dataclass
class ExtXIFramesOnly(Tag):
    """Every segment holds a single I-frame."""

    PREFIX = "#EXT-X-I-FRAMES-ONLY"
    VERSION = ProtocolVersion.V4
