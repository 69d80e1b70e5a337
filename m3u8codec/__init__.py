from .playlist import Playlist, M3U8Line, TagLine, URILine
from .master_playlist import MasterPlaylist, VariantStream
from .media_playlist import MediaPlaylist
from .media_segment import MediaSegment, MediaSegmentDraft
from .sequencer import SegmentSequencer
from .attribute import AttributePairs
from .types import ByteRange, ProtocolVersion, Resolution, required_version
from . import config, errors, tag, tags

__all__ = [
    "tag",
    "tags",
    "config",
    "errors",
    "Playlist",
    "MasterPlaylist",
    "MediaPlaylist",
    "VariantStream",
    "MediaSegment",
    "MediaSegmentDraft",
    "SegmentSequencer",
    "AttributePairs",
    "ByteRange",
    "ProtocolVersion",
    "Resolution",
    "required_version",
]
