from dataclasses import dataclass, field
from typing import List, Optional
import logging

from .errors import MissingAttribute, MissingTag
from .playlist import BlankLine, CommentLine, M3U8Line, Playlist, URILine
from .tags import (
    ExtXIFrameStreamInf,
    ExtXIndependentSegments,
    ExtXStart,
    ExtXStreamInf,
    ExtXVersion,
)
from .types import ProtocolVersion, required_version

logger = logging.getLogger(__name__)


@dataclass
class VariantStream:
    stream_inf: ExtXStreamInf
    uri: str

    def lines(self) -> List[str]:
        return [str(self.stream_inf), self.uri]

    def required_version(self) -> ProtocolVersion:
        return self.stream_inf.required_version()


@dataclass
class MasterPlaylist(Playlist):
    variant_streams: List[VariantStream] = field(default_factory=list)
    i_frame_streams: List[ExtXIFrameStreamInf] = field(default_factory=list)
    independent_segments: bool = False
    start: Optional[ExtXStart] = None
    unknown_tags: List[str] = field(default_factory=list)
    declared_version: Optional[ProtocolVersion] = field(default=None, compare=False)

    @classmethod
    def parse(
        cls, content: str, unknown_tags: Optional[str] = None
    ) -> "MasterPlaylist":
        return cls.from_lines(cls.split_lines(content), unknown_tags)

    @classmethod
    def from_lines(
        cls, lines: List[M3U8Line], unknown_tags: Optional[str] = None
    ) -> "MasterPlaylist":
        policy = cls.unknown_tag_policy(unknown_tags)
        playlist = cls()
        stream_inf: Optional[ExtXStreamInf] = None

        for line in lines:
            if isinstance(line, (BlankLine, CommentLine)):
                continue
            if isinstance(line, URILine):
                if stream_inf is None:
                    raise MissingTag(
                        f"URI {line.line_text!r} does not follow a variant stream tag",
                        tag=ExtXStreamInf.tag_name(),
                    )
                playlist.variant_streams.append(VariantStream(stream_inf, line.line_text))
                stream_inf = None
                continue

            tag = line.tag
            if stream_inf is not None:
                raise MissingAttribute("URI", tag=ExtXStreamInf.tag_name())
            if isinstance(tag, ExtXStreamInf):
                stream_inf = tag
            elif isinstance(tag, ExtXIFrameStreamInf):
                playlist.i_frame_streams.append(tag)
            elif isinstance(tag, ExtXIndependentSegments):
                playlist.independent_segments = True
            elif isinstance(tag, ExtXStart):
                playlist.start = tag
            elif isinstance(tag, ExtXVersion):
                playlist.declared_version = tag.version
            else:
                cls.handle_unknown(line, policy, playlist.unknown_tags)

        if stream_inf is not None:
            raise MissingAttribute("URI", tag=ExtXStreamInf.tag_name())
        logger.info(
            f"Parsed master playlist with {len(playlist.variant_streams)} variant streams"
        )
        return playlist

    def required_version(self) -> ProtocolVersion:
        return required_version(self.variant_streams, self.i_frame_streams, self.start)

    def lines(self) -> List[str]:
        lines = self.header_lines()
        if self.independent_segments:
            lines.append(str(ExtXIndependentSegments()))
        if self.start is not None:
            lines.append(str(self.start))
        lines.extend(self.unknown_tags)
        for variant_stream in self.variant_streams:
            lines.extend(variant_stream.lines())
        lines.extend(str(tag) for tag in self.i_frame_streams)
        return lines
