from dataclasses import dataclass, field
from typing import List, Optional
import logging

from .errors import MissingAttribute, MissingTag
from .media_segment import MediaSegment, MediaSegmentDraft
from .playlist import BlankLine, CommentLine, M3U8Line, Playlist, URILine
from .sequencer import SegmentSequencer
from .tags import (
    ExtInf,
    ExtXByteRange,
    ExtXDateRange,
    ExtXDiscontinuity,
    ExtXDiscontinuitySequence,
    ExtXEndList,
    ExtXIFramesOnly,
    ExtXIndependentSegments,
    ExtXKey,
    ExtXMap,
    ExtXMediaSequence,
    ExtXPlaylistType,
    ExtXProgramDateTime,
    ExtXStart,
    ExtXTargetDuration,
    ExtXVersion,
)
from .types import PlaylistType, ProtocolVersion, required_version

logger = logging.getLogger(__name__)


@dataclass
class MediaPlaylist(Playlist):
    """
    A list of media segments and the tags describing the playlist itself.

    `declared_version` is what the #EXT-X-VERSION line of the parsed text
    said; it is not used for encoding, the version line is always derived
    from `required_version()`.
    """

    target_duration: int
    segments: List[MediaSegment] = field(default_factory=list)
    media_sequence: int = 0
    discontinuity_sequence: int = 0
    playlist_type: Optional[PlaylistType] = None
    i_frames_only: bool = False
    independent_segments: bool = False
    start: Optional[ExtXStart] = None
    has_end_list: bool = False
    unknown_tags: List[str] = field(default_factory=list)
    declared_version: Optional[ProtocolVersion] = field(default=None, compare=False)

    @classmethod
    def parse(
        cls,
        content: str,
        strict_numbering: Optional[bool] = None,
        unknown_tags: Optional[str] = None,
    ) -> "MediaPlaylist":
        return cls.from_lines(cls.split_lines(content), strict_numbering, unknown_tags)

    @classmethod
    def from_lines(
        cls,
        lines: List[M3U8Line],
        strict_numbering: Optional[bool] = None,
        unknown_tags: Optional[str] = None,
    ) -> "MediaPlaylist":
        policy = cls.unknown_tag_policy(unknown_tags)
        target_duration = None
        header = {}
        preserved: List[str] = []
        drafts: List[MediaSegmentDraft] = []
        draft = MediaSegmentDraft()

        for line in lines:
            if isinstance(line, (BlankLine, CommentLine)):
                continue
            if isinstance(line, URILine):
                draft.uri = line.line_text
                drafts.append(draft)
                draft = MediaSegmentDraft()
                continue

            tag = line.tag
            if isinstance(tag, ExtInf):
                draft.inf = tag
            elif isinstance(tag, ExtXByteRange):
                draft.byte_range = tag
            elif isinstance(tag, ExtXDiscontinuity):
                draft.has_discontinuity = True
            elif isinstance(tag, ExtXKey):
                draft.push_key(tag)
            elif isinstance(tag, ExtXMap):
                draft.map = tag
            elif isinstance(tag, ExtXProgramDateTime):
                draft.program_date_time = tag
            elif isinstance(tag, ExtXDateRange):
                draft.date_range = tag
            elif isinstance(tag, ExtXTargetDuration):
                target_duration = tag.duration
            elif isinstance(tag, ExtXMediaSequence):
                header["media_sequence"] = tag.number
            elif isinstance(tag, ExtXDiscontinuitySequence):
                header["discontinuity_sequence"] = tag.number
            elif isinstance(tag, ExtXPlaylistType):
                header["playlist_type"] = tag.playlist_type
            elif isinstance(tag, ExtXIFramesOnly):
                header["i_frames_only"] = True
            elif isinstance(tag, ExtXIndependentSegments):
                header["independent_segments"] = True
            elif isinstance(tag, ExtXStart):
                header["start"] = tag
            elif isinstance(tag, ExtXEndList):
                header["has_end_list"] = True
            elif isinstance(tag, ExtXVersion):
                header["declared_version"] = tag.version
            else:
                cls.handle_unknown(line, policy, preserved)

        if not draft.is_blank():
            raise MissingAttribute("URI", tag="segment")
        if target_duration is None:
            raise MissingTag(
                "media playlist has no target duration",
                tag=ExtXTargetDuration.tag_name(),
            )

        sequencer = SegmentSequencer(
            start_number=header.get("media_sequence", 0), strict=strict_numbering
        )
        playlist = cls(
            target_duration=target_duration,
            segments=sequencer.sequence(drafts),
            unknown_tags=preserved,
            **header,
        )
        logger.info(
            f"Parsed media playlist with {len(playlist.segments)} segments, "
            f"version {playlist.required_version()}"
        )
        return playlist

    def required_version(self) -> ProtocolVersion:
        return required_version(
            self.segments,
            self.i_frames_only and ExtXIFramesOnly(),
            self.start,
        )

    def lines(self) -> List[str]:
        lines = self.header_lines()
        lines.append(str(ExtXTargetDuration(self.target_duration)))
        if self.media_sequence != 0:
            lines.append(str(ExtXMediaSequence(self.media_sequence)))
        if self.discontinuity_sequence != 0:
            lines.append(str(ExtXDiscontinuitySequence(self.discontinuity_sequence)))
        if self.playlist_type is not None:
            lines.append(str(ExtXPlaylistType(self.playlist_type)))
        if self.i_frames_only:
            lines.append(str(ExtXIFramesOnly()))
        if self.independent_segments:
            lines.append(str(ExtXIndependentSegments()))
        if self.start is not None:
            lines.append(str(self.start))
        lines.extend(self.unknown_tags)

        previous_keys: List[ExtXKey] = []
        for segment in self.segments:
            if segment.keys != previous_keys:
                if segment.keys:
                    lines.extend(str(key) for key in segment.keys)
                else:
                    # an unencrypted segment after an encrypted one
                    lines.append(str(ExtXKey.empty()))
                previous_keys = segment.keys
            lines.extend(segment.lines())

        if self.has_end_list:
            lines.append(str(ExtXEndList()))
        return lines
