"""
Lines of a playlist and what master and media playlists have in common.

M3U8Line
    BlankLine
    CommentLine
    TagLine
    URILine

Lines starting with '#EXT' are tags, other lines starting with '#' are
comments and are dropped, any other non-blank line is a URI.
"""

from dataclasses import dataclass
from typing import List, Optional
import logging

from . import config
from .errors import MissingTag, UnexpectedTag
from .tag import RawTag, Tag, tag_manager
from .tags import ExtM3u, ExtXIFrameStreamInf, ExtXStreamInf, ExtXVersion
from .types import ProtocolVersion

logger = logging.getLogger(__name__)


@dataclass
class M3U8Line:
    line_text: str

    @staticmethod
    def parse(line_text: str) -> "M3U8Line":
        if len(line_text.strip()) == 0:
            return BlankLine(line_text)
        if line_text.startswith("#"):
            # Lines that start with the character '#' are either comments or tags.
            if line_text.startswith("#EXT"):
                return TagLine(line_text)
            else:
                return CommentLine(line_text)
        else:
            return URILine(line_text)


class BlankLine(M3U8Line):
    pass


class CommentLine(M3U8Line):
    pass


class TagLine(M3U8Line):
    def __init__(self, line_text: str):
        super().__init__(line_text)
        self.tag: Tag = tag_manager.decode(line_text)


class URILine(M3U8Line):
    pass


def is_master_playlist(lines: List[M3U8Line]) -> bool:
    for line in lines:
        if isinstance(line, TagLine) and isinstance(
            line.tag, (ExtXStreamInf, ExtXIFrameStreamInf)
        ):
            return True
    return False


class Playlist:
    @classmethod
    def parse(
        cls,
        content: str,
        strict_numbering: Optional[bool] = None,
        unknown_tags: Optional[str] = None,
    ) -> "Playlist":
        """Parse either kind of playlist, whichever `content` is."""
        from .master_playlist import MasterPlaylist
        from .media_playlist import MediaPlaylist

        lines = cls.split_lines(content)
        if is_master_playlist(lines):
            logger.info("Master playlist detected")
            return MasterPlaylist.from_lines(lines, unknown_tags)
        logger.info("Media playlist detected")
        return MediaPlaylist.from_lines(lines, strict_numbering, unknown_tags)

    @staticmethod
    def split_lines(content: str) -> List[M3U8Line]:
        """Lines following the #EXTM3U header, which has to be the first line."""
        lines = [M3U8Line.parse(line) for line in content.splitlines()]
        if (
            len(lines) == 0
            or not isinstance(lines[0], TagLine)
            or not isinstance(lines[0].tag, ExtM3u)
        ):
            raise MissingTag(
                "playlist does not start with #EXTM3U", tag=ExtM3u.tag_name()
            )
        return lines[1:]

    @staticmethod
    def unknown_tag_policy(unknown_tags: Optional[str]) -> str:
        policy = config.unknown_tag_policy if unknown_tags is None else unknown_tags
        if policy not in config.UNKNOWN_TAG_POLICIES:
            raise ValueError(
                f"{policy!r} is not one of {', '.join(config.UNKNOWN_TAG_POLICIES)}"
            )
        return policy

    @staticmethod
    def handle_unknown(line: TagLine, policy: str, unknown_tags: List[str]):
        if isinstance(line.tag, ExtM3u):
            raise UnexpectedTag("duplicate #EXTM3U", tag=ExtM3u.tag_name())
        if isinstance(line.tag, RawTag):
            name = line.tag.name
        else:
            name = line.tag.tag_name()
        if policy == "reject":
            raise UnexpectedTag(f"unexpected tag {line.line_text!r}", tag=name)
        logger.warning(f"Preserve {name} tag {line.line_text!r}")
        unknown_tags.append(line.line_text)

    def header_lines(self) -> List[str]:
        lines = [str(ExtM3u())]
        version = self.required_version()
        if version > ProtocolVersion.V1:
            lines.append(str(ExtXVersion(version)))
        return lines

    def lines(self) -> List[str]:
        raise NotImplementedError

    def required_version(self) -> ProtocolVersion:
        raise NotImplementedError

    def encode(self) -> str:
        return "".join(line + "\n" for line in self.lines())

    def __str__(self):
        return self.encode()
