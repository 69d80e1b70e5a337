from dataclasses import dataclass, field
from typing import List, Optional

from .errors import MissingAttribute
from .tags import (
    ExtInf,
    ExtXByteRange,
    ExtXDateRange,
    ExtXDiscontinuity,
    ExtXKey,
    ExtXMap,
    ExtXProgramDateTime,
)
from .types import ProtocolVersion, required_version


@dataclass
class MediaSegment:
    """
    A chunk of media, addressed by `uri` and optionally narrowed to a
    `byte_range` of that resource.

    `number` is given by the sequencer: the media sequence of the playlist
    for the first segment, then one more for each following segment.
    `keys` is the resolved list of keys the segment is encrypted with, empty
    for an unencrypted segment.
    """

    inf: ExtInf
    uri: str
    number: int = 0
    explicit_number: bool = False
    keys: List[ExtXKey] = field(default_factory=list)
    map: Optional[ExtXMap] = None
    byte_range: Optional[ExtXByteRange] = None
    date_range: Optional[ExtXDateRange] = None
    has_discontinuity: bool = False
    program_date_time: Optional[ExtXProgramDateTime] = None

    def __post_init__(self):
        if not self.uri:
            raise MissingAttribute("URI", tag="segment")

    @staticmethod
    def draft(**kwargs) -> "MediaSegmentDraft":
        return MediaSegmentDraft(**kwargs)

    def is_encrypted(self) -> bool:
        return len(self.keys) > 0

    def lines(self) -> List[str]:
        # keys are written by the playlist, only where they change
        lines = []
        if self.map is not None:
            lines.append(str(self.map))
        if self.byte_range is not None:
            lines.append(str(self.byte_range))
        if self.date_range is not None:
            lines.append(str(self.date_range))
        if self.has_discontinuity:
            lines.append(str(ExtXDiscontinuity()))
        if self.program_date_time is not None:
            lines.append(str(self.program_date_time))
        lines.append(str(self.inf))
        lines.append(self.uri)
        return lines

    def encode(self) -> str:
        return "".join(line + "\n" for line in self.lines())

    def __str__(self):
        return self.encode()

    def required_version(self) -> ProtocolVersion:
        return required_version(
            self.keys,
            self.map,
            self.byte_range,
            self.date_range,
            self.has_discontinuity and ExtXDiscontinuity(),
            self.program_date_time,
            self.inf,
        )


@dataclass
class MediaSegmentDraft:
    """
    A segment as it is being read: every slot is optional until the
    sequencer (or `build`) turns it into a `MediaSegment`.

    `keys` is None when no key tag was declared for the segment, which is
    not the same as an empty list: the former inherits the keys of the
    previous segment.
    `number` is only set to pin the segment to a number of its own.
    """

    number: Optional[int] = None
    keys: Optional[List[ExtXKey]] = None
    map: Optional[ExtXMap] = None
    byte_range: Optional[ExtXByteRange] = None
    date_range: Optional[ExtXDateRange] = None
    has_discontinuity: bool = False
    program_date_time: Optional[ExtXProgramDateTime] = None
    inf: Optional[ExtInf] = None
    uri: Optional[str] = None

    @property
    def explicit_number(self) -> bool:
        return self.number is not None

    def push_key(self, key: ExtXKey) -> "MediaSegmentDraft":
        if self.keys is None:
            self.keys = []
        self.keys.append(key)
        return self

    def is_blank(self) -> bool:
        return self == MediaSegmentDraft()

    def check(self):
        if self.inf is None:
            raise MissingAttribute(ExtInf.tag_name(), tag="segment")
        if not self.uri:
            raise MissingAttribute("URI", tag="segment")

    def build(self) -> MediaSegment:
        """Finalize a single segment, outside of any playlist."""
        from .sequencer import SegmentSequencer

        return SegmentSequencer().feed(self)
