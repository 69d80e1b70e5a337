"""
Turns the segment drafts of a playlist body into numbered segments.

The sequencer is a left-to-right fold. Its state is what one segment hands
down to the next one:

- the number the next segment gets,
- the keys in effect, replaced by every segment declaring key tags,
- the offset right after the previous byte range, from which a byte range
  without offset continues.
"""

from typing import Iterable, List, Optional
import logging

from . import config
from .errors import InconsistentSegmentNumbering, MissingByteRangeOffset
from .media_segment import MediaSegment, MediaSegmentDraft
from .tags import ExtXByteRange, ExtXKey
from .types import ByteRange

logger = logging.getLogger(__name__)


class SegmentSequencer:
    def __init__(
        self,
        start_number: int = 0,
        keys: Iterable[ExtXKey] = (),
        previous_byte_range_end: Optional[int] = None,
        strict: Optional[bool] = None,
    ) -> None:
        self.next_number = start_number
        self.pending_keys: List[ExtXKey] = [key for key in keys if not key.is_empty()]
        self.previous_byte_range_end = previous_byte_range_end
        self.strict = config.strict_numbering if strict is None else strict

    def sequence(self, drafts: Iterable[MediaSegmentDraft]) -> List[MediaSegment]:
        return [self.feed(draft) for draft in drafts]

    def feed(self, draft: MediaSegmentDraft) -> MediaSegment:
        draft.check()
        number = self.assign_number(draft)
        keys = self.merge_keys(draft)
        byte_range = self.resolve_byte_range(draft, number)
        if draft.has_discontinuity:
            self.previous_byte_range_end = None
        self.next_number = number + 1

        logger.debug(f"Segment {number}: {draft.uri}")
        return MediaSegment(
            inf=draft.inf,
            uri=draft.uri,
            number=number,
            explicit_number=draft.explicit_number,
            keys=keys,
            map=draft.map,
            byte_range=byte_range,
            date_range=draft.date_range,
            has_discontinuity=draft.has_discontinuity,
            program_date_time=draft.program_date_time,
        )

    def assign_number(self, draft: MediaSegmentDraft) -> int:
        if not draft.explicit_number:
            return self.next_number
        if self.strict and draft.number != self.next_number:
            raise InconsistentSegmentNumbering(
                f"segment {draft.uri!r} is pinned to number {draft.number}, "
                f"{self.next_number} was expected",
                tag="segment",
            )
        return draft.number

    def merge_keys(self, draft: MediaSegmentDraft) -> List[ExtXKey]:
        if draft.keys is not None:
            self.pending_keys = [key for key in draft.keys if not key.is_empty()]
        return list(self.pending_keys)

    def resolve_byte_range(
        self, draft: MediaSegmentDraft, number: int
    ) -> Optional[ExtXByteRange]:
        if draft.byte_range is None:
            self.previous_byte_range_end = None
            return None
        byte_range = draft.byte_range.byte_range
        start = byte_range.start
        if start is None:
            if self.previous_byte_range_end is None:
                raise MissingByteRangeOffset(
                    f"byte range {byte_range} of segment {number} has no offset "
                    "and does not follow another byte range",
                    tag=ExtXByteRange.tag_name(),
                )
            start = self.previous_byte_range_end
        resolved = ByteRange(byte_range.length, start)
        self.previous_byte_range_end = resolved.end
        return ExtXByteRange(resolved)
