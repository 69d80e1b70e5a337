from datetime import datetime, timezone

import pytest

from m3u8codec.errors import MissingAttribute, MissingByteRangeOffset
from m3u8codec.media_segment import MediaSegment, MediaSegmentDraft
from m3u8codec.tags import (
    ExtInf,
    ExtXByteRange,
    ExtXDateRange,
    ExtXKey,
    ExtXMap,
    ExtXProgramDateTime,
)
from m3u8codec.types import ByteRange, EncryptionMethod, ProtocolVersion


class TestMediaSegment:

    def test_encode(self):
        segment = MediaSegment(
            map=ExtXMap("https://www.example.com/"),
            byte_range=ExtXByteRange.from_range(5, 25),
            has_discontinuity=True,
            inf=ExtInf(4),
            uri="http://www.uri.com/",
        )
        assert str(segment) == (
            '#EXT-X-MAP:URI="https://www.example.com/"\n'
            "#EXT-X-BYTERANGE:20@5\n"
            "#EXT-X-DISCONTINUITY\n"
            "#EXTINF:4,\n"
            "http://www.uri.com/\n"
        )

    def test_encode_all_lines(self):
        date = datetime(2014, 3, 5, 11, 15, tzinfo=timezone.utc)
        segment = MediaSegment(
            inf=ExtInf(10),
            uri="a.ts",
            date_range=ExtXDateRange("ad", date),
            program_date_time=ExtXProgramDateTime(date),
        )
        assert segment.lines() == [
            '#EXT-X-DATERANGE:ID="ad",START-DATE="2014-03-05T11:15:00Z"',
            "#EXT-X-PROGRAM-DATE-TIME:2014-03-05T11:15:00Z",
            "#EXTINF:10,",
            "a.ts",
        ]

    def test_keys_not_encoded_by_segment(self):
        segment = MediaSegment(
            inf=ExtInf(10), uri="a.ts", keys=[ExtXKey(EncryptionMethod.AES_128, uri="k")]
        )
        assert segment.encode() == "#EXTINF:10,\na.ts\n"
        assert segment.is_encrypted()

    def test_empty_uri(self):
        with pytest.raises(MissingAttribute):
            MediaSegment(inf=ExtInf(1), uri="")

    def test_required_version(self):
        assert MediaSegment(inf=ExtInf(4), uri="a").required_version() is ProtocolVersion.V1
        assert MediaSegment(inf=ExtInf(4.5), uri="a").required_version() is ProtocolVersion.V3
        segment = MediaSegment(
            inf=ExtInf(4), uri="a", byte_range=ExtXByteRange(ByteRange(10, 0))
        )
        assert segment.required_version() is ProtocolVersion.V4
        segment.map = ExtXMap("init.mp4")
        assert segment.required_version() is ProtocolVersion.V6

    def test_key_version(self):
        key = ExtXKey(EncryptionMethod.AES_128, uri="k", iv=bytes(16))
        segment = MediaSegment(inf=ExtInf(4), uri="a", keys=[key])
        assert segment.required_version() is ProtocolVersion.V2


class TestMediaSegmentDraft:

    def test_build(self):
        segment = MediaSegment.draft(
            map=ExtXMap("https://www.example.com/"),
            byte_range=ExtXByteRange.from_range(5, 25),
            has_discontinuity=True,
            inf=ExtInf(4),
            uri="http://www.uri.com/",
        ).build()
        assert segment.number == 0
        assert segment.explicit_number is False
        assert segment.byte_range.byte_range == ByteRange(20, 5)
        assert segment.encode().count("\n") == 5

    def test_pinned_number(self):
        segment = MediaSegmentDraft(number=7, inf=ExtInf(4), uri="a").build()
        assert segment.number == 7
        assert segment.explicit_number is True

    def test_push_key(self):
        draft = MediaSegmentDraft()
        assert draft.keys is None
        key = ExtXKey(EncryptionMethod.AES_128, uri="k")
        draft.push_key(key).push_key(ExtXKey.empty())
        assert draft.keys == [key, ExtXKey.empty()]

    def test_missing_uri(self):
        with pytest.raises(MissingAttribute) as exc_info:
            MediaSegmentDraft(inf=ExtInf(4)).build()
        assert exc_info.value.name == "URI"

    def test_missing_inf(self):
        with pytest.raises(MissingAttribute) as exc_info:
            MediaSegmentDraft(uri="a").build()
        assert exc_info.value.name == "#EXTINF"

    def test_byte_range_without_offset(self):
        draft = MediaSegmentDraft(inf=ExtInf(4), uri="a", byte_range=ExtXByteRange(ByteRange(5)))
        with pytest.raises(MissingByteRangeOffset):
            draft.build()

    def test_blank(self):
        assert MediaSegmentDraft().is_blank()
        assert not MediaSegmentDraft(has_discontinuity=True).is_blank()
