"""
Primitive value decoders and the version rule.
"""

from datetime import datetime, timedelta, timezone

import pytest

from m3u8codec.errors import (
    InvalidDateTime,
    InvalidEnumValue,
    InvalidNumber,
    InvalidQuotedString,
    InvalidResolution,
)
from m3u8codec.types import (
    ByteRange,
    EncryptionMethod,
    HdcpLevel,
    KeyFormat,
    ProtocolVersion,
    Resolution,
    format_datetime,
    format_float,
    format_hex,
    parse_datetime,
    parse_enum,
    parse_float,
    parse_hex,
    parse_uint,
    parse_yes_no,
    required_version,
    unquote,
)


# =============================================================================
# Numbers and strings
# =============================================================================

class TestNumbers:

    def test_uint(self):
        assert parse_uint("123") == 123
        assert parse_uint("0") == 0

    @pytest.mark.parametrize("text", ["", "12a", "-1", "1.5", " 1"])
    def test_invalid_uint(self, text):
        with pytest.raises(InvalidNumber):
            parse_uint(text)

    def test_float(self):
        assert parse_float("10.5") == 10.5
        assert parse_float("10") == 10.0
        assert parse_float("-1.5", signed=True) == -1.5

    def test_unsigned_float_rejects_sign(self):
        with pytest.raises(InvalidNumber):
            parse_float("-1.5")

    def test_format_float(self):
        assert format_float(4.0) == "4"
        assert format_float(10) == "10"
        assert format_float(5.005) == "5.005"
        assert format_float(-12.5) == "-12.5"

    @pytest.mark.parametrize(
        "value, text",
        [(0.00001, "0.00001"), (-0.00005, "-0.00005"), (1e-7, "0.0000001")],
    )
    def test_format_small_float(self, value, text):
        assert format_float(value) == text
        assert parse_float(text, signed=True) == value

    def test_hex(self):
        value = parse_hex("0x10ef8f758ca555115584bb5b3c687f52")
        assert len(value) == 16
        assert format_hex(value) == "0x10ef8f758ca555115584bb5b3c687f52"
        assert parse_hex("0X10EF8F758CA555115584BB5B3C687F52") == value

    @pytest.mark.parametrize("text", ["10ef", "0x10ef", "0xZZef8f758ca555115584bb5b3c687f52"])
    def test_invalid_hex(self, text):
        with pytest.raises(InvalidNumber):
            parse_hex(text)


class TestQuotedString:

    def test_unquote(self):
        assert unquote('"abc"') == "abc"
        assert unquote('""') == ""

    @pytest.mark.parametrize("text", ["abc", '"abc', 'abc"', '"a"b"', '"'])
    def test_invalid(self, text):
        with pytest.raises(InvalidQuotedString):
            unquote(text)


# =============================================================================
# Enumerations
# =============================================================================

class TestEnums:

    def test_exact_match(self):
        assert parse_enum(EncryptionMethod, "AES-128") is EncryptionMethod.AES_128
        assert parse_enum(HdcpLevel, "TYPE-0") is HdcpLevel.TYPE_0

    def test_case_sensitive(self):
        with pytest.raises(InvalidEnumValue):
            parse_enum(EncryptionMethod, "aes-128")

    def test_unknown_value(self):
        with pytest.raises(InvalidEnumValue) as exc_info:
            parse_enum(HdcpLevel, "TYPE-2")
        assert "TYPE-0" in str(exc_info.value)

    def test_key_format_keeps_unknown(self):
        assert KeyFormat.parse("identity") is KeyFormat.IDENTITY
        assert KeyFormat.parse("com.apple.streamingkeydelivery") == "com.apple.streamingkeydelivery"

    def test_yes_no(self):
        assert parse_yes_no("YES") is True
        assert parse_yes_no("NO") is False
        with pytest.raises(InvalidEnumValue):
            parse_yes_no("yes")


# =============================================================================
# Composite values
# =============================================================================

class TestResolution:

    def test_parse(self):
        assert Resolution.parse("1920x1080") == Resolution(1920, 1080)
        assert str(Resolution(640, 360)) == "640x360"

    @pytest.mark.parametrize("text", ["1920", "1920x", "x1080", "axb", "1920X1080"])
    def test_invalid(self, text):
        with pytest.raises(InvalidResolution):
            Resolution.parse(text)


class TestByteRange:

    def test_with_offset(self):
        byte_range = ByteRange.parse("9@2")
        assert byte_range == ByteRange(9, 2)
        assert byte_range.end == 11
        assert str(byte_range) == "9@2"

    def test_without_offset(self):
        byte_range = ByteRange.parse("5")
        assert byte_range == ByteRange(5)
        assert byte_range.start is None
        assert byte_range.end is None
        assert str(byte_range) == "5"

    def test_from_range(self):
        assert ByteRange.from_range(5, 25) == ByteRange(20, 5)

    def test_from_reversed_range(self):
        with pytest.raises(ValueError):
            ByteRange.from_range(25, 5)

    @pytest.mark.parametrize("text", ["a@2", "5@", "@2", ""])
    def test_invalid(self, text):
        with pytest.raises(InvalidNumber):
            ByteRange.parse(text)


class TestDateTime:

    def test_parse_with_offset(self):
        value = parse_datetime("2010-02-19T14:54:23.031+08:00")
        assert value == datetime(
            2010, 2, 19, 14, 54, 23, 31000, tzinfo=timezone(timedelta(hours=8))
        )

    def test_format_milliseconds(self):
        value = datetime(2010, 2, 19, 14, 54, 23, 31000, tzinfo=timezone(timedelta(hours=8)))
        assert format_datetime(value) == "2010-02-19T14:54:23.031+08:00"

    def test_utc(self):
        value = parse_datetime("2014-03-05T11:15:00Z")
        assert value == datetime(2014, 3, 5, 11, 15, tzinfo=timezone.utc)
        assert format_datetime(value) == "2014-03-05T11:15:00Z"

    def test_invalid(self):
        with pytest.raises(InvalidDateTime):
            parse_datetime("yesterday")


# =============================================================================
# Versions
# =============================================================================

class TestRequiredVersion:

    def test_baseline(self):
        assert required_version() is ProtocolVersion.V1
        assert required_version(None, False, []) is ProtocolVersion.V1

    def test_maximum(self):
        assert required_version(ProtocolVersion.V3, None, [ProtocolVersion.V2, ProtocolVersion.V4]) \
            is ProtocolVersion.V4

    def test_ordered(self):
        assert ProtocolVersion.V1 < ProtocolVersion.V7
        assert str(ProtocolVersion.V3) == "3"
