from dataclasses import dataclass
from typing import Optional, Union

from ..tag import AttributeCodec, TagWithAttrList, tag_manager
from ..types import (
    ClosedCaptions,
    HdcpLevel,
    Resolution,
    format_float,
    parse_enum,
    parse_float,
    parse_uint,
    quote,
    unquote,
)


def _parse_closed_captions(value: str) -> Union[ClosedCaptions, str]:
    if value == "NONE":
        return ClosedCaptions.NONE
    return unquote(value)


def _format_closed_captions(value: Union[ClosedCaptions, str]) -> str:
    if value is ClosedCaptions.NONE:
        return str(value)
    return quote(value)


_bandwidth = AttributeCodec("BANDWIDTH", "bandwidth", parse_uint, required=True)
_average_bandwidth = AttributeCodec("AVERAGE-BANDWIDTH", "average_bandwidth", parse_uint)
_codecs = AttributeCodec("CODECS", "codecs", unquote, quote)
_resolution = AttributeCodec("RESOLUTION", "resolution", Resolution.parse)
_hdcp_level = AttributeCodec("HDCP-LEVEL", "hdcp_level", lambda v: parse_enum(HdcpLevel, v))
_video = AttributeCodec("VIDEO", "video", unquote, quote)


@tag_manager.register
@dataclass
class ExtXStreamInf(TagWithAttrList):
    """
    A variant stream. The URI of its media playlist is the line following
    the tag, so it is kept by the master playlist rather than here.
    """

    PREFIX = "#EXT-X-STREAM-INF:"
    ATTRIBUTES = (
        _bandwidth,
        _average_bandwidth,
        _codecs,
        _resolution,
        AttributeCodec("FRAME-RATE", "frame_rate", parse_float, format_float),
        _hdcp_level,
        AttributeCodec("AUDIO", "audio", unquote, quote),
        _video,
        AttributeCodec("SUBTITLES", "subtitles", unquote, quote),
        AttributeCodec(
            "CLOSED-CAPTIONS",
            "closed_captions",
            _parse_closed_captions,
            _format_closed_captions,
        ),
    )

    bandwidth: int
    average_bandwidth: Optional[int] = None
    codecs: Optional[str] = None
    resolution: Optional[Resolution] = None
    frame_rate: Optional[float] = None
    hdcp_level: Optional[HdcpLevel] = None
    audio: Optional[str] = None
    video: Optional[str] = None
    subtitles: Optional[str] = None
    closed_captions: Optional[Union[ClosedCaptions, str]] = None


@tag_manager.register
@dataclass
class ExtXIFrameStreamInf(TagWithAttrList):
    """A media playlist holding the I-frames of a variant stream."""

    PREFIX = "#EXT-X-I-FRAME-STREAM-INF:"
    ATTRIBUTES = (
        AttributeCodec("URI", "uri", unquote, quote, required=True),
        _bandwidth,
        _average_bandwidth,
        _codecs,
        _resolution,
        _hdcp_level,
        _video,
    )

    uri: str
    bandwidth: int
    average_bandwidth: Optional[int] = None
    codecs: Optional[str] = None
    resolution: Optional[Resolution] = None
    hdcp_level: Optional[HdcpLevel] = None
    video: Optional[str] = None
