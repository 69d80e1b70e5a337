from .basic import ExtM3u, ExtXVersion, ExtXIndependentSegments, ExtXStart
from .media_segment import (
    ExtInf,
    ExtXByteRange,
    ExtXDiscontinuity,
    ExtXKey,
    ExtXMap,
    ExtXProgramDateTime,
    ExtXDateRange,
)
from .media_playlist import (
    ExtXTargetDuration,
    ExtXMediaSequence,
    ExtXDiscontinuitySequence,
    ExtXEndList,
    ExtXPlaylistType,
    ExtXIFramesOnly,
)
from .master_playlist import ExtXStreamInf, ExtXIFrameStreamInf

__all__ = [
    "ExtM3u",
    "ExtXVersion",
    "ExtXIndependentSegments",
    "ExtXStart",
    "ExtInf",
    "ExtXByteRange",
    "ExtXDiscontinuity",
    "ExtXKey",
    "ExtXMap",
    "ExtXProgramDateTime",
    "ExtXDateRange",
    "ExtXTargetDuration",
    "ExtXMediaSequence",
    "ExtXDiscontinuitySequence",
    "ExtXEndList",
    "ExtXPlaylistType",
    "ExtXIFramesOnly",
    "ExtXStreamInf",
    "ExtXIFrameStreamInf",
]
