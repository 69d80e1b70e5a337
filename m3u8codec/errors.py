from typing import Optional


class M3U8Error(ValueError):
    """Base class of every decode failure.

    ``tag`` is the tag kind (e.g. ``#EXT-X-MAP``) and ``attribute`` the
    attribute name the failure belongs to, when known. Codecs fill in the tag
    kind on the way out, so the innermost decoder only has to know the value.
    """

    def __init__(
        self, message: str, tag: Optional[str] = None, attribute: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.tag = tag
        self.attribute = attribute

    def __str__(self):
        where = []
        if self.tag is not None:
            where.append(self.tag)
        if self.attribute is not None:
            where.append(self.attribute)
        if where:
            return f"[{' '.join(where)}] {self.message}"
        return self.message


class MalformedAttributeList(M3U8Error):
    pass


class InvalidNumber(M3U8Error):
    pass


class InvalidQuotedString(M3U8Error):
    pass


class InvalidEnumValue(M3U8Error):
    pass


class InvalidResolution(M3U8Error):
    pass


class InvalidDateTime(M3U8Error):
    pass


class MissingAttribute(M3U8Error):
    def __init__(self, name: str, tag: Optional[str] = None):
        super().__init__(f"missing required attribute {name!r}", tag, name)
        self.name = name


class MissingByteRangeOffset(M3U8Error):
    pass


class InconsistentSegmentNumbering(M3U8Error):
    pass


class UnexpectedTag(M3U8Error):
    pass


class MissingTag(M3U8Error):
    pass
