from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type
import logging

from .attribute import AttributePairs
from .errors import M3U8Error, MissingAttribute, UnexpectedTag
from .types import ProtocolVersion

logger = logging.getLogger(__name__)


@dataclass
class Attribute:
    key: str
    value: Any

    def __str__(self):
        return f"{self.key}={self.value}"


@dataclass(frozen=True)
class AttributeCodec:
    """How one attribute of an attribute-list maps to a field of its tag."""

    key: str
    name: str
    decode: Callable[[str], Any]
    encode: Callable[[Any], str] = str
    required: bool = False
    default: Any = None


class Tag:
    """
    One directive line of a playlist.

    Subclasses set `PREFIX`, the text every line of the kind starts with
    (including the colon when the tag has a value), and `VERSION`, the
    protocol version the tag needs when none of its fields ask for more.
    """

    PREFIX: str = ""
    VERSION = ProtocolVersion.V1

    @classmethod
    def tag_name(cls) -> str:
        return cls.PREFIX.split(":", 1)[0]

    @classmethod
    def matches(cls, line: str) -> bool:
        if cls.PREFIX.endswith(":"):
            return line.startswith(cls.PREFIX)
        return line == cls.PREFIX

    @classmethod
    def decode(cls, line: str) -> "Tag":
        if not cls.matches(line):
            raise UnexpectedTag(f"{line!r} is not a {cls.tag_name()} tag")
        try:
            return cls._decode(line[len(cls.PREFIX) :])
        except M3U8Error as e:
            if e.tag is None:
                e.tag = cls.tag_name()
            raise

    @classmethod
    def _decode(cls, body: str) -> "Tag":
        return cls()

    def encode(self) -> str:
        return self.PREFIX

    def required_version(self) -> ProtocolVersion:
        return self.VERSION

    def __str__(self):
        return self.encode()


@dataclass
class RawTag(Tag):
    """A tag line no codec is registered for, kept as it was read."""

    line_text: str

    @property
    def name(self) -> str:
        return self.line_text.split(":", 1)[0]

    def encode(self) -> str:
        return self.line_text


class TagWithAttrList(Tag):
    """
    Tag whose value is an attribute-list. `ATTRIBUTES` lists the known
    attributes in the order they are written out; attributes missing from it
    are dropped when decoding unless `keeps_attribute` says otherwise.
    """

    ATTRIBUTES: Tuple[AttributeCodec, ...] = ()

    @classmethod
    def _decode(cls, body: str) -> "TagWithAttrList":
        codecs = {codec.key: codec for codec in cls.ATTRIBUTES}
        values: Dict[str, Any] = {}
        extra: List[Attribute] = []
        for key, raw in AttributePairs(body):
            codec = codecs.get(key)
            if codec is None:
                if cls.keeps_attribute(key):
                    extra.append(Attribute(key, raw))
                else:
                    logger.debug(f"Ignore unknown attribute {key!r} of {cls.tag_name()}")
                continue
            try:
                values[codec.name] = codec.decode(raw)
            except M3U8Error as e:
                if e.attribute is None:
                    e.attribute = key
                raise
        for codec in cls.ATTRIBUTES:
            if codec.required and codec.name not in values:
                raise MissingAttribute(codec.key)
        return cls.from_attributes(values, extra)

    @classmethod
    def keeps_attribute(cls, key: str) -> bool:
        return False

    @classmethod
    def from_attributes(cls, values: Dict[str, Any], extra: List[Attribute]):
        return cls(**values)

    def attributes(self) -> List[Attribute]:
        attrs = []
        for codec in self.ATTRIBUTES:
            value = getattr(self, codec.name)
            if value is None or (not codec.required and value == codec.default):
                continue
            attrs.append(Attribute(codec.key, codec.encode(value)))
        return attrs

    def encode(self) -> str:
        return self.PREFIX + ",".join(str(attr) for attr in self.attributes())


@dataclass
class TagManager:
    name2class: Dict[str, Type[Tag]]

    def get(self, line: str) -> Optional[Type[Tag]]:
        tag_name = line.split(":", 1)[0]
        return self.name2class.get(tag_name)

    def decode(self, line: str) -> Tag:
        clazz = self.get(line)
        if clazz is None:
            return RawTag(line)
        return clazz.decode(line)

    def register(self, clazz: Type[Tag]):
        self.name2class[clazz.tag_name()] = clazz
        return clazz


tag_manager = TagManager(dict())
