from typing import Iterator, Tuple
from io import StringIO

from .errors import MalformedAttributeList


class AttributePairs:
    """
    Tokenizer of an attribute-list, the text after a tag's colon:

        KEY=VALUE,KEY="quoted, value",KEY=VALUE

    Iterating yields (key, raw value) pairs in declaration order. The text is
    scanned again on every iteration, nothing is cached.
    Keys are forwarded as they are, deciding which keys matter is up to the tag.
    """

    def __init__(self, attr_text: str) -> None:
        self.attr_text = attr_text

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return self.iter()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.attr_text!r})"

    def iter(self, unquote: bool = False) -> Iterator[Tuple[str, str]]:
        if len(self.attr_text) == 0:
            return
        pivot = 0
        while True:
            key, pivot = self.get_until_assigner(pivot)
            value, pivot = self.get_until_comma(pivot + 1)
            if unquote and len(value) >= 2 and value[0] == value[-1] == '"':
                value = value[1:-1]
            yield key, value
            if pivot >= len(self.attr_text):
                return
            # skip the comma
            pivot += 1

    def get_until_assigner(self, pivot: int) -> Tuple[str, int]:
        """
        Return key and end pivot.
        key starts from the pivot to the position just before the first
        assignment sign, pivot is pointing at the assignment sign.
        """
        buf = StringIO()
        start = pivot
        while pivot < len(self.attr_text):
            c = self.attr_text[pivot]
            if c == "=":
                if pivot == start:
                    self.__error_position("Attribute name is empty", pivot)
                return buf.getvalue(), pivot
            if c == ",":
                break
            buf.write(c)
            pivot += 1
        self.__error_position("Here should be an assigner", start, pivot - 1)

    def get_until_comma(self, pivot: int) -> Tuple[str, int]:
        """
        Return raw value and end pivot.
        value starts from the pivot to the position just before the first
        comma outside of a quoted string (or the end of the text),
        pivot is pointing at that comma (or the end of the text).
        """
        buf = StringIO()
        quoted = False
        quote_start = None
        while pivot < len(self.attr_text):
            c = self.attr_text[pivot]
            if c == '"':
                quoted = not quoted
                quote_start = pivot
            elif c == "," and not quoted:
                break
            buf.write(c)
            pivot += 1
        if quoted:
            self.__error_position("Quoted string is not terminated", quote_start, pivot)
        return buf.getvalue(), pivot

    def __error_position(self, reason: str, start: int, end: int = None):
        if end is None or end - start <= 0:
            end = start
        before_start_len = 0
        for c in self.attr_text[:start]:
            before_start_len += len(repr(c)) - 2  # minus 2 for quotation mark of repr
        error_len = 0
        for c in self.attr_text[start : end + 1]:
            error_len += len(repr(c)) - 2
        highlight_line = (
            " " * (before_start_len + 1) + "~" * max(error_len, 1)
        )  # plus 1 for first quotation mark
        raise MalformedAttributeList(f"{self.attr_text!r}\n{highlight_line}\n{reason}")
