"""
Attribute-list tokenizer.
"""

import pytest

from m3u8codec.attribute import AttributePairs
from m3u8codec.errors import MalformedAttributeList


class TestAttributePairs:

    def test_pairs_in_order(self):
        pairs = list(AttributePairs('URI="foo",BANDWIDTH=1000,RESOLUTION=1920x1080'))
        assert pairs == [
            ("URI", '"foo"'),
            ("BANDWIDTH", "1000"),
            ("RESOLUTION", "1920x1080"),
        ]

    def test_comma_inside_quotes_does_not_split(self):
        pairs = list(AttributePairs('CODECS="mp4a.40.2,avc1.4d401e",BANDWIDTH=1'))
        assert pairs == [("CODECS", '"mp4a.40.2,avc1.4d401e"'), ("BANDWIDTH", "1")]

    def test_unquote_on_request(self):
        pairs = list(AttributePairs('URI="foo",BANDWIDTH=1000').iter(unquote=True))
        assert pairs == [("URI", "foo"), ("BANDWIDTH", "1000")]

    def test_value_split_on_first_assigner(self):
        assert list(AttributePairs('URI="a=b"')) == [("URI", '"a=b"')]

    def test_whitespace_is_kept(self):
        assert list(AttributePairs("A= 1")) == [("A", " 1")]

    def test_unknown_keys_forwarded(self):
        assert list(AttributePairs("FUTURE-FIELD=1")) == [("FUTURE-FIELD", "1")]

    def test_empty_body(self):
        assert list(AttributePairs("")) == []

    def test_restartable(self):
        pairs = AttributePairs("A=1,B=2")
        assert list(pairs) == list(pairs)

    def test_lazy(self):
        it = iter(AttributePairs("A=1,B"))
        assert next(it) == ("A", "1")
        with pytest.raises(MalformedAttributeList):
            next(it)

    @pytest.mark.parametrize(
        "text",
        [
            'URI="foo',
            "URI",
            "A=1,B",
            "A=1,",
            "A=1,,B=2",
            "=1",
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(MalformedAttributeList):
            list(AttributePairs(text))

    def test_error_points_at_position(self):
        with pytest.raises(MalformedAttributeList) as exc_info:
            list(AttributePairs('A=1,URI="foo'))
        message = str(exc_info.value)
        assert "~" in message
        assert "not terminated" in message
