"""Tests for luna.path."""

from luna.path import Path, PathSegment, PathSegmentType


class TestPath:
    def test_root(self):
        assert str(Path.root()) == "$"
        assert Path.root().is_root

    def test_append_key_and_index(self):
        path = Path.root().append_key("people").append_index(0).append_key("score")
        assert str(path) == "$['people'][0]['score']"
        assert len(path) == 3

    def test_append_does_not_modify_receiver(self):
        parent = Path.root().append_key("object")
        parent.append_key("child")
        parent.append_index(3)
        assert str(parent) == "$['object']"

    def test_siblings_share_prefix(self):
        parent = Path.root().append_key("items")
        first = parent.append_index(0)
        second = parent.append_index(1)
        assert str(first) == "$['items'][0]"
        assert str(second) == "$['items'][1]"

    def test_quotes_in_keys_are_escaped(self):
        path = Path.root().append_key("it's").append_key("back\\slash")
        assert str(path) == "$['it\\'s']['back\\\\slash']"

    def test_equality(self):
        assert Path.root().append_key("a") == Path.root().append_key("a")
        assert Path.root().append_key("a") != Path.root().append_index(0)


class TestPathSegment:
    def test_key_segment(self):
        segment = PathSegment.key("name")
        assert segment.type is PathSegmentType.KEY
        assert segment.render() == "['name']"

    def test_index_segment(self):
        segment = PathSegment.index(7)
        assert segment.type is PathSegmentType.INDEX
        assert segment.render() == "[7]"
