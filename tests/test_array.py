"""Tests for ArrayAccessor."""

import pytest

from luna import (
    ArrayAccessor,
    IndexOutOfRangeError,
    MapAccessor,
    Ok,
    TypeMismatchError,
    array_from_bytes,
    map_from_bytes,
    new_array,
)

from tests.structstest import PEOPLE_JSON, SIMPLE_JSON, Account, Person


@pytest.fixture
def obj() -> MapAccessor:
    return map_from_bytes(SIMPLE_JSON).map("object")


class TestArrayScalars:
    def test_len(self, obj):
        assert obj.array("arrayStrKey").len() == Ok(2)
        assert obj.array("arrayStrKey").must_len() == 2

    def test_string(self, obj):
        assert obj.array("arrayStrKey").string(1) == Ok("str2")

    def test_nested_float(self, obj):
        assert obj.array("nestedArrayKey").array(0).float(2) == Ok(5.0)

    def test_int_and_bool(self):
        arr = new_array([3.7, -3.7, True])
        assert arr.must_int(0) == 3
        assert arr.must_int(1) == -3
        assert arr.must_bool(2) is True

    def test_must_variants(self, obj):
        arr = obj.array("arrayStrKey")
        assert arr.must_string(0) == "str1"
        assert obj.array("nestedArrayKey").array(0).must_float(0) == 3.0

    def test_inner_and_bytes(self, obj):
        arr = obj.array("nestedArrayKey")
        assert arr.must_inner() == [[3, 4, 5]]
        assert arr.must_bytes() == b"[[3,4,5]]"


class TestArrayIndexValidation:
    def test_out_of_range(self, obj):
        value, err = obj.array("arrayStrKey").string(2)
        assert value == ""
        assert isinstance(err, IndexOutOfRangeError)
        assert err.index == 2
        assert err.length == 2
        assert str(err) == (
            "index 2 out of range at $['object']['arrayStrKey']; valid range: [0, 1]"
        )

    def test_negative_index_is_out_of_range(self, obj):
        _, err = obj.array("arrayStrKey").string(-1)
        assert isinstance(err, IndexOutOfRangeError)
        assert err.index == -1

    def test_index_checked_before_type(self, obj):
        _, err = obj.array("arrayStrKey").float(5)
        assert isinstance(err, IndexOutOfRangeError)

    def test_empty_array(self):
        arr = new_array([])
        assert arr.len() == Ok(0)
        _, err = arr.float(0)
        assert isinstance(err, IndexOutOfRangeError)
        assert "valid range: []" in str(err)

    def test_non_int_index(self, obj):
        with pytest.raises(TypeError, match="Array indices must be int"):
            obj.array("arrayStrKey").string("0")
        with pytest.raises(TypeError, match="Array indices must be int"):
            obj.array("arrayStrKey").string(True)

    def test_must_raises(self, obj):
        with pytest.raises(IndexOutOfRangeError, match="index 9 out of range"):
            obj.array("arrayStrKey").must_string(9)


class TestArrayTypeMismatch:
    def test_scalar_mismatch(self, obj):
        _, err = obj.array("arrayStrKey").int(0)
        assert isinstance(err, TypeMismatchError)
        assert str(err) == (
            "item at index 0 at $['object']['arrayStrKey'] was a string, not a number"
        )

    def test_map_on_string_keeps_parent_path(self, obj):
        child = obj.array("arrayStrKey").map(0)
        assert isinstance(child, MapAccessor)
        assert str(child.path) == "$['object']['arrayStrKey']"
        assert child.err.path == "$['object']['arrayStrKey']"

    def test_array_on_object(self, obj):
        child = obj.array("arrayObjKey").array(0)
        assert isinstance(child, ArrayAccessor)
        assert child.err.actual == "object"
        assert child.err.expected == "array"


class TestArrayMaps:
    def test_maps(self):
        people = map_from_bytes(PEOPLE_JSON).array("people")
        names = [person.must_string("name") for person in people.must_maps()]
        assert names == ["alice", "bob"]

    def test_maps_with_non_object_element(self):
        entries = new_array([{"a": 1}, "oops"]).must_maps()
        assert entries[0].is_ok()
        assert isinstance(entries[1].err, TypeMismatchError)
        assert str(entries[1].path) == "$"

    def test_maps_paths(self):
        entries = new_array([{}, {}]).must_maps()
        assert [str(entry.path) for entry in entries] == ["$[0]", "$[1]"]


class TestArrayModels:
    def test_model(self):
        people = map_from_bytes(PEOPLE_JSON).array("people")
        bob = people.must_model(1, Person)
        assert bob.name == "bob"
        assert bob.friends == []

    def test_model_mismatch(self):
        people = map_from_bytes(PEOPLE_JSON).array("people")
        _, err = people.model(0, Account)
        assert isinstance(err, TypeMismatchError)
        assert str(err).startswith(
            "item at index 0 at $['people'] was an object, not an Account ("
        )

    def test_model_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            new_array([]).must_model(0, Person)


class TestArrayRoot:
    def test_from_bytes(self):
        arr = array_from_bytes(b'[{"id": 1}, {"id": 2}]')
        assert arr.len() == Ok(2)
        assert arr.map(1).int("id") == Ok(2)
        assert str(arr.map(1).path) == "$[1]"

    def test_tuple_is_an_array(self):
        arr = new_array((1, (2, 3)))
        assert arr.array(1).must_int(1) == 3
        assert arr.must_bytes() == b"[1,[2,3]]"
