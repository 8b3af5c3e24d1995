import pytest

from serverkit.fields.fieldset import FieldSet
from serverkit.fields.selector import parse_selector


@pytest.mark.parametrize(
    "fields, expected",
    [
        ({"x": "y"}, "x=y"),
        ({"foo": "bar"}, "foo=bar"),
        ({"foo": "bar", "baz": "qup"}, "baz=qup,foo=bar"),
    ],
)
def test_set_string(fields, expected):
    assert str(FieldSet(fields)) == expected


@pytest.mark.parametrize(
    "fields, key, has",
    [
        ({"x": "y"}, "x", True),
        ({"x": ""}, "x", True),
        ({"x": "y"}, "foo", False),
    ],
)
def test_field_has(fields, key, has):
    assert FieldSet(fields).has(key) is has


def test_field_get():
    assert FieldSet({"x": "y"}).get("x") == "y"


def test_field_get_missing_is_empty():
    assert FieldSet({"x": "y"}).get("foo") == ""


def test_keyword_construction_and_mapping():
    fs = FieldSet(x="y", z="w")
    assert dict(fs) == {"x": "y", "z": "w"}
    assert len(fs) == 2
    assert fs["z"] == "w"


def test_empty_set_selector_is_empty():
    assert FieldSet().as_selector().empty()


def test_as_selector_matches_itself():
    fs = FieldSet({"foo": "bar", "baz": "blah"})
    assert fs.as_selector().matches(fs)
    assert not fs.as_selector().matches(FieldSet({"foo": "bar"}))


def test_string_round_trips_through_parser():
    fs = FieldSet({"foo": "bar", "baz": "qup"})
    assert str(parse_selector(str(fs))) == str(fs)
    assert parse_selector(str(fs)).matches(fs)