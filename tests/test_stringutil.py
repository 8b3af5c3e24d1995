import base64
import binascii

import pytest

from serverkit.stringutil import (
    camel_case_to_underscore,
    decode_base64,
    diff,
    find_string,
    reverse,
    string_in,
    underscore_to_camel_case,
    unique,
)


def test_diff():
    result = diff(["foo", "bar", "hello"], ["foo", "bar", "world"])
    assert result == ["hello"]


def test_diff_nothing_left():
    assert diff(["a"], ["a", "b"]) == []


def test_unique_keeps_each_once():
    result = unique(["a", "b", "a", "c", "b"])
    assert sorted(result) == ["a", "b", "c"]
    assert len(result) == 3


@pytest.mark.parametrize(
    "camel, underscored",
    [
        ("MyFunc", "my_func"),
        ("myFunc", "my_func"),
        ("a", "a"),
        ("HTTPServer", "h_t_t_p_server"),
        ("a1B2", "a1_b2"),
    ],
)
def test_camel_case_to_underscore(camel, underscored):
    assert camel_case_to_underscore(camel) == underscored


@pytest.mark.parametrize(
    "underscored, camel",
    [
        ("my_func", "MyFunc"),
        ("MY_FUNC", "MyFunc"),
        ("a", "A"),
        ("one_two_three", "OneTwoThree"),
    ],
)
def test_underscore_to_camel_case(underscored, camel):
    assert underscore_to_camel_case(underscored) == camel


def test_find_string_and_string_in():
    array = ["x", "y", "z"]
    assert find_string(array, "y") == 1
    assert find_string(array, "w") == -1
    assert string_in("z", array) is True
    assert string_in("w", array) is False


def test_reverse():
    assert reverse("hello") == "olleh"
    assert reverse("함수") == "수함"
    assert reverse(reverse("round trip")) == "round trip"


def test_decode_base64_round_trip():
    data = b"\x00\x01binary\xff"
    assert decode_base64(base64.b64encode(data).decode("ascii")) == data


def test_decode_base64_known_value():
    assert decode_base64("aGVsbG8=") == b"hello"


def test_decode_base64_ignores_newlines():
    assert decode_base64("aGVs\nbG8=\n") == b"hello"


def test_decode_base64_rejects_invalid():
    with pytest.raises(binascii.Error):
        decode_base64("not base64!")