import pytest

from typed_headers.core import HeaderError
from typed_headers.cookies import Cookie, SetCookie


def test_parse():
    cookie = Cookie.decode(["foo=bar"])
    assert cookie.get("foo") == "bar"
    assert cookie.get("bar") is None


def test_multiple_same_name():
    cookie = Cookie.decode(["foo=bar; foo=baz"])
    assert cookie.get("foo") == "bar"


def test_multiple_lines():
    cookie = Cookie.decode(["foo=bar", "lol = cat"])
    assert cookie.get("foo") == "bar"
    assert cookie.get("lol") == "cat"


def test_iter_and_len_skip_items_without_equals():
    cookie = Cookie.decode(["foo=bar; invalid ; ;; baz=quux; empty="])
    assert list(cookie) == [("foo", "bar"), ("baz", "quux"), ("empty", "")]
    assert len(cookie) == 3


def test_value_with_equals_inside():
    cookie = Cookie.decode(["middle=equals=in=the=middle"])
    assert cookie.get("middle") == "equals=in=the=middle"


def test_cookie_decode_empty_raises():
    with pytest.raises(HeaderError):
        Cookie.decode([])


def test_cookie_encode():
    assert Cookie.decode(["foo=bar", "baz=quux"]).encode() == ["foo=bar; baz=quux"]


def test_set_cookie_decode():
    set_cookie = SetCookie.decode(["foo=bar", "baz=quux"])
    assert len(set_cookie.values) == 2
    assert set_cookie.values[0] == "foo=bar"
    assert set_cookie.values[1] == "baz=quux"


def test_set_cookie_encode():
    set_cookie = SetCookie(["foo=bar", "baz=quux"])
    assert set_cookie.encode() == ["foo=bar", "baz=quux"]


def test_set_cookie_decode_empty_raises():
    with pytest.raises(HeaderError):
        SetCookie.decode([])


def test_set_cookie_rejects_illegal_value():
    with pytest.raises(HeaderError):
        SetCookie(["foo=bar\n"])