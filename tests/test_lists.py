import pytest

from typed_headers.core import HeaderError
from typed_headers.lists import (
    AccessControlAllowHeaders,
    AccessControlAllowMethods,
    AccessControlExposeHeaders,
    AccessControlRequestHeaders,
    Allow,
    Connection,
    ContentEncoding,
)


def test_allow_headers_iter():
    allow = AccessControlAllowHeaders.decode(["foo, bar"])
    assert list(allow) == ["foo", "bar"]


def test_allow_headers_from_names():
    allow = AccessControlAllowHeaders.from_names(["cache-control", "if-range"])
    assert allow.encode() == ["cache-control, if-range"]


def test_allow_headers_with_invalid():
    allow = AccessControlAllowHeaders.decode(["foo foo, bar"])
    assert list(allow) == []


def test_allow_methods_iter():
    allowed = AccessControlAllowMethods.decode(["GET, PUT"])
    assert list(allowed) == ["GET", "PUT"]


def test_allow_methods_from_methods():
    allow = AccessControlAllowMethods.from_methods(["GET", "PUT"])
    assert allow.encode() == ["GET, PUT"]


def test_expose_headers_iter():
    expose = AccessControlExposeHeaders.decode(["foo, bar"])
    assert list(expose) == ["foo", "bar"]


def test_expose_headers_from_names():
    expose = AccessControlExposeHeaders.from_names(["cache-control", "if-range"])
    assert expose.encode() == ["cache-control, if-range"]


def test_expose_headers_skips_invalid():
    expose = AccessControlExposeHeaders.decode(["foo foo, bar"])
    assert list(expose) == ["bar"]


def test_request_headers_iter():
    req = AccessControlRequestHeaders.decode(["foo, bar"])
    assert list(req) == ["foo", "bar"]


def test_request_headers_from_names():
    req = AccessControlRequestHeaders.from_names(["cache-control", "if-range"])
    assert req.encode() == ["cache-control, if-range"]


def test_from_names_lowercases():
    req = AccessControlRequestHeaders.from_names(["Content-Type"])
    assert req.encode() == ["content-type"]


def test_from_names_rejects_invalid_name():
    with pytest.raises(HeaderError):
        AccessControlRequestHeaders.from_names(["bad name"])


def test_allow_from_methods_and_iter():
    allow = Allow.from_methods(["GET", "POST"])
    assert allow.encode() == ["GET, POST"]
    assert list(allow) == ["GET", "POST"]


def test_allow_decode_multiple_values():
    allow = Allow.decode(["GET, HEAD", "PUT"])
    assert list(allow) == ["GET", "HEAD", "PUT"]


def test_allow_rejects_invalid_method():
    with pytest.raises(HeaderError):
        Allow.from_methods(["GE T"])


def test_decode_without_values_fails():
    with pytest.raises(HeaderError):
        Allow.decode([])


def test_connection_contains():
    conn = Connection.keep_alive()
    assert not conn.contains("close")
    assert not conn.contains("upgrade")
    assert conn.contains("keep-alive")
    assert conn.contains("Keep-Alive")


def test_connection_constructors():
    assert Connection.close().encode() == ["close"]
    assert Connection.upgrade().encode() == ["upgrade"]


def test_connection_from_names():
    conn = Connection.from_names(["upgrade", "keep-alive"])
    assert conn.encode() == ["upgrade, keep-alive"]
    assert conn.contains("UPGRADE")


def test_content_encoding_contains():
    enc = ContentEncoding.gzip()
    assert enc.contains("gzip")
    assert not enc.contains("br")


def test_content_encoding_is_case_sensitive():
    enc = ContentEncoding.decode(["gzip, br"])
    assert enc.contains("br")
    assert not enc.contains("GZIP")