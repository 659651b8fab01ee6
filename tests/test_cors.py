from datetime import timedelta

import pytest

from typed_headers.core import HeaderError
from typed_headers.cors import (
    AccessControlAllowCredentials,
    AccessControlAllowOrigin,
    AccessControlMaxAge,
    AccessControlRequestMethod,
    InvalidOrigin,
    Origin,
)

SAMPLE = "http://web-platform.test:8000"


def test_allow_credentials_is_case_sensitive():
    assert AccessControlAllowCredentials.decode(["true"]).encode() == ["true"]
    with pytest.raises(HeaderError):
        AccessControlAllowCredentials.decode(["True"])


def test_allow_credentials_requires_value():
    with pytest.raises(HeaderError):
        AccessControlAllowCredentials.decode([])


def test_max_age_from_timedelta_and_roundtrip():
    max_age = AccessControlMaxAge(timedelta(seconds=531))
    assert max_age.seconds() == 531
    assert max_age.encode() == ["531"]
    assert AccessControlMaxAge.decode(["531"]) == max_age


def test_max_age_rejects_garbage():
    with pytest.raises(HeaderError):
        AccessControlMaxAge.decode(["soon"])


def test_request_method_roundtrip():
    method = AccessControlRequestMethod.decode(["GET"])
    assert method.method == "GET"
    assert method.encode() == ["GET"]


def test_request_method_invalid():
    with pytest.raises(HeaderError):
        AccessControlRequestMethod.decode(["GE T"])


def test_origin_decode_and_encode():
    origin = Origin.decode([SAMPLE])
    assert origin.scheme() == "http"
    assert origin.hostname() == "web-platform.test"
    assert origin.port() == 8000
    assert origin.encode() == [SAMPLE]


def test_origin_null():
    assert Origin.decode(["null"]) == Origin.NULL
    assert Origin.NULL.is_null()
    assert Origin.NULL.encode() == ["null"]
    assert Origin.NULL.scheme() == ""
    assert Origin.NULL.port() is None


def test_origin_trailing_slash_is_dropped():
    assert str(Origin("https://example.com/")) == "https://example.com"


def test_origin_with_path_is_invalid():
    with pytest.raises(HeaderError):
        Origin.decode(["https://example.com/path"])


def test_origin_requires_exactly_one_value():
    with pytest.raises(HeaderError):
        Origin.decode([SAMPLE, SAMPLE])


def test_try_from_parts():
    origin = Origin.try_from_parts("http", "web-platform.test", 8000)
    assert str(origin) == SAMPLE
    assert Origin.try_from_parts("https", "example.com").port() is None


def test_try_from_parts_invalid():
    with pytest.raises(InvalidOrigin):
        Origin.try_from_parts("http", "bad host", None)


def test_allow_origin_decode():
    allow = AccessControlAllowOrigin.decode([SAMPLE])
    origin = allow.origin()
    assert origin.scheme() == "http"
    assert origin.hostname() == "web-platform.test"
    assert origin.port() == 8000
    assert allow.encode() == [SAMPLE]


def test_allow_origin_parse():
    allow = AccessControlAllowOrigin.parse(SAMPLE)
    origin = allow.origin()
    assert origin.scheme() == "http"
    assert origin.hostname() == "web-platform.test"
    assert origin.port() == 8000
    assert allow.encode() == [SAMPLE]


def test_allow_origin_any():
    allow = AccessControlAllowOrigin.decode(["*"])
    assert allow == AccessControlAllowOrigin.ANY
    assert allow.origin() is None
    assert allow.encode() == ["*"]


def test_allow_origin_null():
    allow = AccessControlAllowOrigin.decode(["null"])
    assert allow == AccessControlAllowOrigin.NULL
    assert allow.encode() == ["null"]


def test_allow_origin_parse_rejects_star():
    with pytest.raises(HeaderError):
        AccessControlAllowOrigin.parse("*")