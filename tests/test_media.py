import pytest

from typed_headers.core import HeaderError
from typed_headers.media import ContentType


def test_json():
    assert ContentType.decode(["application/json"]) == ContentType.json()


@pytest.mark.parametrize(
    "value",
    [
        "text/plain",
        "application/json",
        "multipart/form-data; boundary=---------------abcd",
    ],
)
def test_round_trip(value):
    decoded = ContentType.decode([value])
    assert decoded.encode() == [value]
    assert ContentType.decode(decoded.encode()) == decoded


def test_constructors_render():
    assert str(ContentType.text()) == "text/plain"
    assert str(ContentType.text_utf8()) == "text/plain; charset=utf-8"
    assert str(ContentType.html()) == "text/html"
    assert str(ContentType.xml()) == "text/xml"
    assert str(ContentType.form_url_encoded()) == "application/x-www-form-urlencoded"
    assert str(ContentType.jpeg()) == "image/jpeg"
    assert str(ContentType.png()) == "image/png"
    assert str(ContentType.octet_stream()) == "application/octet-stream"


def test_case_insensitive_type_and_charset():
    assert ContentType("Application/JSON") == ContentType.json()
    assert ContentType("text/plain;charset=UTF-8") == ContentType.text_utf8()


def test_quoted_parameter_kept():
    ct = ContentType('multipart/form-data; boundary="a;b"')
    assert str(ct) == 'multipart/form-data; boundary="a;b"'


@pytest.mark.parametrize(
    "value", ["nope", "text/", "/plain", "text/plain; charset", "; text/plain", "text /plain"]
)
def test_invalid(value):
    with pytest.raises(HeaderError):
        ContentType.decode([value])


def test_decode_empty():
    with pytest.raises(HeaderError):
        ContentType.decode([])