"""The ``Content-Type`` header and the media types it carries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from typed_headers.core import Header, HeaderError, split_csv, validate_value

_TOKEN_EXTRA = frozenset("!#$%&'*+-.^_`|~")


def _is_token(text: str) -> bool:
    return bool(text) and all(ch.isascii() and (ch.isalnum() or ch in _TOKEN_EXTRA) for ch in text)


def _is_quoted(text: str) -> bool:
    if len(text) < 2 or not text.startswith('"') or not text.endswith('"'):
        return False
    body = text[1:-1]
    escaped = False
    for ch in body:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == '"':
            return False
    return not escaped


def _normalize(text: str) -> str:
    """Parse a media type and return its canonical text."""
    validate_value(text)
    essence = text.partition(";")[0].strip()
    items = list(split_csv([text], ";"))
    if not items or items[0] != essence:
        raise HeaderError()
    top, slash, sub = essence.partition("/")
    if not slash or not _is_token(top) or not _is_token(sub):
        raise HeaderError()
    parts = [f"{top.lower()}/{sub.lower()}"]
    for item in items[1:]:
        key, eq, val = item.partition("=")
        key, val = key.strip().lower(), val.strip()
        if not eq or not _is_token(key) or not (_is_token(val) or _is_quoted(val)):
            raise HeaderError()
        if key == "charset" and not val.startswith('"'):
            val = val.lower()
        parts.append(f"{key}={val}")
    return "; ".join(parts)


@dataclass(frozen=True)
class ContentType(Header):
    """``Content-Type`` header: the media type of the representation."""

    value: str

    name: ClassVar[str] = "content-type"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _normalize(self.value))

    @classmethod
    def json(cls) -> ContentType:
        """``application/json``."""
        return cls("application/json")

    @classmethod
    def text(cls) -> ContentType:
        """``text/plain``."""
        return cls("text/plain")

    @classmethod
    def text_utf8(cls) -> ContentType:
        """``text/plain; charset=utf-8``."""
        return cls("text/plain; charset=utf-8")

    @classmethod
    def html(cls) -> ContentType:
        """``text/html``."""
        return cls("text/html")

    @classmethod
    def xml(cls) -> ContentType:
        """``text/xml``."""
        return cls("text/xml")

    @classmethod
    def form_url_encoded(cls) -> ContentType:
        """``application/x-www-form-urlencoded``."""
        return cls("application/x-www-form-urlencoded")

    @classmethod
    def jpeg(cls) -> ContentType:
        """``image/jpeg``."""
        return cls("image/jpeg")

    @classmethod
    def png(cls) -> ContentType:
        """``image/png``."""
        return cls("image/png")

    @classmethod
    def octet_stream(cls) -> ContentType:
        """``application/octet-stream``."""
        return cls("application/octet-stream")

    @classmethod
    def decode(cls, values: Iterable[str]) -> ContentType:
        first = next(iter(values), None)
        if first is None:
            raise HeaderError()
        return cls(first)

    def encode(self) -> list[str]:
        return [self.value]

    def __str__(self) -> str:
        return self.value