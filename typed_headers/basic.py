"""Headers that carry a single plain value: locations, server identity, lengths and the like."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from typed_headers.core import Header, HeaderError, join_csv, just_one, validate_value

_V = TypeVar("_V", bound="_ValueHeader")

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")
_AUTHORITY_CHARS = frozenset(
    string.ascii_letters + string.digits + "-._~!$&'()*+,;=:@[]%"
)


@dataclass(frozen=True)
class _ValueHeader(Header):
    value: str

    def __post_init__(self) -> None:
        validate_value(self.value)

    @classmethod
    def decode(cls: type[_V], values: Iterable[str]) -> _V:
        first = next(iter(values), None)
        if first is None:
            raise HeaderError()
        return cls(first)

    def encode(self) -> list[str]:
        return [self.value]


class AcceptRanges(_ValueHeader):
    """``Accept-Ranges`` header: the range units a server supports."""

    name = "accept-ranges"

    @classmethod
    def decode(cls, values: Iterable[str]) -> AcceptRanges:
        return cls(join_csv(values))

    @classmethod
    def bytes(cls) -> AcceptRanges:
        """The common ``Accept-Ranges: bytes`` header."""
        return cls("bytes")


class ContentLocation(_ValueHeader):
    """``Content-Location`` header: a URI reference for the representation."""

    name = "content-location"


class Location(_ValueHeader):
    """``Location`` header: a URI reference related to the response."""

    name = "location"


class Pragma(_ValueHeader):
    """``Pragma`` header from HTTP/1.0."""

    name = "pragma"

    @classmethod
    def no_cache(cls) -> Pragma:
        """The literal ``Pragma: no-cache`` header."""
        return cls("no-cache")

    def is_no_cache(self) -> bool:
        """Whether this pragma is ``no-cache``."""
        return self.value == "no-cache"


class InvalidReferer(ValueError):
    """Raised when text is not a legal ``Referer`` value."""


class Referer(_ValueHeader):
    """``Referer`` header: the URI the target was obtained from."""

    name = "referer"

    @classmethod
    def parse(cls, text: str) -> Referer:
        """Build a ``Referer`` from text, raising ``InvalidReferer`` if illegal."""
        try:
            return cls(text)
        except HeaderError:
            raise InvalidReferer(f"invalid Referer: {text!r}") from None


class InvalidServer(ValueError):
    """Raised when text is not a legal ``Server`` value."""


class Server(_ValueHeader):
    """``Server`` header: the software used by the origin server."""

    name = "server"

    @classmethod
    def parse(cls, text: str) -> Server:
        """Build a ``Server`` from text, raising ``InvalidServer`` if illegal."""
        try:
            return cls(text)
        except HeaderError:
            raise InvalidServer(f"invalid Server: {text!r}") from None

    def __str__(self) -> str:
        return self.value


def _split_authority(text: str) -> tuple[str, str | None]:
    """Split an authority into host and port text, validating its shape."""
    if not text or any(ch not in _AUTHORITY_CHARS for ch in text):
        raise HeaderError()
    hostport = text.rpartition("@")[2]
    if hostport.startswith("["):
        close = hostport.find("]")
        if close < 0:
            raise HeaderError()
        host, rest = hostport[: close + 1], hostport[close + 1 :]
        if "[" in host[1:]:
            raise HeaderError()
    else:
        host, sep, port = hostport.partition(":")
        rest = sep + port
        if "[" in host or "]" in host:
            raise HeaderError()
    if not rest:
        return host, None
    if not rest.startswith(":"):
        raise HeaderError()
    port_text = rest[1:]
    if port_text and (
        not all(ch in string.digits for ch in port_text) or int(port_text) > 0xFFFF
    ):
        raise HeaderError()
    return host, port_text


@dataclass(frozen=True)
class Host(Header):
    """``Host`` header: the authority (host and optional port) of the target."""

    authority: str

    name: ClassVar[str] = "host"

    def __post_init__(self) -> None:
        _split_authority(self.authority)

    @classmethod
    def decode(cls, values: Iterable[str]) -> Host:
        first = next(iter(values), None)
        if first is None:
            raise HeaderError()
        return cls(first)

    def encode(self) -> list[str]:
        return [self.authority]

    def hostname(self) -> str:
        """The host part, such as ``example.domain``."""
        return _split_authority(self.authority)[0]

    def port(self) -> int | None:
        """The port number, if one is given."""
        port_text = _split_authority(self.authority)[1]
        return int(port_text) if port_text else None

    def __str__(self) -> str:
        return self.authority


@dataclass(frozen=True)
class Expect(Header):
    """``Expect`` header; the only expectation defined is ``100-continue``."""

    name: ClassVar[str] = "expect"
    CONTINUE: ClassVar[Expect]

    @classmethod
    def decode(cls, values: Iterable[str]) -> Expect:
        if just_one(values) != "100-continue":
            raise HeaderError()
        return cls.CONTINUE

    def encode(self) -> list[str]:
        return ["100-continue"]

    def __repr__(self) -> str:
        return "Expect('100-continue')"


Expect.CONTINUE = Expect()


def _parse_u64(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise HeaderError()
    number = int(text)
    if number > _U64_MAX:
        raise HeaderError()
    return number


@dataclass(frozen=True)
class ContentLength(Header):
    """``Content-Length`` header: the body size in octets."""

    length: int

    name: ClassVar[str] = "content-length"

    def __post_init__(self) -> None:
        if not 0 <= self.length <= _U64_MAX:
            raise ValueError(f"content length out of range: {self.length}")

    @classmethod
    def decode(cls, values: Iterable[str]) -> ContentLength:
        """Decode; repeated values are accepted only when they all agree."""
        length: int | None = None
        for value in values:
            parsed = _parse_u64(value)
            if length is None:
                length = parsed
            elif parsed != length:
                raise HeaderError()
        if length is None:
            raise HeaderError()
        return cls(length)

    def encode(self) -> list[str]:
        return [str(self.length)]