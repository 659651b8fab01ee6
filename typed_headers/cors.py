"""Cross-origin resource sharing headers and the ``Origin`` header."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar, Optional, Union

from typed_headers.basic import Host
from typed_headers.core import (
    Header,
    HeaderError,
    just_one,
    parse_method,
    validate_value,
)
from typed_headers.dates import parse_seconds

_U64_MAX = 2**64 - 1
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]{0,63}", re.ASCII)


@dataclass(frozen=True)
class AccessControlAllowCredentials(Header):
    """``Access-Control-Allow-Credentials`` header; its only value is ``true``."""

    name: ClassVar[str] = "access-control-allow-credentials"

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlAllowCredentials:
        """Decode the first value, which must be exactly ``true``."""
        if next(iter(values), None) != "true":
            raise HeaderError()
        return cls()

    def encode(self) -> list[str]:
        return ["true"]


@dataclass(frozen=True, order=True)
class AccessControlMaxAge(Header):
    """``Access-Control-Max-Age`` header: how long a preflight may be cached."""

    value: Union[int, timedelta]

    name: ClassVar[str] = "access-control-max-age"

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, timedelta):
            value = value // timedelta(seconds=1)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("max age is a number of seconds or a timedelta")
        if not 0 <= value <= _U64_MAX:
            raise ValueError(f"max age out of range: {value}")
        object.__setattr__(self, "value", value)

    def seconds(self) -> int:
        """The maximum age in whole seconds."""
        return int(self.value)

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlMaxAge:
        return cls(parse_seconds(just_one(values)))

    def encode(self) -> list[str]:
        return [str(self.value)]


@dataclass(frozen=True)
class AccessControlRequestMethod(Header):
    """``Access-Control-Request-Method`` header: the method of the actual request."""

    method: str

    name: ClassVar[str] = "access-control-request-method"

    def __post_init__(self) -> None:
        parse_method(self.method)

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlRequestMethod:
        first = next(iter(values), None)
        if first is None:
            raise HeaderError()
        return cls(parse_method(first))

    def encode(self) -> list[str]:
        return [self.method]


class InvalidOrigin(ValueError):
    """Raised when parts cannot form a legal origin."""


def _split_origin(value: str) -> Optional[tuple[str, str]]:
    """Return ``(scheme, authority)``, or ``None`` for the ``null`` origin."""
    validate_value(value)
    if value == "null":
        return None
    scheme, sep, rest = value.partition("://")
    if not sep or not _SCHEME.fullmatch(scheme):
        raise HeaderError()
    if scheme.lower() in ("http", "https"):
        scheme = scheme.lower()
    cut = min((pos for pos in (rest.find("/"), rest.find("?")) if pos >= 0), default=len(rest))
    authority, remainder = rest[:cut], rest[cut:]
    if remainder not in ("", "/"):
        raise HeaderError()
    Host(authority)
    return scheme, authority


@dataclass(frozen=True)
class Origin(Header):
    """``Origin`` header: a scheme and authority, or the literal ``null``."""

    value: str

    name: ClassVar[str] = "origin"
    NULL: ClassVar[Origin]

    def __post_init__(self) -> None:
        parts = _split_origin(self.value)
        normalized = "null" if parts is None else f"{parts[0]}://{parts[1]}"
        object.__setattr__(self, "value", normalized)

    def _parts(self) -> Optional[tuple[str, str]]:
        return _split_origin(self.value)

    def is_null(self) -> bool:
        """Whether this is the ``null`` origin."""
        return self._parts() is None

    def scheme(self) -> str:
        """The scheme, or an empty string for ``null``."""
        parts = self._parts()
        return "" if parts is None else parts[0]

    def hostname(self) -> str:
        """The host name, or an empty string for ``null``."""
        parts = self._parts()
        return "" if parts is None else Host(parts[1]).hostname()

    def port(self) -> int | None:
        """The port, if one is given."""
        parts = self._parts()
        return None if parts is None else Host(parts[1]).port()

    @classmethod
    def try_from_parts(cls, scheme: str, host: str, port: int | None = None) -> Origin:
        """Build an origin from its parts; raises ``InvalidOrigin`` if illegal."""
        if port is not None and not 0 <= port <= 0xFFFF:
            raise InvalidOrigin(f"invalid port: {port}")
        suffix = "" if port is None else f":{port}"
        text = f"{scheme}://{host}{suffix}"
        try:
            return cls(text)
        except HeaderError:
            raise InvalidOrigin(f"invalid origin: {text!r}") from None

    @classmethod
    def decode(cls, values: Iterable[str]) -> Origin:
        return cls(just_one(values))

    def encode(self) -> list[str]:
        return [self.value]

    def __str__(self) -> str:
        return self.value


Origin.NULL = Origin("null")


@dataclass(frozen=True)
class AccessControlAllowOrigin(Header):
    """``Access-Control-Allow-Origin`` header: an origin, ``null`` or ``*``."""

    allowed: Optional[Origin]

    name: ClassVar[str] = "access-control-allow-origin"
    ANY: ClassVar[AccessControlAllowOrigin]
    NULL: ClassVar[AccessControlAllowOrigin]

    def origin(self) -> Origin | None:
        """The origin, unless this allows any origin."""
        return self.allowed

    @classmethod
    def parse(cls, text: str) -> AccessControlAllowOrigin:
        """Build from an origin text; ``*`` is not accepted here."""
        return cls(Origin(text))

    @classmethod
    def decode(cls, values: Iterable[str]) -> AccessControlAllowOrigin:
        value = just_one(values)
        if value == "*":
            return cls.ANY
        return cls(Origin(value))

    def encode(self) -> list[str]:
        if self.allowed is None:
            return ["*"]
        return self.allowed.encode()


AccessControlAllowOrigin.ANY = AccessControlAllowOrigin(None)
AccessControlAllowOrigin.NULL = AccessControlAllowOrigin(Origin.NULL)