"""The ``Authorization`` and ``Proxy-Authorization`` headers and their credentials."""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

from typed_headers.core import Header, HeaderError, validate_value

_C = TypeVar("_C", bound="Credentials")


class Credentials(ABC):
    """Credentials carried after a scheme name such as ``Basic``."""

    SCHEME: ClassVar[str]

    @classmethod
    @abstractmethod
    def decode(cls: type[_C], value: str) -> _C:
        """Decode a whole header value that starts with the scheme.

        Raises ``HeaderError`` if the value cannot be decoded.
        """

    @abstractmethod
    def encode(self) -> str:
        """Encode to a header value that starts with the scheme."""


@dataclass(frozen=True)
class Basic(Credentials):
    """Credentials for Basic authentication: a user name and a password."""

    decoded: str
    colon_pos: int

    SCHEME: ClassVar[str] = "Basic"

    def __post_init__(self) -> None:
        if not 0 <= self.colon_pos < len(self.decoded) or (
            self.decoded[self.colon_pos] != ":"
        ):
            raise ValueError("colon position does not point at a colon")

    def username(self) -> str:
        """The decoded user name."""
        return self.decoded[: self.colon_pos]

    def password(self) -> str:
        """The decoded password."""
        return self.decoded[self.colon_pos + 1 :]

    @classmethod
    def decode(cls, value: str) -> Basic:
        prefix = "Basic "
        if not value.startswith(prefix):
            raise HeaderError()
        encoded = value[len(prefix) :].lstrip(" ")
        if not encoded:
            raise HeaderError()
        try:
            text = base64.b64decode(encoded, validate=True).decode("utf-8")
        except ValueError:
            raise HeaderError() from None
        colon = text.find(":")
        if colon < 0:
            raise HeaderError()
        return cls(text, colon)

    def encode(self) -> str:
        encoded = base64.b64encode(self.decoded.encode("utf-8")).decode("ascii")
        return f"Basic {encoded}"


@dataclass(frozen=True)
class Bearer(Credentials):
    """A bearer token, as used with OAuth; holds the whole ``Bearer ...`` value."""

    value: str

    SCHEME: ClassVar[str] = "Bearer"

    def __post_init__(self) -> None:
        validate_value(self.value)
        if not self.value.startswith("Bearer "):
            raise HeaderError()

    def token(self) -> str:
        """The token after the scheme."""
        return self.value[len("Bearer ") :]

    @classmethod
    def decode(cls, value: str) -> Bearer:
        return cls(value)

    def encode(self) -> str:
        return self.value


class InvalidBearerToken(ValueError):
    """Raised when a token cannot form a legal header value."""


def _decode_credentials(values: Iterable[str], credentials: type[_C]) -> _C:
    value = next(iter(values), None)
    if value is None:
        raise HeaderError()
    scheme = credentials.SCHEME
    if not (
        value.startswith(scheme)
        and len(value) > len(scheme)
        and value[len(scheme)] == " "
    ):
        raise HeaderError()
    return credentials.decode(value)


@dataclass(frozen=True)
class Authorization(Header, Generic[_C]):
    """``Authorization`` header: credentials for the origin server."""

    credentials: _C

    name: ClassVar[str] = "authorization"

    @classmethod
    def basic(cls, username: str, password: str) -> Authorization[Basic]:
        """A Basic authorization header."""
        return cls(Basic(f"{username}:{password}", len(username)))

    @classmethod
    def bearer(cls, token: str) -> Authorization[Bearer]:
        """A Bearer authorization header; raises ``InvalidBearerToken`` if illegal."""
        try:
            return cls(Bearer(f"Bearer {token}"))
        except HeaderError:
            raise InvalidBearerToken("invalid bearer token") from None

    @classmethod
    def decode(
        cls, values: Iterable[str], credentials: type[_C]
    ) -> Authorization[_C]:
        """Decode the first value as credentials of the given type."""
        return cls(_decode_credentials(values, credentials))

    def encode(self) -> list[str]:
        return [self.credentials.encode()]


@dataclass(frozen=True)
class ProxyAuthorization(Header, Generic[_C]):
    """``Proxy-Authorization`` header: credentials for a proxy."""

    credentials: _C

    name: ClassVar[str] = "proxy-authorization"

    @classmethod
    def decode(
        cls, values: Iterable[str], credentials: type[_C]
    ) -> ProxyAuthorization[_C]:
        """Decode the first value as credentials of the given type."""
        return cls(Authorization.decode(values, credentials).credentials)

    def encode(self) -> list[str]:
        return [self.credentials.encode()]