"""Headers used in the WebSocket opening handshake."""

from __future__ import annotations

import base64
import hashlib
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from typed_headers.core import Header, HeaderError, validate_value

_GUID = b"258EAFA5-E914-47DA-95CA-C5AB0DC85B11"

_W = TypeVar("_W", bound="_WebsocketValue")


@dataclass(frozen=True)
class _WebsocketValue(Header):
    value: str

    def __post_init__(self) -> None:
        validate_value(self.value)

    @classmethod
    def decode(cls: type[_W], values: Iterable[str]) -> _W:
        first = next(iter(values), None)
        if first is None:
            raise HeaderError()
        return cls(first)

    def encode(self) -> list[str]:
        return [self.value]


class SecWebsocketKey(_WebsocketValue):
    """``Sec-WebSocket-Key`` header sent by the client."""

    name = "sec-websocket-key"


class SecWebsocketAccept(_WebsocketValue):
    """``Sec-WebSocket-Accept`` header: the server's signature of the key."""

    name = "sec-websocket-accept"

    @classmethod
    def from_key(cls, key: SecWebsocketKey) -> SecWebsocketAccept:
        """Sign a client key as the handshake requires."""
        digest = hashlib.sha1(key.value.encode("ascii") + _GUID).digest()
        return cls(base64.b64encode(digest).decode("ascii"))


@dataclass(frozen=True)
class SecWebsocketVersion(Header):
    """``Sec-WebSocket-Version`` header; only version 13 is supported."""

    version: int = 13

    name: ClassVar[str] = "sec-websocket-version"
    V13: ClassVar[SecWebsocketVersion]

    def __post_init__(self) -> None:
        if self.version != 13:
            raise ValueError(f"unsupported websocket version: {self.version}")

    @classmethod
    def decode(cls, values: Iterable[str]) -> SecWebsocketVersion:
        if next(iter(values), None) != "13":
            raise HeaderError()
        return cls.V13

    def encode(self) -> list[str]:
        return ["13"]


SecWebsocketVersion.V13 = SecWebsocketVersion(13)