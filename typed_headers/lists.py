"""Headers whose value is a comma-separated list of tokens, methods or header names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeVar

from typed_headers.core import (
    Header,
    HeaderError,
    join_csv,
    parse_header_name,
    parse_method,
    split_csv,
    validate_value,
)

_L = TypeVar("_L", bound="_ListHeader")


@dataclass(frozen=True)
class _ListHeader(Header):
    value: str

    def __post_init__(self) -> None:
        validate_value(self.value)

    @classmethod
    def decode(cls: type[_L], values: Iterable[str]) -> _L:
        collected = list(values)
        if not collected:
            raise HeaderError()
        return cls(join_csv(collected))

    def encode(self) -> list[str]:
        return [self.value]

    def _items(self) -> Iterator[str]:
        return split_csv([self.value])


def _parsed(items: Iterable[str], parser) -> Iterator[str]:
    """Yield the items that the parser accepts, skipping the others."""
    for item in items:
        try:
            yield parser(item)
        except HeaderError:
            continue


def _join_names(names: Iterable[str]) -> str:
    return join_csv(parse_header_name(name) for name in names)


def _join_methods(methods: Iterable[str]) -> str:
    return join_csv(parse_method(method) for method in methods)


class Connection(_ListHeader):
    """``Connection`` header: control options for the current connection."""

    name = "connection"

    @classmethod
    def close(cls) -> Connection:
        """The ``Connection: close`` header."""
        return cls("close")

    @classmethod
    def keep_alive(cls) -> Connection:
        """The ``Connection: keep-alive`` header."""
        return cls("keep-alive")

    @classmethod
    def upgrade(cls) -> Connection:
        """The ``Connection: upgrade`` header."""
        return cls("upgrade")

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Connection:
        """Build from header names, which are written in lower case."""
        return cls(_join_names(names))

    def contains(self, name: str) -> bool:
        """Whether the given option is listed, compared case-insensitively."""
        wanted = name.lower()
        return any(option.lower() == wanted for option in self._items())


class ContentEncoding(_ListHeader):
    """``Content-Encoding`` header: the codings applied to the content."""

    name = "content-encoding"

    @classmethod
    def gzip(cls) -> ContentEncoding:
        """The ``Content-Encoding: gzip`` header."""
        return cls("gzip")

    def contains(self, coding: str) -> bool:
        """Whether the given coding is listed, compared exactly."""
        return any(item == coding for item in self._items())


class Allow(_ListHeader):
    """``Allow`` header: the methods supported by the target resource."""

    name = "allow"

    @classmethod
    def from_methods(cls, methods: Iterable[str]) -> Allow:
        """Build from method names."""
        return cls(_join_methods(methods))

    def __iter__(self) -> Iterator[str]:
        """Yield the listed methods, skipping any that are not valid."""
        return _parsed(self._items(), parse_method)


class AccessControlAllowMethods(_ListHeader):
    """``Access-Control-Allow-Methods`` header: methods allowed for the actual request."""

    name = "access-control-allow-methods"

    @classmethod
    def from_methods(cls, methods: Iterable[str]) -> AccessControlAllowMethods:
        """Build from method names."""
        return cls(_join_methods(methods))

    def __iter__(self) -> Iterator[str]:
        """Yield the listed methods, skipping any that are not valid."""
        return _parsed(self._items(), parse_method)


class AccessControlAllowHeaders(_ListHeader):
    """``Access-Control-Allow-Headers`` header: header names usable in the actual request."""

    name = "access-control-allow-headers"

    @classmethod
    def from_names(cls, names: Iterable[str]) -> AccessControlAllowHeaders:
        """Build from header names, which are written in lower case."""
        return cls(_join_names(names))

    def __iter__(self) -> Iterator[str]:
        """Yield the listed header names, stopping at the first invalid one."""
        for item in self._items():
            try:
                yield parse_header_name(item)
            except HeaderError:
                return


class AccessControlExposeHeaders(_ListHeader):
    """``Access-Control-Expose-Headers`` header: header names safe to expose."""

    name = "access-control-expose-headers"

    @classmethod
    def from_names(cls, names: Iterable[str]) -> AccessControlExposeHeaders:
        """Build from header names, which are written in lower case."""
        return cls(_join_names(names))

    def __iter__(self) -> Iterator[str]:
        """Yield the listed header names, skipping any that are not valid."""
        return _parsed(self._items(), parse_header_name)


class AccessControlRequestHeaders(_ListHeader):
    """``Access-Control-Request-Headers`` header: header names the actual request will use."""

    name = "access-control-request-headers"

    @classmethod
    def from_names(cls, names: Iterable[str]) -> AccessControlRequestHeaders:
        """Build from header names, which are written in lower case."""
        return cls(_join_names(names))

    def __iter__(self) -> Iterator[str]:
        """Yield the listed header names, skipping any that are not valid."""
        return _parsed(self._items(), parse_header_name)