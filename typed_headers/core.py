"""The header protocol, the decoding error and helpers for raw header values."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import ClassVar, TypeVar

_H = TypeVar("_H", bound="Header")

_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")


class HeaderError(ValueError):
    """Raised when header values cannot be decoded into a typed header."""

    def __init__(self, message: str = "invalid HTTP header") -> None:
        super().__init__(message)


class Header(ABC):
    """A typed header: a lower-case field name plus decoding and encoding."""

    name: ClassVar[str]

    @classmethod
    @abstractmethod
    def decode(cls: type[_H], values: Iterable[str]) -> _H:
        """Build the header from the raw values found under its name."""

    @abstractmethod
    def encode(self) -> list[str]:
        """Return the raw values that represent this header."""


def validate_value(value: str) -> str:
    """Return ``value`` if it is a legal header value (visible ASCII or tab)."""
    if not isinstance(value, str) or any(
        ch != "\t" and not " " <= ch <= "~" for ch in value
    ):
        raise HeaderError()
    return value


def _is_token(value: str) -> bool:
    return bool(value) and all(ch in _TOKEN_CHARS for ch in value)


def parse_header_name(value: str) -> str:
    """Parse a header field name, returning it in lower case."""
    if not _is_token(value):
        raise HeaderError()
    return value.lower()


def parse_method(value: str) -> str:
    """Parse an HTTP method; methods are case-sensitive tokens."""
    if not _is_token(value):
        raise HeaderError()
    return value


def _split_quoted(text: str, separator: str) -> Iterator[str]:
    in_quotes = False
    start = 0
    for pos, ch in enumerate(text):
        if in_quotes:
            if ch == '"':
                in_quotes = False
        elif ch == separator:
            yield text[start:pos]
            start = pos + 1
        elif ch == '"':
            in_quotes = True
    yield text[start:]


def split_csv(values: Iterable[str], separator: str = ",") -> Iterator[str]:
    """Yield the trimmed, non-empty items of delimited header values.

    Separators inside double quotes do not split an item.
    """
    for value in values:
        for item in _split_quoted(value, separator):
            item = item.strip()
            if item:
                yield item


def join_csv(items: Iterable[str], separator: str = ",") -> str:
    """Join items into one delimited header value."""
    return f"{separator} ".join(items)


def just_one(values: Iterable[str]) -> str:
    """Return the only value, raising if there are none or several."""
    iterator = iter(values)
    first = next(iterator, None)
    if first is None or next(iterator, None) is not None:
        raise HeaderError()
    return first