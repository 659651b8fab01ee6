"""The ``Cookie`` request header and the ``Set-Cookie`` response header."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from typed_headers.core import Header, HeaderError, join_csv, split_csv, validate_value


@dataclass(frozen=True)
class Cookie(Header):
    """``Cookie`` header: semicolon-separated ``name=value`` pairs."""

    value: str

    name: ClassVar[str] = "cookie"

    def __post_init__(self) -> None:
        validate_value(self.value)

    @classmethod
    def decode(cls, values: Iterable[str]) -> Cookie:
        collected = list(values)
        if not collected:
            raise HeaderError()
        return cls(join_csv(collected, ";"))

    def encode(self) -> list[str]:
        return [self.value]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Yield the ``(name, value)`` pairs; items without ``=`` are skipped."""
        for item in split_csv([self.value], ";"):
            key, sep, val = item.partition("=")
            if sep:
                yield key.strip(), val.strip()

    def get(self, name: str) -> str | None:
        """The value of the first cookie called ``name``, if any."""
        return next((val for key, val in self if key == name), None)

    def __len__(self) -> int:
        return sum(1 for _ in self)


@dataclass(frozen=True)
class SetCookie(Header):
    """``Set-Cookie`` header: one raw value per cookie."""

    values: tuple[str, ...]

    name: ClassVar[str] = "set-cookie"

    def __post_init__(self) -> None:
        values = tuple(self.values)
        for value in values:
            validate_value(value)
        object.__setattr__(self, "values", values)

    @classmethod
    def decode(cls, values: Iterable[str]) -> SetCookie:
        collected = tuple(values)
        if not collected:
            raise HeaderError()
        return cls(collected)

    def encode(self) -> list[str]:
        return list(self.values)