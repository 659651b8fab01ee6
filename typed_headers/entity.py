"""Entity tags and the headers that carry or compare them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar, TypeVar, Union

from typed_headers.core import (
    Header,
    HeaderError,
    join_csv,
    just_one,
    split_csv,
    validate_value,
)
from typed_headers.dates import LastModified, format_http_date, parse_http_date

_R = TypeVar("_R", bound="_TagRange")


def _is_etagc(ch: str) -> bool:
    return ch == "!" or "#" <= ch <= "~" or ch >= "\x80"


def _normalize(when: datetime) -> datetime:
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc).replace(microsecond=0)


@dataclass(frozen=True)
class EntityTag:
    """An opaque validator, optionally marked weak (``W/"..."``)."""

    tag: str
    weak: bool = False

    def __post_init__(self) -> None:
        if not all(_is_etagc(ch) for ch in self.tag):
            raise HeaderError()

    @classmethod
    def parse(cls, text: str) -> EntityTag:
        """Parse ``"tag"`` or ``W/"tag"``; the ``W`` is case-sensitive."""
        weak = text.startswith("W/")
        body = text[2:] if weak else text
        if len(body) < 2 or not body.startswith('"') or not body.endswith('"'):
            raise HeaderError()
        return cls(body[1:-1], weak)

    def strong_eq(self, other: EntityTag) -> bool:
        """Strong comparison: both tags strong and identical."""
        return not self.weak and not other.weak and self.tag == other.tag

    def weak_eq(self, other: EntityTag) -> bool:
        """Weak comparison: identical opaque tags, weakness ignored."""
        return self.tag == other.tag

    def __str__(self) -> str:
        return f'{"W/" if self.weak else ""}"{self.tag}"'


class InvalidETag(ValueError):
    """Raised when text is not a legal entity tag."""


@dataclass(frozen=True)
class ETag(Header):
    """``ETag`` header: the current entity tag of the representation."""

    tag: EntityTag

    name: ClassVar[str] = "etag"

    @classmethod
    def parse(cls, text: str) -> ETag:
        """Build an ``ETag`` from text, raising ``InvalidETag`` if illegal."""
        try:
            return cls(EntityTag.parse(text))
        except HeaderError:
            raise InvalidETag(f"invalid ETag: {text!r}") from None

    @classmethod
    def decode(cls, values: Iterable[str]) -> ETag:
        return cls(EntityTag.parse(just_one(values)))

    def encode(self) -> list[str]:
        return [str(self.tag)]


@dataclass(frozen=True)
class _TagRange(Header):
    value: str

    def __post_init__(self) -> None:
        validate_value(self.value)

    @classmethod
    def decode(cls: type[_R], values: Iterable[str]) -> _R:
        collected = list(values)
        if not collected:
            raise HeaderError()
        return cls(join_csv(collected))

    def encode(self) -> list[str]:
        return [self.value]

    def _is_any(self) -> bool:
        return self.value == "*"

    def _tags(self) -> Iterator[EntityTag]:
        for item in split_csv([self.value]):
            try:
                yield EntityTag.parse(item)
            except HeaderError:
                continue

    def _matches_strong(self, other: EntityTag) -> bool:
        return self._is_any() or any(tag.strong_eq(other) for tag in self._tags())

    def _matches_weak(self, other: EntityTag) -> bool:
        return self._is_any() or any(tag.weak_eq(other) for tag in self._tags())


class IfMatch(_TagRange):
    """``If-Match`` header: ``*`` or a list of entity tags, compared strongly."""

    name = "if-match"

    @classmethod
    def any(cls) -> IfMatch:
        """The ``If-Match: *`` header."""
        return cls("*")

    def is_any(self) -> bool:
        """Whether this is ``If-Match: *``."""
        return self._is_any()

    def precondition_passes(self, etag: ETag) -> bool:
        """Whether ``etag`` strongly matches one of the listed tags."""
        return self._matches_strong(etag.tag)


class IfNoneMatch(_TagRange):
    """``If-None-Match`` header: ``*`` or a list of entity tags, compared weakly."""

    name = "if-none-match"

    @classmethod
    def any(cls) -> IfNoneMatch:
        """The ``If-None-Match: *`` header."""
        return cls("*")

    def precondition_passes(self, etag: ETag) -> bool:
        """Whether ``etag`` matches none of the listed tags."""
        return not self._matches_weak(etag.tag)


@dataclass(frozen=True)
class IfRange(Header):
    """``If-Range`` header: an entity tag or the date the client fetched the resource."""

    value: Union[EntityTag, datetime]

    name: ClassVar[str] = "if-range"

    def __post_init__(self) -> None:
        if isinstance(self.value, datetime):
            object.__setattr__(self, "value", _normalize(self.value))
        elif not isinstance(self.value, EntityTag):
            raise TypeError("If-Range holds an entity tag or a datetime")

    @classmethod
    def etag(cls, tag: ETag) -> IfRange:
        """An ``If-Range`` with an entity tag."""
        return cls(tag.tag)

    @classmethod
    def date(cls, when: datetime) -> IfRange:
        """An ``If-Range`` with a date."""
        return cls(when)

    @classmethod
    def decode(cls, values: Iterable[str]) -> IfRange:
        first = next(iter(values), None)
        if first is None:
            raise HeaderError()
        try:
            return cls(EntityTag.parse(first))
        except HeaderError:
            return cls(parse_http_date(first))

    def encode(self) -> list[str]:
        if isinstance(self.value, datetime):
            return [format_http_date(self.value)]
        return [str(self.value)]

    def is_modified(
        self, etag: ETag | None = None, last_modified: LastModified | None = None
    ) -> bool:
        """Whether the resource changed, so the range request cannot be served."""
        if isinstance(self.value, datetime):
            if last_modified is None:
                return True
            return self.value < last_modified.when
        if etag is None:
            return True
        return not etag.tag.strong_eq(self.value)