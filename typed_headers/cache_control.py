"""The ``Cache-Control`` header and its directives."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import ClassVar, Optional, Union

from typed_headers.core import Header, HeaderError, join_csv, split_csv
from typed_headers.dates import parse_seconds

_U64_MAX = 2**64 - 1


class _Flags(enum.Flag):
    NONE = 0
    NO_CACHE = enum.auto()
    NO_STORE = enum.auto()
    NO_TRANSFORM = enum.auto()
    ONLY_IF_CACHED = enum.auto()
    MUST_REVALIDATE = enum.auto()
    PUBLIC = enum.auto()
    PRIVATE = enum.auto()
    PROXY_REVALIDATE = enum.auto()


# Encoding order of the flag directives.
_FLAG_DIRECTIVES = (
    (_Flags.NO_CACHE, "no-cache"),
    (_Flags.NO_STORE, "no-store"),
    (_Flags.NO_TRANSFORM, "no-transform"),
    (_Flags.ONLY_IF_CACHED, "only-if-cached"),
    (_Flags.MUST_REVALIDATE, "must-revalidate"),
    (_Flags.PUBLIC, "public"),
    (_Flags.PRIVATE, "private"),
    (_Flags.PROXY_REVALIDATE, "proxy-revalidate"),
)
_FLAG_BY_NAME = {name: flag for flag, name in _FLAG_DIRECTIVES}

# Directive name -> dataclass field, in encoding order.
_ARG_DIRECTIVES = (
    ("max-age", "max_age_seconds"),
    ("max-stale", "max_stale_seconds"),
    ("min-fresh", "min_fresh_seconds"),
    ("s-maxage", "s_max_age_seconds"),
)
_ARG_BY_NAME = dict(_ARG_DIRECTIVES)

Seconds = Union[int, timedelta]


def _to_seconds(value: Seconds) -> int:
    if isinstance(value, timedelta):
        value = value // timedelta(seconds=1)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("seconds must be an int or a timedelta")
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"seconds out of range: {value}")
    return value


def _as_duration(value: Optional[int]) -> Optional[timedelta]:
    return None if value is None else timedelta(seconds=value)


@dataclass(frozen=True)
class CacheControl(Header):
    """``Cache-Control`` header: directives for caches along the chain.

    Unknown directives are ignored when decoding.
    """

    flags: _Flags = _Flags.NONE
    max_age_seconds: Optional[int] = None
    max_stale_seconds: Optional[int] = None
    min_fresh_seconds: Optional[int] = None
    s_max_age_seconds: Optional[int] = None

    name: ClassVar[str] = "cache-control"

    def __post_init__(self) -> None:
        for _, field_name in _ARG_DIRECTIVES:
            value = getattr(self, field_name)
            if value is not None:
                object.__setattr__(self, field_name, _to_seconds(value))

    # queries

    def no_cache(self) -> bool:
        """Whether ``no-cache`` is set."""
        return _Flags.NO_CACHE in self.flags

    def no_store(self) -> bool:
        """Whether ``no-store`` is set."""
        return _Flags.NO_STORE in self.flags

    def no_transform(self) -> bool:
        """Whether ``no-transform`` is set."""
        return _Flags.NO_TRANSFORM in self.flags

    def only_if_cached(self) -> bool:
        """Whether ``only-if-cached`` is set."""
        return _Flags.ONLY_IF_CACHED in self.flags

    def public(self) -> bool:
        """Whether ``public`` is set."""
        return _Flags.PUBLIC in self.flags

    def private(self) -> bool:
        """Whether ``private`` is set."""
        return _Flags.PRIVATE in self.flags

    def max_age(self) -> Optional[timedelta]:
        """The ``max-age`` directive, if set."""
        return _as_duration(self.max_age_seconds)

    def max_stale(self) -> Optional[timedelta]:
        """The ``max-stale`` directive, if set."""
        return _as_duration(self.max_stale_seconds)

    def min_fresh(self) -> Optional[timedelta]:
        """The ``min-fresh`` directive, if set."""
        return _as_duration(self.min_fresh_seconds)

    def s_max_age(self) -> Optional[timedelta]:
        """The ``s-maxage`` directive, if set."""
        return _as_duration(self.s_max_age_seconds)

    # builders

    def _with_flag(self, flag: _Flags) -> CacheControl:
        return replace(self, flags=self.flags | flag)

    def with_no_cache(self) -> CacheControl:
        """A copy with ``no-cache`` set."""
        return self._with_flag(_Flags.NO_CACHE)

    def with_no_store(self) -> CacheControl:
        """A copy with ``no-store`` set."""
        return self._with_flag(_Flags.NO_STORE)

    def with_no_transform(self) -> CacheControl:
        """A copy with ``no-transform`` set."""
        return self._with_flag(_Flags.NO_TRANSFORM)

    def with_only_if_cached(self) -> CacheControl:
        """A copy with ``only-if-cached`` set."""
        return self._with_flag(_Flags.ONLY_IF_CACHED)

    def with_private(self) -> CacheControl:
        """A copy with ``private`` set."""
        return self._with_flag(_Flags.PRIVATE)

    def with_public(self) -> CacheControl:
        """A copy with ``public`` set."""
        return self._with_flag(_Flags.PUBLIC)

    def with_max_age(self, seconds: Seconds) -> CacheControl:
        """A copy with ``max-age`` set."""
        return replace(self, max_age_seconds=_to_seconds(seconds))

    def with_max_stale(self, seconds: Seconds) -> CacheControl:
        """A copy with ``max-stale`` set."""
        return replace(self, max_stale_seconds=_to_seconds(seconds))

    def with_min_fresh(self, seconds: Seconds) -> CacheControl:
        """A copy with ``min-fresh`` set."""
        return replace(self, min_fresh_seconds=_to_seconds(seconds))

    def with_s_max_age(self, seconds: Seconds) -> CacheControl:
        """A copy with ``s-maxage`` set."""
        return replace(self, s_max_age_seconds=_to_seconds(seconds))

    # wire format

    @classmethod
    def decode(cls, values: Iterable[str]) -> CacheControl:
        flags = _Flags.NONE
        args: dict[str, int] = {}
        for item in split_csv(values):
            flag = _FLAG_BY_NAME.get(item)
            if flag is not None:
                flags |= flag
                continue
            key, sep, raw = item.partition("=")
            if not sep or not raw:
                continue
            field_name = _ARG_BY_NAME.get(key)
            if field_name is None:
                continue
            args[field_name] = parse_seconds(raw.strip('"'))
        return cls(flags, **args)

    def encode(self) -> list[str]:
        directives = [name for flag, name in _FLAG_DIRECTIVES if flag in self.flags]
        for directive, field_name in _ARG_DIRECTIVES:
            value = getattr(self, field_name)
            if value is not None:
                directives.append(f"{directive}={value}")
        return [join_csv(directives)]


__all__ = ["CacheControl", "HeaderError"]