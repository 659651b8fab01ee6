from datetime import timedelta

import pytest

from typed_headers.cache_control import CacheControl
from typed_headers.core import HeaderError


def test_parse_multiple_headers():
    assert (
        CacheControl.decode(["no-cache", "private"])
        == CacheControl().with_no_cache().with_private()
    )


def test_parse_argument():
    assert (
        CacheControl.decode(["max-age=100, private"])
        == CacheControl().with_max_age(timedelta(seconds=100)).with_private()
    )


def test_parse_quote_form():
    assert CacheControl.decode(['max-age="200"']) == CacheControl().with_max_age(
        timedelta(seconds=200)
    )


def test_parse_extension():
    assert CacheControl.decode(["foo, no-cache, bar=baz"]) == CacheControl().with_no_cache()


def test_parse_bad_syntax():
    with pytest.raises(HeaderError):
        CacheControl.decode(["max-age=lolz"])


def test_encode_one_flag_directive():
    assert CacheControl().with_no_cache().encode() == ["no-cache"]


def test_encode_one_param_directive():
    cc = CacheControl().with_max_age(timedelta(seconds=300))
    assert cc.encode() == ["max-age=300"]


def test_encode_two_directive():
    assert CacheControl().with_no_cache().with_private().encode() == ["no-cache, private"]
    cc = CacheControl().with_no_cache().with_max_age(timedelta(seconds=100))
    assert cc.encode() == ["no-cache, max-age=100"]


def test_getters_reflect_builders():
    cc = (
        CacheControl()
        .with_no_store()
        .with_no_transform()
        .with_only_if_cached()
        .with_public()
        .with_max_stale(timedelta(seconds=30))
        .with_min_fresh(30)
        .with_s_max_age(timedelta(seconds=30))
    )
    assert cc.no_store() and cc.no_transform() and cc.only_if_cached() and cc.public()
    assert not cc.no_cache() and not cc.private()
    assert cc.max_stale() == timedelta(seconds=30)
    assert cc.min_fresh() == timedelta(seconds=30)
    assert cc.s_max_age() == timedelta(seconds=30)
    assert cc.max_age() is None


def test_builders_do_not_mutate():
    base = CacheControl()
    base.with_no_cache()
    assert base.no_cache() is False


def test_round_trip_all_directives():
    cc = (
        CacheControl()
        .with_no_cache()
        .with_private()
        .with_max_age(1)
        .with_max_stale(2)
        .with_min_fresh(3)
        .with_s_max_age(4)
    )
    assert CacheControl.decode(cc.encode()) == cc


def test_must_revalidate_survives_round_trip():
    cc = CacheControl.decode(["must-revalidate, proxy-revalidate"])
    assert cc.encode() == ["must-revalidate, proxy-revalidate"]


def test_directive_with_empty_argument_is_ignored():
    assert CacheControl.decode(["max-age=, public"]) == CacheControl().with_public()


def test_negative_seconds_rejected():
    with pytest.raises(ValueError):
        CacheControl().with_max_age(-1)