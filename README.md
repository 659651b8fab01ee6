# typed_headers

Typed HTTP header fields for Python. Each header is a small class that
decodes from the raw field values of a message and encodes back to them.
Malformed input raises `HeaderError` (a subclass of `ValueError`) from
`typed_headers.core`.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Decoding and encoding

Every header class has a `decode` class method, which takes the raw values
of that field in the order they were received, and an `encode` method,
which returns the list of values to send. Each class names its field in the
`name` class attribute, in lower case (for example `"cache-control"`); use
it to look up the raw values in whatever header mapping your HTTP stack
provides.

```python
from datetime import timedelta

from typed_headers.cache_control import CacheControl
from typed_headers.core import HeaderError

cc = CacheControl.decode(["max-age=100, private"])
cc.private()          # True
cc.max_age()          # timedelta(seconds=100)

CacheControl().with_no_cache().with_max_age(timedelta(seconds=100)).encode()
# ["no-cache, max-age=100"]

try:
    CacheControl.decode(["max-age=lolz"])
except HeaderError:
    ...
```

Unknown `Cache-Control` directives are ignored when decoding.

## What is covered

- `typed_headers.core`: the `Header` base class, `HeaderError`, and helpers
  for raw values: `validate_value`, `parse_header_name`, `parse_method`,
  `split_csv`, `join_csv` and `just_one`.
- `typed_headers.basic`: `AcceptRanges`, `ContentLocation`, `Location`,
  `Pragma`, `Referer`, `Server`, `Host`, `Expect` and `ContentLength`.
  `Referer.parse` and `Server.parse` raise `InvalidReferer` and
  `InvalidServer`. `ContentLength` accepts repeated values only when they
  all agree.
- `typed_headers.dates`: `Date`, `Expires`, `LastModified`,
  `IfModifiedSince`, `IfUnmodifiedSince` and `RetryAfter`, plus
  `parse_http_date`, `format_http_date` and `parse_seconds`. Decoding
  accepts the IMF-fixdate, RFC 850 and asctime formats; dates are held as
  UTC `datetime` values at whole-second precision.
- `typed_headers.cookies`: `Cookie` (iterate for `(name, value)` pairs, or
  use `get` and `len`) and `SetCookie`.
- `typed_headers.entity`: `EntityTag`, `ETag` (with `InvalidETag`),
  `IfMatch`, `IfNoneMatch` and `IfRange`. `IfMatch` compares strongly and
  `IfNoneMatch` compares weakly.
- `typed_headers.auth`: `Authorization` and `ProxyAuthorization` with the
  `Basic` and `Bearer` credential types. Decoding takes the credential type
  as a second argument. `Authorization.bearer` raises `InvalidBearerToken`
  for a token that is not a legal header value.
- `typed_headers.cors`: `Origin` (with `InvalidOrigin` and `Origin.NULL`),
  `AccessControlAllowOrigin` (with `ANY` and `NULL`),
  `AccessControlAllowCredentials`, `AccessControlMaxAge` and
  `AccessControlRequestMethod`.
- `typed_headers.lists`: `Connection`, `ContentEncoding`, `Allow`,
  `AccessControlAllowMethods`, `AccessControlAllowHeaders`,
  `AccessControlExposeHeaders` and `AccessControlRequestHeaders`.
  `Connection.contains` ignores case; `ContentEncoding.contains` does not.
- `typed_headers.media`: `ContentType`, with constructors such as `json`,
  `text_utf8`, `html` and `octet_stream`.
- `typed_headers.cache_control`: `CacheControl`.
- `typed_headers.websocket`: `SecWebsocketKey`, `SecWebsocketAccept` and
  `SecWebsocketVersion`.

## Examples

```python
from typed_headers.auth import Authorization, Basic, Bearer
from typed_headers.entity import ETag, IfNoneMatch
from typed_headers.websocket import SecWebsocketAccept, SecWebsocketKey

Authorization.bearer("token").encode()
# ["Bearer token"]

Authorization.decode(["Bearer token"], Bearer).credentials.token()
# "token"

auth = Authorization.basic("Aladdin", "password")
Authorization.decode(auth.encode(), Basic).credentials.username()
# "Aladdin"

tag = ETag.parse('"foo"')
IfNoneMatch.any().precondition_passes(tag)   # False

key = SecWebsocketKey.decode(["dGhlIHNhbXBsZSBub25jZQ=="])
SecWebsocketAccept.from_key(key).encode()
# ["s3pPLMBiTxaQ9kYGzzhZRbK+xOo="]
```

## What it does not do

- There are no classes for the `Content-Range` or `Range` headers.
- There is no header map: the package decodes and encodes lists of raw
  values, and leaves storing them in a message to your HTTP library.
- `Content-Disposition` and the `Accept*` negotiation headers are not
  covered.