"""Percent-decoding of raw request paths.

``urllib.parse.unquote`` is lenient: it passes malformed escapes through
and replaces invalid UTF-8.  Request paths here must either decode
completely or be rejected, so the scan is done by hand.
"""

from inkwell.errors import DecodeError

_HEXDIGITS = frozenset("0123456789abcdefABCDEF")


def percent_decode(raw: str) -> str:
    """Decode every ``%XX`` escape in *raw* and validate the result as UTF-8.

    Examples::

        percent_decode("a%20bc")        -> "a bc"
        percent_decode("a%2Fbc")        -> "a/bc"
        percent_decode("%EA%B0%80")     -> "가"

    Raises:
        DecodeError: A ``%`` is not followed by two hex digits, or the
            decoded bytes are not valid UTF-8.
    """
    out = bytearray()
    i = 0
    n = len(raw)
    while i < n:
        ch = raw[i]
        if ch != "%":
            try:
                out += ch.encode("utf-8")
            except UnicodeEncodeError as exc:
                msg = f"Unencodable character at offset {i} in {raw!r}"
                raise DecodeError(msg) from exc
            i += 1
            continue

        pair = raw[i + 1 : i + 3]
        if len(pair) < 2:
            msg = f"Truncated escape at offset {i} in {raw!r}"
            raise DecodeError(msg)
        if pair[0] not in _HEXDIGITS or pair[1] not in _HEXDIGITS:
            msg = f"Invalid escape %{pair} at offset {i} in {raw!r}"
            raise DecodeError(msg)
        out.append(int(pair, 16))
        i += 3

    try:
        return out.decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = f"Path {raw!r} does not decode to UTF-8 text"
        raise DecodeError(msg) from exc
