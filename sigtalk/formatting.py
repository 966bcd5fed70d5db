"""printf-style formatting built on the conversion specifications of ``printf_spec``."""

from __future__ import annotations

import sys

from sigtalk.chars import atoi
from sigtalk.printf_spec import FormatError, Spec, convert, is_valid, parse_spec

_PRECISION_STOPS = b"-xX"


def _checked(amount: int, what: str) -> int:
    if amount < 0:
        raise FormatError(f"negative {what} {amount}")
    return amount


def _pad_left(body: bytes, width: int) -> bytes:
    width = _checked(width, "field width")
    if width > len(body):
        return b" " * (width - len(body)) + body
    return body


def _pad_right(body: bytes, width: int) -> bytes:
    width = _checked(width, "field width")
    if width > len(body):
        return body + b" " * (width - len(body))
    return body


def _zero_pad(body: bytes, width: int, digits: int) -> bytes:
    """Insert zeros between any prefix and the ``digits`` bytes that close ``body``."""
    width = _checked(width, "field width")
    if width <= len(body):
        return body
    fill = b"0" * (width - len(body))
    prefix_len = len(body) - digits
    if body[:1] == b"-":
        prefix_len += 1
    return body[:prefix_len] + fill + body[prefix_len:]


def _precision(body: bytes, precision: int) -> bytes:
    """Widen the digit run at the end of ``body`` to ``precision`` digits."""
    precision = _checked(precision, "precision")
    start = max(body.rfind(bytes([stop])) for stop in _PRECISION_STOPS) + 1
    digits = len(body) - start
    if precision == 0 and body == b"0":
        return b""
    if precision > digits:
        return body[:start] + b"0" * (precision - digits) + body[start:]
    return body


def _truncate(body: bytes, limit: int) -> bytes:
    # A negative limit never cuts anything.
    if 0 <= limit < len(body):
        return body[:limit]
    return body


def _apply_string(text: str, body: bytes) -> bytes:
    pos = 0
    if text[pos] == " ":
        pos += 1
        body = _pad_left(body, atoi(text[pos:]))
    if text[pos] == "-":
        pos += 1
        body = _pad_right(body, atoi(text[pos:]))
    if text[pos] == ".":
        pos += 1
        return _truncate(body, atoi(text[pos:]))
    return _pad_left(body, atoi(text[pos:]))


def _apply_other(text: str, conversion: str, body: bytes) -> bytes:
    pos = 0
    digits = len(body)
    if text[pos] == "#":
        pos += 1
        if body[:1] != b"0":
            body = (b"0X" if conversion == "X" else b"0x") + body
    if text[pos] == "+":
        pos += 1
        if body[:1] != b"-":
            body = b"+" + body
    if text[pos] == " ":
        pos += 1
        if body[:1] != b"-":
            body = b" " + body
    if text[pos] == "0":
        pos += 1
        return _zero_pad(body, atoi(text[pos:]), digits)
    if text[pos] == "-":
        pos += 1
        body = _pad_right(body, atoi(text[pos:]))
    if text[pos] == ".":
        pos += 1
        return _precision(body, atoi(text[pos:]))
    return _pad_left(body, atoi(text[pos:]))


def apply_flags(spec: Spec, body: bytes) -> bytes:
    """Apply the flags, width and precision of ``spec`` to a converted value.

    Raises FormatError for a specification that does not validate, or for a
    width or precision that comes out negative.
    """
    if not is_valid(spec):
        raise FormatError(f"invalid conversion specification %{spec.text}")
    if spec.conversion == "s":
        return _apply_string(spec.text, bytes(body))
    return _apply_other(spec.text, spec.conversion, bytes(body))


def sprintf(fmt: str, *args: object) -> bytes:
    """Format ``args`` according to ``fmt`` and return the resulting bytes.

    Extra arguments are ignored; too few raise FormatError, as does any
    malformed specification.
    """
    out = bytearray()
    values = iter(args)
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            out += fmt[pos:].encode("utf-8")
            break
        out += fmt[pos:percent].encode("utf-8")
        spec, pos = parse_spec(fmt, percent)
        value = None
        if spec.consumes_argument:
            try:
                value = next(values)
            except StopIteration:
                raise FormatError(f"no argument left for %{spec.text}") from None
        out += apply_flags(spec, convert(spec.conversion, value))
    return bytes(out)


def printf(fmt: str, *args: object) -> int:
    """Format like :func:`sprintf`, write to standard output, return the byte count.

    Nothing is written when formatting fails.
    """
    data = sprintf(fmt, *args)
    sys.stdout.flush()
    stream = getattr(sys.stdout, "buffer", None)
    if stream is None:
        sys.stdout.write(data.decode("utf-8", errors="replace"))
        sys.stdout.flush()
    else:
        stream.write(data)
        stream.flush()
    return len(data)