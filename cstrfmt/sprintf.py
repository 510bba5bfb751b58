"""printf-style formatting of values into a new string."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from fractions import Fraction
from typing import Any

from .spec import Length, Spec, parse_spec

_INTEGER_CONVERSIONS = frozenset("diuoxX")
_HALF = Fraction(1, 2)
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"
_POINTER_BITS = 64
_MAX_SINGLE_BYTE = 0x7F


@dataclass
class CountRef:
    """Receives the number of characters written so far for ``%n``."""

    value: int = 0


def _next_arg(args: Iterator) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _bits(length: Length, long_double_is_wide: bool = False) -> int:
    if length in (Length.LONG, Length.LONG_LONG):
        return 64
    if length is Length.LONG_DOUBLE and long_double_is_wide:
        return 64
    if length is Length.SHORT:
        return 16
    if length is Length.CHAR:
        return 8
    return 32


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _as_int(arg: Any) -> int:
    if isinstance(arg, str) and len(arg) == 1:
        return ord(arg)
    return operator.index(arg)


def _is_wide(spec: Spec) -> bool:
    return spec.length in (Length.LONG, Length.LONG_LONG)


def _pad_char(spec: Spec) -> str:
    integer = spec.conversion in _INTEGER_CONVERSIONS
    if spec.zero and not integer:
        return "0"
    if integer and spec.zero and not spec.has_precision:
        return "0"
    return " "


def _pad_before(spec: Spec, size: int) -> str:
    if spec.width and not spec.minus:
        return _pad_char(spec) * max(0, spec.width - size)
    return ""


def _pad_after(spec: Spec, size: int) -> str:
    if spec.width and spec.minus:
        return " " * max(0, spec.width - size)
    return ""


def _format_signed(spec: Spec, arg: Any) -> str:
    value = _wrap_signed(_as_int(arg), _bits(spec.length))
    body = ("-" if value < 0 else "+") + str(abs(value))
    parts: list[str] = []
    has_sign = True
    if not spec.plus and spec.space and body[0] == "+":
        body = " " + body[1:]
        if spec.has_precision and not spec.precision and body[1] == "0":
            parts.append(body[0])
            body = body[1:]
    if not spec.plus and not spec.space and body[0] == "+":
        body = body[1:]
        has_sign = False

    size = len(body)
    if spec.zero and (spec.plus or spec.space or body[0] == "-") and not spec.has_precision:
        parts.append(body[0])
        body = body[1:]
        has_sign = False

    sign = int(has_sign)
    if spec.precision > size - sign:
        size = spec.precision + sign
        parts.append(_pad_before(spec, size))
        if (spec.plus or body[0] == "-" or spec.space) and has_sign:
            parts.append(body[0])
            body = body[1:]
            sign = 0
        parts.append("0" * max(0, spec.precision - len(body) - sign))
        suppress = False
    else:
        suppress = body == "0" and spec.has_precision and not spec.precision
        if suppress:
            size -= 1
        parts.append(_pad_before(spec, size))
    if not suppress:
        parts.append(body)
    parts.append(_pad_after(spec, size))
    return "".join(parts)


def _alternate_prefix(spec: Spec, digits: str) -> str:
    if not spec.sharp or digits[0] == "0":
        return ""
    prefix = "0" if spec.conversion in "oxX" else ""
    if spec.conversion in "xX":
        prefix += spec.conversion
    return prefix


def _format_unsigned(spec: Spec, arg: Any) -> str:
    value = _as_int(arg) & ((1 << _bits(spec.length)) - 1)
    conv = spec.conversion
    digits = format(value, {"o": "o", "x": "x", "X": "X"}.get(conv, "d"))

    size = max(len(digits), spec.precision)
    if spec.sharp and size > 0 and conv in "oxX" and digits[0] != "0":
        size += 1
    if spec.sharp and size > 0 and conv in "xX" and digits[0] != "0":
        size += 1

    parts: list[str] = []
    prefix_pending = True
    if spec.width > size + 2 and spec.sharp and spec.zero and digits[0] != "0":
        prefix_pending = False
        parts.append(_alternate_prefix(spec, digits))
    suppress = (digits == "0" and spec.has_precision and not spec.precision
                and not (conv == "o" and spec.sharp))
    if suppress:
        size -= 1
    parts.append(_pad_before(spec, size))
    if prefix_pending and not (spec.precision > len(digits) and conv == "o"):
        parts.append(_alternate_prefix(spec, digits))
    if spec.precision > len(digits):
        parts.append("0" * (spec.precision - len(digits)))
    if not suppress:
        parts.append(digits)
    parts.append(_pad_after(spec, size))
    return "".join(parts)


def _single_byte(ch: str) -> str:
    if ord(ch) > _MAX_SINGLE_BYTE:
        raise ValueError(f"character {ch!r} is not a single-byte character")
    return ch


def _format_char(spec: Spec, arg: Any) -> str:
    if _is_wide(spec):
        ch = _single_byte(chr(_as_int(arg)))
    else:
        ch = chr(_as_int(arg) & 0xFF)
    return _pad_before(spec, 1) + ch + _pad_after(spec, 1)


def _write_str(spec: Spec, text: str) -> str:
    size = len(text)
    if spec.has_precision and spec.precision < size:
        size = max(0, spec.precision)
    return _pad_before(spec, size) + text[:size] + _pad_after(spec, size)


def _format_string(spec: Spec, arg: Any) -> str:
    spec.zero = False
    if _is_wide(spec):
        if arg is None:
            return _write_str(spec, _NULL_STRING)
        text = str(arg)
        if not text:
            return ""
        return _write_str(spec, "".join(_single_byte(ch) for ch in text))
    if arg is None:
        if spec.has_precision and spec.precision < len(_NULL_STRING):
            return _write_str(spec, "")
        return _write_str(spec, _NULL_STRING)
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a string, not {type(arg).__name__}")
    return _write_str(spec, arg)


def _format_pointer(spec: Spec, arg: Any) -> str:
    if arg is None:
        address = 0
    elif isinstance(arg, int):
        address = arg
    else:
        address = id(arg)
    address &= (1 << _POINTER_BITS) - 1

    if not address:
        body = _NULL_POINTER
        size = len(body) + 2
        return body + _pad_after(spec, size)

    body = format(address, "x")
    size = len(body) + 2
    parts: list[str] = []
    if spec.zero and not spec.precision:
        parts.append("0x")
    else:
        spec.zero = False
    if spec.precision > size - 2:
        size = spec.precision + 2
    parts.append(_pad_before(spec, size))
    if not spec.zero:
        parts.append("0x")
    parts.append("0" * max(0, size - 2 - len(body)))
    parts.append(body)
    parts.append(_pad_after(spec, size))
    return "".join(parts)


def _floor_log10(x: Fraction) -> int:
    degree = len(str(x.numerator)) - len(str(x.denominator))
    if x < Fraction(10) ** degree:
        degree -= 1
    return degree


def _fixed(x: Fraction, precision: int, sharp: bool) -> str:
    scale = 10 ** precision
    whole, frac = divmod(math.floor(x * scale + _HALF), scale)
    text = str(whole)
    if precision or sharp:
        text += "."
    if precision:
        text += str(frac).zfill(precision)
    return text


def _exponent(x: Fraction, precision: int, sharp: bool, letter: str) -> str:
    degree = 0 if x == 0 else _floor_log10(x)
    scaled = x / Fraction(10) ** degree * 10 ** precision + _HALF
    if scaled >= 10 ** (precision + 1):
        degree += 1
        scaled /= 10
    lead, frac = divmod(math.floor(scaled), 10 ** precision)
    text = str(lead)
    if precision or sharp:
        text += "."
    if precision:
        text += str(frac).zfill(precision)
    return f"{text}{letter}{'+' if degree >= 0 else '-'}{abs(degree):02d}"


def _trailing_zeros(text: str) -> int:
    if "." not in text:
        return 0
    fraction = text.split(".", 1)[1].split("e")[0].split("E")[0]
    return len(fraction) - len(fraction.rstrip("0"))


def _general(x: Fraction, precision: int, sharp: bool, upper: bool) -> str:
    degree = 0 if x == 0 else _floor_log10(x)
    p = precision
    if ((0 <= degree < p and p) or -5 < degree < 0
            or (0 <= degree <= p and not p)):
        if degree >= 0 and p:
            p -= degree + 1
        elif degree < 0 and p and p <= -degree:
            p += -degree - 1
        elif degree < 0 and not p:
            p = -degree
        text = _fixed(x, p, sharp)
        zeros = _trailing_zeros(text)
        if zeros and not sharp:
            text = _fixed(x, p - zeros, sharp)
        return text
    if p:
        p -= 1
    letter = "E" if upper else "e"
    text = _exponent(x, p, sharp, letter)
    zeros = _trailing_zeros(text)
    if zeros and not sharp:
        text = _exponent(x, p - zeros, sharp, letter)
    return text


def _format_float(spec: Spec, arg: Any) -> str:
    number = float(arg)
    if math.isnan(number) or math.isinf(number):
        spec.zero = False
        if math.isnan(number):
            body = "nan"
        else:
            body = "-inf" if number < 0 else "inf"
        return _pad_before(spec, len(body)) + body + _pad_after(spec, len(body))

    x = abs(Fraction(number))
    precision = max(0, spec.precision)
    conv = spec.conversion
    if conv in "eE":
        digits = _exponent(x, precision, spec.sharp, conv)
    elif conv == "f":
        digits = _fixed(x, precision, spec.sharp)
    else:
        digits = _general(x, precision, spec.sharp, conv == "G")

    body = ("-" if number < 0 else "+") + digits
    if not spec.plus and spec.space and body[0] == "+":
        body = " " + body[1:]
    if not spec.plus and not spec.space and body[0] == "+":
        body = body[1:]
    size = len(body)
    parts: list[str] = []
    if spec.zero and (spec.plus or spec.space or body[0] == "-"):
        parts.append(body[0])
        body = body[1:]
    parts.append(_pad_before(spec, size))
    parts.append(body)
    parts.append(_pad_after(spec, size))
    return "".join(parts)


def _store_count(spec: Spec, target: Any, written: int) -> None:
    if not isinstance(target, CountRef):
        raise TypeError("%n expects a CountRef")
    target.value = _wrap_signed(written, _bits(spec.length, long_double_is_wide=True))


_HANDLERS: dict[str, Callable[[Spec, Any], str]] = {
    "d": _format_signed,
    "i": _format_signed,
    "o": _format_unsigned,
    "u": _format_unsigned,
    "x": _format_unsigned,
    "X": _format_unsigned,
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "e": _format_float,
    "E": _format_float,
    "f": _format_float,
    "g": _format_float,
    "G": _format_float,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to the printf-style ``fmt`` and return the text.

    ``%n`` stores the count of characters written so far into a ``CountRef``.
    A ``%`` not followed by a known conversion is dropped and the character
    after it is copied literally.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    arg_iter = iter(args)
    pieces: list[str] = []
    written = 0
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        literal = fmt[pos:percent]
        pieces.append(literal)
        written += len(literal)
        spec = parse_spec(fmt, percent, arg_iter)
        if not spec.found:
            following = fmt[percent + 1:percent + 2]
            pieces.append(following)
            written += len(following)
            pos = percent + 2
            continue
        if spec.conversion == "n":
            _store_count(spec, _next_arg(arg_iter), written)
        else:
            text = _HANDLERS[spec.conversion](spec, _next_arg(arg_iter))
            pieces.append(text)
            written += len(text)
        pos = spec.end
    return "".join(pieces)