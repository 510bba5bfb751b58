"""Parsing of a single printf-style conversion specification."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class Length(Enum):
    """Length modifier of a conversion."""

    NONE = ""
    CHAR = "hh"
    SHORT = "h"
    LONG = "l"
    LONG_LONG = "ll"
    LONG_DOUBLE = "L"


CONVERSIONS = frozenset("cdieEfgGosuxXpn")
FLOAT_CONVERSIONS = frozenset("eEfgG")
DEFAULT_FLOAT_PRECISION = 6

_FLAGS = {"-": "minus", "+": "plus", " ": "space", "#": "sharp", "0": "zero"}


@dataclass
class Spec:
    """A parsed conversion: flags, width, precision, length and conversion."""

    minus: bool = False
    plus: bool = False
    space: bool = False
    sharp: bool = False
    zero: bool = False
    width: int = 0
    precision: int = 0
    has_precision: bool = False
    length: Length = Length.NONE
    conversion: str | None = None
    end: int = 0

    @property
    def found(self) -> bool:
        """Whether a known conversion character was recognised."""
        return self.conversion is not None

    @property
    def is_float(self) -> bool:
        return self.conversion in FLOAT_CONVERSIONS


def _char_at(fmt: str, index: int) -> str:
    return fmt[index] if index < len(fmt) else ""


def _next_int(args: Iterator) -> int:
    try:
        return int(next(args))
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _parse_flags(fmt: str, index: int, spec: Spec) -> int:
    while (name := _FLAGS.get(_char_at(fmt, index))) is not None:
        setattr(spec, name, True)
        index += 1
    return index


def _parse_number(fmt: str, index: int, args: Iterator) -> tuple[int, int]:
    """Read digits and ``*`` the way the formatter accepts them.

    A ``*`` is taken only while the value read so far is zero; digits that
    follow it keep extending the value.
    """
    value = 0
    while True:
        ch = _char_at(fmt, index)
        if ch and ch in "0123456789":
            value = value * 10 + int(ch)
        elif ch == "*" and not value:
            value = _next_int(args)
        else:
            return index, value
        index += 1


def _parse_length(fmt: str, index: int) -> tuple[int, Length]:
    for modifier in (Length.CHAR, Length.SHORT, Length.LONG_LONG,
                     Length.LONG, Length.LONG_DOUBLE):
        if fmt.startswith(modifier.value, index):
            return index + len(modifier.value), modifier
    return index, Length.NONE


def parse_spec(fmt: str, pos: int, args: Iterable) -> Spec:
    """Parse the conversion starting at the ``%`` at ``fmt[pos]``.

    Arguments for ``*`` width and precision are drawn from ``args``.
    ``Spec.end`` is the index just past the conversion character.
    """
    if not fmt.startswith("%", pos):
        raise ValueError(f"no '%' at position {pos}")
    arg_iter = iter(args)
    spec = Spec()
    index = _parse_flags(fmt, pos + 1, spec)
    index, spec.width = _parse_number(fmt, index, arg_iter)
    if _char_at(fmt, index) == ".":
        spec.has_precision = True
        index, spec.precision = _parse_number(fmt, index + 1, arg_iter)
    index, spec.length = _parse_length(fmt, index)
    ch = _char_at(fmt, index)
    if ch and ch in CONVERSIONS:
        spec.conversion = ch
    if spec.is_float and not spec.has_precision:
        spec.precision = DEFAULT_FLOAT_PRECISION
    spec.end = index + 1
    return spec