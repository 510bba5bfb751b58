# cstrfmt

Small helpers that behave like their C counterparts: byte-buffer operations,
simple string transformations and a `printf`-style formatter. The package has
no dependencies outside the standard library.

## Installation

```
pip install cstrfmt
```

## Memory helpers

`cstrfmt.memory` works on `bytes`, `bytearray` and `memoryview` objects.
Every function takes a byte count `n`; a negative count, or one larger than a
buffer it reads or writes, raises `ValueError`.

```python
from cstrfmt.memory import memchr, memcmp, memcpy, memset

memchr(b"hello", ord("l"), 5)       # 2 (index of the first 'l'), or None
memcmp(b"abc", b"abd", 3)           # -1: difference of the first unequal bytes
buf = bytearray(5)
memcpy(buf, b"hey", 3)              # copies into buf and returns buf
memset(buf, ord("x"), 2)            # fills the first two bytes, returns buf
```

`memchr` and `memset` use only the low eight bits of the value (`c & 0xFF`).
`memcpy` and `memset` raise `TypeError` when the destination is read-only.

## Text helpers

`cstrfmt.text` returns new strings. A `None` source gives `None` back.

```python
from cstrfmt.text import to_upper, to_lower, insert, trim

to_upper("Hello")                   # "HELLO" (ASCII letters only)
to_lower("Hello")                   # "hello"
insert("Helo", "l", 2)              # "Hello"
insert("abc", "xyz", 10)            # "abcxyz": an index past the end appends
insert("abc", None, 1)              # "abc"
trim("  padded  ", " ")             # "padded"
trim("xxpaddedx", "x")              # "padded"
trim("  padded  ", "")              # "padded": empty or None trims spaces
```

`insert` raises `ValueError` for a negative index.

## Formatting

`cstrfmt.sprintf.sprintf(fmt, *args)` takes a C-style format string and its
arguments and returns the formatted text. It supports:

- conversions `c d i e E f g G o s u x X p n`
- flags `-`, `+`, space, `#` and `0`
- a width and a precision, either of which may be `*` (taken from the
  arguments)
- length modifiers `h`, `hh`, `l`, `ll` and `L`

```python
from cstrfmt.sprintf import sprintf, CountRef

sprintf("%5d|%-5s|%.2f", 42, "ab", 3.14159)
# '   42|ab   |3.14'

count = CountRef()
sprintf("abc%n def", count)
count.value                         # 3
```

Details of how arguments are treated:

- Integers are reduced to the width their length modifier implies (32 bits by
  default, 16 for `h`, 8 for `hh`, 64 for `l` and `ll`), wrapping like C
  integers. A one-character string is accepted wherever an integer is.
- `%s` with `None` prints `(null)`, or nothing when the precision is below 6.
- `%p` prints an integer address in hexadecimal with a `0x` prefix; `None` or
  `0` prints `(nil)`; any other object prints its `id()`.
- `%lc` and `%ls` raise `ValueError` for characters outside the single-byte
  ASCII range.
- `%n` stores the count of characters written so far into a `CountRef`; any
  other target raises `TypeError`.
- A `%` not followed by a known conversion is dropped and the character after
  it is copied as is, so `%%` produces `%`.
- Too few arguments raise `TypeError`.

### Parsing a single conversion

`cstrfmt.spec.parse_spec(fmt, pos, args)` parses the conversion that starts
at the `%` at `fmt[pos]` and returns a `Spec` dataclass with the flags
(`minus`, `plus`, `space`, `sharp`, `zero`), `width`, `precision`,
`has_precision`, `length` (a `Length` enum), `conversion` and `end`, the index
just past the conversion character. `Spec.found` tells whether a known
conversion character was recognised. Values for `*` are drawn from `args`.
Floating-point conversions without an explicit precision get a precision of 6.

```python
from cstrfmt.spec import parse_spec, Length

spec = parse_spec("%-08.3lf", 0, [])
spec.minus, spec.zero, spec.width, spec.precision   # (True, True, 8, 3)
spec.length is Length.LONG, spec.conversion, spec.end  # (True, 'f', 8)
```

## Running the tests

```
pip install -e ".[test]"
pytest
```