import pytest

from cstrfmt.sprintf import CountRef, sprintf


@pytest.mark.parametrize(
    "fmt, args, py_fmt",
    [
        ("%d", (42,), "%d"),
        ("%d", (-42,), "%d"),
        ("%5d", (42,), "%5d"),
        ("%-5d|", (42,), "%-5d|"),
        ("%05d", (-42,), "%05d"),
        ("%+d", (7,), "%+d"),
        ("% d", (7,), "% d"),
        ("%.3d", (-5,), "%.3d"),
        ("%i", (123,), "%i"),
        ("%ld", (2 ** 40,), "%d"),
        ("%lld", (-(2 ** 62),), "%d"),
        ("%*d", (5, 42), "%*d"),
        ("%5.0d", (0,), "%5s"),
    ],
)
def test_signed_integers_match_printf(fmt, args, py_fmt):
    expected_args = ("",) if py_fmt == "%5s" else args
    assert sprintf(fmt, *args) == py_fmt % expected_args


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%u", 42),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%#X", 255),
        ("%o", 8),
        ("%08x", 255),
        ("%-8X|", 255),
        ("%.4x", 255),
    ],
)
def test_unsigned_integers_match_printf(fmt, value):
    assert sprintf(fmt, value) == fmt % value


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%s", ("hello",)),
        ("%10s", ("hi",)),
        ("%-10s|", ("hi",)),
        ("%.2s", ("hello",)),
        ("%c", ("A",)),
        ("%5c", ("A",)),
        ("%c", (65,)),
        ("%s and %s", ("one", "two")),
    ],
)
def test_strings_and_chars_match_printf(fmt, args):
    assert sprintf(fmt, *args) == fmt % args


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%f", 3.14159),
        ("%.2f", 1.2345),
        ("%10.3f", -3.14159),
        ("%e", 12345.678),
        ("%E", 0.000123),
        ("%.3e", 9.9999),
        ("%.0e", 12345.0),
        ("%g", 123456.0),
        ("%g", 1234567.0),
        ("%g", 100.0),
        ("%g", 0.5),
        ("%G", 1e-10),
        ("% f", 1.5),
        ("%+e", -1.5),
        ("%08.2f", -1.5),
        ("%#.0f", 3.0),
    ],
)
def test_floats_match_printf(fmt, value):
    assert sprintf(fmt, value) == fmt % value


def test_double_percent_is_literal():
    assert sprintf("100%% done") == "100%% done" % ()


def test_unknown_conversion_copies_next_character():
    assert sprintf("%y") == "y"


def test_trailing_percent_is_dropped():
    assert sprintf("100%") == "100"


def test_alternate_octal():
    assert sprintf("%#o", 8) == "010"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_null_string_with_short_precision_is_empty():
    assert sprintf("%.3s", None) == sprintf("%s", "")


def test_null_pointer():
    assert sprintf("%p", None) == "(nil)"


def test_pointer_is_hex_with_prefix():
    assert sprintf("%p", 255) == "%#x" % 255


def test_nan_and_infinities():
    assert sprintf("%f", float("nan")) == "nan"
    assert sprintf("%f", float("inf")) == "inf"
    assert sprintf("%f", float("-inf")) == "-inf"
    assert sprintf("%5f", float("inf")) == "%5s" % "inf"


def test_short_length_wraps():
    assert sprintf("%hd", 65536 + 5) == sprintf("%hd", 5)


def test_char_length_unsigned_wraps():
    assert sprintf("%hhu", 256 + 7) == sprintf("%u", 7)


def test_unsigned_negative_wraps_to_32_bits():
    assert sprintf("%u", -1) == sprintf("%u", 0xFFFFFFFF)


def test_count_records_written_characters():
    ref = CountRef()
    assert sprintf("ab%nc", ref) == "abc"
    assert ref.value == len("ab")


def test_count_with_char_length_wraps():
    ref = CountRef()
    sprintf("x" * 300 + "%hhn", ref)
    assert ref.value == int(sprintf("%hhd", 300))


def test_count_requires_count_ref():
    with pytest.raises(TypeError):
        sprintf("%n", 5)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        sprintf(None)


def test_wide_char_outside_single_byte_raises():
    with pytest.raises(ValueError):
        sprintf("%lc", "\u00e9")


def test_wide_string_outside_single_byte_raises():
    with pytest.raises(ValueError):
        sprintf("%ls", "\u20ac")


def test_wide_string_ascii_passes_through():
    assert sprintf("%ls", "abc") == sprintf("%s", "abc")


@pytest.mark.parametrize("value", [0, 1, 9, 10, 255, 4096, 123456789])
def test_integer_round_trips(value):
    assert int(sprintf("%d", value)) == value
    assert int(sprintf("%x", value), 16) == value
    assert int(sprintf("%o", value), 8) == value
    assert int(sprintf("%u", value)) == value


@pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 3.14159265, 12345.6789, 1e-3])
def test_float_round_trips(value):
    assert float(sprintf("%.10f", value)) == pytest.approx(value, abs=1e-9)
    assert float(sprintf("%.12e", value)) == pytest.approx(value, rel=1e-11)


@pytest.mark.parametrize("value", [0.0, -1.5, 6.02e23, 1e-9])
def test_width_is_respected(value):
    assert len(sprintf("%20e", value)) == 20
    assert len(sprintf("%-20e", value)) == 20