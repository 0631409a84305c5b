import io

import pytest

from fdfview.cformat import cformat, cprintf


def test_integer_in_text():
    assert cformat("das ist ein %i", 50) == "das ist ein 50"


def test_int_min():
    assert cformat("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("value", [0, 50, -50, 2147483647, -2147483648, 12345])
def test_decimal_round_trip(value):
    assert int(cformat("%d", value)) == value
    assert cformat("%i", value) == cformat("%d", value)


def test_string_and_null():
    text = "string is 28 characters long"
    assert cformat("%s", text) == text
    assert len(cformat("%s", text)) == 28
    assert cformat("%s", None) == "(null)"


def test_null_pointer():
    assert cformat("%p", 0) == "(nil)"
    assert cformat("%p", None) == "(nil)"


@pytest.mark.parametrize("value", [1, 0xDEADBEEF, 0x7FFFFFFFFFFF])
def test_pointer_round_trip(value):
    text = cformat("%p", value)
    assert text.startswith("0x")
    assert int(text, 16) == value


@pytest.mark.parametrize("value", [0, 1, 255, 44442222, 0xFFFFFFFF])
def test_hex_round_trip(value):
    assert int(cformat("%x", value), 16) == value
    assert cformat("%X", value) == cformat("%x", value).upper()


def test_hex_wraps_to_32_bits():
    assert cformat("%x", -1) == "ffffffff"
    assert cformat("%x", 2**32 + 5) == cformat("%x", 5)


def test_unsigned_wraps():
    assert int(cformat("%u", -1)) == 0xFFFFFFFF
    assert cformat("%u", 44442222) == "44442222"


def test_char_and_percent():
    assert cformat("%c%c", "a", 66) == "aB"
    assert cformat("100%%") == "100%"


def test_unknown_conversion_prints_nothing_and_takes_no_argument():
    assert cformat("%g%d", 5) == "5"


def test_trailing_percent_is_dropped():
    assert cformat("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        cformat("%d")


def test_cprintf_writes_and_counts():
    stream = io.StringIO()
    count = cprintf("%s %d", "abc", 42, stream=stream)
    assert stream.getvalue() == "abc 42"
    assert count == len(stream.getvalue())


def test_cprintf_default_stdout(capsys):
    count = cprintf("%s", "hello")
    assert capsys.readouterr().out == "hello"
    assert count == 5