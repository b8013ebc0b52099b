import pytest

from pushswap.printf import format_printf, printf


def test_plain_text_passes_through():
    assert format_printf("pb\n") == "pb\n"


def test_string_conversion():
    assert format_printf("[%s]", "hello") == "[hello]"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_null_pointer():
    assert format_printf("%p", None) == "(nil)"
    assert format_printf("%p", 0) == "(nil)"


def test_pointer_is_lowercase_hex():
    assert format_printf("%p", 255) == "0x" + format(255, "x")


@pytest.mark.parametrize("value", [0, 7, 42, -1, -999, 2147483647])
def test_decimal_matches_str(value):
    assert format_printf("%d", value) == str(value)
    assert format_printf("%i", value) == str(value)


def test_int_min():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert format_printf("%d", 2147483648) == "-2147483648"


def test_unsigned_wraps_negative():
    assert format_printf("%u", -1) == str(2**32 - 1)


@pytest.mark.parametrize("value", [0, 9, 10, 15, 16, 255, 48879])
def test_upper_hex(value):
    assert format_printf("%X", value) == format(value, "X")


@pytest.mark.parametrize("value", [10, 255, 4096])
def test_lower_hex_prints_same_as_upper(value):
    assert format_printf("%x", value) == format_printf("%X", value)


def test_char_from_int_and_str():
    assert format_printf("%c", ord("z")) == "z"
    assert format_printf("%c", "q") == "q"


def test_percent_literal():
    assert format_printf("%%") == "%"


def test_unknown_conversion_is_dropped():
    assert format_printf("a%yb") == "ab"


def test_trailing_percent_stops():
    assert format_printf("ab%") == "ab"


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_printf_writes_and_counts(capsys):
    count = printf("%s %d\n", "ra", 12)
    captured = capsys.readouterr().out
    assert captured == "ra 12\n"
    assert count == len(captured)