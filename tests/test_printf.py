import pytest

from ftlib.printf import format_printf, printf, to_hex, to_hex_fixed, vprintf


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 2**32 - 1, 2**64 - 1])
def test_to_hex_round_trip(n):
    assert int(to_hex(n), 16) == n
    assert int(to_hex(n, upper=True), 16) == n


def test_to_hex_case():
    assert to_hex(0xABCDEF) == "abcdef"
    assert to_hex(0xABCDEF, upper=True) == "ABCDEF"


def test_to_hex_no_leading_zeros():
    for n in (1, 17, 300, 65535):
        assert not to_hex(n).startswith("0")
    assert to_hex(0) == "0"


def test_to_hex_wraps_negative_to_64_bits():
    assert int(to_hex(-1), 16) == 2**64 - 1


@pytest.mark.parametrize("n", [0, 1, 0xDEADBEEF, 2**64 - 1])
def test_to_hex_fixed_width_and_value(n):
    text = to_hex_fixed(n)
    assert len(text) == 16
    assert int(text, 16) == n


def test_to_hex_fixed_zero_and_upper():
    assert to_hex_fixed(0) == "0" * 16
    assert to_hex_fixed(0xAB, upper=True).endswith("AB")


def test_plain_text_passes_through():
    assert format_printf("hello world") == "hello world"
    assert format_printf("") == ""


def test_char_and_percent():
    assert format_printf("%c%%%c", "a", ord("b")) == "a%b"


def test_string_and_null():
    assert format_printf("[%s]", "text") == "[text]"
    assert format_printf("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 42, -7, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert format_printf("%d", n) == str(n)
    assert format_printf("%i", n) == str(n)


def test_decimal_out_of_range():
    with pytest.raises(OverflowError):
        format_printf("%d", 2**31)


def test_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1
    assert format_printf("%u", 123) == "123"


def test_hex_conversions():
    assert int(format_printf("%x", 0xBEEF), 16) == 0xBEEF
    assert format_printf("%x|%X", 0xAB, 0xAB) == "ab|AB"
    assert int(format_printf("%x", -1), 16) == 2**32 - 1


def test_pointer():
    assert format_printf("%p", 0) == "0x0"
    assert format_printf("%p", None) == "0x0"
    assert int(format_printf("%p", 0x1000)[2:], 16) == 0x1000


def test_pointer_of_object_has_prefix():
    obj = object()
    assert format_printf("%p", obj) == "0x" + to_hex(id(obj))


def test_extra_arguments_ignored():
    assert format_printf("%d", 1, 2, 3) == "1"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_unknown_conversion():
    with pytest.raises(ValueError):
        format_printf("%q", 1)


def test_trailing_percent():
    with pytest.raises(ValueError):
        format_printf("abc%")


def test_wrong_type_for_string():
    with pytest.raises(TypeError):
        format_printf("%s", 5)


def test_printf_writes_to_stdout(capfd):
    count = printf("%s=%d\n", "x", 5)
    out = capfd.readouterr().out
    assert out == format_printf("%s=%d\n", "x", 5)
    assert count == len(out.encode())


def test_vprintf_takes_iterable(capfd):
    count = vprintf("%c%c", iter(["o", "k"]))
    assert capfd.readouterr().out == "ok"
    assert count == 2