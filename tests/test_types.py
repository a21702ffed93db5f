import pytest

from prompto import (
    ConversionError,
    FixedWidthInt,
    Int8,
    Int32,
    Int64,
    Rgb,
    UInt8,
    UInt64,
    convert,
    maybe_convert,
)


def test_fixed_width_ints_are_ints():
    value = Int32.from_str("32")
    assert value == 32
    assert isinstance(value, int)
    assert isinstance(value, Int32)
    assert issubclass(Int32, FixedWidthInt)


def test_ranges():
    assert Int8.min_value() == -128 and Int8.max_value() == 127
    assert Int32.min_value() == -(2 ** 31) and Int32.max_value() == 2 ** 31 - 1
    assert UInt8.min_value() == 0 and UInt8.max_value() == 255
    assert UInt64.max_value() == 2 ** 64 - 1


@pytest.mark.parametrize("text", ["2147483647", "-2147483648", "+5", "007"])
def test_int32_accepts(text):
    assert convert(text, Int32) == int(text)


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", " 32", "32 ", "3_2", "32.0", "", "-", "٣"])
def test_int32_rejects(text):
    with pytest.raises(ConversionError):
        convert(text, Int32)


def test_unsigned_rejects_negative_and_overflow():
    assert convert("255", UInt8) == 255
    assert convert("+1", UInt8) == 1
    assert maybe_convert("-1", UInt8) is None
    assert maybe_convert("-0", UInt8) is None
    assert maybe_convert("256", UInt8) is None


def test_int64_bounds():
    assert convert("9223372036854775807", Int64) == 2 ** 63 - 1
    assert maybe_convert("9223372036854775808", Int64) is None


def test_rgb_parses_hex_pairs():
    colour = Rgb.from_str("#fa7268")
    assert (colour.r, colour.g, colour.b) == (250, 114, 104)
    assert Rgb.from_str("#FFFFFF") == Rgb(255, 255, 255)


@pytest.mark.parametrize("text", ["gkhgkjyfa7jhkhjk268", "fa7268", "#fa726", "#fa72681", "#fa72g8", ""])
def test_rgb_rejects(text):
    assert maybe_convert(text, Rgb) is None


def test_rgb_default():
    assert Rgb.default() == Rgb(0, 0, 0)
