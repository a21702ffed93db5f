from decimal import Decimal
from fractions import Fraction

import pytest

from prompto import ConversionError, Int32, Rgb, convert, maybe_convert, parser_for, zero_value


@pytest.mark.parametrize(
    "text,target",
    [
        ("32", int),
        ("-7", int),
        ("32", float),
        ("3.14", float),
        ("1e3", float),
        ("0.1", Decimal),
        ("1/3", Fraction),
        ("1+2j", complex),
        ("hello world", str),
    ],
)
def test_convert_matches_native_parser(text, target):
    assert convert(text, target) == target(text)


@pytest.mark.parametrize(
    "text,target",
    [
        ("56 fdfs θ gx二éfs sdf34ごν53 df3dfsd2", int),
        ("32.32", int),
        ("3fdgdf2", int),
        ("", int),
        ("abc", float),
        ("abc", Decimal),
        ("1/0", Fraction),
        ("abc", complex),
    ],
)
def test_convert_rejects_what_native_parser_rejects(text, target):
    with pytest.raises(ConversionError):
        convert(text, target)
    assert maybe_convert(text, target) is None


def test_conversion_error_keeps_text_target_and_cause():
    with pytest.raises(ConversionError) as exc_info:
        convert("3ghhj2", int)
    err = exc_info.value
    assert err.text == "3ghhj2"
    assert err.target is int
    assert isinstance(err.__cause__, ValueError)
    assert "int" in str(err)


def test_from_str_takes_precedence_over_constructor():
    assert parser_for(Rgb) == Rgb.from_str
    assert convert(r"#fa7268", Rgb) == Rgb.from_str(r"#fa7268") == Rgb(250, 114, 104)


def test_bool_is_parsed_strictly():
    assert convert("true", bool) is True
    assert convert("false", bool) is False
    for text in ("True", "yes", "1", "", " true"):
        assert maybe_convert(text, bool) is None


def test_plain_callable_target():
    def parse_csv(text):
        return [int(part) for part in text.split(",")]

    assert convert("1,2,3", parse_csv) == [1, 2, 3]
    assert maybe_convert("1,,3", parse_csv) is None


def test_non_callable_target_is_a_programming_error():
    with pytest.raises(TypeError):
        convert("1", 42)


def test_chaining_through_optional_results():
    assert (maybe_convert("32", int) or 0) * 2 == 64
    assert maybe_convert("3.14", float) * 2 == pytest.approx(6.28)
    assert maybe_convert(r"#fa7268", Rgb).r - 100 == 150
    assert (maybe_convert("3fdgdf2", int) or zero_value(int)) * 2 == 0


@pytest.mark.parametrize(
    "target,expected",
    [(int, 0), (float, 0.0), (str, ""), (Decimal, Decimal(0)), (Int32, 0), (Rgb, Rgb(0, 0, 0))],
)
def test_zero_value(target, expected):
    assert zero_value(target) == expected
