import math

import pytest

from clishell.fromstring import (
    BadConversion,
    Target,
    from_string,
    parse_bool,
    parse_char,
    parse_float,
    parse_signed,
    parse_unsigned,
)

HUGE = "99999999999999999999999999999999999999999"

SIGNED = [Target.SIGNED_CHAR, Target.SHORT, Target.INT, Target.LONG, Target.LONG_LONG]
UNSIGNED = [
    Target.UNSIGNED_CHAR,
    Target.UNSIGNED_SHORT,
    Target.UNSIGNED_INT,
    Target.UNSIGNED_LONG,
    Target.UNSIGNED_LONG_LONG,
]


def test_char():
    assert from_string("a", Target.CHAR) == "a"
    assert from_string(" ", Target.CHAR) == " "
    with pytest.raises(BadConversion):
        from_string("aa", Target.CHAR)
    with pytest.raises(BadConversion):
        parse_char("")


@pytest.mark.parametrize("target", SIGNED)
def test_signed_values(target):
    assert from_string("42", target) == 42
    assert from_string("-42", target) == -42
    assert from_string("+42", target) == 42


@pytest.mark.parametrize("target", SIGNED)
@pytest.mark.parametrize("text", ["a", "", "-", "+", "4 2", "--42", "+-42", "42a"])
def test_signed_rejects_garbage(target, text):
    with pytest.raises(BadConversion):
        from_string(text, target)


@pytest.mark.parametrize("target", [Target.SIGNED_CHAR, Target.SHORT, Target.INT])
def test_signed_rejects_huge(target):
    with pytest.raises(BadConversion):
        from_string(HUGE, target)


@pytest.mark.parametrize("target", UNSIGNED)
def test_unsigned_values(target):
    assert from_string("42", target) == 42
    assert from_string("+42", target) == 42


@pytest.mark.parametrize("target", UNSIGNED)
@pytest.mark.parametrize("text", ["-42", "a", "", "+", "4.2"])
def test_unsigned_rejects(target, text):
    with pytest.raises(BadConversion):
        from_string(text, target)


@pytest.mark.parametrize("target", UNSIGNED)
def test_unsigned_rejects_huge(target):
    with pytest.raises(BadConversion):
        from_string(HUGE, target)


def test_signed_char_bounds():
    assert parse_signed("127", 8) == 127
    assert parse_signed("-128", 8) == -128
    with pytest.raises(BadConversion):
        parse_signed("128", 8)
    with pytest.raises(BadConversion):
        parse_signed("-129", 8)


def test_unsigned_char_bounds():
    assert parse_unsigned("255", 8) == 255
    with pytest.raises(BadConversion):
        parse_unsigned("256", 8)


def test_sixty_four_bit_bounds():
    assert parse_signed(str(2**63 - 1), 64) == 2**63 - 1
    assert parse_signed(str(-(2**63)), 64) == -(2**63)
    assert parse_unsigned(str(2**64 - 1), 64) == 2**64 - 1
    with pytest.raises(BadConversion):
        parse_unsigned(str(2**64), 64)
    with pytest.raises(BadConversion):
        parse_signed(str(2**63), 64)


def test_non_ascii_digits_rejected():
    with pytest.raises(BadConversion):
        parse_unsigned("\u0664\u0662", 32)


def test_bool():
    assert parse_bool("true") is True
    assert parse_bool("false") is False
    assert parse_bool("1") is True
    assert parse_bool("0") is False
    assert parse_bool("+1") is True
    for bad in ("2", "-1", "yes", "True", ""):
        with pytest.raises(BadConversion):
            parse_bool(bad)


@pytest.mark.parametrize("target", [Target.FLOAT, Target.DOUBLE, Target.LONG_DOUBLE])
def test_floats(target):
    assert from_string("0.1", target) == pytest.approx(0.1)
    with pytest.raises(BadConversion):
        from_string("a", target)


@pytest.mark.parametrize("text", ["", " 1.5", "1.5 ", "1 5", "1_0", "1.5x", "\t1"])
def test_float_rejects(text):
    with pytest.raises(BadConversion):
        parse_float(text)


def test_float_hex_literal():
    assert parse_float("0x1p3") == pytest.approx(8.0)
    with pytest.raises(BadConversion):
        parse_float("abc")


def test_float_target_rounds_to_single_precision():
    value = from_string("0.1", Target.FLOAT)
    assert value == pytest.approx(0.1, rel=1e-7)
    assert from_string(str(value), Target.FLOAT) == value


def test_string_and_null():
    assert from_string("foo bar", Target.STRING) == "foo bar"
    assert from_string("anything", Target.NULL) is None


def test_python_type_targets():
    assert from_string("42", int) == 42
    assert from_string("foo", str) == "foo"
    assert from_string("true", bool) is True
    assert from_string("0.5", float) == pytest.approx(0.5)
    with pytest.raises(BadConversion):
        from_string("x", int)


def test_unsupported_target():
    with pytest.raises(TypeError):
        from_string("1", list)


def test_error_message():
    with pytest.raises(BadConversion, match="bad from_string conversion"):
        parse_char("ab")