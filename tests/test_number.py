import math

import pytest

from schemelex import ByteRangeError, ExactnessError, NumberError, lex
from schemelex.parser.number import (
    BINARY,
    DECIMAL,
    HEX,
    byte,
    exact,
    inexact,
    uinteger
    )
from schemelex.typs import Integer, NumTok, Rational, Real


def num(text):
    tokens, rest = lex(text)
    assert rest == ''
    assert len(tokens) == 1
    assert isinstance(tokens[0], NumTok)
    return tokens[0].val


@pytest.mark.parametrize('text, expected', [
    ('0', Integer(0)),
    ('42', Integer(42)),
    ('-5', Integer(-5)),
    ('+7', Integer(7)),
    ('#x10', Integer(16)),
    ('#xff', Integer(255)),
    ('#b101', Integer(5)),
    ('#o17', Integer(15)),
    ('#d10', Integer(10)),
    ('#x-a', Integer(-10)),
    ('9223372036854775807', Integer(2 ** 63 - 1)),
    ('-9223372036854775807', Integer(-(2 ** 63 - 1))),
    ])
def test_integers(text, expected):
    assert num(text) == expected

@pytest.mark.parametrize('text, expected', [
    ('1/3', Rational(1, 3)),
    ('-1/3', Rational(-1, 3)),
    ('2/4', Rational(2, 4)),
    ('3/1', Rational(3, 1)),
    ('#b1/10', Rational(1, 2)),
    ('1/4294967295', Rational(1, 4294967295)),
    ])
def test_rationals_are_kept_as_written(text, expected):
    assert num(text) == expected

@pytest.mark.parametrize('text, expected', [
    ('1.5', Real(1.5)),
    ('1.', Real(1.0)),
    ('.5', Real(0.5)),
    ('-.5', Real(-0.5)),
    ('2.5e2', Real(250.0)),
    ('1e-3', Real(0.001)),
    ('.5e1', Real(5.0)),
    ])
def test_decimals(text, expected):
    assert num(text) == expected

def test_integer_mantissa_with_exponent_stays_exact():
    assert num('1e3') == Integer(1000)
    assert num('-2e2') == Integer(-200)
    assert num('9e18') == Integer(9 * 10 ** 18)
    assert num('0e999999') == Integer(0)

def test_integer_mantissa_with_large_exponent_promotes():
    assert num('10e18') == Real(1e19)
    assert num('1e-400') == Real(0.0)

def test_infinities_and_nans():
    assert num('+inf.0') == Real(float('inf'))
    assert num('-inf.0') == Real(float('-inf'))
    assert math.isnan(num('+nan.0').value)
    assert math.isnan(num('-nan.0').value)
    assert num('#x+inf.0') == Real(float('inf'))

@pytest.mark.parametrize('text, expected', [
    ('#e1.0', Integer(1)),
    ('#e-2.0', Integer(-2)),
    ('#e1/2', Rational(1, 2)),
    ('#i5', Real(5.0)),
    ('#i1/4', Real(0.25)),
    ('#x#iff', Real(255.0)),
    ('#i#xff', Real(255.0)),
    ('#e#d12', Integer(12)),
    ('#d#e12', Integer(12)),
    ])
def test_exactness_prefixes(text, expected):
    assert num(text) == expected

@pytest.mark.parametrize('text', ['#e1.5', '#e+inf.0', '#e+nan.0'])
def test_inexact_without_exact_equivalent(text):
    with pytest.raises(ExactnessError):
        lex(text)

@pytest.mark.parametrize('text', [
    '99999999999999999999',
    '9223372036854775808',
    '-9223372036854775808',
    '1/0',
    '1/4294967296',
    '99999999999999999999/2',
    '1e99999999999',
    '1e400',
    '-1.0e400',
    '#e1e400',
    '#i1e400',
    '#xffffffffffffffffff',
    ])
def test_overflow_fails_instead_of_wrapping(text):
    with pytest.raises(NumberError):
        lex(text)

def test_exact_and_inexact_are_distinct():
    assert num('1') != num('1.0')
    assert Integer(1) != Real(1.0)

def test_number_then_identifier():
    tokens, rest = lex('1+')
    assert [t.text for t in tokens] == ['1', '+']
    assert rest == ''

def test_upper_case_hex_digits_are_not_digits():
    assert lex('#xFF') == ([], '#xFF')

def test_digit_outside_radix():
    assert lex('#b2') == ([], '#b2')

def test_uinteger():
    assert uinteger('11111111', BINARY) == 255
    assert uinteger('ff', HEX) == 255
    assert uinteger('255', DECIMAL, 255) == 255
    with pytest.raises(NumberError):
        uinteger('256', DECIMAL, 255)

def test_digit_value():
    assert HEX.digit_value('a') == 10
    with pytest.raises(NumberError):
        HEX.digit_value('g')
    with pytest.raises(NumberError):
        BINARY.digit_value('2')

def test_exact_and_inexact_helpers():
    assert exact(Real(3.0)) == Integer(3)
    assert exact(Rational(1, 2)) == Rational(1, 2)
    assert inexact(Integer(3)) == Real(3.0)
    assert inexact(Rational(1, 3)) == Real(1 / 3)
    with pytest.raises(ExactnessError):
        exact(Real(2.0 ** 63))

def test_byte():
    assert byte(Integer(0)) == 0
    assert byte(Integer(255)) == 255
    for bad in [Integer(256), Integer(-1), Real(1.0), Rational(1, 1)]:
        with pytest.raises(ByteRangeError):
            byte(bad)
