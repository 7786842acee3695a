import math
import re
from collections import namedtuple

from schemelex.errors import ByteRangeError, ExactnessError, NumberError
from schemelex.typs import Integer, NumTok, Rational, Real

__all__ = [
    'Radix',
    'BINARY',
    'OCTAL',
    'DECIMAL',
    'HEX',
    'radixes',
    'uinteger',
    'exact',
    'inexact',
    'byte',
    'Number',
    'number_grammar'
    ]

INT64_MAX = 2 ** 63 - 1
UINT32_MAX = 2 ** 32 - 1
INT32_MAX = 2 ** 31 - 1


################################################################################
## Radixes
################################################################################

class Radix(namedtuple('Radix', ['base', 'marker', 'digits'])):
    """The base a numeric literal is written in.

    @type base: int
    @param base: 2, 8, 10 or 16
    @type marker: String
    @param marker: The prefix selecting this radix, e.g. '#x'
    @type digits: String
    @param digits: The digit alphabet, in order of value
    """
    __slots__ = ()

    def digit_value(self, c):
        i = self.digits.find(c)
        if i < 0 or len(c) != 1:
            raise NumberError('{0!r} is not a base {1} digit'.format(c, self.base))
        return i

BINARY = Radix(2, '#b', '01')
OCTAL = Radix(8, '#o', '01234567')
DECIMAL = Radix(10, '#d', '0123456789')
HEX = Radix(16, '#x', '0123456789abcdef')

radixes = [BINARY, OCTAL, DECIMAL, HEX]


################################################################################
## Magnitudes
################################################################################

def uinteger(digits, radix=DECIMAL, limit=INT64_MAX):
    """Fold digits, most significant first, failing as soon as the value
    passes limit instead of wrapping around.

    @type digits: String
    @param digits: One or more digits of radix
    @type radix: Radix
    @type limit: int
    @param limit: Largest value the target representation holds
    """
    n = 0
    for c in digits:
        n = n * radix.base + radix.digit_value(c)
        if n > limit:
            raise NumberError('{0} is out of range'.format(digits))
    return n

def _decimal(mantissa, exponent, negative):
    """Value of a radix 10 decimal.

    @type mantissa: String
    @param mantissa: digits '.' digits*, '.' digits or digits
    @type exponent: int
    """
    if '.' not in mantissa:
        m = uinteger(mantissa, DECIMAL)
        # an integer mantissa scaled by a power of ten stays exact while the
        # product fits
        if exponent >= 0 and (m == 0 or exponent <= 18):
            n = m * 10 ** exponent if m else 0
            if n <= INT64_MAX:
                return Integer(-n if negative else n)
    f = float('{0}e{1}'.format(mantissa, exponent))
    if math.isinf(f):
        raise NumberError('{0}e{1} is out of range'.format(mantissa, exponent))
    return Real(-f if negative else f)

def _rational(numerator, denominator, radix, negative):
    n = uinteger(numerator, radix)
    d = uinteger(denominator, radix, UINT32_MAX)
    if d == 0:
        raise NumberError('zero denominator in {0}/{1}'.format(
            numerator, denominator))
    return Rational(-n if negative else n, d)


################################################################################
## Exactness
################################################################################

def exact(value):
    """Force an exact value. Only inexact values that hold an integer in
    the 64-bit range have an exact counterpart."""
    if not isinstance(value, Real):
        return value
    f = value.value
    if math.isfinite(f) and f.is_integer() and -INT64_MAX - 1 <= f <= INT64_MAX:
        return Integer(int(f))
    raise ExactnessError('{0!r} has no exact representation'.format(f))

def inexact(value):
    if isinstance(value, Integer):
        return Real(float(value.value))
    if isinstance(value, Rational):
        return Real(value.numerator / value.denominator)
    return value

def byte(value):
    """Check that value may be an element of a byte-vector."""
    if not isinstance(value, Integer) or not 0 <= value.value <= 255:
        raise ByteRangeError('{0!r} is not a byte'.format(value))
    return value.value


################################################################################
## Grammar
################################################################################

# each production is a regex fragment; the named groups are what
# Number.value reads back

exactness = '#[ie]'

suffix = r'(?:e(?P<exp_sign>[+-]?)(?P<exponent>[0-9]+))?'

decimal10 = r'(?P<decimal>(?P<mantissa>{0}){1})'.format('|'.join([
    r'[0-9]+\.[0-9]*',
    r'\.[0-9]+',
    r'[0-9]+(?=e[+-]?[0-9])'
    ]), suffix)

infnan = r'(?P<infnan>[+-](?:inf|nan)\.0)'

def prefix(radix):
    if radix is DECIMAL:
        grammar = '#d(?:{0})?|(?:{0})?(?:#d)?'
    else:
        grammar = '{1}(?:{0})?|{0}{1}'
    return '(?P<prefix>{0})'.format(
        grammar.format(exactness, re.escape(radix.marker)))

def ureal(radix):
    uint = '[{0}]+'.format(radix.digits)
    alternatives = ['(?P<numerator>{0})/(?P<denominator>{0})'.format(uint)]
    if radix is DECIMAL:
        alternatives.append(decimal10)
    alternatives.append('(?P<uinteger>{0})'.format(uint))
    return '(?:{0})'.format('|'.join(alternatives))

def real(radix):
    return '(?:(?P<sign>[+-]?){0}|{1})'.format(ureal(radix), infnan)

class Number(str):
    """Spelling of a numeric literal in some radix. Subclasses generated
    below bind the radix and the grammar."""
    radix = DECIMAL
    kind = NumTok

    def value(self, context=None):
        parts = self.grammar.match(self).groupdict()
        if parts['infnan']:
            value = Real(float(parts['infnan'][:4]))
        else:
            negative = parts['sign'] == '-'
            if parts['numerator']:
                value = _rational(parts['numerator'], parts['denominator'],
                                  self.radix, negative)
            elif parts.get('decimal'):
                exponent = 0
                if parts['exponent']:
                    exponent = uinteger(parts['exponent'], DECIMAL, INT32_MAX)
                    if parts['exp_sign'] == '-':
                        exponent = -exponent
                value = _decimal(parts['mantissa'], exponent, negative)
            else:
                n = uinteger(parts['uinteger'], self.radix)
                value = Integer(-n if negative else n)
        if '#e' in parts['prefix']:
            return exact(value)
        if '#i' in parts['prefix']:
            return inexact(value)
        return value

# store the generated classes in num_classes,
# which we will use to update globals with
num_classes = {}

for radix in radixes:
    class Num_(Number):
        grammar = re.compile(prefix(radix) + real(radix))
    Num_.radix = radix
    Num_.__name__ = Num_.__qualname__ = 'Num%d' % radix.base
    num_classes[Num_.__name__] = Num_

globals().update(num_classes)

number_grammar = [num_classes['Num%d' % r.base] for r in radixes]
