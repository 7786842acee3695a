
from collections import namedtuple

__all__ = [
    'Pos',
    'unkpos',
    'Integer',
    'Rational',
    'Real',
    'NUMBER_TYPES',
    'Punct',
    'Token',
    'IdentTok',
    'BoolTok',
    'NumTok',
    'CharTok',
    'StrTok',
    'PunctTok'
    ]


################################################################################
## Source positions
################################################################################

# A position object for tracking location in the source text
Pos = namedtuple('Pos', ['line', 'col', 'offset'])

unkpos = Pos(-1, -1, -1)


################################################################################
## Numbers
################################################################################

class _Value(object):
    """Numeric values compare by type as well as by fields, so that an exact
    1 is never mistaken for an inexact 1.0."""
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, tuple(self)))

class Integer(_Value, namedtuple('Integer', ['value'])):
    """An exact integer.

    @type value: int
    @param value: The value, within the signed 64-bit range
    """
    __slots__ = ()

class Rational(_Value, namedtuple('Rational', ['numerator', 'denominator'])):
    """An exact ratio, kept exactly as written: never reduced, and never
    collapsed into an Integer when the denominator is 1.

    @type numerator: int
    @param numerator: Signed 64-bit numerator
    @type denominator: int
    @param denominator: Unsigned 32-bit denominator, never zero
    """
    __slots__ = ()

class Real(_Value, namedtuple('Real', ['value'])):
    """An inexact number.

    @type value: float
    @param value: The value
    """
    __slots__ = ()

NUMBER_TYPES = (Integer, Rational, Real)


################################################################################
## Tokens
################################################################################

class Punct(object):
    OPEN = '('
    CLOSE = ')'
    VECTOR = '#('
    BYTEVECTOR = '#u8('
    QUOTE = "'"
    QUASIQUOTE = '`'
    UNQUOTE = ','
    UNQUOTE_SPLICING = ',@'
    PERIOD = '.'

class Token(object):
    """A lexical token.

    Two tokens are equal when they are of the same kind and carry the same
    value; the spelling and position are along for the ride.

    @type val: depends on the kind of token
    @param val: The decoded value
    @type text: String
    @param text: The token as spelled in the source
    @type pos: Pos
    @param pos: Position of the token in the source text
    """
    __slots__ = ('val', 'text', 'pos')

    def __init__(self, val, text=None, pos=unkpos):
        self.val = val
        self.text = text
        self.pos = pos

    def __eq__(self, other):
        return type(self) is type(other) and self.val == other.val

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, self.val))

    def __repr__(self):
        return '{0}({1!r})'.format(type(self).__name__, self.val)

class IdentTok(Token):
    """An identifier; val is the decoded name."""
    __slots__ = ()

class BoolTok(Token):
    __slots__ = ()

class NumTok(Token):
    """A number; val is an Integer, Rational or Real."""
    __slots__ = ()

class CharTok(Token):
    __slots__ = ()

class StrTok(Token):
    __slots__ = ()

class PunctTok(Token):
    """One of the fixed structural tokens; val is a Punct constant."""
    __slots__ = ()
