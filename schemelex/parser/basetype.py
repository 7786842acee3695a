import re
import string

from schemelex.errors import UnterminatedError
from schemelex.typs import BoolTok, IdentTok, Punct, PunctTok
from .character import hex_digits, decode_body

__all__ = [
    'is_initial',
    'is_subsequent',
    'is_sign_subsequent',
    'is_dot_subsequent',
    'Boolean',
    'Identifier',
    'Punctuation'
    ]


################################################################################
## Character classes
################################################################################

letter = string.ascii_letters
special_initial = '!$%&*/:<=>?^_~'
explicit_sign = '+-'
initial = letter + special_initial
subsequent = initial + string.digits + explicit_sign + '.@'
sign_subsequent = initial + explicit_sign + '@'
dot_subsequent = sign_subsequent + '.'

def _one_of(chars):
    return '[' + re.escape(chars) + ']'

def is_initial(c):
    return len(c) == 1 and c in initial

def is_subsequent(c):
    return len(c) == 1 and c in subsequent

def is_sign_subsequent(c):
    return len(c) == 1 and c in sign_subsequent

def is_dot_subsequent(c):
    return len(c) == 1 and c in dot_subsequent


################################################################################
## Booleans
################################################################################

class Boolean(str):
    grammar = re.compile(r'#(?:true|false|t|f)')
    kind = BoolTok

    def value(self, context=None):
        return self in ('#t', '#true')


################################################################################
## Identifiers
################################################################################

symbol_escape = re.compile(
    r'\\(?:(?P<mnemonic>[abtnr])|(?P<literal>\|)|x(?P<hex>{0});)'.format(hex_digits))

pipe_symbol = re.compile(r'\|(?P<body>(?:[^|\\]|\\.)*)(?P<close>\|)?', re.S)

simple_identifier = '{0}{1}*'.format(_one_of(initial), _one_of(subsequent))

# longer forms come before the lone sign
peculiar_identifier = (
    r'[+-](?:{sign_sub}{sub}*|\.{dot_sub}{sub}*)?'
    r'|\.{dot_sub}{sub}*'.format(
        sign_sub=_one_of(sign_subsequent),
        dot_sub=_one_of(dot_subsequent),
        sub=_one_of(subsequent)))

class Identifier(str):
    grammar = re.compile('|'.join([
        simple_identifier,
        pipe_symbol.pattern,
        peculiar_identifier
        ]), re.S)
    kind = IdentTok

    def value(self, context=None):
        if not self.startswith('|'):
            if context is not None and context.fold_case:
                return self.lower()
            return str(self)
        m = pipe_symbol.match(self)
        if m.group('close') is None:
            raise UnterminatedError('unterminated |symbol|', 0)
        return decode_body(m.group('body'), symbol_escape, 1)


################################################################################
## Punctuation
################################################################################

punctuation = [
    Punct.BYTEVECTOR,
    Punct.VECTOR,
    Punct.UNQUOTE_SPLICING,
    Punct.UNQUOTE,
    Punct.OPEN,
    Punct.CLOSE,
    Punct.QUOTE,
    Punct.QUASIQUOTE,
    Punct.PERIOD
    ]

class Punctuation(str):
    grammar = re.compile('|'.join(re.escape(p) for p in punctuation))
    kind = PunctTok

    def value(self, context=None):
        return str(self)
