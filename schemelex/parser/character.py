import re

from schemelex.errors import EscapeError, UnterminatedError
from schemelex.typs import CharTok, StrTok

__all__ = [
    'char_names',
    'mnemonic_escapes',
    'hex_scalar',
    'decode_body',
    'Character',
    'String'
    ]


char_names = {
    'alarm': '\x07',
    'backspace': '\x08',
    'delete': '\x7f',
    'escape': '\x1b',
    'newline': '\n',
    'null': '\x00',
    'return': '\r',
    'space': ' ',
    'tab': '\t'
    }

mnemonic_escapes = {
    'a': '\x07',
    'b': '\x08',
    't': '\t',
    'n': '\n',
    'r': '\r'
    }

hex_digits = r'[0-9A-Fa-f]+'

def hex_scalar(digits, offset=None):
    """Decode hex digits as a Unicode scalar value.

    @type digits: String
    @param digits: One or more hex digits, either case
    @type offset: int
    @param offset: Where the escape starts, for error reporting
    """
    code = int(digits, 16)
    if code > 0x10ffff or 0xd800 <= code <= 0xdfff:
        raise EscapeError('#x{0} is not a Unicode scalar value'.format(digits), offset)
    return chr(code)

def decode_body(body, escape, start=0):
    """Decode the text between the delimiters of a string or |symbol|.

    escape is a compiled pattern anchored on the backslash with the groups
    'mnemonic', 'literal' and 'hex'; a match with none of them set (a line
    continuation) contributes nothing.

    @type start: int
    @param start: Offset of body within the spelling, for error reporting
    """
    chars = []
    i = 0
    while i < len(body):
        c = body[i]
        if c != '\\':
            chars.append(c)
            i += 1
            continue
        m = escape.match(body, i)
        if m is None:
            raise EscapeError('bad escape {0!r}'.format(body[i:i + 2]), start + i)
        if m.group('mnemonic'):
            chars.append(mnemonic_escapes[m.group('mnemonic')])
        elif m.group('literal'):
            chars.append(m.group('literal'))
        elif m.group('hex'):
            chars.append(hex_scalar(m.group('hex'), start + i))
        i = m.end()
    return ''.join(chars)


################################################################################
## Characters
################################################################################

class Character(str):
    # a raw letter wins only when it is not the first letter of a name or of
    # a hex escape; any other raw character always wins
    grammar = re.compile(r'#\\(?:[A-Za-z](?![A-Za-z0-9])|[^A-Za-z]|(?:{0})|x{1})'.format(
        '|'.join(sorted(char_names, key=len, reverse=True)), hex_digits), re.S)
    kind = CharTok

    def value(self, context=None):
        body = self[2:]
        if len(body) == 1:
            return body
        if body in char_names:
            return char_names[body]
        return hex_scalar(body[1:], 0)


################################################################################
## Strings
################################################################################

string_escape = re.compile(
    r'\\(?:(?P<mnemonic>[abtnr])|(?P<literal>["\\])|x(?P<hex>{0});'
    r'|[ \t]*(?:\r\n|\r|\n)[ \t]*)'.format(hex_digits))

class String(str):
    # the closing quote is optional here so that a missing one is reported
    # as unterminated rather than as no match at all
    grammar = re.compile(r'"(?P<body>(?:[^"\\]|\\.)*)(?P<close>")?', re.S)
    kind = StrTok

    def value(self, context=None):
        m = self.grammar.match(self)
        if m.group('close') is None:
            raise UnterminatedError('unterminated string', 0)
        return decode_body(m.group('body'), string_escape, 1)
