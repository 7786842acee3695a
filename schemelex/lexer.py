import logging

from pypeg2 import Parser

from schemelex.errors import ByteRangeError, LexError, NoMatch, UnterminatedError
from schemelex.parser.atmosphere import LexContext, intertoken_space, line_ending
from schemelex.parser.basetype import Boolean, Identifier, Punctuation
from schemelex.parser.character import Character, String
from schemelex.parser.number import byte, number_grammar
from schemelex.typs import NumTok, Pos, Punct

__all__ = [
    'token_grammar',
    'token',
    'lex',
    'bytevector'
    ]

logger = logging.getLogger(__name__)


# the order is the disambiguation: '+5' is a number because numbers are
# tried before identifiers, '.' is a period because nothing richer matched
token_grammar = [Boolean] + number_grammar + [
    Identifier,
    Character,
    String,
    Punctuation
    ]

def _parser():
    # atmosphere is handled by intertoken_space, not by pypeg2
    parser = Parser()
    parser.whitespace = None
    parser.comment = None
    return parser

# a token is parsed from at most window characters; when the match ends, or
# nothing matched, within lookahead of a cut-off window, the rest of the text
# is parsed instead, since the token may run past the window
window = 4096
lookahead = 64

def _spelling(parser, text, pos):
    """Parse the spelling of one token at pos.

    @return: (spelling, offset just past it)
    @raise SyntaxError: if no production matches
    """
    # packrat memory is keyed by the parsed text and never hits across tokens
    parser.clear_memory()
    chunk = text[pos:pos + window]
    if pos + len(chunk) < len(text):
        try:
            rest, spelling = parser.parse(chunk, token_grammar)
        except SyntaxError:
            pass
        else:
            if len(rest) >= lookahead:
                return spelling, pos + len(chunk) - len(rest)
        chunk = text[pos:]
    rest, spelling = parser.parse(chunk, token_grammar)
    return spelling, pos + len(chunk) - len(rest)

class _Locator(object):
    """Turns increasing offsets into line/column positions without
    rescanning the text from the start each time."""
    def __init__(self, text):
        self.text = text
        self.offset = 0
        self.line = 1
        self.line_start = 0

    def __call__(self, offset):
        for m in line_ending.finditer(self.text, self.offset, offset):
            self.line += 1
            self.line_start = m.end()
        self.offset = offset
        return Pos(self.line, offset - self.line_start + 1, offset)

def _token(parser, text, pos, context, locate):
    try:
        spelling, end = _spelling(parser, text, pos)
    except SyntaxError:
        raise NoMatch('no token matches {0!r}'.format(text[pos:pos + 10]), pos)
    try:
        val = spelling.value(context)
    except LexError as e:
        raise e.locate(text, pos)
    tok = spelling.kind(val, str(spelling), locate(pos))
    logger.debug('%r at %s', tok, tok.pos)
    return tok, end

def token(text, pos=0, context=None):
    """Read exactly one token at pos, without skipping atmosphere.

    @type text: String
    @param text: The source text
    @type pos: int
    @param pos: Offset of the token
    @type context: LexContext
    @return: (token, offset just past the token)
    @raise NoMatch: if no production matches; nothing is consumed
    """
    locator = _Locator(text)
    try:
        return _token(_parser(), text, pos, context, locator)
    except LexError as e:
        raise e.locate(text)

def lex(text, context=None):
    """Split text into tokens.

    Lexing stops at the end of the text or at the first position where
    neither atmosphere nor a token can be read.

    @type text: String
    @param text: A whole document; constructs may span lines
    @type context: LexContext
    @param context: Initial fold-case state and datum skipper; a fresh
        LexContext is used when omitted
    @return: (list of tokens, unconsumed text)
    @raise LexError: for malformed literals and unterminated constructs
    """
    if context is None:
        context = LexContext()
    parser = _parser()
    locator = _Locator(text)
    tokens = []
    try:
        pos = intertoken_space(text, 0, context)
        while pos < len(text):
            try:
                tok, pos = _token(parser, text, pos, context, locator)
            except NoMatch:
                break
            tokens.append(tok)
            pos = intertoken_space(text, pos, context)
    except LexError as e:
        raise e.locate(text)
    return tokens, text[pos:]

def bytevector(text, pos=0, context=None):
    """Read a byte-vector literal, #u8( followed by bytes and a closing
    parenthesis.

    @return: (bytes, offset just past the closing parenthesis)
    @raise ByteRangeError: for an element that is not an exact 0..255
    """
    if not text.startswith(Punct.BYTEVECTOR, pos):
        raise NoMatch('expected #u8(', pos).locate(text)
    parser = _parser()
    locator = _Locator(text)
    elements = []
    try:
        i = intertoken_space(text, pos + len(Punct.BYTEVECTOR), context)
        while not text.startswith(Punct.CLOSE, i):
            if i >= len(text):
                raise UnterminatedError('unterminated byte-vector', pos)
            start = i
            tok, i = _token(parser, text, i, context, locator)
            if not isinstance(tok, NumTok):
                raise ByteRangeError('{0} is not a byte'.format(tok.text), start)
            try:
                elements.append(byte(tok.val))
            except ByteRangeError as e:
                raise e.locate(text, start)
            i = intertoken_space(text, i, context)
    except LexError as e:
        raise e.locate(text)
    return bytes(elements), i + len(Punct.CLOSE)
