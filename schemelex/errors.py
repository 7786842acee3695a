
from schemelex.typs import Pos

__all__ = [
    'LexError',
    'NoMatch',
    'NumberError',
    'ExactnessError',
    'EscapeError',
    'UnterminatedError',
    'ByteRangeError'
    ]


class LexError(ValueError):
    """Base class for everything the lexer can complain about.

    @type msg: String
    @param msg: What went wrong
    @type offset: int
    @param offset: Offset into the lexed text where the problem starts, or
        None while the error is still travelling out of a grammar rule that
        only sees part of the text
    """
    def __init__(self, msg, offset=None):
        super(LexError, self).__init__(msg)
        self.msg = msg
        self.offset = offset
        self.pos = None

    def locate(self, text, base=0):
        """Pin the error to a Pos in text. Offsets recorded by grammar rules
        are relative to the spelling they were decoding, which starts at base.
        """
        if self.pos is not None:
            return self
        offset = base + (self.offset or 0)
        self.offset = offset
        head = text[:offset]
        # \r\n and a lone \r both end a line
        head = head.replace('\r\n', '\n').replace('\r', '\n')
        line = head.count('\n') + 1
        col = len(head) - (head.rfind('\n') + 1) + 1
        self.pos = Pos(line, col, offset)
        return self

    def __str__(self):
        if self.pos is None:
            return self.msg
        return '{0}:{1}: {2}'.format(self.pos.line, self.pos.col, self.msg)

class NoMatch(LexError):
    """No token production matches at the current position."""

class NumberError(LexError):
    """A numeric literal that cannot be represented."""

class ExactnessError(NumberError):
    """#e applied to an inexact value with no exact equivalent."""

class EscapeError(LexError):
    """An escape sequence that does not decode."""

class UnterminatedError(LexError):
    """A string, |symbol| or block comment missing its closing delimiter."""

class ByteRangeError(LexError):
    """A byte-vector element that is not an exact integer in 0..255."""
