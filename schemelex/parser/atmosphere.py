import logging
import re

from schemelex.errors import NoMatch, UnterminatedError

__all__ = [
    'LexContext',
    'line_ending',
    'intertoken_space',
    'nested_comment'
    ]

logger = logging.getLogger(__name__)


class LexContext(object):
    """State carried across one lexing pass.

    @type fold_case: bool
    @param fold_case: Whether identifiers are case-folded; switched by the
        #!fold-case and #!no-fold-case directives
    @type datum: callable
    @param datum: datum(text, pos) -> end, skipping one datum for a #;
        datum comment. Without one, #; is not atmosphere.
    """
    def __init__(self, fold_case=False, datum=None):
        self.fold_case = fold_case
        self.datum = datum

    def __repr__(self):
        return 'LexContext(fold_case={0!r}, datum={1!r})'.format(
            self.fold_case, self.datum)


line_ending = re.compile(r'\r\n|\r|\n')

# whitespace, line endings and ; comments; the line ending that closes a
# comment is left to the next round
whitespace = re.compile(r'(?:[ \t]|\r\n|\r|\n|;[^\r\n]*)+')

directive = re.compile(r'#!(no-)?fold-case')

def nested_comment(text, pos=0):
    """Skip a #| ... |# comment starting at pos, nesting to any depth, and
    return the offset just past it."""
    if not text.startswith('#|', pos):
        return pos
    depth = 0
    i = pos
    while i < len(text):
        if text.startswith('#|', i):
            depth += 1
            i += 2
        elif text.startswith('|#', i):
            depth -= 1
            i += 2
            if depth == 0:
                return i
        else:
            i += 1
    raise UnterminatedError('unterminated block comment', pos)

def intertoken_space(text, pos=0, context=None):
    """Skip whitespace, comments and directives.

    @type text: String
    @param text: The source text
    @type pos: int
    @param pos: Where to start
    @type context: LexContext
    @param context: Receives directive switches and supplies the datum
        skipper for #; comments
    @return: The offset of the first character that is not atmosphere
    """
    while True:
        m = whitespace.match(text, pos)
        if m:
            pos = m.end()
            continue
        if text.startswith('#|', pos):
            pos = nested_comment(text, pos)
            continue
        m = directive.match(text, pos)
        if m:
            if context is not None:
                context.fold_case = m.group(1) is None
                logger.debug('%s at offset %d', m.group(0), pos)
            pos = m.end()
            continue
        if text.startswith('#;', pos) and context is not None and context.datum:
            start = intertoken_space(text, pos + 2, context)
            try:
                pos = context.datum(text, start)
            except NoMatch:
                # no datum to comment out, so #; is not atmosphere
                return pos
            continue
        return pos
