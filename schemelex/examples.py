import argparse
import logging
import sys

from schemelex.errors import LexError
from schemelex.lexer import lex
from schemelex.parser.atmosphere import LexContext

__all__ = ['report', 'main']


def report(text, context=None, out=None):
    """Lex text and print the tokens, any trailing garbage, or the error.

    @return: True when the whole text was consumed
    """
    out = out or sys.stdout
    try:
        tokens, rest = lex(text, context)
    except LexError as e:
        print('error:', e, file=out)
        return False
    print('tokens:', file=out)
    print(tokens, file=out)
    if rest:
        print(' followed by garbage: "{0}".'.format(rest), file=out)
        return False
    return True

def main(argv=None, stdin=None, stdout=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    parser = argparse.ArgumentParser(
        description='Print the tokens of Scheme source read from stdin'
        )
    parser.add_argument(
        '--fold-case',
        action='store_true',
        help='Start with identifier case folding on, as after #!fold-case'
        )
    parser.add_argument(
        '--whole',
        action='store_true',
        help='Lex all of stdin at once instead of line by line'
        )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log every token'
        )
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(message)s',
        stream=sys.stderr
        )

    context = LexContext(fold_case=args.fold_case)
    if args.whole:
        ok = report(stdin.read(), context, stdout)
    else:
        ok = True
        for line in stdin:
            ok = report(line.rstrip('\r\n'), context, stdout) and ok
    return 0 if ok else 1

if __name__ == '__main__':
    sys.exit(main())
