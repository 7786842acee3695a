"""A lexer for R7RS Scheme source text."""

from schemelex.errors import *
from schemelex.typs import *
from schemelex.parser.atmosphere import LexContext, intertoken_space
from schemelex.lexer import bytevector, lex, token

__version__ = '0.1.0'
