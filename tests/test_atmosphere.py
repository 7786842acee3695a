import pytest

from schemelex import LexContext, UnterminatedError, lex, token
from schemelex.parser.atmosphere import intertoken_space, nested_comment
from schemelex.typs import IdentTok


def test_no_atmosphere_is_fine():
    assert intertoken_space('foo') == 0
    assert intertoken_space('') == 0

def test_whitespace_and_line_endings():
    text = ' \t\n\r\n\r x'
    assert intertoken_space(text) == text.index('x')

def test_line_comments():
    text = '; a comment\n  ; another\r\nx'
    assert intertoken_space(text) == text.index('x')
    assert intertoken_space('; to the end') == len('; to the end')

def test_nested_comment_is_atmosphere():
    assert lex('#|a #|b|# c|#') == ([], '')

@pytest.mark.parametrize('text', [
    '#||#',
    '#|#|x|#|#',
    '#|a|##|b|#',
    '#| ; not a line comment |#',
    '#| "not a string |#',
    '#|\n multi\r\n line \n|#',
    ])
def test_block_comments(text):
    assert intertoken_space(text) == len(text)

def test_adjacent_closer_ends_the_comment():
    assert nested_comment('#|x|#|#') == 5

def test_deep_nesting_does_not_recurse():
    depth = 5000
    text = '#|' * depth + '|#' * depth
    assert intertoken_space(text) == len(text)

@pytest.mark.parametrize('text', ['#| abc', '#|#| x |#', '#|#'])
def test_unterminated_block_comment(text):
    with pytest.raises(UnterminatedError):
        intertoken_space(text)

def test_comments_between_tokens():
    tokens, rest = lex('a ; one\n#| two |# b')
    assert tokens == [IdentTok('a'), IdentTok('b')]
    assert rest == ''

def test_directives():
    context = LexContext()
    assert intertoken_space('#!fold-case x', 0, context) == 12
    assert context.fold_case is True
    assert intertoken_space('#!no-fold-case', 0, context) == 14
    assert context.fold_case is False
    assert intertoken_space('#!fold-case #!no-fold-case') == 26

def test_datum_comment_needs_a_datum_reader():
    assert intertoken_space('#; x') == 0
    assert lex('#; x') == ([], '#; x')

def skip_token(text, pos):
    return token(text, pos)[1]

def test_datum_comment():
    context = LexContext(datum=skip_token)
    assert intertoken_space('#; foo bar', 0, context) == 7
    tokens, rest = lex('#;foo bar #; 42', context)
    assert tokens == [IdentTok('bar')]
    assert rest == ''

def test_datum_comment_with_nothing_to_comment_out():
    context = LexContext(datum=skip_token)
    assert intertoken_space('#; ', 0, context) == 0
    assert lex('foo #;', context) == ([IdentTok('foo')], '#;')
    assert lex('foo #; #|x|#', context) == ([IdentTok('foo')], '#; #|x|#')
