"""
Tests for the line tokenizer.

Verifies:
1. Whitespace handling and empty lines.
2. Word/operator runs (identifiers, numbers and punctuation glue together).
3. Quoted strings keep their quotes and interior whitespace.
4. Error reporting for unterminated strings and unknown characters.
"""

import pytest

from linescript.compiler.frontend.tokens import LineLexer, tokenize
from linescript.errors import InvalidString, TokenizeError, UnknownCharacter


@pytest.mark.parametrize("line", ["", "   ", "\t \t", " \x0b\x0c "])
def test_whitespace_only_line_yields_no_tokens(line):
  assert tokenize(line) == []


def test_simple_assignment():
  assert tokenize("x = 5") == ["x", "=", "5"]


def test_quoted_string_keeps_quotes_and_spaces():
  assert tokenize('say "hi there"') == ["say", '"hi there"']


def test_operators_without_spaces_form_one_token():
  """Word and operator characters share a class, so a+b is a single token."""
  assert tokenize("return a+b") == ["return", "a+b"]
  assert tokenize("foo(1,2);") == ["foo(1,2);"]


def test_full_punctuation_set_is_word_class():
  punct = "!@#$%^&*()-=_+[]{};:,.<>/?"
  assert tokenize(f"x {punct} y") == ["x", punct, "y"]


def test_mixed_case_and_digits():
  assert tokenize("Foo42 BAR_baz 3.14") == ["Foo42", "BAR_baz", "3.14"]


def test_string_adjacent_to_word():
  assert tokenize('print"a""b"c') == ["print", '"a"', '"b"', "c"]


def test_empty_string_literal():
  assert tokenize('say ""') == ["say", '""']


def test_string_may_contain_any_character():
  assert tokenize('say "~`\'|\\"') == ["say", '"~`\'|\\"']


def test_unterminated_string_raises():
  with pytest.raises(InvalidString):
    tokenize('say "oops')


def test_quote_as_last_character_raises():
  with pytest.raises(InvalidString) as excinfo:
    tokenize('say "')
  assert excinfo.value.column == 5


@pytest.mark.parametrize("char", ["~", "`", "'", "|", "\\", "é"])
def test_unknown_character_raises(char):
  with pytest.raises(UnknownCharacter) as excinfo:
    tokenize(f"x = a {char} b")
  assert excinfo.value.char == char
  assert excinfo.value.column == 7


def test_errors_are_value_errors():
  """TokenizeError subclasses ValueError for callers catching generic input errors."""
  with pytest.raises(ValueError):
    tokenize("~")
  assert issubclass(InvalidString, TokenizeError)


def test_line_number_is_reported():
  lexer = LineLexer()
  with pytest.raises(UnknownCharacter) as excinfo:
    lexer.tokenize("a ~", line_number=12)

  assert excinfo.value.line == 12
  assert "line 12" in str(excinfo.value)
  assert "'~'" in str(excinfo.value)
