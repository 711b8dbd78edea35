import pytest
from hypothesis import given
from hypothesis import strategies as st

from arith.arith_errors import LexError
from arith.arith_lexer import CharacterStream, Lexer, Token, tokenize

ALPHABET = "0123456789+-*/() \t\r\n"


def kinds(source: str) -> list[tuple[str, int | str]]:
    return [(t.type, t.value) for t in tokenize(source)]


def test_single_char_tokens() -> None:
    code = "+ - * / ( )"
    expected = ["PLUS", "MINUS", "TIMES", "DIVISION", "LPAREN", "RPAREN"]
    lexer = Lexer(CharacterStream(code))
    types = [lexer.next_token().type for _ in expected]
    assert types == expected


def test_digit_token_holds_int_value() -> None:
    tok = Lexer(CharacterStream("7")).next_token()
    assert tok.type == "DIGIT"
    assert tok.value == 7


def test_all_digits() -> None:
    assert [t.value for t in tokenize("0123456789")] == list(range(10))


def test_multi_digit_is_not_accumulated() -> None:
    assert kinds("12") == [("DIGIT", 1), ("DIGIT", 2)]


def test_whitespace_is_skipped() -> None:
    assert kinds(" 1 +\t2\n") == kinds("1+2")


def test_empty_and_blank_input() -> None:
    assert tokenize("") == []
    assert tokenize("   \t\n") == []


def test_eof_token_repeats() -> None:
    lexer = Lexer(CharacterStream("1"))
    lexer.next_token()
    assert lexer.next_token().type == "EOF"
    assert lexer.next_token().type == "EOF"


def test_token_positions() -> None:
    toks = tokenize("1 +\n 2")
    assert [(t.line, t.col) for t in toks] == [(1, 1), (1, 3), (2, 2)]


def test_end_to_end_token_sequence() -> None:
    assert kinds("-3 + 4 * 5 / 2 - (3 + 2)") == [
        ("MINUS", "-"),
        ("DIGIT", 3),
        ("PLUS", "+"),
        ("DIGIT", 4),
        ("TIMES", "*"),
        ("DIGIT", 5),
        ("DIVISION", "/"),
        ("DIGIT", 2),
        ("MINUS", "-"),
        ("LPAREN", "("),
        ("DIGIT", 3),
        ("PLUS", "+"),
        ("DIGIT", 2),
        ("RPAREN", ")"),
    ]


def test_unknown_character_raises() -> None:
    with pytest.raises(LexError) as exc:
        tokenize("2+a")
    assert exc.value.char == "a"
    assert exc.value.position == 3


@pytest.mark.parametrize("char", ["a", ".", "%", "^", "x", "=", "٣", "²"])
def test_rejects_characters_outside_alphabet(char: str) -> None:
    with pytest.raises(LexError):
        tokenize(f"1+{char}")


def test_lexer_iterates_until_eof() -> None:
    assert [t.type for t in Lexer(CharacterStream("(1)"))] == [
        "LPAREN",
        "DIGIT",
        "RPAREN",
    ]


def test_token_equality_and_hash() -> None:
    a = Token("DIGIT", 1, 1, 1)
    b = Token("DIGIT", 1, 1, 1)
    c = Token("DIGIT", 1, 1, 2)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert a != "DIGIT"


def test_token_repr() -> None:
    assert repr(Token("PLUS", "+")) == "Token(PLUS, +)"


def test_token_is_immutable() -> None:
    tok = Token("DIGIT", 1)
    with pytest.raises(AttributeError):
        tok.value = 2  # type: ignore[misc]


def test_character_stream_tracks_lines() -> None:
    cs = CharacterStream("a\nb")
    assert cs.next() == "a"
    assert cs.next() == "\n"
    assert (cs.line, cs.column) == (2, 1)
    assert cs.peek() == "b"
    cs.next()
    assert cs.peek() == ""
    assert cs.end_of_file()
    with pytest.raises(EOFError):
        cs.next()


@given(st.text(alphabet=ALPHABET))
def test_alphabet_always_lexes(source: str) -> None:
    toks = tokenize(source)
    assert len(toks) == sum(1 for ch in source if not ch.isspace())


@given(st.text(min_size=1).filter(lambda s: any(ch not in ALPHABET for ch in s)))
def test_foreign_characters_always_fail(source: str) -> None:
    with pytest.raises(LexError):
        tokenize(source)


def test_lex_error_reports_line_of_character() -> None:
    with pytest.raises(LexError) as exc:
        tokenize("1+\n2a")
    assert (exc.value.line, exc.value.position) == (2, 2)
