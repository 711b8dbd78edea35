"""
Lexical analyzer for arith expressions.

This module converts raw expression text into a flat token sequence:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: Represents a single token with type, value, and source location.
    Lexer: Converts a CharacterStream into a sequence of tokens.

Features:
    - Skips whitespace (space, tab, CR, LF)
    - Each decimal digit is its own DIGIT token; "12" lexes as two digits
    - Recognizes `+ - * / ( )` one-to-one
    - Fails fast on any other character

Raises:
    LexError: On the first character outside the input alphabet.

Example:
    >>> tokenize("2 + 3")
    [Token(DIGIT, 2), Token(PLUS, +), Token(DIGIT, 3)]

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenize
    - token_hashmap
"""

from typing import Any

from arith.arith_constants import DIGIT, EOF, WHITESPACE, token_hashmap
from arith.arith_errors import LexError


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Returns:
            str: The next character.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise EOFError(
                f"Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self) -> str:
        """Returns the current character without advancing, or "" at end of input."""
        if self.position >= len(self.source):
            return ""
        return self.source[self.position]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Token:
    """Represents a single lexical token.

    Tokens are immutable once built by the lexer.

    Attributes:
        type (str): The canonical token type (e.g. 'DIGIT', 'PLUS', 'EOF').
        value (int | str): The digit's integer value, or the raw symbol.
        line (int): The 1-based line number where the token appears.
        col (int): The 1-based column number where the token starts.
    """

    __slots__ = ("type", "value", "line", "col")

    def __init__(self, type_: str, value: int | str, line: int = 0, col: int = 0):
        object.__setattr__(self, "type", type_)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "col", col)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Token is immutable (tried to set {name!r})")

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.type, self.value, self.line, self.col))


class Lexer:
    """Lexical analyzer for arith expressions.

    The Lexer takes a CharacterStream and produces Token objects one at a
    time. A single left-to-right pass with no lookahead is enough for this
    alphabet.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.peek() in WHITESPACE:
            self.advance()

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token: The next token, or an EOF token once the input is exhausted.

        Raises:
            LexError: If the next character is not part of the alphabet.
        """
        self.skip_whitespace()

        line, col = self.stream.line, self.stream.column
        if self.stream.end_of_file():
            return Token(EOF, EOF, line, col)

        ch = self.peek()

        # str.isdigit() accepts other Unicode digits, so compare against ASCII
        if "0" <= ch <= "9":
            self.advance()
            return Token(DIGIT, ord(ch) - ord("0"), line, col)

        if ch in token_hashmap:
            self.advance()
            return Token(token_hashmap[ch], ch, line, col)

        raise LexError(ch, col, line)

    def __iter__(self) -> "Lexer":
        return self

    def __next__(self) -> Token:
        tok = self.next_token()
        if tok.type == EOF:
            raise StopIteration
        return tok


def tokenize(source: str) -> list[Token]:
    """Lex `source` completely.

    Args:
        source (str): Expression text.

    Returns:
        list[Token]: Tokens in input order, without the trailing EOF token.

    Raises:
        LexError: On the first unrecognized character; no partial list is returned.
    """
    return list(Lexer(CharacterStream(source)))


__all__ = ["CharacterStream", "Lexer", "Token", "token_hashmap", "tokenize"]
