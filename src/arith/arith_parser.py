"""
arith Expression Parser

Parses a token sequence into an abstract syntax tree (AST) with a
recursive-descent parser over a fixed four-level grammar.

Grammar
-------
    E = F (("+"|"-") F)*      additive, left-associative
    F = G (("*"|"/") G)*      multiplicative, left-associative
    G = "-" H | H              unary negation
    H = DIGIT | "(" E ")"      atoms and grouping

Lower letters bind tighter. Each level is one method; precedence comes from
the call structure alone, so no backtracking is needed: an operator that a
level does not expect is left unconsumed and control returns to the caller.

Parser Behavior
---------------
- The parse cursor is threaded explicitly: every level takes a cursor and
  returns `(node, next_cursor)`. The parser itself holds no mutable position.
- `+`/`-` and `*`/`/` chains fold to the left, so `8-3-2` is `(8-3)-2`.
- Unary minus applies to an atom only; `--3` is rejected.
- Trailing tokens after a complete expression are rejected.
- Nesting (parentheses and unary minus) is capped by `max_depth` so that
  deeply nested input fails with a ParseError instead of a RecursionError.

Entry Points
------------
- `Parser(tokens).parse()`: Parse a complete expression.
- `parse(tokens)`: Module-level shortcut.

Raises
------
ParseError
    On an unexpected token, end of input where a token is required,
    a missing `)`, trailing tokens, or excessive nesting.
"""

from __future__ import annotations

from typing import Callable

from arith.arith_ast import ASTNode
from arith.arith_constants import ADDITIVE_OPS, DIGIT, MAX_DEPTH, MULTIPLICATIVE_OPS
from arith.arith_errors import ParseError
from arith.arith_lexer import Token


class Parser:
    """
    Recursive-descent parser for arith expressions.

    Attributes
    ----------
    tokens : tuple[Token, ...]
        The token sequence, read-only for the lifetime of the parser.
    max_depth : int
        Maximum nesting of parentheses and unary minus.

    Methods
    -------
    parse() -> ASTNode
        Parse the whole token sequence as one expression.
    parse_expression(pos, depth) -> tuple[ASTNode, int]
        Grammar level E.
    parse_term(pos, depth) -> tuple[ASTNode, int]
        Grammar level F.
    parse_unary(pos, depth) -> tuple[ASTNode, int]
        Grammar level G.
    parse_atom(pos, depth) -> tuple[ASTNode, int]
        Grammar level H.
    """

    def __init__(self, tokens: list[Token] | tuple[Token, ...], max_depth: int = MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        self.tokens: tuple[Token, ...] = tuple(tokens)
        self.max_depth = max_depth

    def peek(self, pos: int) -> Token | None:
        return self.tokens[pos] if pos < len(self.tokens) else None

    def expect(self, pos: int) -> Token:
        """Return the token at `pos`, failing if the input ends there."""
        tok = self.peek(pos)
        if tok is None:
            raise ParseError(f"cannot read token at position {pos}", pos)
        return tok

    def parse(self) -> ASTNode:
        """Parse the full token sequence and return the root node.

        Raises:
            ParseError: If the tokens do not form exactly one expression.
        """
        node, pos = self.parse_expression(0, 0)
        if pos != len(self.tokens):
            tok = self.tokens[pos]
            raise ParseError(
                f"unexpected token {tok.value!r} after complete expression", pos
            )
        return node

    def _fold(
        self,
        pos: int,
        depth: int,
        ops: dict[str, str],
        operand: Callable[[int, int], tuple[ASTNode, int]],
    ) -> tuple[ASTNode, int]:
        """Left fold of `operand (op operand)*` for one binary precedence level."""
        node, pos = operand(pos, depth)
        while True:
            tok = self.peek(pos)
            if tok is None or tok.type not in ops:
                return node, pos
            right, pos = operand(pos + 1, depth)
            node = ASTNode(ops[tok.type], children=(node, right), line=tok.line, col=tok.col)

    def parse_expression(self, pos: int, depth: int) -> tuple[ASTNode, int]:
        """E = F (("+"|"-") F)*"""
        return self._fold(pos, depth, ADDITIVE_OPS, self.parse_term)

    def parse_term(self, pos: int, depth: int) -> tuple[ASTNode, int]:
        """F = G (("*"|"/") G)*"""
        return self._fold(pos, depth, MULTIPLICATIVE_OPS, self.parse_unary)

    def parse_unary(self, pos: int, depth: int) -> tuple[ASTNode, int]:
        """G = "-" H | H"""
        tok = self.expect(pos)
        if tok.type != "MINUS":
            return self.parse_atom(pos, depth)
        self._check_depth(pos, depth + 1)
        operand, pos = self.parse_atom(pos + 1, depth + 1)
        return ASTNode("negative", children=(operand,), line=tok.line, col=tok.col), pos

    def parse_atom(self, pos: int, depth: int) -> tuple[ASTNode, int]:
        """Grammar level H: DIGIT | "(" E ")"."""
        tok = self.expect(pos)
        if tok.type == DIGIT:
            return ASTNode("digit", tok.value, line=tok.line, col=tok.col), pos + 1
        if tok.type == "LPAREN":
            self._check_depth(pos, depth + 1)
            node, pos = self.parse_expression(pos + 1, depth + 1)
            closing = self.peek(pos)
            if closing is None:
                raise ParseError(
                    f"cannot read token at position {pos}: expected ')'", pos
                )
            if closing.type != "RPAREN":
                raise ParseError(f"expected ')' but found {closing.value!r}", pos)
            return node, pos + 1
        raise ParseError(
            f"unexpected token {tok.value!r}: expected a digit or '('", pos
        )

    def _check_depth(self, pos: int, depth: int) -> None:
        if depth > self.max_depth:
            raise ParseError(
                f"expression nested too deeply (limit is {self.max_depth})", pos
            )


def parse(tokens: list[Token] | tuple[Token, ...], max_depth: int = MAX_DEPTH) -> ASTNode:
    """Parse `tokens` into an AST. See `Parser.parse`."""
    return Parser(tokens, max_depth).parse()


__all__ = ["Parser", "parse"]
