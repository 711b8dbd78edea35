"""
Shared lookup tables for the arith toolchain.

The lexer, parser, interpreter and AST all key off the canonical names defined
here, so the set of tokens and node kinds is closed and lives in one place.

Exports:
    - token_hashmap: single-character symbol to canonical token type
    - DIGIT, EOF: special token types not present in `token_hashmap`
    - WHITESPACE: characters the lexer skips
    - ADDITIVE_OPS, MULTIPLICATIVE_OPS: token type to AST kind for each fold level
    - BINARY_KINDS, UNARY_KINDS, AST_KINDS: closed set of AST node kinds
    - KIND_SYMBOLS: AST kind to infix symbol (used by `ASTNode.to_source`)
    - KIND_PRECEDENCE: AST kind to binding strength (used by `ASTNode.to_source`)
    - MAX_DEPTH: default parser nesting limit
"""

DIGIT = "DIGIT"
EOF = "EOF"

token_hashmap: dict[str, str] = {
    "+": "PLUS",
    "-": "MINUS",
    "*": "TIMES",
    "/": "DIVISION",
    "(": "LPAREN",
    ")": "RPAREN",
}

TOKEN_TYPES: frozenset[str] = frozenset(token_hashmap.values()) | {DIGIT}

WHITESPACE = " \t\r\n"

# Grammar level E folds these into its left subtree
ADDITIVE_OPS: dict[str, str] = {
    "PLUS": "sum",
    "MINUS": "diff",
}

# Grammar level F
MULTIPLICATIVE_OPS: dict[str, str] = {
    "TIMES": "prod",
    "DIVISION": "div",
}

BINARY_KINDS: frozenset[str] = frozenset(
    list(ADDITIVE_OPS.values()) + list(MULTIPLICATIVE_OPS.values())
)
UNARY_KINDS: frozenset[str] = frozenset({"negative"})
AST_KINDS: frozenset[str] = BINARY_KINDS | UNARY_KINDS | {"digit"}

KIND_SYMBOLS: dict[str, str] = {
    "sum": "+",
    "diff": "-",
    "prod": "*",
    "div": "/",
    "negative": "-",
}

# Binding strength used when printing; atoms and negation never need grouping
KIND_PRECEDENCE: dict[str, int] = {
    "sum": 1,
    "diff": 1,
    "prod": 2,
    "div": 2,
    "negative": 3,
    "digit": 3,
}

# Each "(" and unary "-" costs one level. Every level is six Python frames
# deep in the parser, so keep this well under the interpreter's recursion limit.
MAX_DEPTH = 100

__all__ = [
    "ADDITIVE_OPS",
    "AST_KINDS",
    "BINARY_KINDS",
    "DIGIT",
    "EOF",
    "KIND_PRECEDENCE",
    "KIND_SYMBOLS",
    "MAX_DEPTH",
    "MULTIPLICATIVE_OPS",
    "TOKEN_TYPES",
    "UNARY_KINDS",
    "WHITESPACE",
    "token_hashmap",
]
