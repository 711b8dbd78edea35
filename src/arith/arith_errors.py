"""
Error types raised by the arith pipeline.

Every stage fails fast with a subclass of `CalcError`:

    LexError   -- unrecognized character in the input
    ParseError -- unexpected or missing token, unbalanced parentheses,
                  trailing tokens, nesting limit exceeded
    EvalError  -- division by zero

Positions are 1-based source columns for lexer and interpreter errors and
0-based token indices (the parse cursor) for parser errors.

Example:
    >>> try:
    ...     calculate("2+a")
    ... except CalcError as e:
    ...     print(format_error("2+a", e))
"""
class CalcError(Exception):
    """Base class for all arith pipeline failures.

    Attributes:
        message (str): Human-readable diagnostic.
        position (int | None): Where the failure was detected, if known.
        line (int | None): 1-based source line of `position`, when it is a column.
    """

    kind = "CalcError"

    def __init__(
        self, message: str, position: int | None = None, line: int | None = None
    ):
        super().__init__(message)
        self.message = message
        self.position = position
        self.line = line

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"


class LexError(CalcError):
    """Raised when the lexer meets a character outside the input alphabet.

    Attributes:
        char (str): The offending character.
    """

    kind = "LexError"

    def __init__(self, char: str, position: int | None = None, line: int | None = None):
        super().__init__(f"unrecognized character {char!r}", position, line)
        self.char = char


class ParseError(CalcError):
    kind = "ParseError"


class EvalError(CalcError):
    kind = "EvalError"


def format_error(source: str, error: CalcError) -> str:
    """Render an error with the offending source line and a caret under it.

    Only lexer and interpreter positions are source columns, so the caret is
    drawn for those; parse errors fall back to the plain message. The caret
    goes under line `error.line` (line 1 when unset).

    Args:
        source (str): The expression that failed.
        error (CalcError): The raised error.

    Returns:
        str: A one- or three-line diagnostic.
    """
    header = f"{error.kind}: {error}"
    if isinstance(error, ParseError) or error.position is None:
        return header
    lines = source.splitlines() or [source]
    index = (error.line or 1) - 1
    if not 0 <= index < len(lines) or error.position > len(lines[index]):
        return header
    caret = " " * (error.position - 1) + "^"
    return f"{header}\n  {lines[index]}\n  {caret}"


__all__ = ["CalcError", "EvalError", "LexError", "ParseError", "format_error"]
