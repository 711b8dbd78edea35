"""
Single entry point for the arith pipeline: text -> tokens -> AST -> int.

Functions:
    calculate(source, max_depth=MAX_DEPTH) -> int
        Run all three stages on one expression. The first failing stage raises
        and the remaining stages are skipped.

    calculate_all(sources, max_depth=MAX_DEPTH) -> list[CalcResult]
        Run `calculate` on each expression independently. A failure is recorded
        on that expression's result and does not stop the batch.

Example:
    >>> calculate("-3 + 4 * 5 - (3 + 2) * ( 7 - 5 )")
    7
"""

from collections.abc import Iterable
from dataclasses import dataclass

from arith.arith_constants import MAX_DEPTH
from arith.arith_errors import CalcError
from arith.arith_interpreter import evaluate
from arith.arith_lexer import tokenize
from arith.arith_parser import parse


@dataclass(frozen=True)
class CalcResult:
    """Outcome of evaluating one expression in a batch.

    Exactly one of `value` and `error` is set.
    """

    source: str
    value: int | None = None
    error: CalcError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def calculate(source: str, max_depth: int = MAX_DEPTH) -> int:
    """Evaluate an arithmetic expression.

    Args:
        source (str): Expression text over digits, `+ - * / ( )` and whitespace.
        max_depth (int): Nesting limit passed to the parser.

    Returns:
        int: The value of the expression.

    Raises:
        LexError: If the text contains a character outside the alphabet.
        ParseError: If the tokens do not form exactly one expression.
        EvalError: If the expression divides by zero.
    """
    tokens = tokenize(source)
    tree = parse(tokens, max_depth)
    return evaluate(tree)


def calculate_all(sources: Iterable[str], max_depth: int = MAX_DEPTH) -> list[CalcResult]:
    results: list[CalcResult] = []
    for source in sources:
        try:
            results.append(CalcResult(source, value=calculate(source, max_depth)))
        except CalcError as e:
            results.append(CalcResult(source, error=e))
    return results


__all__ = ["CalcResult", "calculate", "calculate_all"]
