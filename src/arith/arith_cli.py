"""
arith CLI Entrypoint.

This module provides the command-line interface for evaluating arith expressions.
It supports inline expressions, expression files, and interactive REPL mode.

Features:
    - Read expressions from `.arith` files (one per line) or inline strings.
    - Lex, parse, and evaluate each expression.
    - Optionally show tokens, the AST as infix text, or the AST as JSON.
    - Launch an interactive REPL with optional verbosity.

Example usage:
    arith -s "2 + 3 * 5"
    arith -s "(2+3)*5" --tokens --ast -p
    arith sums.arith
    arith --repl --verbose

Functions:
    run_arith(source: str, is_string: bool = False, show_tokens: bool = False,
              show_ast: bool = False, as_json: bool = False, pretty: bool = False,
              max_depth: int = MAX_DEPTH) -> int:
        Executes the full pipeline (lex → parse → evaluate → output) and returns
        the process exit status.

    main() -> None:
        Parses CLI arguments and invokes the appropriate action (REPL or evaluate).
"""

import argparse
import json
import sys

from arith.arith_constants import MAX_DEPTH
from arith.arith_errors import CalcError, format_error
from arith.arith_interpreter import Interpreter
from arith.arith_lexer import tokenize
from arith.arith_parser import Parser


def read_expressions(path: str) -> list[str]:
    """Read one expression per line, skipping blank lines and `#` comments."""
    with open(path, encoding="utf-8") as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith("#")]


def run_one(
    source: str,
    show_tokens: bool = False,
    show_ast: bool = False,
    as_json: bool = False,
    pretty: bool = False,
    max_depth: int = MAX_DEPTH,
) -> bool:
    """Evaluate one expression and print the result or the error.

    Returns:
        bool: True if the expression evaluated successfully.
    """
    try:
        tokens = tokenize(source)
        if show_tokens:
            print(f"[tokens] >>> {tokens}")
        tree = Parser(tokens, max_depth).parse()
        if show_ast:
            print(f"[ast] >>> {tree.to_source()}")
        if as_json:
            print(json.dumps(tree.to_dict(), indent=2 if pretty else None))
        value = Interpreter().evaluate(tree)
    except CalcError as e:
        print(f"[error] >>> {format_error(source, e)}", file=sys.stderr)
        return False
    except RecursionError:
        # json's encoder recurses once per level of the tree
        print("[error] >>> AST too deep to render as JSON", file=sys.stderr)
        return False

    if pretty:
        print(f"{source} = {value}")
    else:
        print(value)
    return True


def run_arith(
    source: str,
    is_string: bool = False,
    show_tokens: bool = False,
    show_ast: bool = False,
    as_json: bool = False,
    pretty: bool = False,
    max_depth: int = MAX_DEPTH,
) -> int:
    """
    Run the arith pipeline on an inline expression or an expression file.

    Args:
        source (str): The expression, or a path to a `.arith` file.
        is_string (bool): If True, treats `source` as an expression instead of a file path.
        show_tokens (bool): Print the token list before parsing.
        show_ast (bool): Print the parsed tree as infix text.
        as_json (bool): Print the parsed tree as JSON.
        pretty (bool): Print banners and `expr = value` lines.
        max_depth (int): Parser nesting limit.

    Returns:
        int: 0 if every expression evaluated, 1 otherwise.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.arith'.
    """
    if not is_string and not source.endswith(".arith"):
        raise ValueError("Only .arith files are supported.")

    expressions = [source] if is_string else read_expressions(source)

    if pretty:
        banner = "=" * 20
        print(f"{banner}\narith ({len(expressions)} expression(s))\n{banner}")

    failures = 0
    for expr in expressions:
        ok = run_one(
            expr,
            show_tokens=show_tokens,
            show_ast=show_ast,
            as_json=as_json,
            pretty=pretty,
            max_depth=max_depth,
        )
        if not ok:
            failures += 1

    if pretty and failures:
        print(f"({failures} of {len(expressions)} failed)")
    return 1 if failures else 0


def main() -> None:
    """
    Entry point for the arith CLI.

    Parses command-line arguments and dispatches to the appropriate mode:
    - Launches the REPL if no arguments are passed or `--repl` is specified.
    - Otherwise, evaluates the inline expression or file and exits with its status.

    Supported flags:
        - `-s`, `--string`: Interpret source as an expression instead of a file path.
        - `--tokens`: Print the token list.
        - `--ast`: Print the AST as infix text.
        - `--json`: Print the AST as JSON.
        - `-p`, `--pretty`: Show banners and `expr = value` lines.
        - `--max-depth`: Parser nesting limit.
        - `--repl`: Launch the interactive REPL.
        - `--verbose`: Enable verbose REPL mode.
    """
    if len(sys.argv) == 1:
        from arith.arith_repl import start_repl

        start_repl()
        return
    parser = argparse.ArgumentParser(prog="arith")
    parser.add_argument("source", nargs="?", help="Filename or expression (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as an expression"
    )
    parser.add_argument("--tokens", action="store_true", help="Print the token list")
    parser.add_argument("--ast", action="store_true", help="Print the AST as infix text")
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Print the AST as JSON"
    )
    parser.add_argument(
        "-p", "--pretty", action="store_true", help="Show output with banners"
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_DEPTH,
        metavar="N",
        help=f"Maximum nesting of parentheses and unary minus (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL instead of evaluating",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Verbose REPL mode (if --repl)"
    )

    args = parser.parse_args()
    if args.max_depth < 1:
        parser.error("--max-depth must be a positive integer")

    if args.repl or args.source is None:
        from arith.arith_repl import start_repl

        start_repl(verbose=args.verbose, max_depth=args.max_depth)
        return
    try:
        status = run_arith(
            source=args.source,
            is_string=args.string,
            show_tokens=args.tokens,
            show_ast=args.ast,
            as_json=args.as_json,
            pretty=args.pretty,
            max_depth=args.max_depth,
        )
    except (ValueError, OSError) as e:
        print(f"[error] >>> {e}", file=sys.stderr)
        status = 1
    sys.exit(status)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
