from arith.arith_constants import MAX_DEPTH
from arith.arith_errors import CalcError, format_error
from arith.arith_interpreter import Interpreter
from arith.arith_lexer import tokenize
from arith.arith_parser import Parser


def eval_line(src: str, verbose: bool = False, max_depth: int = MAX_DEPTH) -> None:
    """Evaluate one REPL line and print the value or the error."""
    try:
        tokens = tokenize(src)
        if verbose:
            print(f"[tokens] >>> {tokens}")
        tree = Parser(tokens, max_depth).parse()
        if verbose:
            print(f"[ast] >>> {tree.to_source()}")
        value = Interpreter().evaluate(tree)
    except CalcError as e:
        print("[error] >>>")
        print(format_error(src, e))
        return
    print(value)


def start_repl(verbose: bool = False, max_depth: int = MAX_DEPTH) -> None:
    print("arith REPL. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            src = input(">>> ").strip()
            if src in ("exit", "quit"):
                print("Exiting arith REPL.")
                return
            if not src or src.startswith("#"):
                continue
            if src.lower() == "verbose-mode":
                verbose = not verbose
                print(f"[mode] >>> Verbose mode {'ON' if verbose else 'OFF'}")
                continue
            eval_line(src, verbose=verbose, max_depth=max_depth)
        except (KeyboardInterrupt, EOFError):
            print("\nExiting arith REPL.")
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
