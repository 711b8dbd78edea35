"""
Evaluates arith ASTs to integers.

Classes and Features:
    - Interpreter: Reduces an `ASTNode` tree to an `int`, dispatching on node kind
      to `eval_<kind>` methods.
    - evaluate(): Module-level shortcut.

Evaluation walks the tree with an explicit stack rather than Python recursion,
so a long operator chain such as `1+1+...+1` (whose AST is as deep as it is
long) cannot hit the recursion limit.

Division truncates toward zero (`-7/2 == -3`), the behavior of fixed-width
integer division, rather than Python's flooring `//`. Python integers do not
overflow, so sums and products are always exact.

Raises:
    EvalError: On division by zero.
    NotImplementedError: If a node kind has no `eval_<kind>` method.
"""

from typing import Callable

from arith.arith_ast import ASTNode
from arith.arith_errors import EvalError


class Interpreter:
    """Dispatches AST nodes to the matching `eval_<kind>` method.

    Leaves are handled by `eval_digit(node)`, unary nodes by
    `eval_<kind>(node, operand)` and binary nodes by
    `eval_<kind>(node, left, right)`, where the operands are already evaluated.
    """

    def evaluate(self, root: ASTNode) -> int:
        """Evaluate `root` and return its integer value.

        Args:
            root: The tree to evaluate. It is not modified.

        Raises:
            EvalError: If a division by zero occurs anywhere in the tree.
            TypeError: If `root` is not an ASTNode.
        """
        if not isinstance(root, ASTNode):
            raise TypeError(f"Expected an ASTNode, got {type(root).__name__}")

        # Post-order walk: a node is applied once all its children have pushed
        # their values onto `values`.
        values: list[int] = []
        stack: list[tuple[ASTNode, bool]] = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            if not node.children:
                values.append(self._method(node)(node))
            elif not expanded:
                stack.append((node, True))
                for child in reversed(node.children):
                    stack.append((child, False))
            else:
                arity = len(node.children)
                args = values[-arity:]
                del values[-arity:]
                values.append(self._method(node)(node, *args))
        return values[0]

    def _method(self, node: ASTNode) -> Callable[..., int]:
        method_name = f"eval_{node.kind}"
        method = getattr(self, method_name, None)
        if method is None:
            raise NotImplementedError(
                f"No evaluator for node kind '{node.kind}' "
                f"(line {node.line}, col {node.col})"
            )
        return method

    def eval_digit(self, node: ASTNode) -> int:
        return node.value  # type: ignore[return-value]

    def eval_sum(self, node: ASTNode, left: int, right: int) -> int:
        return left + right

    def eval_diff(self, node: ASTNode, left: int, right: int) -> int:
        return left - right

    def eval_prod(self, node: ASTNode, left: int, right: int) -> int:
        return left * right

    def eval_div(self, node: ASTNode, left: int, right: int) -> int:
        if right == 0:
            raise EvalError("division by zero", node.col or None, node.line or None)
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient

    def eval_negative(self, node: ASTNode, operand: int) -> int:
        return -operand


def evaluate(node: ASTNode) -> int:
    """Evaluate `node` with a fresh Interpreter."""
    return Interpreter().evaluate(node)


__all__ = ["Interpreter", "evaluate"]
