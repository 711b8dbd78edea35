"""
Defines the abstract syntax tree (AST) node structure for arith expressions.

Classes:
    ASTNode:
        A node of the expression tree built by the parser and consumed by the
        interpreter. The set of kinds is closed:

            digit     leaf, value 0..9
            sum       left + right
            diff      left - right
            prod      left * right
            div       left / right
            negative  -operand

    ASTDict:
        TypedDict representation for serializing ASTNode instances to plain Python
        dictionaries, suitable for JSON output or debugging.

Each child is owned by exactly one parent and nodes cannot be changed after
construction, so a tree is acyclic by construction.

A left-folded chain such as `1+1+...+1` yields a tree as deep as the chain
is long, so every tree walk here uses an explicit stack instead of recursion.

Example:
    node = ASTNode("sum", children=[ASTNode("digit", 1), ASTNode("digit", 2)])
    node.to_source()  # "1 + 2"
"""

from typing import Any, TypedDict

from arith.arith_constants import (
    AST_KINDS,
    BINARY_KINDS,
    KIND_PRECEDENCE,
    KIND_SYMBOLS,
    UNARY_KINDS,
)


class ASTDict(TypedDict):
    """
    TypedDict representation of an ASTNode used for serialization.

    Fields:
        kind (str): The node kind (e.g., "digit", "sum", "negative").
        value (int | None): The digit value for leaves, None otherwise.
        line (int): Line number of the token that produced the node.
        col (int): Column number of the token that produced the node.
        children (list[ASTDict]): Child nodes, left to right.
    """

    kind: str
    value: int | None
    line: int
    col: int
    children: list["ASTDict"]


class ASTNode:
    """
    Represents a node in the expression tree.

    Args:
        kind (str): One of `AST_KINDS`.
        value (int, optional): The digit value; required for "digit", forbidden otherwise.
        children (list[ASTNode] | tuple[ASTNode, ...], optional): Two children for
            binary kinds, one for "negative", none for "digit".
        line (int): Source line of the producing token (default is 0).
        col (int): Source column of the producing token (default is 0).

    Raises:
        ValueError: If the kind is unknown, the arity is wrong, or a digit is out of range.

    Note:
        `line` and `col` are diagnostics only and do not take part in equality,
        so the same expression written with different spacing yields equal trees.
    """

    __slots__ = ("kind", "value", "children", "line", "col", "_hash")

    def __init__(
        self,
        kind: str,
        value: int | None = None,
        children: list["ASTNode"] | tuple["ASTNode", ...] | None = None,
        line: int = 0,
        col: int = 0,
    ):
        kids = tuple(children or ())
        if kind not in AST_KINDS:
            raise ValueError(f"Unknown AST node kind: {kind!r}")
        if kind == "digit":
            if kids:
                raise ValueError("digit nodes cannot have children")
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 9:
                raise ValueError(f"digit value must be an int in 0..9, got {value!r}")
        else:
            if value is not None:
                raise ValueError(f"{kind} nodes do not carry a value")
            expected = 2 if kind in BINARY_KINDS else 1
            if len(kids) != expected:
                raise ValueError(
                    f"{kind} nodes take {expected} children, got {len(kids)}"
                )
        if not all(isinstance(c, ASTNode) for c in kids):
            raise TypeError("All children must be ASTNode instances.")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "children", kids)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "col", col)
        # Children are complete before their parent, so their hashes are ready
        object.__setattr__(
            self, "_hash", hash((kind, value, tuple(c._hash for c in kids)))
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"ASTNode is immutable (tried to set {name!r})")

    @property
    def left(self) -> "ASTNode":
        if self.kind not in BINARY_KINDS:
            raise AttributeError(f"{self.kind} node has no left child")
        return self.children[0]

    @property
    def right(self) -> "ASTNode":
        if self.kind not in BINARY_KINDS:
            raise AttributeError(f"{self.kind} node has no right child")
        return self.children[1]

    @property
    def operand(self) -> "ASTNode":
        if self.kind not in UNARY_KINDS:
            raise AttributeError(f"{self.kind} node has no operand")
        return self.children[0]

    def __repr__(self) -> str:
        pieces: list[str] = []
        stack: list[ASTNode | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                pieces.append(item)
                continue
            parts: list[ASTNode | str] = [f"ASTNode({item.kind}"]
            if item.value is not None:
                parts.append(f", value={item.value!r}")
            if item.children:
                parts.append(", children=[")
                for i, child in enumerate(item.children):
                    if i:
                        parts.append(", ")
                    parts.append(child)
                parts.append("]")
            parts.append(")")
            stack.extend(reversed(parts))
        return "".join(pieces)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ASTNode):
            return False
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is b:
                continue
            if a._hash != b._hash or a.kind != b.kind or a.value != b.value:
                return False
            pending.extend(zip(a.children, b.children))
        return True

    def __hash__(self) -> int:
        return self._hash

    def to_dict(self) -> ASTDict:
        root: list[ASTDict] = []
        stack: list[tuple[ASTNode, list[ASTDict]]] = [(self, root)]
        while stack:
            node, siblings = stack.pop()
            entry: ASTDict = {
                "kind": node.kind,
                "value": node.value,
                "line": node.line,
                "col": node.col,
                "children": [],
            }
            siblings.append(entry)
            for child in reversed(node.children):
                stack.append((child, entry["children"]))
        return root[0]

    def to_source(self) -> str:
        """Render the tree as infix text with only the parentheses it needs.

        A child is parenthesized when it binds looser than its parent, or when
        it is the right operand of an operator at the same level (`8 - (3 - 2)`).
        Left-folded chains therefore print flat and the output re-parses to an
        equal tree regardless of chain length. Negation is written as `-(x)`
        when its operand is not a digit, because the grammar only allows a
        digit or a parenthesized group after unary minus.

        Returns:
            str: Infix expression text.
        """
        pieces: list[str] = []
        stack: list[ASTNode | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                pieces.append(item)
            elif item.kind == "digit":
                pieces.append(str(item.value))
            elif item.kind == "negative":
                if item.operand.kind == "digit":
                    stack.extend((item.operand, "-"))
                else:
                    stack.extend((")", item.operand, "-("))
            else:
                level = KIND_PRECEDENCE[item.kind]
                left, right = item.children
                parts: list[ASTNode | str] = []
                if KIND_PRECEDENCE[left.kind] < level:
                    parts += ["(", left, ")"]
                else:
                    parts.append(left)
                parts.append(f" {KIND_SYMBOLS[item.kind]} ")
                if KIND_PRECEDENCE[right.kind] <= level:
                    parts += ["(", right, ")"]
                else:
                    parts.append(right)
                stack.extend(reversed(parts))
        return "".join(pieces)


__all__ = ["ASTDict", "ASTNode"]
