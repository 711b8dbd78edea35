import json

import pytest

from arith.arith_ast import ASTNode


def d(v: int) -> ASTNode:
    return ASTNode("digit", v)


def test_astnode_repr() -> None:
    node = ASTNode("sum", children=[d(1), d(2)])
    assert repr(node) == (
        "ASTNode(sum, children=[ASTNode(digit, value=1), ASTNode(digit, value=2)])"
    )


def test_astnode_eq_equal() -> None:
    assert ASTNode("prod", children=[d(2), d(3)]) == ASTNode(
        "prod", children=(d(2), d(3))
    )


def test_astnode_eq_ignores_position() -> None:
    assert ASTNode("digit", 4, line=1, col=1) == ASTNode("digit", 4, line=3, col=9)


def test_astnode_eq_not_equal_kind() -> None:
    assert ASTNode("sum", children=[d(1), d(2)]) != ASTNode("diff", children=[d(1), d(2)])


def test_astnode_eq_not_equal_children() -> None:
    assert ASTNode("negative", children=[d(1)]) != ASTNode("negative", children=[d(2)])


def test_astnode_eq_other_type() -> None:
    assert d(1) != 1


def test_astnode_hash_matches_eq() -> None:
    assert hash(ASTNode("digit", 4, col=1)) == hash(ASTNode("digit", 4, col=7))


def test_child_accessors() -> None:
    node = ASTNode("div", children=[d(8), d(2)])
    assert node.left == d(8)
    assert node.right == d(2)
    with pytest.raises(AttributeError):
        node.operand
    neg = ASTNode("negative", children=[d(3)])
    assert neg.operand == d(3)
    with pytest.raises(AttributeError):
        neg.left


@pytest.mark.parametrize(
    "kind,value,children",
    [
        ("mod", None, [d(1), d(2)]),
        ("digit", 10, []),
        ("digit", -1, []),
        ("digit", None, []),
        ("digit", True, []),
        ("digit", 1, [d(1)]),
        ("sum", None, [d(1)]),
        ("sum", 3, [d(1), d(2)]),
        ("negative", None, [d(1), d(2)]),
        ("negative", None, []),
    ],
)
def test_astnode_rejects_malformed_nodes(kind: str, value: object, children: list[ASTNode]) -> None:
    with pytest.raises(ValueError):
        ASTNode(kind, value, children)  # type: ignore[arg-type]


def test_astnode_rejects_non_node_children() -> None:
    with pytest.raises(TypeError):
        ASTNode("negative", children=["1"])  # type: ignore[list-item]


def test_astnode_is_immutable() -> None:
    node = d(1)
    with pytest.raises(AttributeError):
        node.value = 2  # type: ignore[misc]


def test_astnode_to_dict_basic() -> None:
    node = ASTNode("sum", children=[ASTNode("digit", 1, line=1, col=1), d(2)], line=1, col=2)
    result = node.to_dict()
    assert result["kind"] == "sum"
    assert result["value"] is None
    assert result["line"] == 1
    assert result["col"] == 2
    assert result["children"][0] == {
        "kind": "digit",
        "value": 1,
        "line": 1,
        "col": 1,
        "children": [],
    }
    json.dumps(result)


@pytest.mark.parametrize(
    "node,text",
    [
        (d(7), "7"),
        (ASTNode("sum", children=[d(1), d(2)]), "1 + 2"),
        (ASTNode("negative", children=[d(3)]), "-3"),
        (
            ASTNode("negative", children=[ASTNode("sum", children=[d(3), d(4)])]),
            "-(3 + 4)",
        ),
        (
            ASTNode("negative", children=[ASTNode("negative", children=[d(3)])]),
            "-(-3)",
        ),
        (
            ASTNode(
                "diff",
                children=[ASTNode("diff", children=[d(8), d(3)]), d(2)],
            ),
            "8 - 3 - 2",
        ),
        (
            ASTNode("prod", children=[d(4), ASTNode("negative", children=[d(2)])]),
            "4 * -2",
        ),
    ],
)
def test_astnode_to_source(node: ASTNode, text: str) -> None:
    assert node.to_source() == text


@pytest.mark.parametrize(
    "node,text",
    [
        (ASTNode("diff", children=[d(8), ASTNode("diff", children=[d(3), d(2)])]), "8 - (3 - 2)"),
        (ASTNode("prod", children=[ASTNode("sum", children=[d(1), d(2)]), d(3)]), "(1 + 2) * 3"),
        (ASTNode("sum", children=[d(1), ASTNode("prod", children=[d(2), d(3)])]), "1 + 2 * 3"),
        (ASTNode("div", children=[d(8), ASTNode("prod", children=[d(2), d(2)])]), "8 / (2 * 2)"),
        (
            ASTNode("prod", children=[ASTNode("negative", children=[ASTNode("sum", children=[d(1), d(2)])]), d(3)]),
            "-(1 + 2) * 3",
        ),
    ],
)
def test_astnode_to_source_groups_only_where_needed(node: ASTNode, text: str) -> None:
    assert node.to_source() == text


def chain(length: int) -> ASTNode:
    tree = d(1)
    for _ in range(length - 1):
        tree = ASTNode("sum", children=[tree, d(1)])
    return tree


def test_deep_chain_helpers_do_not_recurse() -> None:
    first, second = chain(3000), chain(3000)
    assert first == second
    assert hash(first) == hash(second)
    assert first != chain(2999)
    assert first.to_source() == " + ".join(["1"] * 3000)
    assert repr(first).startswith("ASTNode(sum, children=[" * 2999 + "ASTNode(digit, value=1)")

    result = first.to_dict()
    depth = 0
    while result["children"]:
        assert result["kind"] == "sum"
        result = result["children"][0]
        depth += 1
    assert depth == 2999
    assert result == {"kind": "digit", "value": 1, "line": 0, "col": 0, "children": []}


def test_deep_chain_inequality_at_the_bottom() -> None:
    deep = chain(3000)
    other = d(2)
    for _ in range(2999):
        other = ASTNode("sum", children=[other, d(1)])
    assert deep != other
