import dataclasses

import pytest

from symbolic_math import (
    Symbol, Node, Expr, ConstantNode, VariableNode, BinaryOpNode, NegNode,
    constant, variable, variables, add, sub, mul, div, power, neg
)


def test_symbol_compares_by_name():
    assert Symbol("x") == Symbol("x")
    assert hash(Symbol("x")) == hash(Symbol("x"))
    assert Symbol("x") != Symbol("y")
    assert str(Symbol("alpha")) == "alpha"


def test_symbol_rejects_bad_names():
    with pytest.raises(ValueError):
        Symbol("")
    with pytest.raises(TypeError):
        Symbol(3)


def test_symbol_is_frozen():
    symbol = Symbol("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        symbol.name = "y"


def test_constructors():
    assert Node.constant(2.0) == ConstantNode(2.0)
    assert Expr.variable("x") == VariableNode(Symbol("x"))
    assert constant(3) == ConstantNode(3.0)
    assert isinstance(constant(3).value, float)
    assert variable("x") == VariableNode("x")
    x, y = variables("x", "y")
    assert (x, y) == (VariableNode("x"), VariableNode("y"))


def test_constant_rejects_non_numbers():
    with pytest.raises(TypeError):
        ConstantNode("2")
    with pytest.raises(TypeError):
        ConstantNode(True)


def test_binary_node_validation():
    x = variable("x")
    with pytest.raises(ValueError):
        BinaryOpNode("%", x, x)
    with pytest.raises(TypeError):
        BinaryOpNode("+", x, 2.0)
    with pytest.raises(TypeError):
        NegNode("x")


def test_operators_build_nodes():
    x, y = variables("x", "y")
    assert x + y == BinaryOpNode("+", x, y)
    assert x - y == BinaryOpNode("-", x, y)
    assert x * y == BinaryOpNode("*", x, y)
    assert x / y == BinaryOpNode("/", x, y)
    assert x ** y == BinaryOpNode("^", x, y)
    assert x.pow(y) == BinaryOpNode("^", x, y)
    assert -x == NegNode(x)


@pytest.mark.parametrize("operator, build, build_reflected", [
    ("+", lambda e: e + 2.0, lambda e: 2.0 + e),
    ("-", lambda e: e - 2.0, lambda e: 2.0 - e),
    ("*", lambda e: e * 2.0, lambda e: 2.0 * e),
    ("/", lambda e: e / 2.0, lambda e: 2.0 / e),
    ("^", lambda e: e ** 2.0, lambda e: 2.0 ** e),
])
def test_operators_mix_with_numbers(operator, build, build_reflected):
    x = variable("x")
    two = constant(2.0)
    assert build(x) == BinaryOpNode(operator, x, two)
    assert build_reflected(x) == BinaryOpNode(operator, two, x)


def test_operators_accept_ints_and_reject_other_types():
    x = variable("x")
    assert x + 1 == BinaryOpNode("+", x, ConstantNode(1.0))
    assert x.pow(2) == BinaryOpNode("^", x, ConstantNode(2.0))
    with pytest.raises(TypeError):
        x + "y"
    with pytest.raises(TypeError):
        x * True
    with pytest.raises(TypeError):
        x.pow(None)


def test_named_helpers_match_operators():
    x, y = variables("x", "y")
    assert add(x, 1) == x + 1
    assert sub(1, x) == 1 - x
    assert mul(x, y) == x * y
    assert div(x, 2) == x / 2
    assert power(x, y) == x.pow(y)
    assert neg(x) == -x
    with pytest.raises(TypeError):
        add(x, "y")


def test_structural_equality():
    x, y = variables("x", "y")
    assert x + y == variable("x") + variable("y")
    assert x + y != y + x
    assert ConstantNode(2.0) == ConstantNode(2)
    assert ConstantNode(0.0) == ConstantNode(-0.0)
    # An unsimplified tree is not equal to its simplified form
    assert x + 0 != x
    assert len({x + y, variable("x") + variable("y")}) == 1
    assert (x == 2.0) is False


def test_nodes_are_immutable():
    x = variable("x")
    c = constant(2.0)
    expr = x + c
    with pytest.raises(AttributeError):
        c.value = 3.0
    with pytest.raises(AttributeError):
        x.symbol = Symbol("y")
    with pytest.raises(AttributeError):
        expr.left = c
    with pytest.raises(AttributeError):
        expr.extra = 1
    assert expr.copy() is expr


def test_display_string():
    x, y = variables("x", "y")
    expr = x + y * constant(3.0).pow(constant(2.0))
    assert expr.to_display_string() == "(x + (y * (3 ^ 2)))"
    assert str((x - 0.5) / -y) == "((x - 0.5) / -y)"
    assert str(constant(float("inf"))) == "inf"
    assert str(constant(-4.0)) == "-4"


def test_repr():
    expr = variable("x") * 2 + (-variable("y"))
    assert repr(expr) == (
        "BinaryOpNode('+', BinaryOpNode('*', VariableNode('x'), ConstantNode(2.0)), "
        "NegNode(VariableNode('y')))"
    )


def test_symbol_if_variable():
    x = variable("x")
    assert x.symbol_if_variable() == Symbol("x")
    assert (x + 1).symbol_if_variable() is None
    assert constant(1.0).symbol_if_variable() is None
    assert (-x).symbol_if_variable() is None


def test_constant_value_accessor():
    assert constant(2.5).is_constant()
    assert constant(2.5).constant_value() == 2.5
    assert not variable("x").is_constant()
    with pytest.raises(TypeError):
        variable("x").constant_value()


def test_size_depth_and_variables():
    x, y = variables("x", "y")
    expr = (x + y) * 2
    assert expr.size() == 5
    assert expr.depth() == 3
    assert expr.variables() == {Symbol("x"), Symbol("y")}
    assert constant(1.0).variables() == set()
    assert (-x).size() == 2
    assert expr.children() == (x + y, constant(2.0))


def test_helpers_share_the_node_operand_alias():
    from symbolic_math.expression_tree import expression
    from symbolic_math.expression_tree.core import node, operators
    assert expression.Operand is node.Operand
    assert set(operators.OP_SYMBOLS) == set(operators.BINARY_OP_MAP.values())
    assert not hasattr(operators, "UNARY_OP_MAP")
