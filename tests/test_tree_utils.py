import pytest

from symbolic_math import BinaryOpNode, ConstantNode, NegNode, Symbol, constant, variables
from symbolic_math.expression_tree.core import OpType
from symbolic_math.expression_tree.utils import (
    get_all_nodes, calculate_tree_depth, is_operation,
    find_nodes_by_type, find_nodes_by_operator,
    get_variable_usage_counts, get_constants, get_variables,
    get_binary_ops, get_negations
)

x, y = variables("x", "y")


def test_breadth_first_order():
    expr = (x + y) * 2
    nodes = get_all_nodes(expr)
    assert nodes == [expr, x + y, constant(2.0), x, y]


def test_depth_first_order():
    expr = (x + y) * 2
    nodes = get_all_nodes(expr, traversal_order='depth_first')
    assert nodes == [expr, x + y, x, y, constant(2.0)]


def test_invalid_traversal_order():
    with pytest.raises(ValueError):
        get_all_nodes(x, traversal_order='sideways')


def test_tree_depth():
    assert calculate_tree_depth(x) == 1
    assert calculate_tree_depth(-(x + y)) == 3
    assert calculate_tree_depth((x + y) * 2) == 3


def test_is_operation():
    assert is_operation(x + y, OpType.ADD)
    assert not is_operation(x + y, OpType.MUL)
    assert not is_operation(-x, OpType.SUB)
    assert not is_operation(x, OpType.ADD)


def test_find_nodes_by_operator():
    expr = -(x + y) + x * 2
    assert find_nodes_by_operator(expr, '+') == [expr, x + y]
    assert find_nodes_by_operator(expr, '*') == [x * 2]
    assert find_nodes_by_operator(expr, 'neg') == [-(x + y)]
    assert find_nodes_by_operator(expr, '^') == []
    with pytest.raises(ValueError):
        find_nodes_by_operator(expr, '%')


def test_find_nodes_by_type_and_shortcuts():
    expr = -(x + 1) * (y - 2)
    assert all(isinstance(n, ConstantNode) for n in find_nodes_by_type(expr, ConstantNode))
    assert [c.value for c in get_constants(expr)] == [2.0, 1.0]
    assert [v.name for v in get_variables(expr)] == ["y", "x"]
    assert len(get_binary_ops(expr)) == 3
    assert all(isinstance(n, BinaryOpNode) for n in get_binary_ops(expr))
    negations = get_negations(expr)
    assert len(negations) == 1 and isinstance(negations[0], NegNode)


def test_variable_usage_counts():
    expr = x * x + y
    assert get_variable_usage_counts(expr) == {Symbol("x"): 2, Symbol("y"): 1}
    assert get_variable_usage_counts(constant(1.0)) == {}
