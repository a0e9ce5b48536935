"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier
from .expander import ExpressionExpander
from .sympy_utils import to_sympy, from_sympy, are_equivalent, latex_representation
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, is_operation,
    find_nodes_by_type, find_nodes_by_operator,
    get_variable_usage_counts, get_constants, get_variables,
    get_binary_ops, get_negations
)

__all__ = [
    'ExpressionSimplifier', 'ExpressionExpander',
    'to_sympy', 'from_sympy', 'are_equivalent', 'latex_representation',
    'get_all_nodes', 'calculate_tree_depth', 'is_operation',
    'find_nodes_by_type', 'find_nodes_by_operator',
    'get_variable_usage_counts', 'get_constants', 'get_variables',
    'get_binary_ops', 'get_negations'
]
