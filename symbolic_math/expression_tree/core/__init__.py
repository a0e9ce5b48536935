"""Core expression tree components."""

from .symbol import Symbol, as_symbol, normalize_bindings
from .node import Node, VariableNode, ConstantNode, BinaryOpNode, NegNode, format_number
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, OP_SYMBOLS,
    evaluate_constant, evaluate_binary_op, evaluate_unary_op,
    apply_binary_op, apply_unary_op, round_significant, is_finite
)

__all__ = [
    'Symbol', 'as_symbol', 'normalize_bindings',
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'NegNode', 'format_number',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'OP_SYMBOLS',
    'evaluate_constant', 'evaluate_binary_op', 'evaluate_unary_op',
    'apply_binary_op', 'apply_unary_op', 'round_significant', 'is_finite'
]
