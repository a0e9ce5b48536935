"""Expression Tree Module

Immutable expression trees with evaluation, simplification and expansion.
"""

from .core.symbol import Symbol
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    NegNode
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    round_significant
)
from .expression import Expr, constant, variable, variables, add, sub, mul, div, power, neg
from .utils import (
    ExpressionSimplifier, ExpressionExpander,
    to_sympy, from_sympy, are_equivalent, latex_representation
)

__all__ = [
    "Symbol",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "NegNode",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "round_significant",
    "Expr", "constant", "variable", "variables",
    "add", "sub", "mul", "div", "power", "neg",
    "ExpressionSimplifier", "ExpressionExpander",
    "to_sympy", "from_sympy", "are_equivalent", "latex_representation"
]
