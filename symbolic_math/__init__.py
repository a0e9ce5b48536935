# Python

"""Symbolic Math Package

Scalar expression trees built from constants, named variables and the
operators + - * / ^ and negation, with numeric evaluation, algebraic
simplification and distributive expansion.
"""

from .expression_tree import (
  Symbol, Node, Expr, VariableNode, ConstantNode, BinaryOpNode, NegNode,
  constant, variable, variables, add, sub, mul, div, power, neg,
  ExpressionSimplifier, ExpressionExpander,
  to_sympy, from_sympy, are_equivalent
)
from .errors import EvalError, SymbolNotFound, UndefinedOperation
from .config import (
  EvaluationConfig, SimplifyConfig,
  DEFAULT_EVALUATION_CONFIG, DEFAULT_SIMPLIFY_CONFIG
)
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Symbol", "Node", "Expr", "VariableNode", "ConstantNode", "BinaryOpNode", "NegNode",
  "constant", "variable", "variables", "add", "sub", "mul", "div", "power", "neg",
  "ExpressionSimplifier", "ExpressionExpander",
  "to_sympy", "from_sympy", "are_equivalent",
  "EvalError", "SymbolNotFound", "UndefinedOperation",
  "EvaluationConfig", "SimplifyConfig",
  "DEFAULT_EVALUATION_CONFIG", "DEFAULT_SIMPLIFY_CONFIG",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
