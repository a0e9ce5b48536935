from typing import Union
from .core.node import Node, ConstantNode, VariableNode, BinaryOpNode, NegNode, Operand, _as_node
from .core.symbol import Symbol

# Spelling used by callers who think of the tree as an expression type
Expr = Node


def _operand(value: Operand) -> Node:
  node = _as_node(value)
  if node is None:
    raise TypeError(f"Unsupported operand type: {type(value).__name__}")
  return node


def constant(value: float) -> ConstantNode:
  return ConstantNode(value)


def variable(name: Union[str, Symbol]) -> VariableNode:
  return VariableNode(name)


def variables(*names: str) -> tuple:
  """Several variables at once: x, y = variables('x', 'y')"""
  return tuple(VariableNode(name) for name in names)


def add(left: Operand, right: Operand) -> BinaryOpNode:
  return BinaryOpNode('+', _operand(left), _operand(right))


def sub(left: Operand, right: Operand) -> BinaryOpNode:
  return BinaryOpNode('-', _operand(left), _operand(right))


def mul(left: Operand, right: Operand) -> BinaryOpNode:
  return BinaryOpNode('*', _operand(left), _operand(right))


def div(left: Operand, right: Operand) -> BinaryOpNode:
  return BinaryOpNode('/', _operand(left), _operand(right))


def power(base: Operand, exponent: Operand) -> BinaryOpNode:
  return BinaryOpNode('^', _operand(base), _operand(exponent))


def neg(operand: Operand) -> NegNode:
  return NegNode(_operand(operand))
