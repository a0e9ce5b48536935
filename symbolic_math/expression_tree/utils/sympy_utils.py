import sympy as sp
from functools import reduce

from ..core.node import Node, ConstantNode, VariableNode, BinaryOpNode, NegNode
from ..core.operators import OpType


def to_sympy(node: Node) -> sp.Expr:
  """Convert a tree to the corresponding SymPy expression"""
  if isinstance(node, ConstantNode):
    value = node.value
    if value != value:
      return sp.nan
    if value in (float('inf'), float('-inf')):
      return sp.oo if value > 0 else -sp.oo
    if value.is_integer():
      return sp.Integer(int(value))
    return sp.Float(value)

  elif isinstance(node, VariableNode):
    return sp.Symbol(node.symbol.name)

  elif isinstance(node, NegNode):
    return sp.Mul(-1, to_sympy(node.operand))

  elif isinstance(node, BinaryOpNode):
    left = to_sympy(node.left)
    right = to_sympy(node.right)
    if node.op_type == OpType.ADD:
      return sp.Add(left, right)
    elif node.op_type == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif node.op_type == OpType.MUL:
      return sp.Mul(left, right)
    elif node.op_type == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, -1))
    elif node.op_type == OpType.POW:
      return sp.Pow(left, right)

  raise TypeError(f"to_sympy reached unexpected node {type(node).__name__}")


def from_sympy(expr: sp.Basic) -> Node:
  """
  Convert a SymPy expression built from symbols, numbers, Add, Mul and Pow.

  N-ary sums and products are folded left-associatively. Anything else
  (functions, relations, complex numbers) raises ValueError.
  """
  if expr.is_Symbol:
    return VariableNode(expr.name)

  if expr.is_Number:
    try:
      return ConstantNode(float(expr))
    except TypeError:
      raise ValueError(f"Cannot convert non-real number {expr} to a constant") from None

  if isinstance(expr, sp.Add):
    return _fold_args('+', expr.args)

  if isinstance(expr, sp.Mul):
    return _fold_args('*', expr.args)

  if isinstance(expr, sp.Pow):
    base, exponent = expr.args
    return BinaryOpNode('^', from_sympy(base), from_sympy(exponent))

  raise ValueError(f"Unsupported SymPy expression: {expr} ({type(expr).__name__})")


def _fold_args(operator: str, args) -> Node:
  nodes = [from_sympy(arg) for arg in args]
  return reduce(lambda left, right: BinaryOpNode(operator, left, right), nodes)


def are_equivalent(first: Node, second: Node, simplify: bool = True) -> bool:
  """
  Symbolic equivalence check through SymPy.

  Both trees are converted and their difference is reduced with sp.simplify
  (or sp.expand when simplify=False). Useful as an independent oracle for the
  native simplifier and expander.
  """
  difference = to_sympy(first) - to_sympy(second)
  reduced = sp.simplify(difference) if simplify else sp.expand(difference)
  return reduced == 0


def latex_representation(node: Node) -> str:
  """LaTeX rendering of the tree via SymPy"""
  return sp.latex(to_sympy(node))
