from typing import Optional
from ..core.node import Node, ConstantNode, BinaryOpNode, NegNode
from ..core.operators import OpType, apply_binary_op
from .tree_utils import is_operation
from ...config import SimplifyConfig, DEFAULT_SIMPLIFY_CONFIG
from ...logging_system import get_logger, log_warning


def _is_const(node: Node, value: float) -> bool:
  return isinstance(node, ConstantNode) and node.value == value


def _rebuild(node: BinaryOpNode, left: Node, right: Node) -> BinaryOpNode:
  if left is node.left and right is node.right:
    return node
  return BinaryOpNode(node.operator, left, right)


class ExpressionSimplifier:
  """
  Single-pass bottom-up simplifier.

  Children are simplified first, then the rules for the node's own operator
  are tried in priority order and the first match is applied once. The
  result of a rewrite is not simplified again in the same pass, so
  Pow(Pow(x, 2), 1) becomes Pow(x, Mul(2, 1)) and only reaches Pow(x, 2) on
  the next pass. A single pass is therefore not idempotent;
  simplify_to_fixed_point repeats passes until nothing changes.

  Only the one-sided identities are applied: x - 0 -> x and x / 1 -> x.
  0 - x and 1 / x are left alone.
  """

  @staticmethod
  def simplify_expression(node: Node) -> Node:
    """Run one simplification pass and return the new tree"""
    return ExpressionSimplifier._apply_simplification_rules(node)

  @staticmethod
  def simplify_to_fixed_point(node: Node, config: Optional[SimplifyConfig] = None) -> Node:
    """Repeat passes until the tree is structurally stable or max_passes is hit"""
    config = config or DEFAULT_SIMPLIFY_CONFIG
    current = node
    for _ in range(config.max_passes):
      simplified = ExpressionSimplifier._apply_simplification_rules(current)
      if simplified == current:
        return simplified
      current = simplified
    log_warning(f"simplification did not reach a fixed point after {config.max_passes} passes: {current}")
    return current

  @staticmethod
  def _apply_simplification_rules(node: Node) -> Node:
    if isinstance(node, BinaryOpNode):
      left = ExpressionSimplifier._apply_simplification_rules(node.left)
      right = ExpressionSimplifier._apply_simplification_rules(node.right)

      if node.op_type == OpType.ADD:
        return ExpressionSimplifier._simplify_add(node, left, right)
      elif node.op_type == OpType.SUB:
        return ExpressionSimplifier._simplify_sub(node, left, right)
      elif node.op_type == OpType.MUL:
        return ExpressionSimplifier._simplify_mul(node, left, right)
      elif node.op_type == OpType.DIV:
        return ExpressionSimplifier._simplify_div(node, left, right)
      elif node.op_type == OpType.POW:
        return ExpressionSimplifier._simplify_pow(node, left, right)
      return _rebuild(node, left, right)

    elif isinstance(node, NegNode):
      operand = ExpressionSimplifier._apply_simplification_rules(node.operand)
      if operand is node.operand:
        return node
      return NegNode(operand)

    # Constants and variables
    return node

  @staticmethod
  def _rewrite(rule: str, node: Node, result: Node) -> Node:
    logger = get_logger()
    if logger.is_verbose():
      logger.debug(f"simplify [{rule}]: {node} -> {result}")
    return result

  @staticmethod
  def _fold(node: BinaryOpNode, left: ConstantNode, right: ConstantNode) -> Node:
    value = apply_binary_op(left.value, right.value, node.op_type)
    return ExpressionSimplifier._rewrite('fold', node, ConstantNode(value))

  @staticmethod
  def _like_term_coefficient(term: Node, other: Node) -> Optional[float]:
    """c for term = c * other or other * c, else None"""
    if not is_operation(term, OpType.MUL):
      return None
    if isinstance(term.left, ConstantNode) and term.right == other:
      return term.left.value
    if isinstance(term.right, ConstantNode) and term.left == other:
      return term.right.value
    return None

  @staticmethod
  def _simplify_add(node: BinaryOpNode, left: Node, right: Node) -> Node:
    rewrite = ExpressionSimplifier._rewrite
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return ExpressionSimplifier._fold(node, left, right)

    if left == right:
      return rewrite('x + x', node, BinaryOpNode('*', ConstantNode(2.0), left))

    coefficient = ExpressionSimplifier._like_term_coefficient(left, right)
    if coefficient is not None:
      return rewrite('c*x + x', node, BinaryOpNode('*', ConstantNode(coefficient + 1.0), right))
    coefficient = ExpressionSimplifier._like_term_coefficient(right, left)
    if coefficient is not None:
      return rewrite('x + c*x', node, BinaryOpNode('*', ConstantNode(coefficient + 1.0), left))

    if _is_const(left, 0.0):
      return rewrite('0 + x', node, right)
    if _is_const(right, 0.0):
      return rewrite('x + 0', node, left)

    return _rebuild(node, left, right)

  @staticmethod
  def _simplify_sub(node: BinaryOpNode, left: Node, right: Node) -> Node:
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return ExpressionSimplifier._fold(node, left, right)

    # x - 0 only, 0 - x is a negation
    if _is_const(right, 0.0):
      return ExpressionSimplifier._rewrite('x - 0', node, left)

    return _rebuild(node, left, right)

  @staticmethod
  def _simplify_mul(node: BinaryOpNode, left: Node, right: Node) -> Node:
    rewrite = ExpressionSimplifier._rewrite
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return ExpressionSimplifier._fold(node, left, right)

    if left == right:
      return rewrite('x * x', node, BinaryOpNode('^', left, ConstantNode(2.0)))

    if is_operation(left, OpType.POW) and is_operation(right, OpType.POW) and left.left == right.left:
      exponent = BinaryOpNode('+', left.right, right.right)
      return rewrite('x^a * x^b', node, BinaryOpNode('^', left.left, exponent))

    if _is_const(right, 1.0):
      return rewrite('x * 1', node, left)
    if _is_const(left, 1.0):
      return rewrite('1 * x', node, right)

    if _is_const(left, 0.0) or _is_const(right, 0.0):
      return rewrite('x * 0', node, ConstantNode(0.0))

    if _is_const(left, -1.0):
      return rewrite('-1 * x', node, NegNode(right))
    if _is_const(right, -1.0):
      return rewrite('x * -1', node, NegNode(left))

    return _rebuild(node, left, right)

  @staticmethod
  def _simplify_div(node: BinaryOpNode, left: Node, right: Node) -> Node:
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      # IEEE semantics, 1 / 0 folds to inf
      return ExpressionSimplifier._fold(node, left, right)

    # x / 1 only, 1 / x is a reciprocal
    if _is_const(right, 1.0):
      return ExpressionSimplifier._rewrite('x / 1', node, left)

    if _is_const(left, 0.0):
      return ExpressionSimplifier._rewrite('0 / x', node, ConstantNode(0.0))

    return _rebuild(node, left, right)

  @staticmethod
  def _simplify_pow(node: BinaryOpNode, left: Node, right: Node) -> Node:
    rewrite = ExpressionSimplifier._rewrite
    if is_operation(left, OpType.POW):
      exponent = BinaryOpNode('*', left.right, right)
      return rewrite('(x^a)^b', node, BinaryOpNode('^', left.left, exponent))

    if _is_const(right, 1.0):
      return rewrite('x^1', node, left)

    # Also applied to 0^0, which is taken to be 1
    if _is_const(right, 0.0):
      return rewrite('x^0', node, ConstantNode(1.0))

    if _is_const(left, 1.0):
      return rewrite('1^x', node, ConstantNode(1.0))

    return _rebuild(node, left, right)
