from ..core.node import Node, BinaryOpNode, NegNode
from ..core.operators import OpType
from .tree_utils import is_operation


class ExpressionExpander:
  """Distributes multiplication over addition and subtraction"""

  @staticmethod
  def expand_expression(node: Node) -> Node:
    """
    Expand products of sums and differences.

    (a + b) * c -> (a * c) + (b * c)
    c * (a - b) -> (c * a) - (c * b)

    Each distributed result is expanded again, so nested products are pushed
    all the way down. Div and Pow do not distribute; their children are still
    expanded. No simplification is done here.
    """
    if isinstance(node, BinaryOpNode):
      left = ExpressionExpander.expand_expression(node.left)
      right = ExpressionExpander.expand_expression(node.right)
      if node.op_type == OpType.MUL:
        return ExpressionExpander._distribute(node, left, right)
      if left is node.left and right is node.right:
        return node
      return BinaryOpNode(node.operator, left, right)

    elif isinstance(node, NegNode):
      operand = ExpressionExpander.expand_expression(node.operand)
      if operand is node.operand:
        return node
      return NegNode(operand)

    return node

  @staticmethod
  def _distribute(node: BinaryOpNode, left: Node, right: Node) -> Node:
    expand = ExpressionExpander.expand_expression

    if is_operation(left, OpType.ADD):
      return expand(BinaryOpNode('+',
                                 BinaryOpNode('*', left.left, right),
                                 BinaryOpNode('*', left.right, right)))
    if is_operation(right, OpType.ADD):
      return expand(BinaryOpNode('+',
                                 BinaryOpNode('*', right.left, left),
                                 BinaryOpNode('*', right.right, left)))

    if is_operation(left, OpType.SUB):
      return expand(BinaryOpNode('-',
                                 BinaryOpNode('*', right, left.left),
                                 BinaryOpNode('*', right, left.right)))
    if is_operation(right, OpType.SUB):
      return expand(BinaryOpNode('-',
                                 BinaryOpNode('*', left, right.left),
                                 BinaryOpNode('*', left, right.right)))

    if left is node.left and right is node.right:
      return node
    return BinaryOpNode('*', left, right)
