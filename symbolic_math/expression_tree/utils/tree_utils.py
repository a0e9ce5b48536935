"""
Tree Utility Functions

Read-only traversal and query helpers for expression trees. None of these
functions modify the tree they are given.
"""

from typing import List, Dict, cast
from collections import Counter

from ..core.node import Node, BinaryOpNode, NegNode, ConstantNode, VariableNode
from ..core.operators import OpType, BINARY_OP_MAP
from ..core.symbol import Symbol


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first' (pre-order)

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in node.children():
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    return node.depth()


def is_operation(node: Node, op_type: OpType) -> bool:
    """True if node is a binary operation of the given kind"""
    return isinstance(node, BinaryOpNode) and node.op_type == op_type


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """
    Find all nodes of a specific type in the tree.

    Args:
        node: Root node of the tree
        node_type: Type of nodes to find (e.g., ConstantNode, VariableNode)

    Returns:
        List of nodes matching the specified type, breadth-first
    """
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, operator: str) -> List[Node]:
    """
    Find all operator nodes with a specific operator.

    Args:
        node: Root node of the tree
        operator: One of '+', '-', '*', '/', '^' or 'neg'

    Returns:
        List of nodes with the specified operator
    """
    if operator == 'neg':
        return find_nodes_by_type(node, NegNode)
    if operator not in BINARY_OP_MAP:
        raise ValueError(f"Unknown operator: {operator!r}")
    op_type = BINARY_OP_MAP[operator]
    return [n for n in get_all_nodes(node) if is_operation(n, op_type)]


def get_variable_usage_counts(node: Node) -> Dict[Symbol, int]:
    """
    Count how often each symbol occurs in the tree.

    Args:
        node: Root node of the tree

    Returns:
        Dictionary mapping symbols to their occurrence counts
    """
    return dict(Counter(var_node.symbol for var_node in get_variables(node)))


# Convenience functions for common operations
def get_constants(node: Node) -> List[ConstantNode]:
    """Get all constant nodes in the tree."""
    return cast(List[ConstantNode], find_nodes_by_type(node, ConstantNode))


def get_variables(node: Node) -> List[VariableNode]:
    """Get all variable nodes in the tree."""
    return cast(List[VariableNode], find_nodes_by_type(node, VariableNode))


def get_binary_ops(node: Node) -> List[BinaryOpNode]:
    """Get all binary operation nodes in the tree."""
    return cast(List[BinaryOpNode], find_nodes_by_type(node, BinaryOpNode))


def get_negations(node: Node) -> List[NegNode]:
    """Get all negation nodes in the tree."""
    return cast(List[NegNode], find_nodes_by_type(node, NegNode))
