"""
Tree Utility Functions

Traversal and analysis helpers for expression trees. These are diagnostic
tools; the optimizer itself only relies on the instance/key counters.
"""

from collections import Counter, deque
from typing import Iterator, List, Optional

from ..core.node import Node
from ..core.canonical import to_canonical_string


class PreOrderTraverser:
    """
    Iterative pre-order traversal with an explicit pending stack.

    A node is visited, its right child (if any) is pushed onto the stack and
    the walk descends into the left child or function argument. When a leaf
    is reached the next pending node is popped.
    """

    def __init__(self, root: Optional[Node]):
        self._node = root
        self._stack: List[Node] = []

    def next_node(self) -> Optional[Node]:
        """Return the next node, or None once the traversal is exhausted."""
        if self._node is None:
            return None

        result = self._node
        children = result.children()

        if len(children) == 2:
            self._stack.append(children[1])

        if children:
            self._node = children[0]
        elif self._stack:
            self._node = self._stack.pop()
        else:
            self._node = None

        return result

    def __iter__(self) -> 'PreOrderTraverser':
        return self

    def __next__(self) -> Node:
        node = self.next_node()
        if node is None:
            raise StopIteration
        return node


def iter_preorder(root: Optional[Node]) -> Iterator[Node]:
    """Fresh pre-order traversal over ``root``. Shared subtrees are visited once per reference."""
    return PreOrderTraverser(root)


def get_all_nodes(node: Node, traversal_order: str = 'pre_order') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'pre_order' (default) or 'breadth_first'

    Returns:
        List of all nodes in the tree, one entry per reference
    """
    if traversal_order == 'pre_order':
        return list(iter_preorder(node))
    elif traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def count_unique_instances(node: Optional[Node]) -> int:
    """Number of distinct node objects reachable from ``node``."""
    return len({id(n) for n in iter_preorder(node)})


def count_unique_keys(node: Optional[Node]) -> int:
    """Number of distinct canonical keys among the subtrees of ``node``."""
    memo = {}
    return len({to_canonical_string(n, memo) for n in iter_preorder(node)})


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    children = node.children()
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def collect_subtree_patterns(node: Node) -> List[str]:
    """Canonical strings of every subtree, one per occurrence."""
    memo = {}
    return [to_canonical_string(n, memo) for n in iter_preorder(node)]


def calculate_redundancy_score(node: Node) -> float:
    """
    Calculate redundancy score based on repeated subtree patterns.

    Args:
        node: Root node of the tree

    Returns:
        Redundancy score between 0.0 (no redundancy) and 1.0 (high redundancy)
    """
    subtrees = collect_subtree_patterns(node)

    if len(subtrees) <= 1:
        return 0.0

    subtree_counts = Counter(subtrees)
    repeated_count = sum(count - 1 for count in subtree_counts.values() if count > 1)

    return repeated_count / len(subtrees)
