"""Utilities for expression trees."""

from .sympy_utils import to_sympy
from .tree_utils import (
    PreOrderTraverser, iter_preorder, get_all_nodes,
    count_unique_instances, count_unique_keys, calculate_tree_depth,
    collect_subtree_patterns, calculate_redundancy_score
)

__all__ = [
    'to_sympy',
    'PreOrderTraverser', 'iter_preorder', 'get_all_nodes',
    'count_unique_instances', 'count_unique_keys', 'calculate_tree_depth',
    'collect_subtree_patterns', 'calculate_redundancy_score'
]
