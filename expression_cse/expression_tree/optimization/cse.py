"""
Common-subexpression elimination over expression trees.

Subtrees with equal canonical keys are rebuilt once and shared: every
occurrence in the output refers to the same node instance. Input trees are
never mutated.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional, Tuple

from ..core.node import Node, ConstantNode, VariableNode, BinaryOpNode, FunctionNode
from ..core.canonical import to_canonical_string, KeyMemo
from ..utils.tree_utils import count_unique_instances, count_unique_keys
from ...exceptions import UnrecognizedVariantError
from ...logging_system import get_logger, LogLevel


@dataclass(frozen=True)
class OptimizationStats:
  original_string: str
  optimized_string: str
  unique_before: int       # distinct node instances in the input
  unique_after: int        # distinct node instances in the output
  unique_keys: int         # distinct canonical keys
  duplicates_removed: int

  def to_dict(self) -> dict:
    return asdict(self)


class ExpressionOptimizer:
  """Deduplicating optimizer. Each call to optimize() uses its own cache."""

  def __init__(self, memoize_keys: bool = True, console_log: bool = False):
    """
    Args:
        memoize_keys: Reuse canonical keys of input nodes within one call so
            key computation is linear in tree size. Output is identical either way.
        console_log: Report before/after strings for every optimization at the
            default log level.
    """
    self.memoize_keys = memoize_keys
    self.console_log = console_log

  def optimize(self, expr: Optional[Node]) -> Optional[Node]:
    if expr is None:
      return None

    cache: Dict[str, Node] = {}
    memo: Optional[KeyMemo] = {} if self.memoize_keys else None
    result = self._resolve(expr, cache, memo)

    logger = get_logger()
    logger.debug(f"optimize: {len(cache)} cached subexpressions")
    if self.console_log:
      logger.info(f"Optimized expression: {result}", LogLevel.MINIMAL)
    return result

  def optimize_with_stats(self, expr: Optional[Node]) -> Tuple[Optional[Node], Optional[OptimizationStats]]:
    if expr is None:
      return None, None

    unique_before = count_unique_instances(expr)
    optimized = self.optimize(expr)
    unique_after = count_unique_instances(optimized)

    stats = OptimizationStats(
      original_string=to_canonical_string(expr),
      optimized_string=to_canonical_string(optimized),
      unique_before=unique_before,
      unique_after=unique_after,
      unique_keys=count_unique_keys(optimized),
      duplicates_removed=unique_before - unique_after,
    )
    get_logger().result_summary(stats.to_dict())
    return optimized, stats

  def _resolve(self, node: Node, cache: Dict[str, Node], memo: Optional[KeyMemo]) -> Node:
    key = to_canonical_string(node, memo)
    existing = cache.get(key)
    if existing is not None:
      return existing

    # one frame per tree level, matching to_canonical_string
    if isinstance(node, ConstantNode):
      rebuilt = ConstantNode(node.value)
    elif isinstance(node, VariableNode):
      rebuilt = VariableNode(node.name)
    elif isinstance(node, BinaryOpNode):
      # children first so the cache fills bottom-up
      left = self._resolve(node.left, cache, memo)
      right = self._resolve(node.right, cache, memo)
      rebuilt = BinaryOpNode(left, right, node.operator)
    elif isinstance(node, FunctionNode):
      rebuilt = FunctionNode(node.kind, self._resolve(node.argument, cache, memo))
    else:
      raise UnrecognizedVariantError(node)

    cache[key] = rebuilt
    return rebuilt


def optimize(expr: Optional[Node]) -> Optional[Node]:
  """Return a copy of ``expr`` in which key-equal subtrees share one instance."""
  return ExpressionOptimizer().optimize(expr)


def optimize_with_stats(expr: Optional[Node]) -> Tuple[Optional[Node], Optional[OptimizationStats]]:
  return ExpressionOptimizer().optimize_with_stats(expr)
