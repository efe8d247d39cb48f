"""
Canonical keys for expression trees.

The canonical string is both the display form of an expression and its
deduplication identity: two subtrees are duplicates exactly when their keys
are equal. Operands of commutative operators are ordered by plain string
comparison, so "(2 + x)" and "(x + 2)" collide while "(2 - x)" and
"(x - 2)" do not. The comparison is not numeric-aware: "10" sorts before "2".
"""

from typing import Dict, Optional

from .node import Node, ConstantNode, VariableNode, BinaryOpNode, FunctionNode
from .operators import operator_symbol, function_name
from ...exceptions import UnrecognizedVariantError

KeyMemo = Dict[int, str]


def to_canonical_string(expr: Node, memo: Optional[KeyMemo] = None) -> str:
  """
  Render the canonical key of an expression.

  Args:
      expr: Root of the expression tree
      memo: Optional caller-owned dict keyed by ``id(node)``. When given, keys
          already computed for a node are reused. Only valid while the nodes
          it was filled from are alive.

  Returns:
      Canonical string such as ``"(2 + x)"`` or ``"sin(x)"``
  """
  if memo is not None:
    cached = memo.get(id(expr))
    if cached is not None:
      return cached

  if isinstance(expr, ConstantNode):
    key = str(expr.value)
  elif isinstance(expr, VariableNode):
    key = expr.name
  elif isinstance(expr, FunctionNode):
    key = f"{function_name(expr.kind)}({to_canonical_string(expr.argument, memo)})"
  elif isinstance(expr, BinaryOpNode):
    left = to_canonical_string(expr.left, memo)
    right = to_canonical_string(expr.right, memo)
    if expr.operator.is_commutative and left > right:
      left, right = right, left
    key = f"({left} {operator_symbol(expr.operator)} {right})"
  else:
    raise UnrecognizedVariantError(expr)

  if memo is not None:
    memo[id(expr)] = key
  return key
