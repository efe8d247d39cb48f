from operator import index
from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union

from .operators import (
  OperatorKind, FunctionKind, as_operator_kind, as_function_kind
)
from ...exceptions import InvalidOperandError


class Node(ABC):
  """Immutable expression node. Equality is identity; use canonical keys to compare structure."""

  __slots__ = ('_size_cache',)

  def __init__(self):
    self._size_cache: Optional[int] = None

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  def size(self) -> int:
    """Node count of the subtree, counting shared children once per reference"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  def is_leaf(self) -> bool:
    return not self.children()

  def to_string(self) -> str:
    # Import here to avoid circular imports
    from .canonical import to_canonical_string
    return to_canonical_string(self)

  def __str__(self) -> str:
    return self.to_string()


class ConstantNode(Node):
  __slots__ = ('_value',)

  def __init__(self, value: int):
    if isinstance(value, bool):
      raise TypeError("ConstantNode value must be an integer, not bool")
    super().__init__()
    # floats and numeric strings raise TypeError rather than truncating
    self._value = index(value)

  @property
  def value(self) -> int:
    return self._value

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_size(self) -> int:
    return 1

  def __repr__(self) -> str:
    return f"ConstantNode({self._value!r})"


class VariableNode(Node):
  __slots__ = ('_name',)

  def __init__(self, name: str):
    super().__init__()
    self._name = name

  @property
  def name(self) -> str:
    return self._name

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_size(self) -> int:
    return 1

  def __repr__(self) -> str:
    return f"VariableNode({self._name!r})"


class BinaryOpNode(Node):
  __slots__ = ('_left', '_right', '_operator')

  def __init__(self, left: Node, right: Node, operator: Union[OperatorKind, str]):
    if left is None:
      raise InvalidOperandError("BinaryOpNode requires a left operand")
    if right is None:
      raise InvalidOperandError("BinaryOpNode requires a right operand")
    super().__init__()
    self._left = left
    self._right = right
    self._operator = as_operator_kind(operator)

  @property
  def left(self) -> Node:
    return self._left

  @property
  def right(self) -> Node:
    return self._right

  @property
  def operator(self) -> OperatorKind:
    return self._operator

  def children(self) -> Tuple[Node, ...]:
    return (self._left, self._right)

  def _compute_size(self) -> int:
    return 1 + self._left.size() + self._right.size()

  def __repr__(self) -> str:
    return f"BinaryOpNode({self._left!r}, {self._right!r}, {self._operator})"


class FunctionNode(Node):
  __slots__ = ('_kind', '_argument')

  def __init__(self, kind: Union[FunctionKind, str], argument: Node):
    if argument is None:
      raise InvalidOperandError("FunctionNode requires an argument")
    super().__init__()
    self._kind = as_function_kind(kind)
    self._argument = argument

  @property
  def kind(self) -> FunctionKind:
    return self._kind

  @property
  def argument(self) -> Node:
    return self._argument

  def children(self) -> Tuple[Node, ...]:
    return (self._argument,)

  def _compute_size(self) -> int:
    return 1 + self._argument.size()

  def __repr__(self) -> str:
    return f"FunctionNode({self._kind}, {self._argument!r})"


Expression = Union[ConstantNode, VariableNode, BinaryOpNode, FunctionNode]


def make_constant(value: int) -> ConstantNode:
  return ConstantNode(value)


def make_variable(name: str) -> VariableNode:
  return VariableNode(name)


def make_binary(left: Node, right: Node, op: Union[OperatorKind, str]) -> BinaryOpNode:
  return BinaryOpNode(left, right, op)


def make_function(kind: Union[FunctionKind, str], argument: Node) -> FunctionNode:
  return FunctionNode(kind, argument)
