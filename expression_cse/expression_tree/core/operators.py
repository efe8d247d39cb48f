from enum import Enum
from typing import Dict, Union

from ...exceptions import InvalidOperatorOrFunctionKindError


class OperatorKind(Enum):
  PLUS = 'plus'
  MINUS = 'minus'
  MULTIPLY = 'multiply'
  DIVIDE = 'divide'

  @property
  def is_commutative(self) -> bool:
    return self in COMMUTATIVE_OPS


class FunctionKind(Enum):
  SIN = 'sin'
  COS = 'cos'
  MAX = 'max'  # unary in this model


COMMUTATIVE_OPS = frozenset({OperatorKind.PLUS, OperatorKind.MULTIPLY})

# Mapping dictionaries
OPERATOR_SYMBOLS: Dict[OperatorKind, str] = {
  OperatorKind.PLUS: '+',
  OperatorKind.MINUS: '-',
  OperatorKind.MULTIPLY: '*',
  OperatorKind.DIVIDE: '/',
}
BINARY_OP_MAP: Dict[str, OperatorKind] = {sym: op for op, sym in OPERATOR_SYMBOLS.items()}
FUNCTION_MAP: Dict[str, FunctionKind] = {kind.value: kind for kind in FunctionKind}


def is_commutative(op: OperatorKind) -> bool:
  return op in COMMUTATIVE_OPS


def operator_symbol(op: OperatorKind) -> str:
  try:
    return OPERATOR_SYMBOLS[op]
  except (KeyError, TypeError):
    raise InvalidOperatorOrFunctionKindError(f"Invalid operator sign: {op!r}") from None


def function_name(kind: FunctionKind) -> str:
  if not isinstance(kind, FunctionKind):
    raise InvalidOperatorOrFunctionKindError(f"Invalid function kind: {kind!r}")
  return kind.value


def as_operator_kind(op: Union[OperatorKind, str]) -> OperatorKind:
  """Accept an OperatorKind or its symbol ('+', '-', '*', '/')"""
  if isinstance(op, OperatorKind):
    return op
  try:
    return BINARY_OP_MAP[op]
  except (KeyError, TypeError):
    raise InvalidOperatorOrFunctionKindError(f"Invalid operator sign: {op!r}") from None


def as_function_kind(kind: Union[FunctionKind, str]) -> FunctionKind:
  """Accept a FunctionKind or its lowercase name ('sin', 'cos', 'max')"""
  if isinstance(kind, FunctionKind):
    return kind
  try:
    return FUNCTION_MAP[kind]
  except (KeyError, TypeError):
    raise InvalidOperatorOrFunctionKindError(f"Invalid function kind: {kind!r}") from None
