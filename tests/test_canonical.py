import pytest

from expression_cse import (
  Node, make_constant, make_variable, make_binary, make_function,
  OperatorKind, FunctionKind, to_canonical_string, UnrecognizedVariantError
)

PLUS, MINUS, MULTIPLY, DIVIDE = (
  OperatorKind.PLUS, OperatorKind.MINUS, OperatorKind.MULTIPLY, OperatorKind.DIVIDE
)


class RogueNode(Node):
  """Node subclass outside the closed variant set."""
  __slots__ = ()

  def children(self):
    return ()

  def _compute_size(self):
    return 1


def test_leaf_keys():
  assert to_canonical_string(make_constant(42)) == '42'
  assert to_canonical_string(make_constant(-7)) == '-7'
  assert to_canonical_string(make_variable('rate')) == 'rate'


def test_function_keys():
  x = make_variable('x')
  assert to_canonical_string(make_function(FunctionKind.SIN, x)) == 'sin(x)'
  nested = make_function(FunctionKind.SIN, make_function(FunctionKind.COS, x))
  assert to_canonical_string(nested) == 'sin(cos(x))'


def test_commutative_operands_collide():
  a = make_binary(make_constant(2), make_variable('x'), PLUS)
  b = make_binary(make_variable('x'), make_constant(2), PLUS)
  assert to_canonical_string(a) == to_canonical_string(b) == '(2 + x)'

  c = make_binary(make_variable('y'), make_constant(3), MULTIPLY)
  assert to_canonical_string(c) == '(3 * y)'


def test_non_commutative_operands_do_not_collide():
  a = make_binary(make_constant(2), make_variable('x'), MINUS)
  b = make_binary(make_variable('x'), make_constant(2), MINUS)
  assert to_canonical_string(a) == '(2 - x)'
  assert to_canonical_string(b) == '(x - 2)'

  c = make_binary(make_variable('x'), make_constant(2), DIVIDE)
  assert to_canonical_string(c) == '(x / 2)'


def test_commutative_order_is_plain_string_order():
  expr = make_binary(make_constant(2), make_constant(10), PLUS)
  assert to_canonical_string(expr) == '(10 + 2)'


def test_nested_commutative_ordering_uses_child_keys():
  x = make_variable('x')
  two_x = make_binary(make_constant(2), x, MULTIPLY)
  expr = make_binary(make_function(FunctionKind.SIN, two_x), two_x, PLUS)
  # '(' sorts before 's'
  assert to_canonical_string(expr) == '((2 * x) + sin((2 * x)))'

  mixed = make_binary(
    make_binary(make_constant(2), x, MINUS),
    make_binary(x, make_constant(2), MINUS),
    PLUS,
  )
  assert to_canonical_string(mixed) == '((2 - x) + (x - 2))'


def test_to_string_and_str_match_canonical_key():
  expr = make_binary(make_variable('x'), make_constant(2), PLUS)
  assert expr.to_string() == str(expr) == '(2 + x)'


def test_memo_reuses_keys_without_changing_them():
  x = make_variable('x')
  inner = make_binary(x, x, PLUS)
  expr = make_binary(inner, make_function(FunctionKind.COS, inner), MULTIPLY)
  memo = {}
  assert to_canonical_string(expr, memo) == to_canonical_string(expr)
  assert memo[id(inner)] == '(x + x)'
  assert memo[id(expr)] == to_canonical_string(expr)


def test_unrecognized_variant_is_fatal():
  with pytest.raises(UnrecognizedVariantError):
    to_canonical_string(RogueNode())
  with pytest.raises(UnrecognizedVariantError):
    to_canonical_string(make_binary(RogueNode(), make_variable('x'), PLUS))
  with pytest.raises(UnrecognizedVariantError):
    to_canonical_string(3)
