import sympy as sp
from typing import Dict, Optional

from ..core.node import Node, ConstantNode, VariableNode, BinaryOpNode, FunctionNode
from ..core.operators import OperatorKind, FunctionKind
from ...exceptions import UnrecognizedVariantError, InvalidOperatorOrFunctionKindError


def to_sympy(expr: Node, symbols: Optional[Dict[str, sp.Symbol]] = None) -> sp.Expr:
  """
  Convert an expression tree to an equivalent SymPy expression.

  SymPy canonicalizes on construction, so shared and unshared trees with the
  same meaning convert to equal objects. No further simplification is applied.

  Args:
      expr: Root of the expression tree
      symbols: Optional mapping of variable names to existing SymPy symbols
  """
  if symbols is None:
    symbols = {}

  if isinstance(expr, ConstantNode):
    return sp.Integer(expr.value)

  elif isinstance(expr, VariableNode):
    if expr.name not in symbols:
      symbols[expr.name] = sp.Symbol(expr.name)
    return symbols[expr.name]

  elif isinstance(expr, BinaryOpNode):
    left = to_sympy(expr.left, symbols)
    right = to_sympy(expr.right, symbols)
    if expr.operator == OperatorKind.PLUS:
      return sp.Add(left, right)
    elif expr.operator == OperatorKind.MINUS:
      return sp.Add(left, sp.Mul(-1, right))
    elif expr.operator == OperatorKind.MULTIPLY:
      return sp.Mul(left, right)
    elif expr.operator == OperatorKind.DIVIDE:
      return sp.Mul(left, sp.Pow(right, -1))
    raise InvalidOperatorOrFunctionKindError(f"to_sympy reached unexpected operator: {expr.operator!r}")

  elif isinstance(expr, FunctionNode):
    argument = to_sympy(expr.argument, symbols)
    if expr.kind == FunctionKind.SIN:
      return sp.sin(argument)
    elif expr.kind == FunctionKind.COS:
      return sp.cos(argument)
    elif expr.kind == FunctionKind.MAX:
      return sp.Max(argument)
    raise InvalidOperatorOrFunctionKindError(f"to_sympy reached unexpected function: {expr.kind!r}")

  raise UnrecognizedVariantError(expr)
