"""Error types raised by the expression tree and optimizer."""


class ExpressionError(Exception):
  """Base class for all expression_cse errors"""


class InvalidOperandError(ExpressionError, ValueError):
  """A required child expression was missing at construction time"""


class UnrecognizedVariantError(ExpressionError, TypeError):
  """A node outside the closed set of expression variants was encountered"""

  def __init__(self, node):
    super().__init__(f"Unrecognized expression variant: {type(node).__name__}")
    self.node = node


class InvalidOperatorOrFunctionKindError(ExpressionError, ValueError):
  """Symbol or name lookup for an operator/function kind that does not exist"""
