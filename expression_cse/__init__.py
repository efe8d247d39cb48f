"""Expression CSE Package

Expression trees over integers, variables, + - * / and sin/cos/max, with
common-subexpression elimination that shares key-equal subtrees.
"""

from .expression_tree import (
  Node, Expression, ConstantNode, VariableNode, BinaryOpNode, FunctionNode,
  make_constant, make_variable, make_binary, make_function,
  OperatorKind, FunctionKind, to_canonical_string,
  ExpressionOptimizer, OptimizationStats, optimize, optimize_with_stats,
  PreOrderTraverser, iter_preorder, to_sympy
)
from .exceptions import (
  ExpressionError, InvalidOperandError, UnrecognizedVariantError,
  InvalidOperatorOrFunctionKindError
)
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "Node", "Expression", "ConstantNode", "VariableNode", "BinaryOpNode", "FunctionNode",
  "make_constant", "make_variable", "make_binary", "make_function",
  "OperatorKind", "FunctionKind", "to_canonical_string",
  "ExpressionOptimizer", "OptimizationStats", "optimize", "optimize_with_stats",
  "PreOrderTraverser", "iter_preorder", "to_sympy",
  "ExpressionError", "InvalidOperandError", "UnrecognizedVariantError",
  "InvalidOperatorOrFunctionKindError",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
