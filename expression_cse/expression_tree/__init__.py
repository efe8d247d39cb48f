"""Expression Tree Module

Expression nodes, canonical keys and common-subexpression elimination.
"""

from .core.node import (
    Node,
    Expression,
    ConstantNode,
    VariableNode,
    BinaryOpNode,
    FunctionNode,
    make_constant,
    make_variable,
    make_binary,
    make_function
)
from .core.operators import (
    OperatorKind,
    FunctionKind,
    BINARY_OP_MAP,
    FUNCTION_MAP,
    is_commutative,
    operator_symbol,
    function_name
)
from .core.canonical import to_canonical_string
from .optimization import ExpressionOptimizer, OptimizationStats, optimize, optimize_with_stats
from .utils import PreOrderTraverser, iter_preorder, to_sympy

__all__ = [
    "Node", "Expression", "ConstantNode", "VariableNode", "BinaryOpNode", "FunctionNode",
    "make_constant", "make_variable", "make_binary", "make_function",
    "OperatorKind", "FunctionKind", "BINARY_OP_MAP", "FUNCTION_MAP",
    "is_commutative", "operator_symbol", "function_name",
    "to_canonical_string",
    "ExpressionOptimizer", "OptimizationStats", "optimize", "optimize_with_stats",
    "PreOrderTraverser", "iter_preorder", "to_sympy"
]
