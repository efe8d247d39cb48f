"""Core expression tree components."""

from .node import (
    Node, ConstantNode, VariableNode, BinaryOpNode, FunctionNode, Expression,
    make_constant, make_variable, make_binary, make_function
)
from .operators import (
    OperatorKind, FunctionKind, BINARY_OP_MAP, FUNCTION_MAP, OPERATOR_SYMBOLS,
    is_commutative, operator_symbol, function_name
)
from .canonical import to_canonical_string

__all__ = [
    'Node', 'ConstantNode', 'VariableNode', 'BinaryOpNode', 'FunctionNode', 'Expression',
    'make_constant', 'make_variable', 'make_binary', 'make_function',
    'OperatorKind', 'FunctionKind', 'BINARY_OP_MAP', 'FUNCTION_MAP', 'OPERATOR_SYMBOLS',
    'is_commutative', 'operator_symbol', 'function_name',
    'to_canonical_string'
]
