import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from expression_cse import (
  make_constant, make_variable, make_binary, make_function,
  OperatorKind, FunctionKind, optimize_with_stats
)

PLUS, MINUS, MULTIPLY = OperatorKind.PLUS, OperatorKind.MINUS, OperatorKind.MULTIPLY
SIN, COS = FunctionKind.SIN, FunctionKind.COS
c = make_constant


def x():
  return make_variable('x')


def y():
  return make_variable('y')


def build_cases():
  return [
    ("1. Simple constant", c(5)),
    ("2. Simple variable", x()),
    ("3. Duplicate constants", make_binary(c(5), c(5), PLUS)),
    ("4. Commutative order swap (2 + x) and (x + 2)",
     make_binary(make_binary(c(2), x(), PLUS), make_binary(x(), c(2), PLUS), PLUS)),
    ("5. Non-commutative order swap (2 - x) and (x - 2)",
     make_binary(make_binary(c(2), x(), MINUS), make_binary(x(), c(2), MINUS), PLUS)),
    ("6. Nested duplicates (x + x) + (x + x)",
     make_binary(make_binary(x(), x(), PLUS), make_binary(x(), x(), PLUS), PLUS)),
    ("7. Function duplicates sin(x) + sin(x)",
     make_binary(make_function(SIN, x()), make_function(SIN, x()), PLUS)),
    ("8. Nested function sin(cos(x)) + sin(cos(x))",
     make_binary(make_function(SIN, make_function(COS, x())),
                 make_function(SIN, make_function(COS, x())), PLUS)),
    ("9. Deep mixed structure (sin(2*x) + 2*x)",
     make_binary(make_function(SIN, make_binary(c(2), x(), MULTIPLY)),
                 make_binary(c(2), x(), MULTIPLY), PLUS)),
    ("10. Complex expression with shared subtree",
     make_binary(
       make_binary(make_function(SIN, make_binary(c(3), y(), MULTIPLY)),
                   make_binary(c(3), y(), MULTIPLY), MINUS),
       make_function(COS, y()), PLUS)),
  ]


def run_case(name, expr):
  _, stats = optimize_with_stats(expr)
  print(f"\n{name}:")
  print(f"Original expression: {stats.original_string}")
  print(f"Unique subexpressions (before): {stats.unique_before}")
  print(f"Optimized expression: {stats.optimized_string}")
  print(f"Unique subexpressions (after): {stats.unique_after}")
  print(f"Duplicates removed: {stats.duplicates_removed}")


if __name__ == "__main__":
  for name, expr in build_cases():
    run_case(name, expr)
    print("-" * 70)
