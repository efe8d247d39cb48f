"""Optimization passes for expression trees."""

from .cse import ExpressionOptimizer, OptimizationStats, optimize, optimize_with_stats

__all__ = ['ExpressionOptimizer', 'OptimizationStats', 'optimize', 'optimize_with_stats']
