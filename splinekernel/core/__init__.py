"""
core - 核心算法模块

包含:
- bspline: 参数化、节点向量、基函数
- linalg: 基函数矩阵线性方程组求解
- interpolation: B样条插值求解
"""

from .bspline import (
    bspline_basis_matrix,
    centripetal_parameterization,
    check_degree,
    compute_knot_vector,
    evaluate_bspline_basis,
)
from .interpolation import InterpolationResult, interpolate_with_bspline_curve
from .linalg import solve_linear_system

__all__ = [
    "centripetal_parameterization",
    "check_degree",
    "compute_knot_vector",
    "evaluate_bspline_basis",
    "bspline_basis_matrix",
    "solve_linear_system",
    "interpolate_with_bspline_curve",
    "InterpolationResult",
]
