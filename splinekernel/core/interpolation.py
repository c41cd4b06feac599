"""
interpolation - 二维点序列的B样条插值

流程: 点 -> 参数值 -> 节点向量 -> 基函数矩阵 -> 控制点
"""

import logging
from typing import NamedTuple

import numpy as np

from ..utils.geometry import as_point_sequence
from .bspline import (
    bspline_basis_matrix,
    centripetal_parameterization,
    check_degree,
    compute_knot_vector,
)
from .linalg import DEFAULT_RCOND, solve_linear_system

logger = logging.getLogger(__name__)


class InterpolationResult(NamedTuple):
    """
    插值结果，可直接解包为 (control_points, knot_vector)。

    Attributes:
        control_points: (x, y) 控制点坐标，各 (N,)
        knot_vector: (N + degree + 1,) 节点向量
    """

    control_points: tuple[np.ndarray, np.ndarray]
    knot_vector: np.ndarray


def interpolate_with_bspline_curve(
    points,
    degree: int,
    parameterization: str = "centripetal",
    banded: bool = False,
    rcond: float = DEFAULT_RCOND,
) -> InterpolationResult:
    """
    计算精确穿过给定点的B样条曲线。

    Args:
        points: (x, y) 两个等长坐标序列
        degree: 样条阶数, 0 <= degree <= N-1
        parameterization: 参数化方式, 见 centripetal_parameterization
        banded: 是否使用带状求解器
        rcond: 奇异判定的倒数条件数下限

    Returns:
        InterpolationResult(control_points, knot_vector)

    Raises:
        MismatchedLengthError: x、y 数量不一致 (在任何数值计算前检查)
        InvalidDegreeError: 阶数无效
        DegenerateParameterizationError: 所有点重合
        SingularSystemError: 基函数矩阵奇异
    """
    x, y = as_point_sequence(points)
    N = len(x)

    # 先于参数化检查，重合点输入也优先报告阶数错误
    check_degree(degree, N)

    params = centripetal_parameterization(x, y, method=parameterization)
    knots = compute_knot_vector(params, degree)
    logger.debug("Interpolating %d points with degree %d, %d knots", N, degree, len(knots))

    Phi = bspline_basis_matrix(params, knots, degree)
    solution = solve_linear_system(Phi, np.column_stack([x, y]), banded=banded, rcond=rcond)

    control_points = (solution[:, 0].copy(), solution[:, 1].copy())
    return InterpolationResult(control_points, knots)
