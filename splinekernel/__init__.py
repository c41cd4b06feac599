"""
splinekernel - 二维B样条插值算法库

给定有序二维点序列，计算精确穿过所有点的 clamped B样条曲线，
返回控制点与节点向量。

流程: 向心参数化 -> 均值法节点向量 -> 基函数矩阵 -> 按坐标轴求解控制点
"""

from .algorithm import InterpolatingCurve
from .core.interpolation import InterpolationResult, interpolate_with_bspline_curve
from .errors import (
    DegenerateParameterizationError,
    InterpolationError,
    InvalidDegreeError,
    MismatchedLengthError,
    SingularSystemError,
)

__version__ = "0.1.0"
__all__ = [
    "InterpolatingCurve",
    "InterpolationResult",
    "interpolate_with_bspline_curve",
    "InterpolationError",
    "MismatchedLengthError",
    "InvalidDegreeError",
    "DegenerateParameterizationError",
    "SingularSystemError",
]
