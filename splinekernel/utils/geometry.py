"""
geometry - 几何计算工具函数

提供点序列的校验转换、相邻点弦长等基础几何操作。
"""

import numpy as np

from ..errors import InterpolationError, MismatchedLengthError


def as_point_sequence(points) -> tuple[np.ndarray, np.ndarray]:
    """
    将 (x, y) 坐标序列对转换为 float64 数组。

    在任何数值计算之前检查两组坐标长度是否一致。

    Args:
        points: (x, y) 两个等长数值序列

    Returns:
        x: (N,) x 坐标
        y: (N,) y 坐标

    Raises:
        MismatchedLengthError: x 与 y 长度不同
        InterpolationError: 输入不是坐标对、坐标不是一维序列、点数为 0 或含非有限值
    """
    try:
        x_values, y_values = points
    except (TypeError, ValueError) as exc:
        raise InterpolationError("Points must be given as a pair of coordinate sequences (x, y)") from exc

    x = np.asarray(x_values, dtype=np.float64)
    y = np.asarray(y_values, dtype=np.float64)

    if x.ndim != 1 or y.ndim != 1:
        raise InterpolationError(
            f"Coordinate sequences must be one-dimensional, got shapes {x.shape} and {y.shape}"
        )

    if len(x) != len(y):
        raise MismatchedLengthError(len(x), len(y))
    if len(x) == 0:
        raise InterpolationError("At least one interpolation point is required")
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
        raise InterpolationError("Interpolation points must have finite coordinates")

    return x, y


def chord_lengths(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """
    计算相邻点之间的欧氏距离。

    Args:
        x: (N,) x 坐标
        y: (N,) y 坐标

    Returns:
        d: (N-1,) d[i] = ||P[i+1] - P[i]||
    """
    return np.sqrt(np.diff(x) ** 2 + np.diff(y) ** 2)
