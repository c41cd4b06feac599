"""
linalg - 基函数矩阵线性方程组求解

稠密路径对矩阵做一次 LU 分解，多个右端项 (x、y 两个坐标轴) 共用同一分解。
带状路径利用 B样条基函数的局部支撑性，按带状存储求解。
"""

import logging

import numpy as np
from scipy.linalg import LinAlgError, lu_factor, lu_solve, solve_banded

from ..errors import SingularSystemError

logger = logging.getLogger(__name__)

DEFAULT_RCOND = 1e-13


def solve_linear_system(
    matrix: np.ndarray,
    rhs: np.ndarray,
    banded: bool = False,
    rcond: float = DEFAULT_RCOND,
) -> np.ndarray:
    """
    求解 A @ X = B。

    Args:
        matrix: (N, N) 系数矩阵
        rhs: (N,) 或 (N, K) 右端项，K 列共用一次分解
        banded: 是否使用带状存储求解
        rcond: 倒数条件数下限，低于该值视为奇异 (仅稠密路径)

    Returns:
        X: 与 rhs 形状相同的解

    Raises:
        SingularSystemError: 矩阵奇异或数值上接近奇异
        ValueError: 矩阵非方阵或右端项行数不匹配
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    rhs = np.asarray(rhs, dtype=np.float64)

    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {matrix.shape}")
    if rhs.ndim not in (1, 2) or rhs.shape[0] != matrix.shape[0]:
        raise ValueError(
            f"Right-hand side with shape {rhs.shape} does not match matrix of shape {matrix.shape}"
        )

    if banded and matrix.shape[0] > 1:
        return _solve_banded_system(matrix, rhs)

    cond = np.linalg.cond(matrix)
    logger.debug("Collocation matrix %dx%d, condition number %.3e", *matrix.shape, cond)
    if not np.isfinite(cond) or 1.0 / cond < rcond:
        raise SingularSystemError(float(cond))

    lu_piv = lu_factor(matrix, check_finite=False)
    return lu_solve(lu_piv, rhs, check_finite=False)


def band_storage(matrix: np.ndarray) -> tuple[np.ndarray, int, int]:
    """
    将稠密矩阵转换为 solve_banded 使用的带状存储。

    带宽由矩阵中的非零元素确定: ab[upper + i - j, j] = matrix[i, j]。

    Returns:
        ab: (lower + upper + 1, N) 带状矩阵
        lower: 下带宽
        upper: 上带宽
    """
    N = matrix.shape[0]
    rows, cols = np.nonzero(matrix)
    if rows.size == 0:
        return np.zeros((1, N)), 0, 0

    lower = int(max(np.max(rows - cols), 0))
    upper = int(max(np.max(cols - rows), 0))

    ab = np.zeros((lower + upper + 1, N))
    for offset in range(-lower, upper + 1):
        diag = np.diagonal(matrix, offset)
        if offset >= 0:
            ab[upper - offset, offset:] = diag
        else:
            ab[upper - offset, :N + offset] = diag

    return ab, lower, upper


def _solve_banded_system(matrix: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """带状求解，只能检测出精确奇异 (零主元)。"""
    ab, lower, upper = band_storage(matrix)
    logger.debug("Banded solve: lower=%d, upper=%d, N=%d", lower, upper, matrix.shape[0])

    try:
        solution = solve_banded((lower, upper), ab, rhs, check_finite=False)
    except LinAlgError as exc:
        raise SingularSystemError(float("inf")) from exc

    if not np.all(np.isfinite(solution)):
        raise SingularSystemError(float("inf"))

    return solution
