"""
bspline - B样条插值的基础工具函数

实现:
1. 向心参数化 (点 -> 参数值)
2. 均值法节点向量 (参数值 -> 节点向量)
3. Cox-de Boor 基函数递推
4. 基函数矩阵构造 (向量化版本)
"""

import numpy as np
from scipy.interpolate import BSpline

from ..errors import DegenerateParameterizationError, InvalidDegreeError
from ..utils.geometry import chord_lengths

# 弦长权重指数: w[i] = d[i] ** exponent
PARAMETERIZATION_EXPONENTS = {
    "centripetal": 0.5,
    "chord_length": 1.0,
}


def centripetal_parameterization(
    x: np.ndarray, y: np.ndarray, method: str = "centripetal"
) -> np.ndarray:
    """
    向心参数化方法。

    先计算相邻点欧氏距离 d[i]，再取其平方根作为权重来分配参数值:
        t[0] = 0,  t[i+1] = t[i] + sqrt(d[i]) / sum(sqrt(d))

    method="chord_length" 时直接使用 d[i] 作为权重。

    Args:
        x: (N,) x 坐标
        y: (N,) y 坐标
        method: 权重方式, "centripetal" 或 "chord_length"

    Returns:
        t: (N,) 参数值数组, t[0]=0, t[-1]=1

    Raises:
        DegenerateParameterizationError: 所有点重合
    """
    if method not in PARAMETERIZATION_EXPONENTS:
        raise ValueError(
            f"Unknown parameterization {method!r}, "
            f"expected one of {sorted(PARAMETERIZATION_EXPONENTS)}"
        )

    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    N = len(x)
    if N < 2:
        return np.zeros(N)

    weights = chord_lengths(x, y) ** PARAMETERIZATION_EXPONENTS[method]
    d = np.sum(weights)

    # d == 0 时除法无意义，不允许 NaN 继续传播
    if not d > 0:
        raise DegenerateParameterizationError(N)

    t = np.zeros(N)
    t[1:] = np.cumsum(weights) / d
    t[-1] = 1.0

    return t


def check_degree(degree: int, num_points: int) -> None:
    """阶数须为整数且 0 <= degree <= num_points - 1，否则抛出 InvalidDegreeError。"""
    if (
        isinstance(degree, bool)
        or not isinstance(degree, (int, np.integer))
        or not 0 <= degree <= num_points - 1
    ):
        raise InvalidDegreeError(degree, num_points)


def compute_knot_vector(params: np.ndarray, degree: int) -> np.ndarray:
    """
    计算B样条节点向量 (均值法)。

    内部节点 N-p-1 个，第 j 个为 params[j .. j+p-1] 的平均值 (j 从 1 开始)，
    两端各重复 p+1 次 (clamped)。

    Args:
        params: (N,) 参数值数组
        degree: 样条阶数 p, 0 <= p <= N-1

    Returns:
        knots: (N + p + 1,) 节点向量

    Raises:
        InvalidDegreeError: 阶数为负或超过 N-1
    """
    params = np.asarray(params, dtype=np.float64)
    N = len(params)

    check_degree(degree, N)

    p = int(degree)
    knots = np.zeros(N + p + 1)
    knots[-(p + 1):] = 1.0

    if p == 0:
        # 平均窗口为空，取相邻参数的中点
        knots[1:N] = 0.5 * (params[:-1] + params[1:])
        return knots

    for j in range(1, N - p):
        knots[j + p] = np.mean(params[j:j + p])

    return knots


def evaluate_bspline_basis(u: float, index: int, degree: int, knots: np.ndarray) -> float:
    """
    Cox-de Boor 递推计算单个基函数值 N_{index,degree}(u)。

    约定 0/0 = 0；最后一个非退化区间在右端闭合，使 clamped 节点向量下
    最后一个基函数在 u = knots[-1] 处取 1。

    逐点参考实现，插值求解本身使用 bspline_basis_matrix；
    两者在相同参数与节点向量下结果一致，可用于重新求值校验插值结果。
    """
    knots = np.asarray(knots, dtype=np.float64)

    if degree == 0:
        if knots[index] <= u < knots[index + 1]:
            return 1.0
        if u == knots[-1] and knots[index] < knots[index + 1] == knots[-1]:
            return 1.0
        return 0.0

    value = 0.0

    left_span = knots[index + degree] - knots[index]
    if left_span > 0:
        value += (u - knots[index]) / left_span * evaluate_bspline_basis(
            u, index, degree - 1, knots
        )

    right_span = knots[index + degree + 1] - knots[index + 1]
    if right_span > 0:
        value += (knots[index + degree + 1] - u) / right_span * evaluate_bspline_basis(
            u, index + 1, degree - 1, knots
        )

    return value


def bspline_basis_matrix(params: np.ndarray, knots: np.ndarray, degree: int) -> np.ndarray:
    """
    计算B样条基函数矩阵 - 优化版本。

    以单位矩阵为系数构造 BSpline，一次求值得到全部基函数，
    代替逐项调用 evaluate_bspline_basis 的 O(N²) 递推。

    Args:
        params: (N,) 参数值
        knots: 节点向量
        degree: 样条阶数

    Returns:
        Phi: (N, N) 基函数矩阵, Phi[k, i] = N_{i,p}(params[k])
    """
    N = len(knots) - degree - 1
    coeffs = np.eye(N)
    basis_spline = BSpline(knots, coeffs, degree)
    return basis_spline(np.asarray(params, dtype=np.float64))
