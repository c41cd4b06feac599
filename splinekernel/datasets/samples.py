"""
samples - 插值测试用二维点集

数据说明:
- four_point_arch: 4 个点构成的拱形，三次插值时恰为单段 Bézier 曲线
- sine_wave: 正弦曲线等间距采样
- naca_symmetric_upper: NACA 四位数对称翼型上表面，余弦分布采样
"""

import numpy as np

# (0,0), (1,2), (3,3), (4,0)
_ARCH_POINTS = np.array(
    [
        [0.0, 0.0],
        [1.0, 2.0],
        [3.0, 3.0],
        [4.0, 0.0],
    ],
    dtype=np.float64,
)


def four_point_arch() -> tuple[np.ndarray, np.ndarray]:
    """
    四点拱形。

    Returns:
        x: (4,) x 坐标
        y: (4,) y 坐标
    """
    return _ARCH_POINTS[:, 0].copy(), _ARCH_POINTS[:, 1].copy()


def sine_wave(num_points: int = 9, periods: float = 1.0) -> tuple[np.ndarray, np.ndarray]:
    """
    y = sin(x) 在 [0, 2π·periods] 上的等间距采样。

    Args:
        num_points: 采样点数
        periods: 周期数

    Returns:
        x: (num_points,) x 坐标
        y: (num_points,) y 坐标
    """
    x = np.linspace(0.0, 2 * np.pi * periods, num_points)
    return x, np.sin(x)


def naca_symmetric_upper(num_points: int = 11, thickness: float = 0.12) -> tuple[np.ndarray, np.ndarray]:
    """
    NACA 00xx 对称翼型上表面 (弦长为 1)。

    厚度分布:
        y_t = 5t (0.2969√x - 0.1260x - 0.3516x² + 0.2843x³ - 0.1015x⁴)

    前缘附近曲率大，采用余弦分布加密采样。

    Args:
        num_points: 采样点数
        thickness: 最大相对厚度 t

    Returns:
        x: (num_points,) 弦向坐标, 0 -> 1
        y: (num_points,) 上表面厚度
    """
    beta = np.linspace(0.0, np.pi, num_points)
    x = 0.5 * (1.0 - np.cos(beta))
    y = 5 * thickness * (
        0.2969 * np.sqrt(x)
        - 0.1260 * x
        - 0.3516 * x**2
        + 0.2843 * x**3
        - 0.1015 * x**4
    )
    return x, y
