"""
datasets - 测试数据集

包含:
- four_point_arch: 四点拱形
- sine_wave: 正弦曲线采样
- naca_symmetric_upper: NACA 对称翼型上表面
"""

from .samples import four_point_arch, naca_symmetric_upper, sine_wave

__all__ = [
    "four_point_arch",
    "sine_wave",
    "naca_symmetric_upper",
]
