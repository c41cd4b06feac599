"""
utils - 工具函数模块

包含:
- geometry: 点序列校验与弦长计算
"""

from .geometry import as_point_sequence, chord_lengths

__all__ = [
    "as_point_sequence",
    "chord_lengths",
]
