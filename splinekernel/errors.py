"""
errors - 插值过程中的异常类型

所有异常均继承自 InterpolationError (ValueError 子类)，调用方可统一捕获，
也可按具体类型区分处理 (例如降低阶数、去除重复点)。
"""

from dataclasses import dataclass

import numpy as np


class InterpolationError(ValueError):
    """B样条插值失败的基类。"""


@dataclass(eq=False)
class MismatchedLengthError(InterpolationError):
    """x 坐标与 y 坐标数量不一致。"""

    x_length: int
    y_length: int

    def __post_init__(self):
        super().__init__(
            f"Number of x-values ({self.x_length}) does not match "
            f"number of y-values ({self.y_length})"
        )


@dataclass(eq=False)
class InvalidDegreeError(InterpolationError):
    """阶数为负，或超过 点数-1。"""

    degree: object
    num_points: int

    def __post_init__(self):
        super().__init__(
            f"Polynomial degree {self.degree} is invalid for "
            f"{self.num_points} interpolation points"
        )


@dataclass(eq=False)
class DegenerateParameterizationError(InterpolationError):
    """所有点重合，弦长总和为零，无法参数化。"""

    num_points: int

    def __post_init__(self):
        super().__init__(
            f"All {self.num_points} interpolation points coincide; "
            "total chord length is zero"
        )


@dataclass(eq=False)
class SingularSystemError(InterpolationError, np.linalg.LinAlgError):
    """基函数矩阵奇异 (或数值上接近奇异)。"""

    condition_number: float

    def __post_init__(self):
        super().__init__(
            f"Collocation matrix is singular (condition number {self.condition_number:.3e})"
        )
