"""
utils 模块单元测试
"""

import numpy as np
import pytest

from splinekernel.errors import InterpolationError, MismatchedLengthError
from splinekernel.utils.geometry import as_point_sequence, chord_lengths


class TestChordLengths:
    """弦长计算测试"""

    def test_pythagorean(self):
        """测试 3-4-5 三角形"""
        d = chord_lengths(np.array([0.0, 3.0, 3.0]), np.array([0.0, 4.0, 0.0]))
        np.testing.assert_allclose(d, [5.0, 4.0])

    def test_repeated_point(self):
        """测试重复点距离为 0"""
        d = chord_lengths(np.array([1.0, 1.0]), np.array([2.0, 2.0]))
        np.testing.assert_array_equal(d, [0.0])

    def test_single_point(self):
        """测试单点无弦"""
        assert chord_lengths(np.array([1.0]), np.array([2.0])).shape == (0,)


class TestAsPointSequence:
    """点序列校验测试"""

    def test_converts_to_float64(self):
        """测试转换为 float64"""
        x, y = as_point_sequence(([1, 2, 3], (4, 5, 6)))
        assert x.dtype == np.float64 and y.dtype == np.float64
        np.testing.assert_array_equal(y, [4.0, 5.0, 6.0])

    def test_accepts_2xn_array(self):
        """测试 (2, N) 数组"""
        x, y = as_point_sequence(np.arange(8.0).reshape(2, 4))
        np.testing.assert_array_equal(x, [0, 1, 2, 3])
        np.testing.assert_array_equal(y, [4, 5, 6, 7])

    def test_mismatched_lengths(self):
        """测试长度不一致"""
        with pytest.raises(MismatchedLengthError) as exc_info:
            as_point_sequence(([0.0, 1.0], [0.0]))
        assert (exc_info.value.x_length, exc_info.value.y_length) == (2, 1)

    def test_empty(self):
        """测试空输入"""
        with pytest.raises(InterpolationError):
            as_point_sequence(([], []))

    def test_rejects_multidimensional(self):
        """测试多维坐标不会被静默展平"""
        with pytest.raises(InterpolationError, match="one-dimensional"):
            as_point_sequence((np.zeros((2, 3)), np.zeros((2, 3))))

    def test_rejects_scalar_coordinates(self):
        """测试标量坐标"""
        with pytest.raises(InterpolationError, match="one-dimensional"):
            as_point_sequence((1.0, 2.0))

    def test_infinite(self):
        """测试无穷坐标"""
        with pytest.raises(InterpolationError, match="finite"):
            as_point_sequence(([0.0, 1.0], [0.0, np.inf]))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
