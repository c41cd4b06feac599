"""
algorithm (InterpolatingCurve) 模块单元测试
"""

import numpy as np
import pytest

from splinekernel import InterpolatingCurve, InvalidDegreeError
from splinekernel.datasets import four_point_arch, naca_symmetric_upper


class TestInterpolatingCurve:
    """InterpolatingCurve 主类测试"""

    @pytest.fixture
    def airfoil_data(self):
        """翼型上表面数据"""
        return naca_symmetric_upper(12)

    def test_initialization(self, airfoil_data):
        """测试初始化"""
        x, y = airfoil_data
        curve = InterpolatingCurve(x, y)

        assert curve.degree == 3
        assert curve.spline is None  # 未拟合
        assert "not fitted" in repr(curve)

    def test_evaluate_before_fit(self, airfoil_data):
        """测试未拟合时求值报错"""
        curve = InterpolatingCurve(*airfoil_data)
        with pytest.raises(RuntimeError, match="not fitted"):
            curve.evaluate(0.5)

    def test_fit(self, airfoil_data):
        """测试拟合"""
        x, y = airfoil_data
        curve = InterpolatingCurve(x, y, degree=3)
        result = curve.fit()

        assert result is curve  # 链式调用
        assert curve.spline.k == 3
        assert len(curve.knots) == len(x) + 3 + 1
        assert len(curve.control_points[0]) == len(x)
        assert "not fitted" not in repr(curve)

    def test_passes_through_points(self, airfoil_data):
        """测试曲线穿过所有数据点"""
        x, y = airfoil_data
        curve = InterpolatingCurve(x, y).fit()

        points = curve.evaluate_batch(curve.params)
        np.testing.assert_allclose(points, np.column_stack([x, y]), atol=1e-9)

    def test_evaluate_at_boundaries(self, airfoil_data):
        """测试端点与参数裁剪"""
        x, y = airfoil_data
        curve = InterpolatingCurve(x, y).fit()

        np.testing.assert_allclose(curve.evaluate(0.0), [x[0], y[0]], atol=1e-9)
        np.testing.assert_allclose(curve.evaluate(1.0), [x[-1], y[-1]], atol=1e-9)
        np.testing.assert_allclose(curve.evaluate(-0.5), curve.evaluate(0.0))
        np.testing.assert_allclose(curve.evaluate(1.5), curve.evaluate(1.0))

    def test_sample_uniform(self, airfoil_data):
        """测试均匀采样"""
        curve = InterpolatingCurve(*airfoil_data).fit()
        u_values, points = curve.sample_uniform(50)

        assert u_values.shape == (50,)
        assert points.shape == (50, 2)
        assert u_values[0] == 0.0 and u_values[-1] == 1.0

    def test_linear_curve_is_polyline(self):
        """测试一次曲线在相邻参数中点处为线段中点"""
        x, y = four_point_arch()
        curve = InterpolatingCurve(x, y, degree=1).fit()

        u_mid = 0.5 * (curve.params[0] + curve.params[1])
        np.testing.assert_allclose(
            curve.evaluate(u_mid), [(x[0] + x[1]) / 2, (y[0] + y[1]) / 2], atol=1e-12
        )

    def test_bezier_end_derivative(self):
        """测试单段三次曲线起点导矢为 3(P1 - P0)"""
        x, y = four_point_arch()
        curve = InterpolatingCurve(x, y, degree=3).fit()

        cx, cy = curve.control_points
        expected = 3 * np.array([cx[1] - cx[0], cy[1] - cy[0]])
        np.testing.assert_allclose(curve.derivative(0.0), expected, atol=1e-9)

    def test_derivative_above_degree(self):
        """测试超过阶数的导数为零"""
        x, y = four_point_arch()
        curve = InterpolatingCurve(x, y, degree=1).fit()

        np.testing.assert_array_equal(curve.derivative(0.3, order=2), [0.0, 0.0])
        assert curve.derivative(np.linspace(0, 1, 4), order=2).shape == (4, 2)

    def test_fit_propagates_errors(self):
        """测试拟合时的阶数错误"""
        x, y = four_point_arch()
        with pytest.raises(InvalidDegreeError):
            InterpolatingCurve(x, y, degree=4).fit()

    def test_banded_solver(self, airfoil_data):
        """测试带状求解选项"""
        x, y = airfoil_data
        dense = InterpolatingCurve(x, y).fit()
        banded = InterpolatingCurve(x, y, banded=True).fit()

        u = np.linspace(0, 1, 30)
        np.testing.assert_allclose(banded.evaluate_batch(u), dense.evaluate_batch(u), atol=1e-10)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
