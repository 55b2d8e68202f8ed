"""
cylindrical 模块单元测试
"""

import dataclasses

import numpy as np
import pytest

from geo_coords.config import EPSILON
from geo_coords.core.cartesian import CartesianPoint
from geo_coords.core.cylindrical import CylindricalPoint, calculate_section, canonical
from geo_coords.errors import InvalidArgumentError, ParseError
from geo_coords.utils.angles import FULL_TURN, AngleUnit


@pytest.fixture
def random_points():
    rng = np.random.default_rng(7)
    rho = rng.uniform(-50, 50, 30)
    phi = rng.uniform(-4 * np.pi, 4 * np.pi, 30)
    z = rng.uniform(-50, 50, 30)
    return [CylindricalPoint(*row) for row in zip(rho, phi, z)]


class TestConstruction:
    """构造与解析测试"""

    def test_zero(self):
        """测试零点"""
        assert CylindricalPoint(0.0, 0.0, 0.0).equals(CylindricalPoint.zero())

    def test_frozen(self):
        """测试点不可修改"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            CylindricalPoint(1, 0, 0).rho = -1

    def test_rejects_text(self):
        """测试文本坐标不会被隐式转换"""
        with pytest.raises(TypeError):
            CylindricalPoint("1", 0, 0)
        with pytest.raises(TypeError):
            canonical(1, "90°", 0)

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("(1, 2, 3)", CylindricalPoint(1, 2, 3)),
            ("(1, -2, 3)", CylindricalPoint(1, -2, 3)),
            ("(1, 90°, 3)", CylindricalPoint(1, np.pi / 2, 3)),
            ("(1, -90°, 3)", CylindricalPoint(1, -np.pi / 2, 3)),
            ("(1, 90 °, 3)", CylindricalPoint(1, np.pi / 2, 3)),
            ("rpz: [1.70, 5, 0]", CylindricalPoint(1.7, 5, 0)),
            ("rpz: [1.70, 90.00°, 0.00]", CylindricalPoint(1.7, np.pi / 2, 0)),
        ],
    )
    def test_parse(self, expression, expected):
        """测试字符串解析"""
        assert expected.equals(CylindricalPoint.from_string(expression))

    @pytest.mark.parametrize(
        "expression",
        [
            "I'm at the center of the cylinder.",
            "xyz: [1, 2, 3]",
            "(1, 2)",
            "(1, north, 3)",
            "rpz: [1, 2, 3",
        ],
    )
    def test_parse_invalid(self, expression):
        """测试非法字符串"""
        with pytest.raises(ParseError):
            CylindricalPoint.from_string(expression)


class TestStrings:
    """字符串输出测试"""

    def test_format_in_radians(self):
        """测试弧度输出"""
        point = CylindricalPoint(1.7, np.pi / 2, 0)
        assert point.format("(%.2f, %.2f, %.2f)") == "(1.70, 1.57, 0.00)"

    def test_format_in_degrees(self):
        """测试角度输出"""
        point = CylindricalPoint(1.7, np.pi / 2, 0)
        assert point.format("(%.2f, %.2f°, %.2f)", AngleUnit.DEGREES) == "(1.70, 90.00°, 0.00)"

    def test_str(self):
        """测试默认字符串输出"""
        assert str(CylindricalPoint(1.7, np.pi / 2, 0)) == "rpz: [1.70, 90.00°, 0.00]"

    @pytest.mark.parametrize(
        "template, unit",
        [
            ("rpz: [%.7f, %.7f, %.7f]", AngleUnit.RADIANS),
            ("(%.7f, %.7f, %.7f)", AngleUnit.RADIANS),
            ("rpz: [%.7f, %.7f°, %.7f]", AngleUnit.DEGREES),
            ("(%.7f, %.7f°, %.7f)", AngleUnit.DEGREES),
        ],
    )
    def test_format_then_parse(self, template, unit, random_points):
        """测试格式化后可解析回原点"""
        for point in random_points:
            assert point.equals(CylindricalPoint.from_string(point.format(template, unit)))

    def test_str_then_parse(self):
        """测试 str() 输出可解析回原点"""
        point = CylindricalPoint(17, np.radians(24), -6)
        assert point.equals(CylindricalPoint.from_string(str(point)))


class TestNormalize:
    """归一化测试"""

    def test_negative_rho(self):
        """测试负半径归一化"""
        expected = CylindricalPoint(4, np.radians(270), 5)
        actual = CylindricalPoint(-4, np.pi / 2, 5)
        assert actual.equals(expected)
        assert actual.rho == 4
        assert np.isclose(actual.phi, 3 * np.pi / 2)

    def test_phi_wrapped(self):
        """测试方位角归一化到 [0, 2π)"""
        point = CylindricalPoint(1, 5 * np.pi / 2, 0)
        assert np.isclose(point.phi, np.pi / 2)

    def test_invariant(self, random_points):
        """测试规范形式不变量"""
        for point in random_points:
            assert point.rho >= 0
            assert 0 <= point.phi < FULL_TURN

    def test_idempotent(self, random_points):
        """测试归一化幂等"""
        for point in random_points:
            assert canonical(*point) == tuple(point)
            assert CylindricalPoint(*point) == point

    def test_canonical_does_not_need_instance(self):
        """测试 canonical 可独立调用"""
        assert canonical(-1, 0, 2) == (1.0, np.pi, 2.0)


class TestComparison:
    """比较与距离测试"""

    def test_equals_across_zero_seam(self):
        """测试 0/2π 两侧的方位角相等"""
        assert CylindricalPoint(1, FULL_TURN - 1e-9, 0).equals(CylindricalPoint(1, 0, 0))

    def test_not_equals(self):
        """测试不相等"""
        assert not CylindricalPoint(1, 0, 0).equals(CylindricalPoint(1, np.pi, 0))

    def test_distance_to_itself_is_zero(self):
        """测试到自身的距离为 0"""
        point = CylindricalPoint(1, np.pi / 4, 3)
        assert point.distance(CylindricalPoint(*point)) == 0.0

    def test_distance_matches_cartesian(self, random_points):
        """测试距离与笛卡尔距离一致"""
        for a, b in zip(random_points, random_points[1:]):
            expected = a.to_cartesian().distance(b.to_cartesian())
            assert a.distance(b) == pytest.approx(expected, abs=1e-6)

    def test_distance_symmetric(self, random_points):
        """测试距离对称"""
        for a, b in zip(random_points, random_points[1:]):
            assert a.distance(b) == pytest.approx(b.distance(a))
            assert a.distance(b) >= 0


class TestConversion:
    """坐标系转换测试"""

    def test_to_cartesian(self):
        """测试笛卡尔坐标转换"""
        expected = CartesianPoint(5 * np.sqrt(3) / 2, 5 / 2, 4)
        point = CylindricalPoint(5, np.pi / 6, 4)
        assert expected.equals(point.to_cartesian())

    def test_to_spherical_keeps_phi(self):
        """测试球坐标转换保持方位角"""
        point = CylindricalPoint(1, np.pi / 2, 3)
        assert point.to_spherical().phi == point.phi

    def test_to_spherical(self):
        """测试球坐标转换"""
        spherical = CylindricalPoint(3, np.pi / 3, 3).to_spherical()
        assert np.isclose(spherical.rho, 3 * np.sqrt(2))
        assert np.isclose(spherical.theta, np.pi / 4)

    def test_to_spherical_on_axis(self):
        """ρ = 0 时位于 z 轴（两极），方位角置零"""
        spherical = CylindricalPoint(0, np.pi / 3, -2).to_spherical()
        assert spherical.theta == np.pi
        assert spherical.phi == 0

    def test_spherical_roundtrip(self, random_points):
        """测试球坐标往返转换"""
        for point in random_points:
            assert point.equals(point.to_spherical().to_cylindrical())


# 0 和 ε 总在第一个扇区，2π - ε 总在最后一个扇区，边界属于后一个扇区
SECTIONS = [
    (0, 4, 1),
    (0, 6, 1),
    (EPSILON, 4, 1),
    (EPSILON, 6, 1),
    (np.pi / 2, 6, 2),
    (np.radians(30), 4, 1),
    (np.radians(100), 4, 2),
    (np.radians(250), 4, 3),
    (np.radians(320), 4, 4),
    (np.pi, 4, 3),
    (np.pi / 2, 4, 2),
    (np.pi, 6, 4),
    (np.pi - EPSILON, 4, 2),
    (np.pi / 2 - EPSILON, 4, 1),
    (np.pi - EPSILON, 6, 3),
    (np.pi + EPSILON, 4, 3),
    (np.pi / 2 + EPSILON, 4, 2),
    (np.pi + EPSILON, 6, 4),
    (-EPSILON, 4, 4),
    (-EPSILON, 6, 6),
]


class TestSections:
    """扇区划分测试"""

    @pytest.mark.parametrize("angle, count, expected", SECTIONS)
    def test_calculate_section(self, angle, count, expected):
        """测试扇区计算"""
        assert calculate_section(angle, count) == expected

    @pytest.mark.parametrize("phi, count, expected", SECTIONS)
    def test_get_section(self, phi, count, expected):
        """测试点所在扇区"""
        assert CylindricalPoint(1, phi, 5).get_section(count) == expected

    def test_default_count_is_six(self):
        """测试默认 6 个扇区"""
        assert calculate_section(-EPSILON) == 6
        assert CylindricalPoint(1, np.pi, 0).get_section() == 4

    def test_single_section(self):
        """测试只有一个扇区"""
        for angle in [0, np.pi, -EPSILON, 100]:
            assert calculate_section(angle, 1) == 1

    def test_never_exceeds_count(self):
        """测试扇区编号不超过扇区数"""
        just_below = np.nextafter(FULL_TURN, 0)
        for count in [1, 3, 6, 7, 360]:
            assert calculate_section(just_below, count) == count

    @pytest.mark.parametrize("count", [0, -4])
    def test_invalid_count(self, count):
        """测试非法扇区数"""
        with pytest.raises(InvalidArgumentError):
            calculate_section(1.0, count)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
