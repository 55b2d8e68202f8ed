"""
cylindrical - 柱坐标点 (ρ, φ, z)

适合描述圆柱形区域（如塔楼）内的坐标: 水平方向用极坐标，
高度 z 与中心无关。

规范形式: ρ ≥ 0，φ ∈ [0, 2π)。构造时立即归一化:
    (-ρ, φ, z) == (ρ, φ + π, z)

扇区 (section) 把圆周从 φ = 0 起沿 φ 增大方向等分为 n 份，编号 1..n:

           n = 6             n = 4
          o  o              o  o
       o 6    1 o        o 4 | 1  o
      o          o      o ___|___  o
      o          o      o  3 | 2   o
       o 4    3 o        o   |    o
          o  o              o  o
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Sequence

import numpy as np

from ..config import EPSILON
from ..errors import InvalidArgumentError
from ..utils.angles import FULL_TURN, AngleUnit, angle_equals, equals, normalize_angle, parse_angle
from ..utils.parsing import as_coordinate, parse_decimal, split_triplet
from .cartesian import CartesianPoint

if TYPE_CHECKING:
    from .spherical import SphericalPoint

PREFIX = "rpz:"
DEFAULT_FORMAT = "rpz: [%.2f, %.2f°, %.2f]"
DEFAULT_SECTION_COUNT = 6


def canonical(rho: float, phi: float, z: float) -> tuple[float, float, float]:
    """
    计算柱坐标的规范形式，不修改任何输入。

    Args:
        rho: 径向距离，可为负
        phi: 方位角 (rad)，任意范围
        z: 高度

    Returns:
        (rho, phi, z): rho ≥ 0，phi ∈ [0, 2π)
    """
    rho, phi, z = as_coordinate(rho), as_coordinate(phi), as_coordinate(z)
    if rho < 0:
        rho = -rho
        phi += np.pi
    return rho, normalize_angle(phi), z


def calculate_section(angle: float, count: int = DEFAULT_SECTION_COUNT) -> int:
    """
    计算角度所在的扇区编号。

    扇区下边界闭、上边界开: 恰好落在边界上的角度属于从该边界开始的扇区，
    -ε（即 2π - ε）属于最后一个扇区。

    Args:
        angle: 角度 (rad)
        count: 扇区数量，≥ 1

    Returns:
        扇区编号 1..count

    Raises:
        InvalidArgumentError: count < 1
    """
    if count < 1:
        raise InvalidArgumentError(f"Section count must be at least 1, got {count}")

    section = 1 + int(np.floor(normalize_angle(angle) / (FULL_TURN / count)))
    # 浮点舍入可能使略小于 2π 的角度落到 count + 1
    return min(section, count)


@dataclass(frozen=True)
class CylindricalPoint:
    """
    柱坐标系下的点。

    Attributes:
        rho: 径向距离 ρ ≥ 0
        phi: 方位角 φ ∈ [0, 2π) (rad)
        z: 高度
    """

    rho: float
    phi: float
    z: float

    def __post_init__(self):
        rho, phi, z = canonical(self.rho, self.phi, self.z)
        object.__setattr__(self, "rho", rho)
        object.__setattr__(self, "phi", phi)
        object.__setattr__(self, "z", z)

    @classmethod
    def zero(cls) -> CylindricalPoint:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> CylindricalPoint:
        rho, phi, z = np.asarray(values, dtype=np.float64).reshape(3)
        return cls(rho, phi, z)

    @classmethod
    def from_string(cls, expression: str) -> CylindricalPoint:
        """
        解析坐标字符串。

        支持格式:
            - ``rpz: [ρ, φ, z]``
            - ``(ρ, φ, z)``

        φ 为纯数字时按弧度解析，带 ``°`` 时按角度解析，如 ``"(1, 90°, 3)"``。

        Raises:
            ParseError: 格式不合法或某个字段无法解析
        """
        rho_text, phi_text, z_text = split_triplet(expression, PREFIX)
        return cls(parse_decimal(rho_text), parse_angle(phi_text), parse_decimal(z_text))

    def __iter__(self) -> Iterator[float]:
        return iter((self.rho, self.phi, self.z))

    def __str__(self) -> str:
        return self.format(DEFAULT_FORMAT, AngleUnit.DEGREES)

    def to_array(self) -> np.ndarray:
        return np.array([self.rho, self.phi, self.z])

    def format(self, template: str, unit: AngleUnit = AngleUnit.RADIANS) -> str:
        """
        按 printf 风格模板输出坐标。

        Args:
            template: 包含三个数值占位符的模板，如 ``"(%.2f, %.2f, %.2f)"``
            unit: φ 的输出单位

        Returns:
            格式化后的字符串
        """
        return template % (self.rho, unit.convert(self.phi), self.z)

    # ------------------------------------------------------------------
    # 比较与度量
    # ------------------------------------------------------------------

    def equals(self, other: CylindricalPoint, epsilon: float = EPSILON) -> bool:
        """规范形式下逐分量带容差比较。"""
        return (
            equals(self.rho, other.rho, epsilon)
            and angle_equals(self.phi, other.phi, epsilon)
            and equals(self.z, other.z, epsilon)
        )

    def distance(self, other: CylindricalPoint) -> float:
        """
        两点间距离（余弦定理）:

            d = sqrt(ρ1² + ρ2² - 2·ρ1·ρ2·cos(φ1 - φ2) + (z1 - z2)²)
        """
        delta_phi = self.phi - other.phi
        squared = (
            self.rho**2
            + other.rho**2
            - 2 * self.rho * other.rho * np.cos(delta_phi)
            + (self.z - other.z) ** 2
        )
        return float(np.sqrt(max(squared, 0.0)))

    def get_section(self, count: int = DEFAULT_SECTION_COUNT) -> int:
        """φ 所在的扇区编号，见 :func:`calculate_section`。"""
        return calculate_section(self.phi, count)

    # ------------------------------------------------------------------
    # 坐标系转换
    # ------------------------------------------------------------------

    def to_cartesian(self) -> CartesianPoint:
        """
        转换为笛卡尔坐标:

            x = ρ·cos(φ)
            y = ρ·sin(φ)
            z = z
        """
        x = self.rho * np.cos(self.phi)
        y = self.rho * np.sin(self.phi)
        return CartesianPoint(x, y, self.z)

    def to_spherical(self) -> SphericalPoint:
        """
        转换为球坐标，φ 保持不变:

            ρ' = sqrt(ρ² + z²)
            θ = arctan2(ρ, z)
        """
        from .spherical import SphericalPoint

        rho = np.hypot(self.rho, self.z)
        theta = np.arctan2(self.rho, self.z)
        return SphericalPoint(rho, theta, self.phi)


if __name__ == "__main__":
    print("=== 扇区测试 (n = 4) ===")
    for degrees in [0, 30, 90, 100, 180, 250, 320, 359.9999]:
        point = CylindricalPoint(1, np.radians(degrees), 5)
        print(f"{point}: 扇区 {point.get_section(4)}")

    print(f"\n负半径归一化: {CylindricalPoint(-4, np.pi / 2, 5)}")
