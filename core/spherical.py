"""
spherical - 球坐标点 (ρ, θ, φ)

    ρ: 径向距离，即到原点的距离
    θ: 极角，与 z 轴正方向的夹角
    φ: 方位角，绕 z 轴的旋转角

同一个空间点可以有多种球坐标表示，构造时统一归一化为规范形式:
    - ρ ≥ 0，θ ∈ [0, π]，φ ∈ [0, 2π)
    - ρ = 0 时方向无定义: θ = φ = 0
    - θ = 0 或 π（两极）时方位角无定义: φ = 0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from ..config import EPSILON
from ..utils.angles import FULL_TURN, AngleUnit, angle_equals, equals, normalize_angle, parse_angle
from ..utils.parsing import as_coordinate, parse_decimal, split_triplet
from .cartesian import CartesianPoint
from .cylindrical import CylindricalPoint

PREFIX = "rtp:"
DEFAULT_FORMAT = "(%.2f, %.2f°, %.2f°)"


def canonical(rho: float, theta: float, phi: float) -> tuple[float, float, float]:
    """
    计算球坐标的规范形式，不修改任何输入。

    归一化步骤:
        1. ρ = 0: θ = φ = 0
        2. ρ < 0: (-ρ, -θ, φ - π) 关于原点对称
        3. θ < 0: (ρ, -θ, φ + π)
        4. θ 归一化到 [0, 2π)
        5. θ ∈ (π, 2π): (ρ, 2π - θ, φ + π)
        6. θ ≈ 0 或 θ ≈ π: φ = 0
        7. φ 归一化到 [0, 2π)

    Args:
        rho: 径向距离，可为负
        theta: 极角 (rad)，任意范围
        phi: 方位角 (rad)，任意范围

    Returns:
        (rho, theta, phi) 规范形式
    """
    rho, theta, phi = as_coordinate(rho), as_coordinate(theta), as_coordinate(phi)

    if rho == 0:
        return 0.0, 0.0, 0.0

    if rho < 0:
        rho = -rho
        theta = -theta
        phi -= np.pi

    if theta < 0:
        theta = -theta
        phi += np.pi

    theta = normalize_angle(theta)
    if theta > np.pi:
        theta = FULL_TURN - theta
        phi += np.pi

    # 两极
    if equals(theta, 0.0):
        return rho, 0.0, 0.0
    if equals(theta, np.pi):
        return rho, np.pi, 0.0

    return rho, theta, normalize_angle(phi)


@dataclass(frozen=True)
class SphericalPoint:
    """
    球坐标系下的点。

    Attributes:
        rho: 径向距离 ρ ≥ 0
        theta: 极角 θ ∈ [0, π] (rad)
        phi: 方位角 φ ∈ [0, 2π) (rad)
    """

    rho: float
    theta: float
    phi: float

    def __post_init__(self):
        rho, theta, phi = canonical(self.rho, self.theta, self.phi)
        object.__setattr__(self, "rho", rho)
        object.__setattr__(self, "theta", theta)
        object.__setattr__(self, "phi", phi)

    @classmethod
    def zero(cls) -> SphericalPoint:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> SphericalPoint:
        rho, theta, phi = np.asarray(values, dtype=np.float64).reshape(3)
        return cls(rho, theta, phi)

    @classmethod
    def from_string(cls, expression: str) -> SphericalPoint:
        """
        解析坐标字符串。

        支持格式:
            - ``rtp: [ρ, θ, φ]``
            - ``(ρ, θ, φ)``

        θ 和 φ 可带 ``°`` 以角度表示，因此 ``str()`` 的输出可以直接解析回来。

        Raises:
            ParseError: 格式不合法或某个字段无法解析
        """
        rho_text, theta_text, phi_text = split_triplet(expression, PREFIX)
        return cls(parse_decimal(rho_text), parse_angle(theta_text), parse_angle(phi_text))

    def __iter__(self) -> Iterator[float]:
        return iter((self.rho, self.theta, self.phi))

    def __str__(self) -> str:
        return self.format(DEFAULT_FORMAT, AngleUnit.DEGREES)

    def to_array(self) -> np.ndarray:
        return np.array([self.rho, self.theta, self.phi])

    def format(self, template: str, unit: AngleUnit = AngleUnit.RADIANS) -> str:
        """
        按 printf 风格模板输出坐标，θ 和 φ 按 unit 转换。
        """
        return template % (self.rho, unit.convert(self.theta), unit.convert(self.phi))

    @property
    def is_degenerate(self) -> bool:
        """位于原点或两极时方位角无定义。"""
        return self.rho == 0 or self.theta == 0 or self.theta == np.pi

    # ------------------------------------------------------------------
    # 比较与度量
    # ------------------------------------------------------------------

    def equals(self, other: SphericalPoint, epsilon: float = EPSILON) -> bool:
        """
        规范形式下逐分量带容差比较。

        原点、两极等退化点在归一化时已将无定义的角度置零，
        因此无论构造时传入什么角度都能正确比较。
        """
        return (
            equals(self.rho, other.rho, epsilon)
            and equals(self.theta, other.theta, epsilon)
            and angle_equals(self.phi, other.phi, epsilon)
        )

    def distance(self, other: SphericalPoint) -> float:
        """
        两点间距离（球面余弦定理）:

            c = sin θ1·sin θ2·cos(φ1 - φ2) + cos θ1·cos θ2
            d = sqrt(ρ1² + ρ2² - 2·ρ1·ρ2·c)

        三角函数累积误差较大，同一点的距离约为 1e-6 量级而非严格为 0。
        """
        angular = (
            np.sin(self.theta) * np.sin(other.theta) * np.cos(self.phi - other.phi)
            + np.cos(self.theta) * np.cos(other.theta)
        )
        squared = self.rho**2 + other.rho**2 - 2 * self.rho * other.rho * angular
        return float(np.sqrt(max(squared, 0.0)))

    # ------------------------------------------------------------------
    # 坐标系转换
    # ------------------------------------------------------------------

    def to_cartesian(self) -> CartesianPoint:
        """
        转换为笛卡尔坐标:

            x = ρ·sin θ·cos φ
            y = ρ·sin θ·sin φ
            z = ρ·cos θ
        """
        sin_theta = np.sin(self.theta)
        x = self.rho * sin_theta * np.cos(self.phi)
        y = self.rho * sin_theta * np.sin(self.phi)
        z = self.rho * np.cos(self.theta)
        return CartesianPoint(x, y, z)

    def to_cylindrical(self) -> CylindricalPoint:
        """
        转换为柱坐标，φ 保持不变:

            r = ρ·sin θ
            z = ρ·cos θ
        """
        r = self.rho * np.sin(self.theta)
        z = self.rho * np.cos(self.theta)
        return CylindricalPoint(r, self.phi, z)


if __name__ == "__main__":
    print("=== 退化点归一化 ===")
    for args in [(0, np.pi / 4, np.pi / 2), (4, 0, np.pi / 2), (4, np.pi, np.pi / 2), (-1, -np.pi / 4, np.pi)]:
        print(f"{args} -> {SphericalPoint(*args)}")

    point = SphericalPoint(70.637885, 2.322316, -1.428351)
    print(f"\n{point.format('(%.2f, %.2f, %.2f)')} -> {point.to_cartesian()}")
