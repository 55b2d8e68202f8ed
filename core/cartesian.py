"""
cartesian - 笛卡尔坐标点

(x, y, z) 三元组本身即为规范形式，无需归一化。
几何变换（平移、缩放）返回新的点，可链式调用:

    >>> CartesianPoint(800, 42, 220).move_origin_to(500, 300, 200).scale(0.5)
    CartesianPoint(x=150.0, y=-129.0, z=10.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Sequence

import numpy as np

from ..config import EPSILON
from ..utils.angles import equals
from ..utils.parsing import as_coordinate, parse_decimal, split_triplet

if TYPE_CHECKING:
    from .cylindrical import CylindricalPoint
    from .spherical import SphericalPoint

PREFIX = "xyz:"
DEFAULT_FORMAT = "xyz: [%.2f, %.2f, %.2f]"


@dataclass(frozen=True)
class CartesianPoint:
    """
    笛卡尔坐标系下的点。

    Attributes:
        x: x 坐标
        y: y 坐标
        z: z 坐标
    """

    x: float
    y: float
    z: float

    def __post_init__(self):
        object.__setattr__(self, "x", as_coordinate(self.x))
        object.__setattr__(self, "y", as_coordinate(self.y))
        object.__setattr__(self, "z", as_coordinate(self.z))

    @classmethod
    def zero(cls) -> CartesianPoint:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> CartesianPoint:
        x, y, z = np.asarray(values, dtype=np.float64).reshape(3)
        return cls(x, y, z)

    @classmethod
    def from_string(cls, expression: str) -> CartesianPoint:
        """
        解析坐标字符串。

        支持格式:
            - ``xyz: [x, y, z]``
            - ``(x, y, z)``

        Raises:
            ParseError: 格式不合法或某个字段不是十进制数
        """
        fields = split_triplet(expression, PREFIX)
        x, y, z = (parse_decimal(field) for field in fields)
        return cls(x, y, z)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __str__(self) -> str:
        return self.format(DEFAULT_FORMAT)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def format(self, template: str) -> str:
        """
        按 printf 风格模板输出坐标，例如 ``"(%d, %d, %d)"``。

        Args:
            template: 包含三个数值占位符的模板

        Returns:
            格式化后的字符串
        """
        return template % (self.x, self.y, self.z)

    # ------------------------------------------------------------------
    # 比较与度量
    # ------------------------------------------------------------------

    def equals(self, other: CartesianPoint, epsilon: float = EPSILON) -> bool:
        """逐分量带容差比较。"""
        return (
            equals(self.x, other.x, epsilon)
            and equals(self.y, other.y, epsilon)
            and equals(self.z, other.z, epsilon)
        )

    def distance(self, other: CartesianPoint) -> float:
        """欧氏距离。"""
        return float(np.linalg.norm(self.to_array() - other.to_array()))

    # ------------------------------------------------------------------
    # 几何变换
    # ------------------------------------------------------------------

    def translate(self, dx: float, dy: float, dz: float) -> CartesianPoint:
        """
        平移坐标。

        Args:
            dx, dy, dz: 各轴偏移量

        Returns:
            平移后的新点
        """
        return CartesianPoint(self.x + dx, self.y + dy, self.z + dz)

    def move_origin_to(self, x: float, y: float, z: float) -> CartesianPoint:
        """
        将原点移动到 (x, y, z)，返回该点在新坐标系下的坐标。

        等价于 ``translate(-x, -y, -z)``。
        """
        return self.translate(-x, -y, -z)

    def scale(self, factor: float) -> CartesianPoint:
        """各坐标乘以 factor。factor = 0 时得到原点。"""
        return CartesianPoint(self.x * factor, self.y * factor, self.z * factor)

    def octant(self) -> int:
        """该点所在的卦限编号 (0-8)。"""
        from .octant import get_octant

        return get_octant(self.x, self.y, self.z)

    # ------------------------------------------------------------------
    # 坐标系转换
    # ------------------------------------------------------------------

    def to_cylindrical(self) -> CylindricalPoint:
        """
        转换为柱坐标 (ρ, φ, z)。

            ρ = sqrt(x² + y²)
            φ = arctan2(y, x)
            z = z
        """
        from .cylindrical import CylindricalPoint

        rho = np.hypot(self.x, self.y)
        # z 轴上方位角无定义，避免 arctan2(-0.0, -0.0) = -π
        phi = np.arctan2(self.y, self.x) if rho != 0 else 0.0
        return CylindricalPoint(rho, phi, self.z)

    def to_spherical(self) -> SphericalPoint:
        """
        转换为球坐标 (ρ, θ, φ)。

            ρ = sqrt(x² + y² + z²)
            θ = arccos(z / ρ)  -- 极角，与z轴夹角
            φ = arctan2(y, x)  -- 方位角

        原点的方向无定义，返回规范的零点。
        """
        from .spherical import SphericalPoint

        rho = float(np.linalg.norm(self.to_array()))
        if rho == 0:
            return SphericalPoint.zero()

        theta = np.arccos(np.clip(self.z / rho, -1.0, 1.0))
        phi = np.arctan2(self.y, self.x)
        return SphericalPoint(rho, theta, phi)


if __name__ == "__main__":
    point = CartesianPoint(5 * np.sqrt(3) / 2, 5 / 2, 4)
    print(f"笛卡尔: {point}")
    print(f"柱坐标: {point.to_cylindrical()}")
    print(f"球坐标: {point.to_spherical()}")
    print(f"往返误差: {point.distance(point.to_spherical().to_cartesian()):.2e}")
