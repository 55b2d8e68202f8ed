"""
octant - 卦限划分

以原点为中心，用三个坐标平面把空间切成 8 个卦限:

                _____ _____
              /  5  /  6  /|
             /- - -/- - -/ |
            /_____/____ /| |
           |     |     | |/|
           |  7  |  8  | / | 2
           |_____|_____|/| |
           |     |     | |/
           |  3  |  4  | /
           |_____|_____|/

编号 = 1 + (x ≥ 0) + 2·(y < 0) + 4·(z ≥ 0)，原点为 0。
"""

import numbers

from ..errors import InvalidArgumentError
from .cartesian import CartesianPoint

# 卦限编号 -> 从原点指向该卦限的符号向量
BASE_VECTORS: dict[int, tuple[int, int, int]] = {
    0: (0, 0, 0),
    1: (-1, 1, -1),
    2: (1, 1, -1),
    3: (-1, -1, -1),
    4: (1, -1, -1),
    5: (-1, 1, 1),
    6: (1, 1, 1),
    7: (-1, -1, 1),
    8: (1, -1, 1),
}


def get_octant(x: float, y: float, z: float) -> int:
    """
    计算 (x, y, z) 所在的卦限。

    Returns:
        原点返回 0，否则返回 1-8
    """
    if x == 0 and y == 0 and z == 0:
        return 0

    octant = 1
    if x >= 0:
        octant += 1
    if y < 0:
        octant += 2
    if z >= 0:
        octant += 4
    return octant


def get_octant_from_point(point: CartesianPoint) -> int:
    return get_octant(point.x, point.y, point.z)


def get_octant_from_string(expression: str) -> int:
    """解析坐标字符串（格式见 CartesianPoint.from_string）后计算卦限。"""
    return get_octant_from_point(CartesianPoint.from_string(expression))


def get_base_vector(octant: int) -> tuple[int, int, int]:
    """
    获取卦限的符号向量。

    例如 ``get_base_vector(4)`` 返回 ``(1, -1, -1)``。

    Args:
        octant: 卦限编号 0-8

    Returns:
        0 号卦限返回 (0, 0, 0)，否则为三个 ±1 组成的元组

    Raises:
        InvalidArgumentError: 不是整数（bool 也不算）或不在 0-8 范围内
    """
    if isinstance(octant, bool) or not isinstance(octant, numbers.Integral) or octant not in BASE_VECTORS:
        raise InvalidArgumentError(f"Not a valid octant: {octant!r}")
    return BASE_VECTORS[int(octant)]
