"""
reference_points - 参考坐标点数据

六组随机选取的空间点，给出笛卡尔坐标及其球坐标（保留 6 位小数），
用于验证坐标系转换的正确性。

数据说明:
- x, y, z: 笛卡尔坐标
- ρ, θ, φ: 对应球坐标，φ 取 arctan2 的原始值 [-π, π]，未归一化
"""

import numpy as np

from ..core.cartesian import CartesianPoint
from ..core.spherical import SphericalPoint

# 格式: [x, y, z, ρ, θ, φ]
_RAW_DATA = np.array(
    [
        [-28.232, -33.237, -30.422, 53.171817, 2.179915, -2.274951],
        [22.872, -75.829, -71.902, 106.972254, 2.307913, -1.277848],
        [-92.964, -67.125, 1.834, 114.679704, 1.554803, -2.516218],
        [7.327, -51.089, -48.228, 70.637885, 2.322316, -1.428351],
        [-31.358, 93.665, -62.046, 116.645456, 2.131662, 1.893856],
        [70.400, -62.563, -63.704, 113.703512, 2.165501, -0.726525],
    ],
    dtype=np.float64,
)


def reference_point_pairs() -> tuple[np.ndarray, np.ndarray]:
    """
    获取参考点数组。

    Returns:
        cartesian: (N, 3) 笛卡尔坐标 [x, y, z]
        spherical: (N, 3) 球坐标 [ρ, θ, φ]（未归一化）
    """
    return _RAW_DATA[:, :3].copy(), _RAW_DATA[:, 3:].copy()


def reference_points() -> list[tuple[CartesianPoint, SphericalPoint]]:
    """获取参考点对象列表，球坐标已归一化。"""
    cartesian, spherical = reference_point_pairs()
    return [
        (CartesianPoint.from_array(c), SphericalPoint.from_array(s))
        for c, s in zip(cartesian, spherical)
    ]


if __name__ == "__main__":
    print("=== 参考点 ===")
    for point, expected in reference_points():
        print(f"{point} -> {expected}  误差: {point.distance(expected.to_cartesian()):.2e}")
