"""
geometry - 批量坐标转换

对 (N, 3) 数组做向量化转换，约定与单点类型的规范形式一致:
φ ∈ [0, 2π)，原点行的角度为 0，两极处 φ = 0。
"""

import numpy as np

from ..config import EPSILON
from ..errors import InvalidArgumentError
from .angles import FULL_TURN


def _as_triplets(points: np.ndarray) -> np.ndarray:
    """检查并转换为 (N, 3) float64 数组。"""
    array = np.asarray(points, dtype=np.float64)
    if array.ndim != 2 or array.shape[1] != 3:
        raise InvalidArgumentError(f"Expected an (N, 3) array, got shape {array.shape}")
    return array


def _wrap_azimuth(phi: np.ndarray) -> np.ndarray:
    """方位角归一化到 [0, 2π)。"""
    phi = np.mod(phi, FULL_TURN)
    return np.where(phi >= FULL_TURN, phi - FULL_TURN, phi)


def batch_cartesian_to_cylindrical(points: np.ndarray) -> np.ndarray:
    """
    批量将笛卡尔坐标转换为柱坐标。

    Args:
        points: (N, 3) 数组 [x, y, z]

    Returns:
        (N, 3) 数组 [ρ, φ, z]
    """
    p = _as_triplets(points)
    rho = np.hypot(p[:, 0], p[:, 1])
    phi = _wrap_azimuth(np.arctan2(p[:, 1], p[:, 0]))
    phi[rho == 0] = 0.0
    return np.column_stack([rho, phi, p[:, 2]])


def batch_cylindrical_to_cartesian(points: np.ndarray) -> np.ndarray:
    """
    批量将柱坐标转换为笛卡尔坐标。

    Args:
        points: (N, 3) 数组 [ρ, φ, z]

    Returns:
        (N, 3) 数组 [x, y, z]
    """
    p = _as_triplets(points)
    rho, phi = p[:, 0], p[:, 1]
    return np.column_stack([rho * np.cos(phi), rho * np.sin(phi), p[:, 2]])


def batch_cartesian_to_spherical(points: np.ndarray) -> np.ndarray:
    """
    批量将笛卡尔坐标转换为球坐标。

    Args:
        points: (N, 3) 数组 [x, y, z]

    Returns:
        (N, 3) 数组 [ρ, θ, φ]
    """
    p = _as_triplets(points)
    rho = np.linalg.norm(p, axis=1)
    origin = rho == 0

    cos_theta = np.divide(p[:, 2], rho, out=np.ones_like(rho), where=~origin)
    theta = np.arccos(np.clip(cos_theta, -1.0, 1.0))
    phi = _wrap_azimuth(np.arctan2(p[:, 1], p[:, 0]))

    north = np.abs(theta) < EPSILON
    south = np.abs(theta - np.pi) < EPSILON
    theta[north | origin] = 0.0
    theta[south & ~origin] = np.pi
    phi[north | south | origin] = 0.0

    return np.column_stack([rho, theta, phi])


def batch_spherical_to_cartesian(points: np.ndarray) -> np.ndarray:
    """
    批量将球坐标转换为笛卡尔坐标。

    Args:
        points: (N, 3) 数组 [ρ, θ, φ]

    Returns:
        (N, 3) 数组 [x, y, z]
    """
    p = _as_triplets(points)
    rho, theta, phi = p[:, 0], p[:, 1], p[:, 2]
    sin_theta = np.sin(theta)
    return np.column_stack([
        rho * sin_theta * np.cos(phi),
        rho * sin_theta * np.sin(phi),
        rho * np.cos(theta),
    ])


def batch_get_octant(points: np.ndarray) -> np.ndarray:
    """
    批量计算卦限编号。

    Args:
        points: (N, 3) 数组 [x, y, z]

    Returns:
        (N,) int 数组，原点为 0，其余为 1-8
    """
    p = _as_triplets(points)
    x, y, z = p[:, 0], p[:, 1], p[:, 2]
    octants = 1 + (x >= 0).astype(int) + 2 * (y < 0) + 4 * (z >= 0)
    octants[(x == 0) & (y == 0) & (z == 0)] = 0
    return octants


if __name__ == "__main__":
    rng = np.random.default_rng(0)
    cartesian = rng.uniform(-100, 100, size=(5, 3))

    spherical = batch_cartesian_to_spherical(cartesian)
    back = batch_spherical_to_cartesian(spherical)
    print("=== 批量球坐标往返 ===")
    print(f"最大误差: {np.abs(back - cartesian).max():.2e}")
    print(f"卦限: {batch_get_octant(cartesian)}")
