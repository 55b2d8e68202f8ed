"""
core - 核心坐标类型

包含:
- cartesian: 笛卡尔坐标点
- cylindrical: 柱坐标点与扇区划分
- spherical: 球坐标点
- octant: 卦限划分
"""

from .cartesian import CartesianPoint
from .cylindrical import CylindricalPoint, calculate_section
from .spherical import SphericalPoint
from .octant import get_base_vector, get_octant, get_octant_from_point, get_octant_from_string

__all__ = [
    "CartesianPoint",
    "CylindricalPoint",
    "calculate_section",
    "SphericalPoint",
    "get_base_vector",
    "get_octant",
    "get_octant_from_point",
    "get_octant_from_string",
]
