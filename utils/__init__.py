"""
utils - 工具函数模块

包含:
- angles: 角度比较、归一化与解析
- parsing: 坐标字符串解析
- geometry: 批量坐标转换
"""

from .angles import AngleUnit, angle_equals, equals, normalize_angle, parse_angle
from .geometry import (
    batch_cartesian_to_cylindrical,
    batch_cartesian_to_spherical,
    batch_cylindrical_to_cartesian,
    batch_get_octant,
    batch_spherical_to_cartesian,
)

__all__ = [
    "AngleUnit",
    "angle_equals",
    "equals",
    "normalize_angle",
    "parse_angle",
    "batch_cartesian_to_cylindrical",
    "batch_cartesian_to_spherical",
    "batch_cylindrical_to_cartesian",
    "batch_get_octant",
    "batch_spherical_to_cartesian",
]
