"""
geo_coords - 三维坐标系工具库

在笛卡尔、柱坐标 (ρ, φ, z) 和球坐标 (ρ, θ, φ) 三种坐标系之间转换，
计算距离，并按卦限或圆周扇区对空间点分类。

柱坐标和球坐标在构造时归一化为唯一的规范形式，
保证相等判定、距离计算和往返转换结果一致。
"""

from .config import EPSILON
from .core import (
    CartesianPoint,
    CylindricalPoint,
    SphericalPoint,
    calculate_section,
    get_base_vector,
    get_octant,
    get_octant_from_point,
    get_octant_from_string,
)
from .errors import GeoCoordsError, InvalidArgumentError, ParseError
from .utils.angles import AngleUnit, angle_equals, equals, normalize_angle, parse_angle

__version__ = "0.1.0"
__all__ = [
    "EPSILON",
    "CartesianPoint",
    "CylindricalPoint",
    "SphericalPoint",
    "calculate_section",
    "get_base_vector",
    "get_octant",
    "get_octant_from_point",
    "get_octant_from_string",
    "GeoCoordsError",
    "InvalidArgumentError",
    "ParseError",
    "AngleUnit",
    "angle_equals",
    "equals",
    "normalize_angle",
    "parse_angle",
]
