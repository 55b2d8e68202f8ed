"""
datasets - 测试数据集

包含:
- reference_points: 笛卡尔/球坐标参考点对
"""

from .reference_points import reference_point_pairs, reference_points

__all__ = [
    "reference_point_pairs",
    "reference_points",
]
