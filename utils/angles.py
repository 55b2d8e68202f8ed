"""
angles - 角度工具函数

提供带容差的浮点比较、角度归一化、角度字符串解析等基础操作，
所有坐标类型都依赖这些函数。角度一律以弧度存储。
"""

from enum import Enum

import numpy as np

from ..config import EPSILON
from .parsing import fail, parse_decimal

FULL_TURN = 2 * np.pi
DEGREE_SIGN = "°"


class AngleUnit(Enum):
    """角度输出单位"""

    RADIANS = "rad"
    DEGREES = "deg"

    def convert(self, angle: float) -> float:
        """将弧度值转换为本单位。"""
        if self is AngleUnit.DEGREES:
            return radians_to_degrees(angle)
        return angle


def equals(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """
    带容差的浮点数相等判定: |a - b| < epsilon。

    Args:
        a, b: 待比较的数
        epsilon: 容差

    Returns:
        两数之差小于容差时为 True
    """
    return abs(a - b) < epsilon


def normalize_angle(angle: float, start: float = 0.0) -> float:
    """
    将角度归一化到半开区间 [start, start + 2π)。

    使用取模运算，耗时与输入大小无关。

    Args:
        angle: 角度 (rad)
        start: 区间下界 (rad)

    Returns:
        与 angle 模 2π 同余且位于 [start, start + 2π) 的值
    """
    result = start + float(np.mod(angle - start, FULL_TURN))
    # 极小的负数取模后可能舍入为 2π，落在区间上界上
    if result >= start + FULL_TURN:
        result -= FULL_TURN
    return result


def angle_equals(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """
    判断两个角度是否相等（模 2π）。

    两个角度先归一化到 [0, 2π) 再比较；跨越 0/2π 接缝的两个值
    （如 2π - 1e-9 与 0）同样视为相等。
    """
    delta = abs(normalize_angle(a) - normalize_angle(b))
    return delta < epsilon or equals(delta, FULL_TURN, epsilon)


def degrees_to_radians(angle: float) -> float:
    return float(np.radians(angle))


def radians_to_degrees(angle: float) -> float:
    return float(np.degrees(angle))


def parse_angle(text: str) -> float:
    """
    解析角度字符串。

    纯数字按弧度解析；包含 ``°`` 符号时按角度解析并转换为弧度。
    字符串中的所有空白都会被忽略，例如 ``"90 °"`` 解析为 π/2，
    ``"3"`` 解析为 3 弧度。

    Args:
        text: 角度字符串

    Returns:
        角度 (rad)

    Raises:
        ParseError: 去除单位后不是合法的十进制数
    """
    value = "".join(text.split())

    in_degrees = DEGREE_SIGN in value
    if in_degrees:
        value = value.replace(DEGREE_SIGN, "")

    if not value:
        raise fail("Can't parse string as an angle", text)
    angle = parse_decimal(value)

    if in_degrees:
        return degrees_to_radians(angle)
    return angle


if __name__ == "__main__":
    print("=== 角度归一化测试 ===")
    for raw in [0.0, np.pi, 2 * np.pi, np.radians(450), -1e-6, 1e9]:
        print(f"{raw:>16.6f} -> {normalize_angle(raw):.6f}")

    print("\n=== 角度解析测试 ===")
    for text in ["0", "3.1415926535898", " 90 °", "-90°"]:
        print(f"{text!r:>20} -> {parse_angle(text):.6f} rad")
