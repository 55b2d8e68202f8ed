"""
parsing - 坐标字符串解析工具

支持两种三元组格式:
    - ``<prefix>: [a, b, c]``，例如 ``xyz: [1, 2, 3]``
    - ``(a, b, c)``
"""

import logging
import re

from ..errors import ParseError

logger = logging.getLogger(__name__)

# 十进制数: 可选符号、整数或小数部分、可选指数。不接受 nan / inf / 下划线分隔
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def fail(message: str, expression: str) -> ParseError:
    """记录调试日志并构造 ParseError，由调用方 raise。"""
    logger.debug("%s: %r", message, expression)
    return ParseError(f"{message}: {expression!r}", expression)


def parse_decimal(text: str) -> float:
    """
    解析十进制数字符串，忽略首尾空白。

    Args:
        text: 待解析字符串

    Returns:
        解析得到的浮点数

    Raises:
        ParseError: 字符串为空或不是合法的十进制数
    """
    value = text.strip()
    if not _DECIMAL_RE.fullmatch(value):
        raise fail("Not a decimal number", text)
    return float(value)


def split_triplet(expression: str, prefix: str) -> tuple[str, str, str]:
    """
    拆分坐标三元组字符串，返回三个未解析的字段。

    Args:
        expression: 原始字符串，如 ``"xyz: [1, 2, 3]"`` 或 ``"(1, 2, 3)"``
        prefix: 方括号格式的前缀，如 ``"xyz:"``

    Returns:
        三个去除首尾空白的字段

    Raises:
        ParseError: 缺少前缀/括号，或字段数量不是 3
    """
    text = expression.strip()

    if text.startswith(prefix):
        body = text[len(prefix):].strip()
        if not (body.startswith("[") and body.endswith("]")):
            raise fail(f"Expected '[...]' after '{prefix}'", expression)
        body = body[1:-1]
    elif text.startswith("(") and text.endswith(")"):
        body = text[1:-1]
    else:
        raise fail("Not a valid coordinates expression", expression)

    fields = body.split(",")
    if len(fields) != 3:
        raise fail(f"Expected 3 comma-separated fields, got {len(fields)}", expression)

    a, b, c = (field.strip() for field in fields)
    return a, b, c


def as_coordinate(value) -> float:
    """
    将数值坐标转换为 float。

    字符串必须通过各坐标类型的 ``from_string`` 解析，这里直接拒绝。

    Raises:
        TypeError: value 是 str 或 bytes
    """
    if isinstance(value, (str, bytes)):
        raise TypeError(
            f"Expected a number, got {type(value).__name__} {value!r}; use from_string() to parse text"
        )
    return float(value)
