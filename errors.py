"""
errors - 异常类型
"""


class GeoCoordsError(Exception):
    """geo_coords 所有异常的基类"""


class ParseError(GeoCoordsError, ValueError):
    """
    坐标或角度字符串无法解析。

    Attributes:
        expression: 解析失败的原始字符串
    """

    def __init__(self, message: str, expression: str | None = None):
        super().__init__(message)
        self.expression = expression


class InvalidArgumentError(GeoCoordsError, ValueError):
    """参数超出允许范围（卦限编号、扇区数量、数组形状等）"""
