"""
config - 全局容差配置

所有带容差的比较都以 ``EPSILON`` 为默认值，调用时可通过 ``epsilon`` 参数覆盖。
"""

EPSILON = 1e-6  # 浮点数相等判定
