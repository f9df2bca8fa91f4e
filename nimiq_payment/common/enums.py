"""
Nimiq 支付校验 — 枚举定义

枚举值为对外稳定的字符串常量，不可随意修改。
"""

from enum import Enum


class PaymentState(str, Enum):
    """支付状态"""
    PAID = "PAID"            # 金额一致且确认数达标
    OVERPAID = "OVERPAID"    # 多付，在阈值内
    UNDERPAID = "UNDERPAID"  # 少付，在阈值内
    FAILED = "FAILED"        # 无规则匹配 / 收款地址不符
    NOT_FOUND = "NOT_FOUND"  # 链上未找到交易


class Network(str, Enum):
    """Nimiq 网络"""
    MAIN = "main"
    TEST = "test"
