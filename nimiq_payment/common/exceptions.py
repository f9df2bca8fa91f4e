"""
Nimiq 支付校验 — 自定义异常

异常层级：
- PaymentValidatorError: 基础异常
  - InvalidTransactionHashError: 调用方传入了非法交易哈希
  - ConfigurationError: 配置错误

注意：未找到交易、收款地址不符、金额不符都属于业务结果，
以 PaymentResult 返回，不抛异常。
"""

from typing import Any


class PaymentValidatorError(Exception):
    """支付校验基础异常"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidTransactionHashError(PaymentValidatorError):
    """
    非法交易哈希

    触发场景：
    - 哈希为空
    - 哈希包含非十六进制字符
    """
    pass


class ConfigurationError(PaymentValidatorError):
    """配置错误（未知网络、非法阈值等）"""
    pass
