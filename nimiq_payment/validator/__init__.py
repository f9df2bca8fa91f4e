"""
Nimiq 支付校验 — 交易校验

查询交易、校验哈希与收款地址，并委托状态计算器判定。
"""

from .gateway import ApiGateway, NimiqWatchApiGateway
from .transaction_validator import (
    TransactionValidator,
    TransactionValidatorBase,
    create_validator,
    is_valid_hash,
)

__all__ = [
    # Gateway
    "ApiGateway",
    "NimiqWatchApiGateway",
    # Validator
    "TransactionValidator",
    "TransactionValidatorBase",
    "create_validator",
    "is_valid_hash",
]
