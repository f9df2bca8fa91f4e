"""
Nimiq 支付校验 — 支付状态判定

可插拔、有序的策略求值器。
"""

from .computer import PaymentStateComputer, build_strategies, default_strategies
from .strategies import (
    OverpaidStrategy,
    PaidStrategy,
    PaymentStateStrategy,
    ThresholdStrategy,
    UnderpaidStrategy,
)

__all__ = [
    # Computer
    "PaymentStateComputer",
    "build_strategies",
    "default_strategies",
    # Strategies
    "OverpaidStrategy",
    "PaidStrategy",
    "PaymentStateStrategy",
    "ThresholdStrategy",
    "UnderpaidStrategy",
]
