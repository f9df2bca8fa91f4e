"""
Nimiq 支付校验 — 支付状态策略

每个策略独立可插拔，判定交易是否符合某一支付状态。
"""

from .base import PaymentStateStrategy, ThresholdStrategy
from .overpaid import OverpaidStrategy
from .paid import PaidStrategy
from .underpaid import UnderpaidStrategy

__all__ = [
    "OverpaidStrategy",
    "PaidStrategy",
    "PaymentStateStrategy",
    "ThresholdStrategy",
    "UnderpaidStrategy",
]
