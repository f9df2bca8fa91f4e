"""
Nimiq 支付校验 — 足额支付策略

金额与期望完全一致，且确认数达标。
"""

from nimiq_payment.common.enums import PaymentState
from nimiq_payment.common.models import Transaction
from nimiq_payment.common.utils import Amount

from .base import PaymentStateStrategy


class PaidStrategy(PaymentStateStrategy):
    """足额支付"""

    @property
    def name(self) -> str:
        return "paid"

    @property
    def state(self) -> PaymentState:
        return PaymentState.PAID

    def matches(self, expected_amount: Amount, transaction: Transaction) -> bool:
        # 期望金额换算后带小数时不可能等于链上整数金额
        return (
            transaction.value_units == self._expected_units(expected_amount)
            and self._is_confirmed(transaction)
        )
