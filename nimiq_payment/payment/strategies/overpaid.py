"""
Nimiq 支付校验 — 多付策略

expected < value <= expected + threshold，且确认数达标。
"""

from decimal import localcontext

from nimiq_payment.common.constants import ResultMessages
from nimiq_payment.common.enums import PaymentState
from nimiq_payment.common.models import Transaction
from nimiq_payment.common.utils import EXACT_CONTEXT, Amount

from .base import ThresholdStrategy


class OverpaidStrategy(ThresholdStrategy):
    """多付（容差内）"""

    @property
    def name(self) -> str:
        return "overpaid"

    @property
    def state(self) -> PaymentState:
        return PaymentState.OVERPAID

    @property
    def message(self) -> str | None:
        return ResultMessages.OVERPAID

    def matches(self, expected_amount: Amount, transaction: Transaction) -> bool:
        expected = self._expected_units(expected_amount)
        value = transaction.value_units

        with localcontext(EXACT_CONTEXT):
            upper = expected + self._threshold_units

        return expected < value <= upper and self._is_confirmed(transaction)
