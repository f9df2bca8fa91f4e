"""
Nimiq 支付校验 — 少付策略

expected - threshold <= value < expected，且确认数达标。
"""

from decimal import localcontext

from nimiq_payment.common.constants import ResultMessages
from nimiq_payment.common.enums import PaymentState
from nimiq_payment.common.models import Transaction
from nimiq_payment.common.utils import EXACT_CONTEXT, Amount

from .base import ThresholdStrategy


class UnderpaidStrategy(ThresholdStrategy):
    """少付（容差内）"""

    @property
    def name(self) -> str:
        return "underpaid"

    @property
    def state(self) -> PaymentState:
        return PaymentState.UNDERPAID

    @property
    def message(self) -> str | None:
        return ResultMessages.UNDERPAID

    def matches(self, expected_amount: Amount, transaction: Transaction) -> bool:
        expected = self._expected_units(expected_amount)
        value = transaction.value_units

        with localcontext(EXACT_CONTEXT):
            lower = expected - self._threshold_units

        return lower <= value < expected and self._is_confirmed(transaction)
