"""
Nimiq 支付校验 — 支付状态策略基类

定义策略接口。策略按调用方给定的顺序求值，首个匹配者胜出。
所有金额比较都在最小单位上用 Decimal 精确进行。
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from nimiq_payment.common.constants import ConfirmationDefaults
from nimiq_payment.common.enums import PaymentState
from nimiq_payment.common.exceptions import ConfigurationError
from nimiq_payment.common.models import Transaction
from nimiq_payment.common.utils import Amount, to_decimal, to_smallest_units


class PaymentStateStrategy(ABC):
    """
    支付状态策略基类

    所有支付状态策略必须继承此类。配置在构造时绑定，之后不可变。
    """

    def __init__(
        self,
        min_confirmations: int = ConfirmationDefaults.DEFAULT_MIN_CONFIRMATIONS,
    ):
        if min_confirmations < 0:
            raise ConfigurationError(
                "min_confirmations must be >= 0",
                {"min_confirmations": min_confirmations},
            )
        self._min_confirmations = min_confirmations

    @property
    @abstractmethod
    def name(self) -> str:
        """策略名称"""
        pass

    @property
    @abstractmethod
    def state(self) -> PaymentState:
        """匹配时对应的支付状态"""
        pass

    @property
    def message(self) -> str | None:
        """匹配时附带的说明"""
        return None

    @property
    def min_confirmations(self) -> int:
        return self._min_confirmations

    @abstractmethod
    def matches(self, expected_amount: Amount, transaction: Transaction) -> bool:
        """
        判断交易是否符合本策略

        Args:
            expected_amount: 期望金额（NIM）
            transaction: 链上交易

        Returns:
            是否匹配
        """
        pass

    def _is_confirmed(self, transaction: Transaction) -> bool:
        """确认数是否达标"""
        return transaction.confirmations >= self._min_confirmations

    @staticmethod
    def _expected_units(expected_amount: Amount) -> Decimal:
        """期望金额换算为最小单位"""
        return to_smallest_units(expected_amount)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min_confirmations={self._min_confirmations})"


class ThresholdStrategy(PaymentStateStrategy):
    """
    带金额容差的策略基类

    threshold 与期望金额同单位（NIM），边界值包含在内。
    """

    def __init__(
        self,
        threshold: Amount,
        min_confirmations: int = ConfirmationDefaults.DEFAULT_MIN_CONFIRMATIONS,
    ):
        super().__init__(min_confirmations)
        try:
            threshold_value = to_decimal(threshold)
        except ValueError as e:
            raise ConfigurationError(
                f"invalid threshold: {threshold!r}", {"threshold": threshold}
            ) from e
        if threshold_value < 0:
            raise ConfigurationError(
                "threshold must be >= 0", {"threshold": str(threshold_value)}
            )
        self._threshold = threshold_value
        self._threshold_units = to_smallest_units(threshold_value)

    @property
    def threshold(self) -> Decimal:
        return self._threshold

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(threshold={self._threshold}, "
            f"min_confirmations={self._min_confirmations})"
        )
