"""
Nimiq 支付校验 — 支付状态计算器

按优先级依次求值策略，返回首个匹配结果；无匹配时返回 FAILED。
"""

from collections.abc import Iterable

from nimiq_payment.common.config import PaymentConfig
from nimiq_payment.common.enums import PaymentState
from nimiq_payment.common.models import PaymentResult, Transaction
from nimiq_payment.common.utils import Amount

from .strategies import (
    OverpaidStrategy,
    PaidStrategy,
    PaymentStateStrategy,
    UnderpaidStrategy,
)


class PaymentStateComputer:
    """
    支付状态计算器

    纯函数式：无 I/O、无副作用，相同输入总得到相同输出。
    策略顺序即优先级，构造后不可修改。
    """

    def __init__(self, strategies: Iterable[PaymentStateStrategy]):
        self._strategies: tuple[PaymentStateStrategy, ...] = tuple(strategies)

    @property
    def strategies(self) -> tuple[PaymentStateStrategy, ...]:
        """已配置的策略（按优先级）"""
        return self._strategies

    def determine_payment_state(
        self,
        expected_amount: Amount,
        transaction: Transaction,
    ) -> PaymentResult:
        """
        判定支付状态

        Args:
            expected_amount: 期望金额（NIM）
            transaction: 链上交易

        Returns:
            首个匹配策略的结果，无匹配时为 FAILED
        """
        for strategy in self._strategies:
            if strategy.matches(expected_amount, transaction):
                return PaymentResult(state=strategy.state, message=strategy.message)

        return PaymentResult(state=PaymentState.FAILED)


def default_strategies() -> list[PaymentStateStrategy]:
    """未配置策略时的默认顺序"""
    return [PaidStrategy()]


def build_strategies(config: PaymentConfig) -> list[PaymentStateStrategy]:
    """
    根据配置构建策略列表

    顺序：少付 → 多付 → 足额。容差策略仅在配置了阈值时加入。

    Args:
        config: 支付判定配置

    Returns:
        策略列表
    """
    strategies: list[PaymentStateStrategy] = []

    if config.underpaid_threshold is not None:
        strategies.append(
            UnderpaidStrategy(config.underpaid_threshold, config.min_confirmations)
        )

    if config.overpaid_threshold is not None:
        strategies.append(
            OverpaidStrategy(config.overpaid_threshold, config.min_confirmations)
        )

    strategies.append(PaidStrategy(config.min_confirmations))

    return strategies
