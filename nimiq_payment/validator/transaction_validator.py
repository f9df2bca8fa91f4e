"""
Nimiq 支付校验 — 交易校验器

流程（遇到确定结果即返回）：
1. 校验哈希格式（仅十六进制），非法则抛 InvalidTransactionHashError
2. 网关查询，未找到返回 NOT_FOUND
3. 校验收款地址，不符返回 FAILED
4. 交给 PaymentStateComputer 判定

本层不重试；是否再次轮询（例如等待更多确认）由调用方决定。
"""

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Sequence

import httpx

from nimiq_payment.common.config import Settings
from nimiq_payment.common.constants import ResultMessages
from nimiq_payment.common.enums import PaymentState
from nimiq_payment.common.exceptions import InvalidTransactionHashError
from nimiq_payment.common.logging import LoggerAdapter, get_logger, set_log_level
from nimiq_payment.common.models import PaymentResult
from nimiq_payment.common.utils import Amount
from nimiq_payment.payment.computer import (
    PaymentStateComputer,
    build_strategies,
    default_strategies,
)
from nimiq_payment.payment.strategies import PaymentStateStrategy

from .gateway import ApiGateway, NimiqWatchApiGateway

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")


def is_valid_hash(transaction_hash: str) -> bool:
    """是否为非空十六进制字符串"""
    return isinstance(transaction_hash, str) and _HEX_PATTERN.fullmatch(transaction_hash) is not None


class TransactionValidatorBase(ABC):
    """交易校验器接口"""

    @abstractmethod
    def validate_transaction(
        self,
        transaction_hash: str,
        expected_amount: Amount,
    ) -> PaymentResult:
        """
        校验交易并返回支付结果

        Args:
            transaction_hash: 交易哈希
            expected_amount: 期望金额（NIM）

        Returns:
            支付结果
        """
        pass


class TransactionValidator(TransactionValidatorBase):
    """
    交易校验器

    持有一个网关引用和一个状态计算器，构造后不可变，可并发调用。
    """

    def __init__(
        self,
        api_gateway: ApiGateway,
        receiver_address: str,
        strategies: Sequence[PaymentStateStrategy] | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ):
        self._api_gateway = api_gateway
        self._receiver_address = receiver_address
        # 默认日志带上收款地址
        if logger is None:
            logger = LoggerAdapter(
                get_logger(__name__), {"receiver_address": receiver_address}
            )
        self._logger = logger

        # 未提供策略时使用默认策略
        if not strategies:
            strategies = default_strategies()

        self._computer = PaymentStateComputer(strategies)

    @property
    def receiver_address(self) -> str:
        return self._receiver_address

    @property
    def computer(self) -> PaymentStateComputer:
        return self._computer

    def validate_transaction(
        self,
        transaction_hash: str,
        expected_amount: Amount,
    ) -> PaymentResult:
        if not is_valid_hash(transaction_hash):
            self._logger.error(
                "Invalid transaction hash provided.",
                extra={"extra_data": {"transaction_hash": transaction_hash}},
            )
            raise InvalidTransactionHashError(
                ResultMessages.INVALID_HASH,
                {"transaction_hash": transaction_hash},
            )

        transaction = self._api_gateway.get_transaction_by_hash(transaction_hash)
        if transaction is None:
            self._logger.warning(
                "Transaction not found.",
                extra={"extra_data": {"transaction_hash": transaction_hash}},
            )
            return PaymentResult(
                state=PaymentState.NOT_FOUND,
                message=ResultMessages.NOT_FOUND,
            )

        if transaction.recipient_address != self._receiver_address:
            self._logger.warning(
                "Recipient address mismatch.",
                extra={
                    "extra_data": {
                        "transaction_hash": transaction_hash,
                        "expected_address": self._receiver_address,
                        "actual_address": transaction.recipient_address,
                    }
                },
            )
            return PaymentResult(
                state=PaymentState.FAILED,
                message=ResultMessages.RECIPIENT_MISMATCH,
            )

        return self._computer.determine_payment_state(expected_amount, transaction)


def create_validator(
    settings: Settings,
    http_client: httpx.Client | None = None,
) -> TransactionValidator:
    """
    根据配置组装校验器

    Args:
        settings: 系统配置
        http_client: 可选的 httpx 客户端（测试或共享连接池时注入）

    Returns:
        TransactionValidator 实例
    """
    gateway = NimiqWatchApiGateway(
        network=settings.gateway.network,
        api_domain=settings.gateway.api_domain,
        http_client=http_client,
        rate_limit=settings.gateway.rate_limit,
        timeout=settings.gateway.timeout,
    )

    validator = TransactionValidator(
        api_gateway=gateway,
        receiver_address=settings.payment.receiver_address,
        strategies=build_strategies(settings.payment),
    )

    # 校验器和网关的 logger 均已创建，统一调整级别
    set_log_level(settings.log_level)

    return validator
