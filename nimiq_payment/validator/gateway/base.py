"""
Nimiq 支付校验 — 区块浏览器网关基类

定义按哈希查询交易的接口。
"""

from abc import ABC, abstractmethod

from nimiq_payment.common.models import Transaction


class ApiGateway(ABC):
    """
    区块浏览器网关抽象基类

    实现方必须吸收所有网络和解析错误，以 None 表示“未找到”，
    不得向调用方抛出异常。
    """

    @abstractmethod
    def get_transaction_by_hash(self, transaction_hash: str) -> Transaction | None:
        """
        按哈希查询交易

        Args:
            transaction_hash: 交易哈希（十六进制）

        Returns:
            交易，未找到或出错时为 None
        """
        pass
