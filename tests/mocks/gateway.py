"""Mock 区块浏览器网关"""

from nimiq_payment.common.models import Transaction
from nimiq_payment.validator.gateway.base import ApiGateway


class InMemoryGateway(ApiGateway):
    """内存网关，用于测试，记录每次查询的哈希"""

    def __init__(self, transactions: list[Transaction] | None = None):
        self._transactions = {tx.hash: tx for tx in transactions or []}
        self.calls: list[str] = []

    def add(self, transaction: Transaction) -> None:
        self._transactions[transaction.hash] = transaction

    def get_transaction_by_hash(self, transaction_hash: str) -> Transaction | None:
        self.calls.append(transaction_hash)
        return self._transactions.get(transaction_hash)
