"""
Nimiq 支付校验 — NimiqWatch 网关

通过 NimiqWatch REST API 查询交易。
"""

import threading
import time
from typing import Any

import httpx

from nimiq_payment.common.constants import ApiDefaults
from nimiq_payment.common.enums import Network
from nimiq_payment.common.exceptions import ConfigurationError
from nimiq_payment.common.logging import get_logger
from nimiq_payment.common.models import Transaction

from .base import ApiGateway

logger = get_logger(__name__)


class NimiqWatchApiGateway(ApiGateway):
    """
    NimiqWatch 客户端

    - GET {api_domain}/transaction/{hash}
    - 非 200、空响应、JSON 无效、字段缺失、网络异常一律视为未找到
    - 同一实例的相邻请求至少间隔 rate_limit 毫秒
    """

    def __init__(
        self,
        network: Network | str = Network.MAIN,
        api_domain: str | None = None,
        http_client: httpx.Client | None = None,
        rate_limit: int = ApiDefaults.RATE_LIMIT_MS,
        timeout: float = ApiDefaults.TIMEOUT,
    ):
        try:
            self.network = Network(network)
        except ValueError as e:
            raise ConfigurationError(
                f"未知网络: {network}", {"network": network}
            ) from e

        if rate_limit < 0:
            raise ConfigurationError(
                "rate_limit must be >= 0", {"rate_limit": rate_limit}
            )

        self.api_domain = api_domain or ApiDefaults.DOMAINS[self.network]
        self.rate_limit = rate_limit
        self.timeout = timeout

        # 仅关闭自己创建的客户端
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client()

        self._lock = threading.Lock()
        self._last_request_at: float | None = None

    # ========================================
    # 连接管理
    # ========================================

    def close(self) -> None:
        """释放 HTTP 客户端"""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "NimiqWatchApiGateway":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ========================================
    # 查询
    # ========================================

    def build_url(self, transaction_hash: str) -> str:
        """拼接交易查询 URL"""
        return f"{self.api_domain.rstrip('/')}/transaction/{transaction_hash}"

    def get_transaction_by_hash(self, transaction_hash: str) -> Transaction | None:
        url = self.build_url(transaction_hash)

        self._wait_for_rate_limit()

        try:
            response = self._client.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.warning(
                f"NimiqWatch 请求失败: {e}",
                extra={"extra_data": {"transaction_hash": transaction_hash, "url": url}},
            )
            return None

        if response.status_code != 200:
            logger.warning(
                f"NimiqWatch 返回状态码 {response.status_code}",
                extra={"extra_data": {"transaction_hash": transaction_hash}},
            )
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning(
                "NimiqWatch 响应不是有效 JSON",
                extra={"extra_data": {"transaction_hash": transaction_hash}},
            )
            return None

        if not data or not isinstance(data, dict):
            return None

        try:
            return self._parse_transaction(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                f"NimiqWatch 交易数据无效: {e}",
                extra={"extra_data": {"transaction_hash": transaction_hash}},
            )
            return None

    def _parse_transaction(self, data: dict[str, Any]) -> Transaction:
        """解析交易数据"""
        confirmations = data.get("confirmations")
        if confirmations is None:
            logger.warning(
                "NimiqWatch 响应缺少 confirmations 字段，按 0 处理",
                extra={"extra_data": {"transaction_hash": data.get("hash")}},
            )
            confirmations = 0

        return Transaction(
            hash=data["hash"],
            sender_address=data["sender_address"],
            recipient_address=data["receiver_address"],
            value=data["value"],
            message=data.get("message") or "",
            height=data["block_height"],
            timestamp=data["timestamp"],
            confirmations=confirmations,
            extra=data.get("extra"),
        )

    def _wait_for_rate_limit(self) -> None:
        """限速：距上次请求不足 rate_limit 毫秒则等待"""
        if self.rate_limit <= 0:
            return

        with self._lock:
            if self._last_request_at is not None:
                elapsed = time.monotonic() - self._last_request_at
                remaining = self.rate_limit / 1000 - elapsed
                if remaining > 0:
                    logger.debug(f"限速等待 {remaining:.3f}s")
                    time.sleep(remaining)
            self._last_request_at = time.monotonic()
