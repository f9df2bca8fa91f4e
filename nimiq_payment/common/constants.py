"""
Nimiq 支付校验 — 常量

链上金额以最小单位（Luna）计，1 NIM = 10^5 Luna。
"""

from .enums import Network


class Currency:
    """币种精度"""

    # NIM 小数位数
    NIM_DECIMALS: int = 5

    # 1 NIM 对应的最小单位数量
    UNITS_PER_COIN: int = 10 ** NIM_DECIMALS


class ConfirmationDefaults:
    """确认数默认值"""

    # 约两小时出块
    DEFAULT_MIN_CONFIRMATIONS: int = 120


class ApiDefaults:
    """区块浏览器 API 默认值"""

    DOMAINS: dict[Network, str] = {
        Network.MAIN: "https://v2.nimiqwatch.com/api/v1/",
        Network.TEST: "https://v2.test.nimiqwatch.com/api/v1/",
    }

    # 请求超时（秒）
    TIMEOUT: float = 5.0

    # 相邻请求最小间隔（毫秒）
    RATE_LIMIT_MS: int = 1000


class ResultMessages:
    """PaymentResult 固定消息"""

    OVERPAID = "Payment amount exceeds the required amount."
    UNDERPAID = "Payment amount is less than the required amount."
    NOT_FOUND = "Transaction not found."
    RECIPIENT_MISMATCH = "Transaction recipient address does not match."
    INVALID_HASH = "Invalid hash (expected hexadecimal)."
