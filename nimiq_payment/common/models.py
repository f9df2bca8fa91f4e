"""
Nimiq 支付校验 — 数据模型

使用 Pydantic v2，所有模型不可变（frozen=True）。
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .constants import Currency
from .enums import PaymentState
from .utils import from_unix_timestamp


class Transaction(BaseModel):
    """
    链上交易快照

    由网关根据区块浏览器响应构造，构造后不可变。
    value 以最小单位的整数字符串保存，币值按需计算，不落地。
    """
    model_config = {"frozen": True}

    hash: str
    sender_address: str
    recipient_address: str
    value: str = Field(description="金额（最小单位，整数字符串）")
    message: str = ""
    height: int = Field(ge=0, description="区块高度")
    timestamp: int = Field(description="Unix 时间戳（秒）")
    confirmations: int = Field(default=0, ge=0, description="确认数")
    extra: dict[str, Any] | None = None

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> str:
        if isinstance(v, bool):
            raise ValueError("value must be an integer amount in smallest units")
        if isinstance(v, int):
            v = str(v)
        if not isinstance(v, str) or not (v.isascii() and v.isdigit()):
            raise ValueError("value must be an integer amount in smallest units")
        return v

    @field_validator("message", mode="before")
    @classmethod
    def validate_message(cls, v: Any) -> str:
        return "" if v is None else v

    @property
    def value_units(self) -> int:
        """金额（最小单位）"""
        return int(self.value)

    @property
    def value_with_digits(self) -> Decimal:
        """金额（NIM），value / 10^5"""
        return Decimal(self.value) / Currency.UNITS_PER_COIN

    @property
    def occurred_at(self) -> datetime:
        """交易时间（UTC）"""
        return from_unix_timestamp(self.timestamp)


class PaymentResult(BaseModel):
    """支付状态判定结果"""
    model_config = {"frozen": True}

    state: PaymentState
    message: str | None = None
