"""
Nimiq 支付校验 — 工具函数

提供时间戳转换和金额换算。金额一律用 Decimal，不使用二进制浮点比较。
"""

from datetime import datetime, timezone
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)

from .constants import Currency

Amount = Decimal | int | float | str

# 精确运算上下文：只用于换算和加减，不做除法
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def from_unix_timestamp(ts: int) -> datetime:
    """
    将 Unix 秒级时间戳转换为 datetime

    Args:
        ts: Unix 时间戳（秒）

    Returns:
        带时区信息的 UTC datetime
    """
    return datetime.fromtimestamp(ts, tz=timezone.utc)


def to_decimal(amount: Amount) -> Decimal:
    """
    将金额归一化为 Decimal

    float 先经 str() 转换，5.1 得到 Decimal("5.1") 而不是其二进制近似值。

    Args:
        amount: 金额（Decimal / int / float / str）

    Returns:
        Decimal 金额

    Raises:
        ValueError: 金额无法解析或不是有限数
    """
    if isinstance(amount, bool):
        raise ValueError(f"无效金额: {amount!r}")

    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, float):
        value = Decimal(str(amount))
    else:
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation as e:
            raise ValueError(f"无效金额: {amount!r}") from e

    if not value.is_finite():
        raise ValueError(f"无效金额: {amount!r}")

    return value


def to_smallest_units(amount: Amount) -> Decimal:
    """
    将币值换算为最小单位

    只平移指数，不受默认 28 位精度影响。结果可能带小数
    （例如 0.000001 NIM），此时不可能与链上整数金额相等。
    """
    with localcontext(EXACT_CONTEXT):
        return to_decimal(amount).scaleb(Currency.NIM_DECIMALS)
