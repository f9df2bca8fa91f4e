"""工具函数测试"""

from datetime import timezone
from decimal import Decimal

import pytest

from nimiq_payment.common.utils import (
    from_unix_timestamp,
    to_decimal,
    to_smallest_units,
)


class TestTime:
    """时间工具测试"""

    def test_from_unix_timestamp(self):
        dt = from_unix_timestamp(0)
        assert dt.year == 1970
        assert dt.tzinfo == timezone.utc


class TestAmounts:
    """金额换算测试"""

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (5, Decimal("5")),
            (5.1, Decimal("5.1")),
            ("5.10", Decimal("5.10")),
            (Decimal("0.00001"), Decimal("0.00001")),
        ],
    )
    def test_to_decimal(self, amount, expected):
        """验证金额归一化"""
        assert to_decimal(amount) == expected

    def test_float_has_no_binary_artifacts(self):
        """验证 float 按十进制字面值换算"""
        assert to_smallest_units(0.1) + to_smallest_units(0.2) == to_smallest_units("0.3")

    @pytest.mark.parametrize("amount", ["abc", "", float("nan"), float("inf"), True])
    def test_invalid_amount(self, amount):
        """验证非法金额"""
        with pytest.raises(ValueError):
            to_decimal(amount)

    def test_to_smallest_units(self):
        """验证最小单位换算"""
        assert to_smallest_units("5") == 500000
        assert to_smallest_units("0.000001") == Decimal("0.1")

    def test_to_smallest_units_beyond_default_precision(self):
        """超过 28 位有效数字时换算仍然精确"""
        amount = "1" + "0" * 30 + ".00001"

        units = to_smallest_units(amount)

        assert units == 10**35 + 1
        assert units != 10**35

    def test_to_smallest_units_keeps_tiny_fraction(self):
        """小数位很多时不被舍入成整数"""
        assert to_smallest_units("5.000000000000000000000000000000001") != 500000
