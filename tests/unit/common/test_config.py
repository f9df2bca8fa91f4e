"""配置加载测试"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from nimiq_payment.common.config import (
    GatewayConfig,
    PaymentConfig,
    Settings,
    load_settings,
    load_yaml_config,
)
from nimiq_payment.common.enums import Network


CONFIG_YAML = """
env: test
log_level: DEBUG
gateway:
  network: test
  api_domain: https://custom.test.api/
  rate_limit: 0
payment:
  receiver_address: ${TEST_RECEIVER}
  underpaid_threshold: "0.5"
  overpaid_threshold: "1.25"
  min_confirmations: 10
"""


class TestDefaults:
    """默认配置测试"""

    def test_settings_defaults(self):
        """验证默认值"""
        settings = Settings()
        assert settings.gateway.network == Network.MAIN
        assert settings.gateway.api_domain is None
        assert settings.gateway.timeout == 5.0
        assert settings.gateway.rate_limit == 1000
        assert settings.payment.min_confirmations == 120
        assert settings.payment.underpaid_threshold is None
        assert settings.payment.overpaid_threshold is None

    def test_negative_threshold_rejected(self):
        """验证阈值不可为负"""
        with pytest.raises(ValidationError):
            PaymentConfig(overpaid_threshold=Decimal("-0.1"))

    def test_unknown_network_rejected(self):
        """验证未知网络"""
        with pytest.raises(ValidationError):
            GatewayConfig(network="devnet")


class TestLoadSettings:
    """YAML 配置加载测试"""

    def test_missing_file(self, tmp_path):
        """验证配置文件不存在时返回空字典"""
        assert load_yaml_config(tmp_path / "missing.yaml") == {}

    def test_load_file_with_env(self, tmp_path, monkeypatch):
        """验证文件加载与环境变量替换"""
        monkeypatch.setenv("TEST_RECEIVER", "NQ01 RECEIVER")
        path = tmp_path / "config.yaml"
        path.write_text(CONFIG_YAML, encoding="utf-8")

        settings = load_settings(path)

        assert settings.env == "test"
        assert settings.gateway.network == Network.TEST
        assert settings.gateway.api_domain == "https://custom.test.api/"
        assert settings.gateway.rate_limit == 0
        assert settings.payment.receiver_address == "NQ01 RECEIVER"
        assert settings.payment.underpaid_threshold == Decimal("0.5")
        assert settings.payment.overpaid_threshold == Decimal("1.25")
        assert settings.payment.min_confirmations == 10

    def test_load_directory(self, tmp_path, monkeypatch):
        """验证传入目录时读取 config.yaml"""
        monkeypatch.setenv("TEST_RECEIVER", "NQ01 RECEIVER")
        (tmp_path / "config.yaml").write_text(CONFIG_YAML, encoding="utf-8")

        assert load_settings(tmp_path).env == "test"

    def test_unset_env_var_kept(self, tmp_path, monkeypatch):
        """验证未设置的环境变量保留占位符"""
        monkeypatch.delenv("TEST_RECEIVER", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(CONFIG_YAML, encoding="utf-8")

        assert load_settings(path).payment.receiver_address == "${TEST_RECEIVER}"

    def test_no_path(self):
        """验证不传路径时使用默认值"""
        assert load_settings() == Settings()
