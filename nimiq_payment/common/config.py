"""
Nimiq 支付校验 — 配置加载

支持 YAML 配置文件和环境变量替换。
"""

import os
import re
from decimal import Decimal
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from .constants import ApiDefaults, ConfirmationDefaults
from .enums import Network
from .logging import get_logger

logger = get_logger(__name__)


class GatewayConfig(BaseModel):
    """区块浏览器网关配置"""

    network: Network = Field(default=Network.MAIN)
    api_domain: str | None = Field(default=None, description="自定义 API 域名")
    timeout: float = Field(default=ApiDefaults.TIMEOUT, gt=0)
    rate_limit: int = Field(default=ApiDefaults.RATE_LIMIT_MS, ge=0, description="请求间隔（毫秒）")


class PaymentConfig(BaseModel):
    """支付判定配置"""

    receiver_address: str = Field(default="")
    underpaid_threshold: Decimal | None = Field(default=None, ge=0)
    overpaid_threshold: Decimal | None = Field(default=None, ge=0)
    min_confirmations: int = Field(
        default=ConfirmationDefaults.DEFAULT_MIN_CONFIRMATIONS, ge=0
    )


class Settings(BaseModel):
    """系统配置"""

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    gateway: GatewayConfig = Field(default_factory=GatewayConfig)
    payment: PaymentConfig = Field(default_factory=PaymentConfig)


def _substitute_env_vars(value: Any) -> Any:
    """替换环境变量占位符 ${VAR_NAME}"""
    if isinstance(value, str):
        pattern = r"\$\{([^}]+)\}"

        def replacer(match: re.Match[str]) -> str:
            var_name = match.group(1)
            return os.environ.get(var_name, match.group(0))

        return re.sub(pattern, replacer, value)

    if isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}

    if isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]

    return value


def load_yaml_config(path: str | Path) -> dict[str, Any]:
    """
    加载 YAML 配置文件

    Args:
        path: 配置文件路径

    Returns:
        配置字典
    """
    path = Path(path)

    if not path.exists():
        logger.warning(f"配置文件不存在: {path}")
        return {}

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return _substitute_env_vars(data)


def load_settings(config_path: str | Path | None = None) -> Settings:
    """
    加载系统配置

    优先级：config.yaml > 默认值。YAML 中可用 ${VAR} 引用环境变量。

    Args:
        config_path: 配置文件路径，或包含 config.yaml 的目录

    Returns:
        Settings 实例
    """
    config_data: dict[str, Any] = {}

    if config_path:
        config_path = Path(config_path)
        if config_path.is_dir():
            config_path = config_path / "config.yaml"
        config_data.update(load_yaml_config(config_path))

    return Settings(**config_data)


# 全局配置实例（延迟初始化）
_settings: Settings | None = None


def get_settings() -> Settings:
    """获取全局配置实例，路径取自 NIMIQ_PAYMENT_CONFIG"""
    global _settings
    if _settings is None:
        _settings = load_settings(os.environ.get("NIMIQ_PAYMENT_CONFIG"))
    return _settings
