"""公共模块"""

from .config import (
    GatewayConfig,
    PaymentConfig,
    Settings,
    get_settings,
    load_settings,
    load_yaml_config,
)
from .constants import ApiDefaults, ConfirmationDefaults, Currency, ResultMessages
from .enums import Network, PaymentState
from .exceptions import (
    ConfigurationError,
    InvalidTransactionHashError,
    PaymentValidatorError,
)
from .logging import JSONFormatter, LoggerAdapter, get_logger, set_log_level
from .models import PaymentResult, Transaction
from .utils import EXACT_CONTEXT, from_unix_timestamp, to_decimal, to_smallest_units

__all__ = [
    # Config
    "GatewayConfig",
    "PaymentConfig",
    "Settings",
    "get_settings",
    "load_settings",
    "load_yaml_config",
    # Constants
    "ApiDefaults",
    "ConfirmationDefaults",
    "Currency",
    "ResultMessages",
    # Enums
    "Network",
    "PaymentState",
    # Exceptions
    "ConfigurationError",
    "InvalidTransactionHashError",
    "PaymentValidatorError",
    # Logging
    "JSONFormatter",
    "LoggerAdapter",
    "get_logger",
    "set_log_level",
    # Models
    "PaymentResult",
    "Transaction",
    # Utils
    "EXACT_CONTEXT",
    "from_unix_timestamp",
    "to_decimal",
    "to_smallest_units",
]
