"""Nimiq 支付校验"""

from .common import (
    InvalidTransactionHashError,
    PaymentResult,
    PaymentState,
    PaymentValidatorError,
    Transaction,
)
from .payment import (
    OverpaidStrategy,
    PaidStrategy,
    PaymentStateComputer,
    UnderpaidStrategy,
)
from .validator import (
    ApiGateway,
    NimiqWatchApiGateway,
    TransactionValidator,
    create_validator,
)

__version__ = "0.1.0"

__all__ = [
    "ApiGateway",
    "InvalidTransactionHashError",
    "NimiqWatchApiGateway",
    "OverpaidStrategy",
    "PaidStrategy",
    "PaymentResult",
    "PaymentState",
    "PaymentStateComputer",
    "PaymentValidatorError",
    "Transaction",
    "TransactionValidator",
    "UnderpaidStrategy",
    "create_validator",
]
