"""区块浏览器网关"""

from .base import ApiGateway
from .nimiq_watch import NimiqWatchApiGateway

__all__ = [
    "ApiGateway",
    "NimiqWatchApiGateway",
]
