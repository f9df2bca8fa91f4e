"""
Nimiq 支付校验 — 结构化日志

提供 JSON 格式日志输出，便于日志聚合和分析。
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class JSONFormatter(logging.Formatter):
    """JSON 格式日志格式化器"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.pathname:
            log_data["location"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # 交易哈希、地址等上下文
        if hasattr(record, "extra_data"):
            log_data["extra"] = record.extra_data

        return json.dumps(log_data, ensure_ascii=False, default=str)


def get_logger(
    name: str,
    level: int = logging.INFO,
    use_json: bool = True,
) -> logging.Logger:
    """
    获取结构化日志记录器

    Args:
        name: 日志记录器名称
        level: 日志级别
        use_json: 是否使用 JSON 格式

    Returns:
        配置好的 Logger 实例
    """
    logger = logging.getLogger(name)

    # 避免重复添加 handler
    if logger.handlers:
        return logger

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if use_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def set_log_level(level: int | str, prefix: str = "nimiq_payment") -> int:
    """
    调整包内所有日志记录器及其 handler 的级别

    get_logger 创建的 handler 自带级别，只改 logger 级别不会放行更低级别的日志。

    Args:
        level: 日志级别（int 或 "DEBUG" 等名称，未知名称按 INFO）
        prefix: 日志记录器名称前缀

    Returns:
        实际生效的级别
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        if name != prefix and not name.startswith(prefix + "."):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    return level


class LoggerAdapter(logging.LoggerAdapter):
    """
    绑定固定上下文的日志适配器

    例如绑定收款地址后，每条日志都会带上 receiver_address。
    """

    def process(
        self, msg: str, kwargs: dict[str, Any]
    ) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        bound = dict(self.extra or {})
        bound.update(extra.get("extra_data", {}))
        extra["extra_data"] = bound
        kwargs["extra"] = extra
        return msg, kwargs
