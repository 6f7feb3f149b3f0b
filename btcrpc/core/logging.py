# btcrpc/core/logging.py

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from btcrpc.core.config import Settings, settings


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # RPC context attached via `extra={"rpc": {...}}`
        if hasattr(record, "rpc"):
            log_data["rpc"] = record.rpc

        return json.dumps(log_data, default=str)


class SimpleFormatter(logging.Formatter):
    """Simple human-readable formatter for development"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as readable text"""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname
        name = record.name
        message = record.getMessage()

        log_line = f"[{timestamp}] {level:8s} | {name:20s} | {message}"

        if record.exc_info:
            log_line += f"\n{self.formatException(record.exc_info)}"

        return log_line


def setup_logging(config: Optional[Settings] = None) -> None:
    """
    Configure application logging

    Sets up logging with JSON format for production and simple format for development.
    Uses settings from config to determine log level and format.

    Args:
        config: Settings to read LOG_LEVEL/LOG_FORMAT from (defaults to module settings)
    """
    config = config or settings

    log_level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if config.LOG_FORMAT.lower() == "json":
        formatter = JSONFormatter()
    else:
        formatter = SimpleFormatter()

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Set specific logger levels
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: level={config.LOG_LEVEL}, format={config.LOG_FORMAT}"
    )
