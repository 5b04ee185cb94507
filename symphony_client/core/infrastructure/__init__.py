"""
Infrastructure Layer - Cross-cutting Concerns.

This layer contains infrastructure code that supports the application:
    - Configuration management
    - Logging setup
"""

from .config import ClientConfig, get_env, load_dotenv_if_present
from .logging import JsonFormatter, OperationLoggerAdapter, get_logger, setup_logging

__all__ = [
    "ClientConfig",
    "get_env",
    "load_dotenv_if_present",
    "JsonFormatter",
    "OperationLoggerAdapter",
    "get_logger",
    "setup_logging",
]
