"""
Shared utilities for Lambda functions and event adapters
"""

from .clients import create_autoscaling_client, create_boto_config
from .config import AppConfig, load_config
from .constants import (
    DEFAULT_AWS_REGION,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_POOL_CONNECTIONS,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_RETRY_MODE,
    LIFECYCLE_ACTION_RESULT_CONTINUE,
    TERMINAL_HTTP_STATUS_CODE,
)

__all__ = [
    "AppConfig",
    "load_config",
    "create_autoscaling_client",
    "create_boto_config",
    "DEFAULT_AWS_REGION",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_POOL_CONNECTIONS",
    "DEFAULT_READ_TIMEOUT",
    "DEFAULT_RETRY_MODE",
    "LIFECYCLE_ACTION_RESULT_CONTINUE",
    "TERMINAL_HTTP_STATUS_CODE",
]
