"""boto3 client construction for the Auto Scaling control plane."""

from typing import Optional

import boto3
from botocore.config import Config as BotocoreConfig

from .config import AppConfig, load_config
from .constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_POOL_CONNECTIONS,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_RETRY_MODE,
)


def create_boto_config(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: str = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
) -> BotocoreConfig:
    """Create botocore Config with retry and timeout settings."""
    return BotocoreConfig(
        retries={
            "max_attempts": max_attempts,
            "mode": retry_mode,
        },
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        max_pool_connections=max_pool_connections,
    )


def create_autoscaling_client(app_config: Optional[AppConfig] = None):
    """Create an Auto Scaling client bounded by the configured timeouts.

    The returned client satisfies the ASGLifecycleActionCompleter protocol.

    Args:
        app_config: Configuration to use (default: loaded from environment)

    Returns:
        boto3 Auto Scaling client
    """
    if app_config is None:
        app_config = load_config()

    boto_config = create_boto_config(
        max_attempts=app_config.max_attempts,
        retry_mode=app_config.retry_mode,
        connect_timeout=app_config.connect_timeout,
        read_timeout=app_config.read_timeout,
    )
    return boto3.client("autoscaling", region_name=app_config.aws_region, config=boto_config)
