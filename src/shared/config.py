"""
Centralized configuration management for the reconciliation shim.

This module provides a single source of truth for environment-based configuration,
eliminating duplicate environment variable reads across the codebase.
"""

import os
from dataclasses import dataclass

from .constants import (
    DEFAULT_AWS_REGION,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_RETRY_MODE,
)


@dataclass
class AppConfig:
    """Application configuration loaded from environment variables.

    Attributes:
        aws_region: AWS region for the Auto Scaling client
        max_attempts: Total attempts botocore makes per request
        retry_mode: botocore retry mode ("legacy", "standard" or "adaptive")
        connect_timeout: Seconds allowed for establishing a connection
        read_timeout: Seconds allowed for reading a response
    """

    aws_region: str
    max_attempts: int
    retry_mode: str
    connect_timeout: int
    read_timeout: int


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} environment variable must be an integer, got '{raw}'") from None


def load_config() -> AppConfig:
    """Load configuration from environment variables.

    Returns:
        AppConfig instance with values from environment

    Raises:
        ValueError: If a numeric environment variable is not an integer
    """
    return AppConfig(
        aws_region=os.environ.get("AWS_REGION", DEFAULT_AWS_REGION),
        max_attempts=_int_from_env("MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
        retry_mode=os.environ.get("RETRY_MODE", DEFAULT_RETRY_MODE),
        connect_timeout=_int_from_env("CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
        read_timeout=_int_from_env("READ_TIMEOUT", DEFAULT_READ_TIMEOUT),
    )
