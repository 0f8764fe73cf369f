"""
Application-wide constants and default values.

This module centralizes all hardcoded default values used across the application,
making them easy to find, update, and maintain.
"""

# AWS Configuration Defaults
DEFAULT_AWS_REGION = "us-east-1"

# Boto3 Configuration Defaults
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_MODE = "standard"  # AWS recommended mode with exponential backoff + jitter
DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_READ_TIMEOUT = 30
DEFAULT_MAX_POOL_CONNECTIONS = 10

# Lifecycle action completion
LIFECYCLE_ACTION_RESULT_CONTINUE = "CONTINUE"
TERMINAL_HTTP_STATUS_CODE = 400  # Stale token, already-completed action, unknown hook

# EventBridge sources and detail types
EC2_EVENT_SOURCE = "aws.ec2"
AUTOSCALING_EVENT_SOURCE = "aws.autoscaling"
EC2_STATE_CHANGE_DETAIL_TYPE = "EC2 Instance State-change Notification"
ASG_TERMINATE_LIFECYCLE_DETAIL_TYPE = "EC2 Instance-terminate Lifecycle Action"
