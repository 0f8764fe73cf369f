"""
Event adapters for the lifecycle reconciliation shim

- lifecycle_action: completion of paused Auto Scaling lifecycle actions
- state_change: EC2 instance state-change notifications
- asg_terminate: Auto Scaling instance-terminate lifecycle actions
- registry: wraps raw EventBridge events in the adapter for their kind
"""

from .asg_terminate import ASGLifecycleTerminateNotification
from .base import Event
from .lifecycle_action import (
    ASGLifecycleActionCompleter,
    LifecycleActionRequest,
    complete,
    http_status_code,
    is_retryable,
)
from .models import AWSEvent
from .registry import UnsupportedEventError, parse_event
from .state_change import EC2InstanceStateChangeNotification

__all__ = [
    "ASGLifecycleActionCompleter",
    "ASGLifecycleTerminateNotification",
    "AWSEvent",
    "EC2InstanceStateChangeNotification",
    "Event",
    "LifecycleActionRequest",
    "UnsupportedEventError",
    "complete",
    "http_status_code",
    "is_retryable",
    "parse_event",
]
