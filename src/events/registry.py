"""Classify raw EventBridge events and wrap them in their event adapter."""

import logging
from typing import Any, Dict

from src.shared.constants import (
    ASG_TERMINATE_LIFECYCLE_DETAIL_TYPE,
    AUTOSCALING_EVENT_SOURCE,
    EC2_EVENT_SOURCE,
    EC2_STATE_CHANGE_DETAIL_TYPE,
)

from .asg_terminate import ASGLifecycleTerminateNotification
from .base import Event
from .lifecycle_action import ASGLifecycleActionCompleter
from .models import AWSEvent
from .state_change import EC2InstanceStateChangeNotification

logger = logging.getLogger(__name__)


class UnsupportedEventError(ValueError):
    """Raised when an event's source and detail type match no known event kind."""

    def __init__(self, source: str, detail_type: str):
        self.source = source
        self.detail_type = detail_type
        super().__init__(f"Unsupported event: source='{source}', detail-type='{detail_type}'")


def parse_event(raw: Dict[str, Any], completer: ASGLifecycleActionCompleter) -> Event:
    """Wrap a deserialized EventBridge event in the adapter for its kind.

    Args:
        raw: EventBridge event as delivered to the handler
        completer: Client used by lifecycle-hook events to complete their action

    Returns:
        The event adapter

    Raises:
        ValueError: If the payload is not an event envelope
        UnsupportedEventError: If the event kind is not handled
    """
    event = AWSEvent.from_dict(raw)
    kind = (event.source, event.detail_type)

    if kind == (EC2_EVENT_SOURCE, EC2_STATE_CHANGE_DETAIL_TYPE):
        return EC2InstanceStateChangeNotification(event)

    if kind == (AUTOSCALING_EVENT_SOURCE, ASG_TERMINATE_LIFECYCLE_DETAIL_TYPE):
        return ASGLifecycleTerminateNotification(event, completer)

    logger.debug(f"--> No adapter for source={event.source} detail-type={event.detail_type}")
    raise UnsupportedEventError(event.source, event.detail_type)
