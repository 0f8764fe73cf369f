"""Completion of paused Auto Scaling lifecycle actions.

A lifecycle hook holds an instance in a wait state until the hook is
completed. ``complete`` tells the control plane to CONTINUE and reports
whether a failure is worth retrying, leaving retry execution to the caller.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Tuple

from botocore.exceptions import ClientError

from src.shared.constants import LIFECYCLE_ACTION_RESULT_CONTINUE, TERMINAL_HTTP_STATUS_CODE


class ASGLifecycleActionCompleter(Protocol):
    """Anything able to complete a lifecycle action, e.g. a boto3 autoscaling client."""

    def complete_lifecycle_action(self, **kwargs: Any) -> Any: ...


@dataclass(frozen=True)
class LifecycleActionRequest:
    """Identifies one outstanding lifecycle action.

    All four fields must belong to the same pending action. They are not
    validated locally; a mismatch is rejected by the control plane.
    """

    auto_scaling_group_name: str
    lifecycle_action_token: str
    lifecycle_hook_name: str
    ec2_instance_id: str


def http_status_code(err: BaseException) -> Optional[int]:
    """Extract the HTTP status code carried by a structured response error.

    Returns:
        The status code, or None when the error carries no HTTP response
    """
    if not isinstance(err, ClientError):
        return None
    status = err.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    return status if isinstance(status, int) else None


def is_retryable(err: BaseException) -> bool:
    """Classify a completion failure.

    Only a structured response error with a status other than 400 is
    retryable. Errors without a status code (connection failures, timeouts)
    classify as terminal.
    """
    status = http_status_code(err)
    return status is not None and status != TERMINAL_HTTP_STATUS_CODE


def complete(
    completer: ASGLifecycleActionCompleter, request: LifecycleActionRequest
) -> Tuple[bool, Optional[Exception]]:
    """Signal CONTINUE for a pending lifecycle action.

    Makes exactly one call to ``completer.complete_lifecycle_action``.

    Args:
        completer: Client exposing complete_lifecycle_action
        request: The lifecycle action to acknowledge

    Returns:
        ``(False, None)`` on success, otherwise ``(retryable, err)`` where
        ``err`` is the exception raised by the completer, unmodified
    """
    try:
        completer.complete_lifecycle_action(
            AutoScalingGroupName=request.auto_scaling_group_name,
            LifecycleActionResult=LIFECYCLE_ACTION_RESULT_CONTINUE,
            LifecycleHookName=request.lifecycle_hook_name,
            LifecycleActionToken=request.lifecycle_action_token,
            InstanceId=request.ec2_instance_id,
        )
    except Exception as e:
        return is_retryable(e), e
    return False, None
