from typing import Any, Dict, List, Optional, Tuple

from .lifecycle_action import ASGLifecycleActionCompleter, LifecycleActionRequest, complete
from .models import AWSEvent


class ASGLifecycleTerminateNotification:
    """An instance held in Terminating:Wait by an Auto Scaling lifecycle hook.

    The event is done once the lifecycle action has been completed with
    CONTINUE, which releases the instance for termination.
    """

    def __init__(self, event: AWSEvent, completer: ASGLifecycleActionCompleter):
        self.event = event
        self.completer = completer

    @property
    def instance_id(self) -> str:
        # Auto Scaling spells it EC2InstanceId, the completion API wants InstanceId
        return self.event.detail["EC2InstanceId"]

    @property
    def lifecycle_transition(self) -> Optional[str]:
        return self.event.detail.get("LifecycleTransition")

    def instance_ids(self) -> List[str]:
        return [self.instance_id]

    def lifecycle_action_request(self) -> LifecycleActionRequest:
        detail = self.event.detail
        return LifecycleActionRequest(
            auto_scaling_group_name=detail["AutoScalingGroupName"],
            lifecycle_action_token=detail["LifecycleActionToken"],
            lifecycle_hook_name=detail["LifecycleHookName"],
            ec2_instance_id=self.instance_id,
        )

    def done(self) -> Tuple[bool, Optional[Exception]]:
        return complete(self.completer, self.lifecycle_action_request())

    def log_fields(self) -> Dict[str, Any]:
        return self.event.log_fields()

    def __repr__(self) -> str:
        return f"ASGLifecycleTerminateNotification(id={self.event.id!r})"
