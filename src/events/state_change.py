from typing import Any, Dict, List, Optional, Tuple

from .models import AWSEvent


class EC2InstanceStateChangeNotification:
    """An EC2 instance state-change observation.

    The event is recorded and passed through; it never requires completion
    against the control plane.
    """

    def __init__(self, event: AWSEvent):
        self.event = event

    @property
    def instance_id(self) -> str:
        return self.event.detail["instance-id"]

    @property
    def state(self) -> str:
        return self.event.detail["state"]

    def instance_ids(self) -> List[str]:
        return [self.instance_id]

    def done(self) -> Tuple[bool, Optional[Exception]]:
        return False, None

    def log_fields(self) -> Dict[str, Any]:
        return self.event.log_fields()

    def __repr__(self) -> str:
        return f"EC2InstanceStateChangeNotification(id={self.event.id!r})"
