from typing import Any, Dict, List, Optional, Protocol, Tuple


class Event(Protocol):
    """Behavior shared by every supported event kind.

    ``done`` returns ``(retryable, err)``. ``(False, None)`` means there is
    nothing left to do for the event and it should not be attempted again.
    """

    def instance_ids(self) -> List[str]: ...

    def done(self) -> Tuple[bool, Optional[Exception]]: ...

    def log_fields(self) -> Dict[str, Any]: ...
