from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class AWSEvent:
    """Typed projection of an EventBridge event that has already been deserialized."""

    version: str = ""
    id: str = ""
    detail_type: str = ""
    source: str = ""
    account: str = ""
    time: str = ""
    region: str = ""
    resources: Tuple[str, ...] = ()
    detail: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "AWSEvent":
        """Build an AWSEvent from an EventBridge envelope.

        Raises:
            ValueError: If the envelope or its detail is not a mapping
        """
        if not isinstance(raw, dict):
            raise ValueError(f"event must be a dict, got {type(raw).__name__}")

        detail = raw.get("detail") or {}
        if not isinstance(detail, dict):
            raise ValueError(f"event detail must be a dict, got {type(detail).__name__}")

        return cls(
            version=raw.get("version", ""),
            id=raw.get("id", ""),
            detail_type=raw.get("detail-type", ""),
            source=raw.get("source", ""),
            account=raw.get("account", ""),
            time=raw.get("time", ""),
            region=raw.get("region", ""),
            resources=tuple(raw.get("resources") or ()),
            detail=dict(detail),
        )

    def log_fields(self) -> Dict[str, Any]:
        """Flatten the envelope into structured log keys."""
        return {
            "eventVersion": self.version,
            "eventId": self.id,
            "detailType": self.detail_type,
            "eventSource": self.source,
            "account": self.account,
            "eventTime": self.time,
            "region": self.region,
            "resources": list(self.resources),
            "detail": dict(self.detail),
        }
