"""
Data models for shift-swap requests and the persisted document.

Field names in the JSON form ("from", "with", "createdAt", ...) are the
on-disk contract; the dataclasses use Python names and convert at the edge.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class RequestStatus(str, Enum):
    """Review status of a swap request."""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DENIED = "DENIED"


# JSON key -> attribute name
RECORD_FIELDS = {
    "id": "id",
    "from": "from_ts",
    "to": "to_ts",
    "with": "with_whom",
    "reason": "reason",
    "status": "status",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


@dataclass
class SwapRequest:
    """One shift-swap request with its review state."""

    id: str
    from_ts: str
    to_ts: str
    with_whom: str
    reason: str
    status: RequestStatus
    created_at: str
    updated_at: str

    # Keys found on disk that this version does not know about
    extra: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk JSON shape."""
        data = dict(self.extra)
        for key, attr in RECORD_FIELDS.items():
            value = getattr(self, attr)
            data[key] = value.value if isinstance(value, RequestStatus) else value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SwapRequest":
        """
        Build a request from its JSON shape.

        Raises:
            KeyError: a required field is absent
            ValueError: a field has the wrong type or an unknown status
        """
        values: dict[str, Any] = {}
        for key, attr in RECORD_FIELDS.items():
            value = data[key]
            if not isinstance(value, str):
                raise ValueError(f"field '{key}' must be a string")
            values[attr] = value

        values["status"] = RequestStatus(values["status"])
        extra = {k: v for k, v in data.items() if k not in RECORD_FIELDS}
        return cls(extra=extra, **values)


@dataclass
class RequestDocument:
    """All stored requests, newest first."""

    requests: list[SwapRequest] = field(default_factory=list)

    # Top-level keys other than "requests", written back unchanged
    extra: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def find(self, request_id: str) -> Optional[SwapRequest]:
        """Return the request with this id, or None."""
        for request in self.requests:
            if request.id == request_id:
                return request
        return None

    def ids(self) -> set[str]:
        return {request.id for request in self.requests}

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.extra)
        data["requests"] = [request.to_dict() for request in self.requests]
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "RequestDocument":
        """
        Build a document from parsed JSON, checking its shape.

        Raises:
            ValueError: data is not ``{"requests": [record, ...]}`` or ids repeat
        """
        if not isinstance(data, dict):
            raise ValueError("document must be a JSON object")
        records = data.get("requests")
        if not isinstance(records, list):
            raise ValueError("document must have a 'requests' list")

        requests = []
        seen: set[str] = set()
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise ValueError(f"record {index} is not an object")
            try:
                request = SwapRequest.from_dict(record)
            except KeyError as e:
                raise ValueError(f"record {index} is missing field {e}") from e
            except ValueError as e:
                raise ValueError(f"record {index}: {e}") from e
            if request.id in seen:
                raise ValueError(f"duplicate request id '{request.id}'")
            seen.add(request.id)
            requests.append(request)

        extra = {k: v for k, v in data.items() if k != "requests"}
        return cls(requests=requests, extra=extra)
