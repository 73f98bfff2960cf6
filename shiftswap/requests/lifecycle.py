"""
Request lifecycle: creation and review of shift-swap requests.

PENDING is the only initial status. APPROVED and DENIED are terminal by
convention only; set_status will move a record out of either one, and
re-applying the current status just refreshes updatedAt.
"""

import secrets
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional, Union

from ..errors import IdGenerationError, NotFoundError, ValidationError
from ..logging import get_logger, log_status_change
from ..utils.time import format_timestamp, is_iso_like, parse_timestamp, utc_now
from .models import RequestStatus, SwapRequest

if TYPE_CHECKING:
    from ..persistence.request_store import RequestStore

REVIEW_STATUSES = (RequestStatus.APPROVED, RequestStatus.DENIED)

# Attempts at drawing an id not already in the document
MAX_ID_ATTEMPTS = 16


class RequestLifecycle:
    """Creates requests and moves them between review statuses."""

    def __init__(
        self,
        store: "RequestStore",
        clock: Callable[[], datetime] = utc_now,
        token_factory: Optional[Callable[[], str]] = None,
        token_bytes: int = 6,
    ):
        """
        Args:
            store: Backing document store
            clock: Returns the current time; injected in tests
            token_factory: Returns a fresh id candidate; defaults to
                secrets.token_hex(token_bytes)
            token_bytes: Random bytes per generated id
        """
        self.store = store
        self.clock = clock
        self.token_factory = token_factory or (lambda: secrets.token_hex(token_bytes))
        self.logger = get_logger("shiftswap.lifecycle")

    def create_request(self, from_ts: str, to_ts: str, with_whom: str, reason: str) -> SwapRequest:
        """
        Validate input, store a new PENDING request at the front, return it.

        Raises:
            ValidationError: a field is empty or a datetime is malformed
        """
        self._validate_new_request(from_ts, to_ts, with_whom, reason)

        document = self.store.load()
        now = format_timestamp(self.clock())
        request = SwapRequest(
            id=self._new_id(document.ids()),
            from_ts=from_ts,
            to_ts=to_ts,
            with_whom=with_whom,
            reason=reason,
            status=RequestStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

        document.requests.insert(0, request)
        self.store.save(document)

        self.logger.info(
            "Request created",
            request_id=request.id,
            from_ts=from_ts,
            to_ts=to_ts,
            with_whom=with_whom
        )
        return request

    def list_requests(self) -> list[SwapRequest]:
        """All requests as stored, newest first."""
        return self.store.load().requests

    def set_status(self, request_id: str, status: Union[RequestStatus, str]) -> SwapRequest:
        """
        Set a request's review status and refresh its updatedAt.

        Raises:
            ValidationError: status is not APPROVED or DENIED
            NotFoundError: no request has this id; nothing is written
        """
        new_status = self._coerce_review_status(status)

        document = self.store.load()
        request = document.find(request_id)
        if request is None:
            self.logger.warning("Request not found", request_id=request_id)
            raise NotFoundError(
                f"No request found with id: {request_id}",
                request_id=request_id,
            )

        previous = request.status
        request.status = new_status
        request.updated_at = self._next_updated_at(request.updated_at)
        self.store.save(document)

        log_status_change(self.logger, request.id, previous.value, new_status.value)
        return request

    def approve(self, request_id: str) -> SwapRequest:
        return self.set_status(request_id, RequestStatus.APPROVED)

    def deny(self, request_id: str) -> SwapRequest:
        return self.set_status(request_id, RequestStatus.DENIED)

    def _validate_new_request(self, from_ts: str, to_ts: str, with_whom: str, reason: str) -> None:
        fields = {"from": from_ts, "to": to_ts, "with": with_whom, "reason": reason}
        missing = [name for name, value in fields.items() if not value]
        malformed = [
            name for name in ("from", "to")
            if fields[name] and not is_iso_like(fields[name])
        ]
        unencodable = [
            name for name, value in fields.items()
            if value and name not in malformed and not _is_utf8_encodable(value)
        ]

        if not missing and not malformed and not unencodable:
            return

        problems = []
        if missing:
            problems.append("missing " + ", ".join(missing))
        if malformed:
            problems.append(
                "not an ISO datetime (e.g. 2026-01-12T07:00): " + ", ".join(malformed)
            )
        if unencodable:
            problems.append("not valid UTF-8 text: " + ", ".join(unencodable))
        raise ValidationError(
            "Invalid request: " + "; ".join(problems),
            fields=missing + malformed + unencodable,
            context={"missing": missing, "malformed": malformed, "unencodable": unencodable},
        )

    @staticmethod
    def _coerce_review_status(status: Union[RequestStatus, str]) -> RequestStatus:
        try:
            value = RequestStatus(status.upper() if isinstance(status, str) else status)
        except ValueError:
            value = None
        if value not in REVIEW_STATUSES:
            raise ValidationError(
                f"Status must be APPROVED or DENIED, got {status!r}",
                fields=["status"],
            )
        return value

    def _new_id(self, existing: set[str]) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self.token_factory()
            if candidate not in existing:
                return candidate
        raise IdGenerationError(
            f"Could not generate a unique request id in {MAX_ID_ATTEMPTS} attempts",
            attempts=MAX_ID_ATTEMPTS,
        )

    def _next_updated_at(self, previous: str) -> str:
        """Current time, but never earlier than the previous updatedAt."""
        now = parse_timestamp(format_timestamp(self.clock()))
        previous_ts = parse_timestamp(previous)
        if previous_ts is not None and previous_ts > now:
            now = previous_ts
        return format_timestamp(now)


def _is_utf8_encodable(value: str) -> bool:
    """False for text holding lone surrogates, e.g. undecodable argv bytes."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
