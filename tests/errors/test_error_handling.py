"""Tests for the error hierarchy."""

import pytest

from shiftswap.errors import (
    ConfigurationError,
    CorruptDataError,
    IdGenerationError,
    NotFoundError,
    PersistenceError,
    RequestError,
    ShiftSwapError,
    StorageError,
    ValidationError,
)


class TestErrorHierarchy:
    """Test classification and attributes."""

    @pytest.mark.parametrize("error_class,parent", [
        (ValidationError, RequestError),
        (NotFoundError, RequestError),
        (CorruptDataError, StorageError),
        (PersistenceError, StorageError),
        (RequestError, ShiftSwapError),
        (StorageError, ShiftSwapError),
        (ConfigurationError, ShiftSwapError),
        (IdGenerationError, ShiftSwapError),
    ])
    def test_inheritance(self, error_class, parent):
        assert issubclass(error_class, parent)

    def test_request_errors_recoverable(self):
        assert ValidationError("bad").recoverable
        assert NotFoundError("missing").recoverable

    def test_storage_errors_not_recoverable(self):
        assert not CorruptDataError("corrupt").recoverable
        assert not PersistenceError("io").recoverable

    def test_validation_error_fields(self):
        error = ValidationError("Invalid request", fields=["from", "to"])

        assert error.fields == ["from", "to"]
        assert str(error) == "Invalid request"
        assert error.context == {}

    def test_context_passthrough(self):
        error = NotFoundError("No request", request_id="abc", context={"op": "approve"})

        assert error.request_id == "abc"
        assert error.context == {"op": "approve"}
        assert error.message == "No request"

    def test_corrupt_data_details(self):
        error = CorruptDataError("Invalid JSON", path="/tmp/r.json", reason="line 1")

        assert error.path == "/tmp/r.json"
        assert error.reason == "line 1"

    def test_persistence_details(self):
        error = PersistenceError("Could not write", operation="write", target="/tmp/r.json")

        assert error.operation == "write"
        assert error.target == "/tmp/r.json"

    def test_catch_by_base(self):
        with pytest.raises(ShiftSwapError):
            raise CorruptDataError("corrupt")

    def test_id_generation_details(self):
        error = IdGenerationError("No unused id", attempts=16)

        assert error.attempts == 16
        assert not error.recoverable
