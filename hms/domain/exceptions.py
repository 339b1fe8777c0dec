class RecordError(Exception):
    """Base exception for all record-related errors."""


class RecordValidationError(RecordError):
    """Raised when user input is rejected before it reaches a store."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(reason)


class InvalidRecordError(RecordError):
    """Raised when a store is handed fields that cannot form a record."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Invalid {kind} record: {reason}")


class RecordNotFoundError(RecordError):
    """Raised when a lookup by ID finds nothing."""

    def __init__(self, record_id: str, kind: str = "record") -> None:
        self.record_id = record_id
        self.kind = kind
        super().__init__(f"No {kind} with ID {record_id}")
