from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from hms.domain.models import Person

RecordT = TypeVar("RecordT", bound=Person)


class AbstractRecordStore(ABC, Generic[RecordT]):
    """Abstract base class for an in-memory collection of one record kind.

    Creation is kind-specific (each store exposes its own ``add``); removal,
    lookup and listing are shared.
    """

    @abstractmethod
    def remove_by_id(self, record_id: str) -> bool:
        """Remove the record with the given ID.

        Args:
            record_id: The record's ID. Matched case-insensitively.

        Returns:
            True if a record was removed, False if no record had that ID.
        """

    @abstractmethod
    def get(self, record_id: str) -> RecordT:
        """Look up a record by ID.

        Args:
            record_id: The record's ID. Matched case-insensitively.

        Returns:
            The matching record.

        Raises:
            RecordNotFoundError: If no record has that ID.
        """

    @abstractmethod
    def __len__(self) -> int:
        """Number of records currently held."""

    @abstractmethod
    def list(self) -> tuple[RecordT, ...]:
        """Return a snapshot of all records in insertion order."""
