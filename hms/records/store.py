from typing import Any

from loguru import logger
from pydantic import ValidationError

from hms.domain.exceptions import InvalidRecordError, RecordNotFoundError
from hms.domain.models import NOT_APPLICABLE, Doctor, Patient
from hms.records.ports import AbstractRecordStore, RecordT

DEFAULT_ID_WIDTH = 3


class RecordStore(AbstractRecordStore[RecordT]):
    """Owns the records of one kind and the counter that numbers them.

    IDs are ``<prefix><sequence>`` with the sequence zero-padded to ``width``
    digits. Sequence values are never handed out twice, even after the
    record that carried one is removed.
    """

    kind = "record"
    model: type[RecordT]

    def __init__(self, prefix: str, width: int = DEFAULT_ID_WIDTH) -> None:
        self._prefix = prefix
        self._width = width
        self._next_seq = 1
        self._records: list[RecordT] = []

    def _format_id(self, seq: int) -> str:
        return f"{self._prefix}{seq:0{self._width}d}"

    def _insert(self, **fields: Any) -> str:
        record_id = self._format_id(self._next_seq)
        try:
            record = self.model(id=record_id, **fields)
        except ValidationError as exc:
            logger.warning("Rejected {} fields: {} error(s)", self.kind, exc.error_count())
            raise InvalidRecordError(self.kind, str(exc)) from exc

        self._records.append(record)
        self._next_seq += 1
        logger.info("Added {} {}", self.kind, record_id)
        return record_id

    def _index_of(self, record_id: str) -> int | None:
        if not isinstance(record_id, str):
            raise InvalidRecordError(self.kind, f"ID must be a string, got {type(record_id).__name__}")
        wanted = record_id.casefold()
        for index, record in enumerate(self._records):
            if record.id.casefold() == wanted:
                return index
        return None

    def remove_by_id(self, record_id: str) -> bool:
        index = self._index_of(record_id)
        if index is None:
            logger.info("No {} with ID {} to remove", self.kind, record_id)
            return False

        removed = self._records.pop(index)
        logger.info("Removed {} {}", self.kind, removed.id)
        return True

    def get(self, record_id: str) -> RecordT:
        index = self._index_of(record_id)
        if index is None:
            raise RecordNotFoundError(record_id, kind=self.kind)
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> tuple[RecordT, ...]:
        return tuple(self._records)


class PatientStore(RecordStore[Patient]):
    kind = "patient"
    model = Patient

    def __init__(
        self,
        prefix: str = "P",
        width: int = DEFAULT_ID_WIDTH,
        default_admit_date: str = NOT_APPLICABLE,
    ) -> None:
        super().__init__(prefix, width)
        self._default_admit_date = default_admit_date

    def add(
        self,
        name: str,
        age: int,
        gender: str,
        illness: str,
        admit_date: str | None = None,
    ) -> str:
        """Register a patient and return the ID minted for them."""
        return self._insert(
            name=name,
            age=age,
            gender=gender,
            illness=illness,
            admit_date=self._default_admit_date if admit_date is None else admit_date,
        )


class DoctorStore(RecordStore[Doctor]):
    kind = "doctor"
    model = Doctor

    def __init__(self, prefix: str = "D", width: int = DEFAULT_ID_WIDTH) -> None:
        super().__init__(prefix, width)

    def add(self, name: str, age: int, gender: str, specialty: str) -> str:
        """Register a doctor and return the ID minted for them."""
        return self._insert(name=name, age=age, gender=gender, specialty=specialty)
