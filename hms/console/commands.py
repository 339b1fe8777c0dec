from collections.abc import Callable

from loguru import logger
from rich.console import Console
from rich.text import Text

from hms.console.tables import build_doctor_table, build_patient_table
from hms.console.validation import parse_age, require_name, require_record_id
from hms.domain.exceptions import RecordError
from hms.domain.models import Appointment, Patient
from hms.records.formatting import (
    format_doctor,
    format_doctor_appointments,
    format_patient,
    render_summary,
)
from hms.records.registry import HospitalRegistry, RecordKind

ConfirmCallback = Callable[[str], bool]


class CommandHandlers:
    """One handler per user action. Each handler reports its outcome on the console."""

    def __init__(self, registry: HospitalRegistry, console: Console) -> None:
        self._registry = registry
        self._console = console

    def _success(self, message: str) -> None:
        self._console.print(Text(f"SUCCESS: {message}", style="green"))

    def _info(self, message: str) -> None:
        self._console.print(Text(f"INFO: {message}", style="yellow"))

    def _error(self, message: str) -> None:
        self._console.print(Text(f"ERROR: {message}", style="bold red"))

    def handle_add_patient(self, name: str, age: str, gender: str, illness: str) -> str | None:
        try:
            patient_id = self._registry.patients.add(
                name=require_name(name),
                age=parse_age(age),
                gender=gender,
                illness=illness.strip(),
            )
        except RecordError as exc:
            self._error(str(exc))
            return None
        except Exception:
            logger.exception("Unexpected error in add_patient")
            self._error("Could not add the patient.")
            return None

        self._success(f"Added Patient {name.strip()} with ID {patient_id}")
        self.handle_refresh()
        return patient_id

    def handle_add_doctor(self, name: str, age: str, gender: str, specialty: str) -> str | None:
        try:
            doctor_id = self._registry.doctors.add(
                name=require_name(name),
                age=parse_age(age),
                gender=gender,
                specialty=specialty.strip(),
            )
        except RecordError as exc:
            self._error(str(exc))
            return None
        except Exception:
            logger.exception("Unexpected error in add_doctor")
            self._error("Could not add the doctor.")
            return None

        self._success(f"Added Doctor {name.strip()} with ID {doctor_id}")
        self.handle_refresh()
        return doctor_id

    def handle_remove(self, record_id: str, confirm: ConfirmCallback) -> RecordKind | None:
        """Remove a patient or doctor after the user confirms.

        Returns the kind of record removed, or None if nothing was removed.
        """
        try:
            record_id = require_record_id(record_id)
        except RecordError as exc:
            self._error(str(exc))
            return None

        if not confirm(f"Are you sure you want to delete record with ID: {record_id}?"):
            return None

        removed = self._registry.remove_record(record_id)
        if removed is None:
            self._info(f"Record with ID {record_id} not found.")
        else:
            self._success(f"Record with ID {record_id} removed.")
        self.handle_refresh()
        return removed

    def handle_book_appointment(
        self, patient_id: str, doctor_id: str, date: str, time: str
    ) -> Appointment | None:
        try:
            appointment = self._registry.book_appointment(
                patient_id.strip(), doctor_id.strip(), date.strip(), time.strip()
            )
        except RecordError as exc:
            self._error(str(exc))
            return None

        doctor = self._registry.doctors.get(appointment.doctor_id)
        self._success(f"Booked an appointment for Dr. {doctor.name}")
        return appointment

    def handle_show_appointments(self, doctor_id: str) -> None:
        try:
            doctor = self._registry.doctors.get(doctor_id.strip())
        except RecordError as exc:
            self._error(str(exc))
            return

        self._console.print(Text(format_doctor_appointments(doctor)))

    def handle_show_record(self, record_id: str) -> None:
        record = self._registry.find_record(record_id.strip())
        if record is None:
            self._info(f"Record with ID {record_id.strip()} not found.")
        elif isinstance(record, Patient):
            self._console.print(Text(format_patient(record)))
        else:
            self._console.print(Text(format_doctor(record)))

    def handle_refresh(self) -> None:
        self._console.print(build_patient_table(self._registry.patient_list()))
        self._console.print(build_doctor_table(self._registry.doctor_list()))

    def handle_summary(self) -> None:
        self._console.print(
            Text(render_summary(self._registry.patient_list(), self._registry.doctor_list()))
        )
