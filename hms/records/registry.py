from enum import Enum

from loguru import logger

from hms.config import AppConfig
from hms.domain.exceptions import RecordNotFoundError
from hms.domain.models import Appointment, Doctor, Patient
from hms.records.store import DoctorStore, PatientStore


class RecordKind(str, Enum):
    """Which store a record lives in."""

    PATIENT = "patient"
    DOCTOR = "doctor"


class HospitalRegistry:
    """Holds the patient and doctor stores and the flows that span both."""

    def __init__(self, patients: PatientStore, doctors: DoctorStore) -> None:
        self.patients = patients
        self.doctors = doctors

    @classmethod
    def from_config(cls, config: AppConfig) -> "HospitalRegistry":
        return cls(
            patients=PatientStore(
                prefix=config.patient_prefix,
                width=config.id_width,
                default_admit_date=config.default_admit_date,
            ),
            doctors=DoctorStore(prefix=config.doctor_prefix, width=config.id_width),
        )

    def remove_record(self, record_id: str) -> RecordKind | None:
        """Remove a record from whichever store holds it.

        Patients are tried before doctors. Returns the kind that was removed,
        or None when neither store had the ID.
        """
        if self.patients.remove_by_id(record_id):
            return RecordKind.PATIENT
        if self.doctors.remove_by_id(record_id):
            return RecordKind.DOCTOR
        return None

    def book_appointment(
        self, patient_id: str, doctor_id: str, date: str, time: str
    ) -> Appointment:
        """Book an appointment with a doctor.

        The patient ID is recorded as given; it is not looked up.

        Raises:
            RecordNotFoundError: If no doctor has ``doctor_id``.
        """
        doctor = self.doctors.get(doctor_id)
        doctor.add_appointment(patient_id, doctor.id, date, time)
        logger.info("Booked appointment with {} on {} at {}", doctor.id, date, time)
        return doctor.appointments[-1]

    def find_record(self, record_id: str) -> Patient | Doctor | None:
        """Look a record up in the patient store, then the doctor store."""
        for store in (self.patients, self.doctors):
            try:
                return store.get(record_id)
            except RecordNotFoundError:
                continue
        return None

    def patient_list(self) -> tuple[Patient, ...]:
        return self.patients.list()

    def doctor_list(self) -> tuple[Doctor, ...]:
        return self.doctors.list()
