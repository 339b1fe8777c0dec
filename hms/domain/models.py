from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

NOT_APPLICABLE = "N/A"


class Appointment(BaseModel):
    """A booking held by a doctor.

    ``patient_id`` and ``doctor_id`` are plain references into the patient
    and doctor ID spaces; they are not checked against either store.
    """

    model_config = ConfigDict(frozen=True)

    patient_id: str
    doctor_id: str
    date: str
    time: str


class Person(BaseModel):
    """Identity and demographic fields shared by patients and doctors."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    age: int = Field(ge=0)
    gender: str


class Patient(Person):
    """A registered patient."""

    illness: str
    admit_date: str = NOT_APPLICABLE


class Doctor(Person):
    """A registered doctor and the appointments booked with them."""

    specialty: str

    _appointments: list[Appointment] = PrivateAttr(default_factory=list)

    @property
    def appointments(self) -> tuple[Appointment, ...]:
        return tuple(self._appointments)

    def add_appointment(self, patient_id: str, doctor_id: str, date: str, time: str) -> None:
        """Append an appointment. Overlapping slots are not checked."""
        self._appointments.append(
            Appointment(patient_id=patient_id, doctor_id=doctor_id, date=date, time=time)
        )
