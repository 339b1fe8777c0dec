import pydantic
import pytest

from hms.domain.models import Appointment, Doctor, Patient


class TestPatient:
    def test_admit_date_defaults_to_not_applicable(self) -> None:
        patient = Patient(id="P001", name="Alice", age=30, gender="Female", illness="Flu")

        assert patient.admit_date == "N/A"

    def test_fields_are_immutable(self) -> None:
        patient = Patient(id="P001", name="Alice", age=30, gender="Female", illness="Flu")

        with pytest.raises(pydantic.ValidationError):
            patient.id = "P999"  # type: ignore[misc]

    def test_rejects_negative_age(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Patient(id="P001", name="Alice", age=-1, gender="Female", illness="Flu")


class TestDoctorAppointments:
    @pytest.fixture
    def doctor(self) -> Doctor:
        return Doctor(id="D001", name="Dr. Lee", age=50, gender="Female", specialty="Cardiology")

    def test_starts_empty(self, doctor: Doctor) -> None:
        assert doctor.appointments == ()

    def test_keeps_insertion_order(self, doctor: Doctor) -> None:
        doctor.add_appointment("P002", "D001", "2024-01-02", "09:00")
        doctor.add_appointment("P001", "D001", "2024-01-01", "10:00")

        assert [a.patient_id for a in doctor.appointments] == ["P002", "P001"]

    def test_allows_double_booking(self, doctor: Doctor) -> None:
        doctor.add_appointment("P001", "D001", "2024-01-01", "10:00")
        doctor.add_appointment("P002", "D001", "2024-01-01", "10:00")

        assert len(doctor.appointments) == 2

    def test_snapshot_does_not_expose_internal_list(self, doctor: Doctor) -> None:
        doctor.add_appointment("P001", "D001", "2024-01-01", "10:00")

        snapshot = doctor.appointments
        doctor.add_appointment("P002", "D001", "2024-01-02", "11:00")

        assert len(snapshot) == 1
        assert len(doctor.appointments) == 2

    def test_appointments_are_per_doctor(self, doctor: Doctor) -> None:
        other = Doctor(id="D002", name="Dr. Kim", age=45, gender="Male", specialty="Oncology")

        doctor.add_appointment("P001", "D001", "2024-01-01", "10:00")

        assert other.appointments == ()


class TestAppointment:
    def test_is_frozen(self) -> None:
        appt = Appointment(patient_id="P001", doctor_id="D001", date="2024-01-01", time="10:00")

        with pytest.raises(pydantic.ValidationError):
            appt.date = "2024-02-02"  # type: ignore[misc]

    def test_dangling_references_are_accepted(self) -> None:
        appt = Appointment(patient_id="P404", doctor_id="D404", date="someday", time="noon")

        assert appt.patient_id == "P404"
