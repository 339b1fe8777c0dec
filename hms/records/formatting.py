from collections.abc import Iterable

from hms.domain.models import Appointment, Doctor, Patient, Person


def format_person(person: Person) -> str:
    return f"ID: {person.id}, Name: {person.name}, Age: {person.age}, Gender: {person.gender}"


def format_patient(patient: Patient) -> str:
    return f"{format_person(patient)}\nIllness: {patient.illness}, Admitted on: {patient.admit_date}"


def format_doctor(doctor: Doctor) -> str:
    return f"{format_person(doctor)}\nSpecialty: {doctor.specialty}"


def format_appointment(appointment: Appointment) -> str:
    return "\n".join(
        [
            "Appointment Details:",
            f"  Patient ID: {appointment.patient_id}",
            f"  Doctor ID: {appointment.doctor_id}",
            f"  Date: {appointment.date}",
            f"  Time: {appointment.time}",
        ]
    )


def format_doctor_appointments(doctor: Doctor) -> str:
    """List a doctor's bookings under a ``--- Appointments for Dr. ... ---`` header."""
    lines = [f"--- Appointments for Dr. {doctor.name} ({doctor.specialty}) ---"]
    if not doctor.appointments:
        lines.append("No appointments scheduled.")
    for appointment in doctor.appointments:
        lines.append(format_appointment(appointment))
        lines.append("---")
    return "\n".join(lines)


def render_summary(patients: Iterable[Patient], doctors: Iterable[Doctor]) -> str:
    """Dump both record lists as plain text, one line per record."""
    lines = ["--- PATIENTS ---"]
    patient_lines = [
        f"ID: {p.id}, Name: {p.name}, Gender: {p.gender}, Illness: {p.illness}" for p in patients
    ]
    lines.extend(patient_lines or ["No patients registered."])

    lines.extend(["", "--- DOCTORS ---"])
    doctor_lines = [
        f"ID: {d.id}, Name: {d.name}, Gender: {d.gender}, Specialty: {d.specialty}"
        for d in doctors
    ]
    lines.extend(doctor_lines or ["No doctors registered."])
    return "\n".join(lines)
