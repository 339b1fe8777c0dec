from collections.abc import Sequence

from rich.table import Table
from rich.text import Text

from hms.domain.models import Doctor, Patient


def _cells(*values: object) -> list[Text]:
    # Plain Text cells so typed brackets are shown as-is instead of parsed as markup.
    return [Text(str(value)) for value in values]


def build_patient_table(patients: Sequence[Patient]) -> Table:
    table = Table(title="Patients", header_style="bold cyan", show_lines=False)
    for column in ("ID", "Name", "Age", "Gender", "Illness", "Admitted"):
        table.add_column(column)
    for p in patients:
        table.add_row(*_cells(p.id, p.name, p.age, p.gender, p.illness, p.admit_date))
    if not patients:
        table.caption = "No patients registered."
    return table


def build_doctor_table(doctors: Sequence[Doctor]) -> Table:
    table = Table(title="Doctors", header_style="bold magenta", show_lines=False)
    for column in ("ID", "Name", "Age", "Gender", "Specialty", "Appointments"):
        table.add_column(column)
    for d in doctors:
        table.add_row(*_cells(d.id, d.name, d.age, d.gender, d.specialty, len(d.appointments)))
    if not doctors:
        table.caption = "No doctors registered."
    return table
