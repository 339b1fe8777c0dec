import re

from hms.domain.exceptions import RecordValidationError

_AGE_PATTERN = re.compile(r"-?[0-9]+")


def require_name(value: str) -> str:
    name = value.strip()
    if not name:
        raise RecordValidationError("name", "Name cannot be empty.")
    return name


def parse_age(value: str) -> int:
    """Parse an age typed by the user. Accepts plain ASCII digits, 0 upwards."""
    text = value.strip()
    if not _AGE_PATTERN.fullmatch(text):
        raise RecordValidationError("age", f"Age must be a whole number, got '{text}'.")
    age = int(text)
    if age < 0:
        raise RecordValidationError("age", "Age cannot be negative.")
    return age


def require_record_id(value: str) -> str:
    record_id = value.strip()
    if not record_id:
        raise RecordValidationError("id", "Please enter an ID to remove.")
    return record_id
