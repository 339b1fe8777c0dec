import pytest

from hms.console.validation import parse_age, require_name, require_record_id
from hms.domain.exceptions import RecordValidationError


class TestRequireName:
    def test_strips(self) -> None:
        assert require_name("  Alice ") == "Alice"

    @pytest.mark.parametrize("value", ["", "   "], ids=["empty", "blank"])
    def test_rejects_empty(self, value: str) -> None:
        with pytest.raises(RecordValidationError) as exc_info:
            require_name(value)

        assert exc_info.value.field == "name"


class TestParseAge:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("0", 0), ("42", 42), (" 7 ", 7)],
        ids=["zero", "plain", "padded"],
    )
    def test_valid(self, value: str, expected: int) -> None:
        assert parse_age(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "4.5", "-1", "1_000", "\u0663\u0660", "+5"],
        ids=[
            "empty",
            "letters",
            "decimal",
            "negative",
            "underscore",
            "arabic-indic-digits",
            "plus-sign",
        ],
    )
    def test_invalid(self, value: str) -> None:
        with pytest.raises(RecordValidationError) as exc_info:
            parse_age(value)

        assert exc_info.value.field == "age"


class TestRequireRecordId:
    def test_strips(self) -> None:
        assert require_record_id(" P001 ") == "P001"

    def test_rejects_blank(self) -> None:
        with pytest.raises(RecordValidationError, match="Please enter an ID to remove."):
            require_record_id("  ")
