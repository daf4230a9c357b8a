"""
Unit tests for the ordered field-validation pipeline and id parsing.
"""

import pytest

from errors import BadRequest, ValidationError
from validation import parse_employee_id, validate_employee_fields


def _body(**overrides):
    body = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "position": "Engineer",
    }
    body.update(overrides)
    return body


class TestPresence:

    @pytest.mark.parametrize("field", ["firstName", "lastName", "email", "position"])
    def test_missing_field(self, field):
        body = _body()
        del body[field]
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_fields(body)
        assert exc_info.value.message == "All fields (firstName, lastName, email, position) are required."

    def test_null_and_empty_count_as_missing(self):
        for value in (None, ""):
            with pytest.raises(ValidationError) as exc_info:
                validate_employee_fields(_body(position=value))
            assert "are required" in exc_info.value.message

    @pytest.mark.parametrize("value", [0, 0.0, False, float("nan")])
    def test_falsy_non_strings_count_as_missing(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_fields(_body(firstName=value))
        assert "are required" in exc_info.value.message

    @pytest.mark.parametrize("value", [[], {}, True, 1])
    def test_truthy_non_strings_are_type_errors(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_fields(_body(firstName=value))
        assert exc_info.value.message == "All fields must be strings."

    def test_no_body(self):
        with pytest.raises(ValidationError):
            validate_employee_fields(None)

    def test_update_message_suffix(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_fields({}, for_update=True)
        assert exc_info.value.message == (
            "All fields (firstName, lastName, email, position) are required for update."
        )


class TestTypesAndFormat:

    def test_non_string_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_fields(_body(lastName=42))
        assert exc_info.value.message == "All fields must be strings."

    def test_presence_checked_before_type(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_fields(_body(firstName=None, lastName=42))
        assert "are required" in exc_info.value.message

    def test_whitespace_only_is_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_fields(_body(firstName="   "))
        assert "are required" in exc_info.value.message

    @pytest.mark.parametrize("email", ["plainaddress", "a@b", "a b@c.com", "@."])
    def test_bad_email_shape(self, email):
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_fields(_body(email=email))
        assert exc_info.value.message == "Invalid email format."

    def test_bad_email_for_update(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_fields(_body(email="nope"), for_update=True)
        assert exc_info.value.message == "Invalid email format for update."


class TestAccepted:

    def test_fields_are_trimmed(self):
        fields = validate_employee_fields(_body(firstName="  Ada ", email=" ada@example.com\t"))
        assert fields.first_name == "Ada"
        assert fields.email == "ada@example.com"

    def test_extra_keys_ignored(self):
        fields = validate_employee_fields(_body(id=999, salary=1))
        assert fields.model_dump() == {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "position": "Engineer",
        }


class TestParseEmployeeId:

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("9999", 9999), ("-3", -3), ("007", 7)])
    def test_valid(self, raw, expected):
        assert parse_employee_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "1.5", "12abc", "", " 1", "+1", "١", "1\n", "-"])
    def test_invalid(self, raw):
        with pytest.raises(BadRequest) as exc_info:
            parse_employee_id(raw)
        assert exc_info.value.message == "Invalid employee ID format."

    def test_too_many_digits(self):
        with pytest.raises(BadRequest):
            parse_employee_id("1" * 5000)
