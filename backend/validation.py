"""
Request validation for employee records.

validate_employee_fields() runs an ordered pipeline and raises on the first
failure, so a given bad body always produces the same message:

  1. presence   - every field is supplied and not null, "", 0 or false
  2. type       - every field is a string
  3. blank      - every field is non-empty after trimming
  4. email      - trimmed email looks like local@domain.tld

Uniqueness and existence depend on stored state and are checked by
EmployeeStore under its lock.
"""

import math
import re
from typing import Any, Mapping, Optional

from errors import BadRequest, ValidationError
from models.employee import EmployeeFields

REQUIRED_FIELDS = ("firstName", "lastName", "email", "position")

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")
EMPLOYEE_ID_PATTERN = re.compile(r"-?[0-9]+")


def _is_missing(value: Any) -> bool:
    """null, "", 0, NaN and false count as not supplied; [] and {} do not."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def _message(base: str, for_update: bool) -> str:
    if for_update:
        return f"{base} for update."
    return f"{base}."


def validate_employee_fields(
    body: Optional[Mapping[str, Any]],
    for_update: bool = False,
) -> EmployeeFields:
    """
    Validate a create/update body and return the trimmed fields.

    Extra keys (including a client-supplied "id") are ignored.

    Raises:
        ValidationError: with a message naming the first failed check.
    """
    body = body or {}
    required_msg = _message(
        "All fields (firstName, lastName, email, position) are required", for_update
    )

    values = [body.get(name) for name in REQUIRED_FIELDS]

    if any(_is_missing(value) for value in values):
        raise ValidationError(required_msg)

    if not all(isinstance(value, str) for value in values):
        raise ValidationError(_message("All fields must be strings", for_update))

    first_name, last_name, email, position = (value.strip() for value in values)

    if not (first_name and last_name and email and position):
        raise ValidationError(required_msg)

    if not EMAIL_PATTERN.match(email):
        raise ValidationError(_message("Invalid email format", for_update))

    return EmployeeFields(
        first_name=first_name,
        last_name=last_name,
        email=email,
        position=position,
    )


def parse_employee_id(raw: str) -> int:
    """Parse an :id path segment. Only an optional '-' and ASCII digits are accepted."""
    if not EMPLOYEE_ID_PATTERN.fullmatch(raw):
        raise BadRequest()
    try:
        return int(raw)
    except ValueError:
        # more digits than int() will convert
        raise BadRequest()
