"""
In-memory state shared across all routes.

Two process-wide objects live here:
  gate       - the admin session flag (one boolean for every caller)
  employees  - the employee roster plus its id counter

Nothing is persisted; a restart returns to the configured seed state.
"""

import logging
import secrets
import threading
from typing import Any, Optional

import config
from errors import Conflict, NotFound, Unauthorized
from models.employee import Employee, EmployeeFields

logger = logging.getLogger(__name__)

SEED_EMPLOYEES = [
    EmployeeFields(first_name="John", last_name="Doe", email="john.doe@example.com", position="Developer"),
    EmployeeFields(first_name="Jane", last_name="Smith", email="jane.smith@example.com", position="Designer"),
]


def _credential_matches(supplied: Any, expected: str) -> bool:
    if not isinstance(supplied, str):
        return False
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


class SessionGate:
    """
    Single shared login flag.

    There is no per-caller identity: a successful login from anywhere
    authorizes every caller until someone logs out or fails a login.
    """

    def __init__(self, username: str, password: str):
        self._username = username
        self._password = password
        self._logged_in = False

    def login(self, username: Any, password: Any) -> bool:
        # Evaluate both so a wrong username costs the same as a wrong password
        user_ok = _credential_matches(username, self._username)
        pass_ok = _credential_matches(password, self._password)
        self._logged_in = user_ok and pass_ok
        return self._logged_in

    def logout(self) -> None:
        self._logged_in = False

    def status(self) -> bool:
        return self._logged_in

    def guard(self) -> None:
        if not self._logged_in:
            raise Unauthorized()


class EmployeeStore:
    """
    Ordered employee roster with a strictly increasing id counter.

    Ids are never reused, even after delete. Records handed out are copies,
    so callers cannot mutate stored state behind the lock.
    """

    def __init__(self, seed: bool = True):
        self._lock = threading.Lock()
        self._records: list[Employee] = []
        self._next_id = 1
        self.reset(seed)

    def reset(self, seed: bool = True) -> None:
        with self._lock:
            self._records = []
            self._next_id = 1
            if seed:
                for fields in SEED_EMPLOYEES:
                    self._append(fields)

    def __len__(self) -> int:
        return len(self._records)

    # ---------- internal helpers (caller holds the lock) ----------

    def _append(self, fields: EmployeeFields) -> Employee:
        employee = Employee(id=self._next_id, **fields.model_dump())
        self._next_id += 1
        self._records.append(employee)
        return employee

    def _find(self, employee_id: int) -> Optional[Employee]:
        for employee in self._records:
            if employee.id == employee_id:
                return employee
        return None

    def _email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            e.email == email and e.id != exclude_id
            for e in self._records
        )

    # ---------- operations ----------

    def list(self) -> list[Employee]:
        with self._lock:
            return [e.model_copy() for e in self._records]

    def get(self, employee_id: int) -> Employee:
        with self._lock:
            employee = self._find(employee_id)
            if employee is None:
                raise NotFound("Employee not found.")
            return employee.model_copy()

    def create(self, fields: EmployeeFields) -> Employee:
        with self._lock:
            if self._email_taken(fields.email):
                raise Conflict("Employee with this email already exists.")
            return self._append(fields).model_copy()

    def update(self, employee_id: int, fields: EmployeeFields) -> Employee:
        """Replace every field except id. Not-found is checked before the email conflict."""
        with self._lock:
            employee = self._find(employee_id)
            if employee is None:
                raise NotFound("Employee not found for update.")
            if self._email_taken(fields.email, exclude_id=employee_id):
                raise Conflict("Another employee with this email already exists.")
            employee.first_name = fields.first_name
            employee.last_name = fields.last_name
            employee.email = fields.email
            employee.position = fields.position
            return employee.model_copy()

    def delete(self, employee_id: int) -> None:
        with self._lock:
            employee = self._find(employee_id)
            if employee is None:
                raise NotFound("Employee not found for deletion.")
            self._records.remove(employee)


gate = SessionGate(config.ADMIN_USERNAME, config.ADMIN_PASSWORD)
employees = EmployeeStore(seed=config.SEED_EMPLOYEES)
