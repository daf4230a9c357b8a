from models.auth import LoginRequest, LoginResponse, MessageResponse, StatusResponse
from models.employee import Employee, EmployeeFields

__all__ = [
    "Employee",
    "EmployeeFields",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "StatusResponse",
]
