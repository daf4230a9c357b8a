"""
Error taxonomy for the admin API.

Every error maps to one HTTP status and is rendered as {"message": ...}
by the handler registered in main.py.
"""


class EmployeeAdminError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(EmployeeAdminError):
    """The session guard denied the request."""
    status_code = 401

    def __init__(self, message: str = "Unauthorized: Admin not logged in."):
        super().__init__(message)


class ValidationError(EmployeeAdminError):
    """A record field is missing, not a string, blank, or a malformed email."""
    status_code = 400


class BadRequest(EmployeeAdminError):
    """The id path parameter is not an integer."""
    status_code = 400

    def __init__(self, message: str = "Invalid employee ID format."):
        super().__init__(message)


class NotFound(EmployeeAdminError):
    status_code = 404


class Conflict(EmployeeAdminError):
    """Another record already uses this email."""
    status_code = 409
