
class ErrorMessages:
    COMPANY_NOT_FOUND = "Company not found with id: {id}"
    COMPANY_NAME_ALREADY_EXISTS = "Company name already exists"
    COMPANY_EMAIL_ALREADY_EXISTS = "Company email already exists"
    COMPANY_HAS_USERS = "Cannot delete company with associated users"

    USER_NOT_FOUND = "User not found with id: {id}"
    EMAIL_ALREADY_EXISTS = "Email already exists"

    INTEGRITY_VIOLATION = "Record conflicts with an existing record"


class RecordError(Exception):
    """Base class for errors raised by the record managers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(RecordError):
    """The referenced record does not exist."""


class ConflictError(RecordError):
    """A uniqueness or referential-safety rule would be violated."""
