# errors.py
from enum import Enum


class StudentErrorKind(str, Enum):
    STORAGE_ERROR = "storage_error"  # the database itself failed
    NOT_FOUND = "not_found"
    INSERTION_FAILED = "insertion_failed"  # insert returned without an id


class DatabaseConnectionError(Exception):
    """Raised when the MongoDB server cannot be reached."""


class ConfigurationError(Exception):
    pass
