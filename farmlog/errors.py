"""Domain errors raised by the store and services.

Every error carries the HTTP status it maps to and a human-readable message;
the application's exception handler turns them into ``{"message": ...}``.
"""
from __future__ import annotations


class FarmlogError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(FarmlogError):
    status_code = 400


class InvalidIdentifier(ValidationFailed):
    def __init__(self, message: str = "Invalid ID format"):
        super().__init__(message)


class RecordNotFound(FarmlogError):
    status_code = 404

    def __init__(self, label: str):
        super().__init__(f"{label} not found")
        self.label = label


class ConstraintViolation(FarmlogError):
    status_code = 409


class InsufficientQuantity(ConstraintViolation):
    # floor violation is a bad request for the caller, not a conflict
    status_code = 400

    def __init__(self, message: str = "Insufficient quantity"):
        super().__init__(message)


class NotAuthenticated(FarmlogError):
    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)
