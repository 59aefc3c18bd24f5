# campus/exceptions.py
"""
Error kinds raised by the service layer.
Translated to HTTP responses by the exception handlers in campus.main.
"""

from fastapi import status


class CampusError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidInputError(CampusError):
    """Caller supplied a malformed or out-of-range value."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"


class ResourceNotFoundError(CampusError):
    """No record matches a validated key."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"
