"""Application error types.

Every service raises one of these; the HTTP layer renders them as
``{"error": kind, "message": message}`` with the matching status code.
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors surfaced to the caller."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    kind = "database_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message}


class NotFoundError(AppError):
    """Referenced category, word or history entry does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    kind = "not_found"


class ValidationFailedError(AppError):
    """A business rule was violated."""

    status_code = status.HTTP_400_BAD_REQUEST
    kind = "validation_error"


class InsufficientWordsError(ValidationFailedError):
    """A letter bucket had fewer eligible words than a draft needs."""

    def __init__(self, bucket: int, available: int):
        super().__init__(
            f"Kategori için yeterli {bucket} harfli kelime yok "
            f"(en az 2 gerekli, {available} bulundu)"
        )
        self.bucket = bucket
        self.available = available

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["bucket"] = self.bucket
        data["available"] = self.available
        return data


class DuplicateError(AppError):
    """A unique constraint was hit."""

    status_code = status.HTTP_409_CONFLICT
    kind = "duplicate"


class PersistenceError(AppError):
    """The storage engine failed; the operation was rolled back."""
