"""Domain exceptions surfaced by the service layer and mapped to HTTP codes."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class ProductHubError(Exception):
    """Base error carrying a caller-safe message and HTTP status."""

    status_code = 500
    error = "InternalError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ProductHubError, ValueError):
    """Input failed shape or range checks before reaching the database."""

    status_code = 400
    error = "ValidationError"

    def __init__(self, errors: list[FieldError], message: str = "Validation failed") -> None:
        super().__init__(message)
        self.errors = errors


class NotFoundError(ProductHubError, LookupError):
    status_code = 404
    error = "NotFound"


class ConflictError(ProductHubError):
    """Request parts disagree with each other, e.g. path id vs body id."""

    status_code = 400
    error = "Conflict"


class StorageError(ProductHubError):
    """Database failure, reported without driver details."""

    status_code = 500
    error = "StorageError"
