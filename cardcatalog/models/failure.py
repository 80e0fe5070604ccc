"""
Failure classification for catalog loading.

Loading the bundled catalog is the only operation in the core that can
fail. Every failure is classified by a FailureKind and carried by a
KnownError subclass so the presentation layer can explain an empty
catalog without inspecting exception types.

INVARIANT: Load failures never escape CatalogStore.load(). They are
logged and recorded as a FailureDetail on the store.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class DataUnavailableError(KnownError):
    """Raised when the bundled catalog resource cannot be located or opened."""

    def __init__(self, resource_name: str, detail: str | None = None):
        self.resource_name = resource_name
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Card catalog '{resource_name}' is not available.",
            detail=detail,
            suggestion="Check that the catalog JSON file ships with the application.",
        )


class CatalogDecodeError(KnownError):
    """
    Raised when catalog content does not match the card schema.

    The underlying JSON or validation error is kept as __cause__.
    """

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.VALIDATION_FAILED,
            message=message,
            detail=detail,
            suggestion="Replace the catalog file with a valid Scryfall export.",
        )
