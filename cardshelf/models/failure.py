"""
Failure classification for the grouping service.

Errors the system can explain are raised as KnownError subclasses and
converted to the ApiResponse envelope at the HTTP boundary.

Response types:
- Success: Grouping completed
- KnownFailure: The request could not be grouped, and the system knows why
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # Resource failures
    NOT_FOUND = "not_found"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"


T = TypeVar("T")


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


class ApiResponse(BaseModel, Generic[T]):
    """Response envelope used for failures and wrapped successes."""

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    @classmethod
    def success(cls, data: T) -> "ApiResponse[T]":
        """Create a success response."""
        return cls(outcome=OutcomeType.SUCCESS, data=data)

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a known failure response.

        Use when the system knows exactly why the operation failed.
        Example: Unknown grouping name, pack missing from metadata.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
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
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class MetadataLookupError(KnownError):
    """
    A card references a pack or cycle that is missing from the metadata.

    Metadata completeness is the caller's contract, so the grouping engine
    never catches this.
    """

    def __init__(self, entity: str, code: str):
        self.entity = entity
        self.code = code
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Unknown {entity} code '{code}'.",
            detail=f"No {entity} with code '{code}' exists in the metadata.",
            suggestion="Make sure the metadata covers every pack and cycle the cards reference.",
            status_code=422,
        )


class InvalidGroupingError(KnownError):
    """A grouping name is unknown or not allowed for the card kind."""

    def __init__(self, grouping: str, allowed: list[str]):
        self.grouping = grouping
        self.allowed = allowed
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"Cannot group cards by '{grouping}'.",
            detail=f"Allowed groupings: {', '.join(allowed)}",
            suggestion="Pick one of the allowed groupings.",
            status_code=422,
        )


class InvalidSortingError(KnownError):
    """A card sort name is unknown."""

    def __init__(self, sorting: list[str], allowed: list[str]):
        self.sorting = sorting
        self.allowed = allowed
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"Cannot sort cards by {', '.join(sorting)}.",
            detail=f"Allowed sorting: {', '.join(allowed)}",
            suggestion="Pick one of the allowed sorting options.",
            status_code=422,
        )
