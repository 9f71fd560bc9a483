"""
Failure classification for pack generation.

Every failure in netdraft is fatal. A malformed catalog must never silently
produce a wrong pack, and a slot that cannot be filled must never produce a
short one. Both error kinds derive from NetdraftError, which carries a
FailureKind and renders to a FailureDetail for the CLI diagnostic.
"""

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input data failures
    CATALOG_DATA = "catalog_data"

    # Sampling failures
    PACK_EXHAUSTED = "pack_exhausted"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )

    def render(self) -> str:
        """Render as diagnostic text, one item per line."""
        lines = [f"{self.kind.value}: {self.message}"]
        if self.detail:
            lines.append(self.detail)
        if self.suggestion:
            lines.append(self.suggestion)
        return "\n".join(lines)


class NetdraftError(Exception):
    """
    Base class for fatal, explainable failures.

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


class CatalogDataError(NetdraftError):
    """
    Raised when a card record cannot be classified.

    The offending field, its raw value, and the card name are kept so the
    data file can be located and patched.
    """

    def __init__(self, field: str, value: object, card_name: str):
        self.field = field
        self.value = value
        self.card_name = card_name
        super().__init__(
            kind=FailureKind.CATALOG_DATA,
            message=f"{field}={value!r} ({card_name})",
            suggestion="Fix the card record or add a data patch for it.",
        )


class PackExhaustedError(NetdraftError):
    """
    Raised when a slot's pool is empty after exclusions.

    This is a hard failure: the catalog cannot satisfy the requested pack
    composition. No partial pack is ever emitted.
    """

    def __init__(self, slot_description: str, chosen: Iterable[str]):
        self.slot_description = slot_description
        self.chosen = list(chosen)
        chosen_text = ", ".join(self.chosen) if self.chosen else "(none)"
        super().__init__(
            kind=FailureKind.PACK_EXHAUSTED,
            message=f"Could not select {slot_description}",
            detail=f"Already chosen: {chosen_text}",
            suggestion="The catalog has too few cards for this pack composition.",
        )
