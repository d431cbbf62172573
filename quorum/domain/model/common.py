"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen. State changes produce new instances, either through
    model_copy for trusted internal updates or through revised for edits
    that must pass validation again.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # NewType identifiers and value objects
    )

    def revised(self, **changes: Any) -> Self:
        """Return a validated copy with the given fields replaced.

        Raises:
            ValidationError: If the result breaks a field or model constraint
        """
        return self.model_validate(self.model_dump() | changes)
