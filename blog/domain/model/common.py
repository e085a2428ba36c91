"""Base model for all domain entities."""

from datetime import datetime, timezone
from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so they compare with database timestamps."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable; state changes produce a new instance.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a validated copy with the given fields replaced.

        Unlike ``model_copy(update=...)`` the result goes through field
        validation again, so invariants such as content length still hold.
        """
        return type(self).model_validate({**self.__dict__, **changes})
