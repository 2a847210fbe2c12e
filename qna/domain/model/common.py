"""Base model for domain entities."""

from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain entity.

    Edits produce a new instance through ``revise``; the owning repository
    persists it.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def revise(self, **changes: Any) -> Self:
        """Copy with ``changes`` applied and field constraints re-checked.

        Entities that track ``updated_at`` get it bumped unless the caller
        sets it explicitly.
        """
        if "updated_at" in type(self).model_fields:
            changes.setdefault("updated_at", datetime.now())
        return type(self).model_validate({**self.model_dump(), **changes})
