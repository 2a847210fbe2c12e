"""Value object bases."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable, compared by value: vote tallies, acceptance state, pages."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive; dumps as that primitive."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
