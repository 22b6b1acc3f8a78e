"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass
    class Floor(Entity[FloorId]):
        id: FloorId
        name: str

        def update_name(self, name: str) -> None:
            self.name = name
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID

from .exceptions import InvalidInputError
from .identifiers import IdGenerator, default_id_generator
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap a UUID. They provide type safety
    to prevent mixing up IDs of different entities.

    Example:
        @dataclass(frozen=True)
        class RoomId(EntityId):
            pass

        room_id = RoomId.generate()
        room_type_id = RoomTypeId(room_id.value)
        # These are different types, preventing accidental mixing
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise InvalidInputError(
                f"{self.__class__.__name__} must wrap a UUID",
                field="id",
                value=self.value,
            )

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls, id_generator: IdGenerator = default_id_generator) -> Self:
        """Create a fresh identifier from the given generator."""
        return cls(id_generator())

    @classmethod
    def from_string(cls, raw: str) -> Self:
        """Parse an identifier from its canonical string form."""
        try:
            return cls(UUID(raw))
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(
                f"Invalid {cls.__name__}: {raw!r}", field="id", value=raw
            ) from exc

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
