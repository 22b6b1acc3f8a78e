"""
Domain layer.

The domain layer contains the lodging inventory business logic.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Floors and hotel rooms, objects with identity and lifecycle
- Value Objects: Immutable, self-validating attribute types
- Aggregate Roots: Accommodation, Room and RoomType consistency boundaries
- Domain Services: Stateless rules spanning more than one aggregate
"""
