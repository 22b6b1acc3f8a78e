"""Identifier generation capability injected into aggregate factories."""

from collections.abc import Callable
from uuid import UUID, uuid4

IdGenerator = Callable[[], UUID]

default_id_generator: IdGenerator = uuid4


def sequential_id_generator(start: int = 1) -> IdGenerator:
    """
    Build a deterministic generator yielding UUIDs 00000000-...-000000000001, 2, 3...

    Intended for tests and fixtures that need predictable identities.
    """
    counter = start

    def generate() -> UUID:
        nonlocal counter
        value = UUID(int=counter)
        counter += 1
        return value

    return generate
