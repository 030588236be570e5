from typing import Iterable, TypeVar

from .exceptions import NullArgumentError

T = TypeVar("T")


def not_none(value: T | None, message: str) -> T:
    """Return `value`, or raise `NullArgumentError` with the given message if it is ``None``."""
    if value is None:
        raise NullArgumentError(message)
    return value


def is_subset(objects: Iterable[int], superset: set | frozenset) -> bool:
    """Check if all the given objects belong to `superset`."""
    return all(obj in superset for obj in objects)


def intersects(objects: Iterable[int], other: set | frozenset) -> bool:
    """Check if at least one of the given objects belongs to `other`."""
    return any(obj in other for obj in objects)


def ratio(numerator: int, denominator: int) -> float:
    """Calculate ``numerator / denominator``, ``0.0`` for an empty denominator."""
    return 0.0 if not denominator else numerator / denominator
