# tasks/partial.py
"""
Partial-update field values.

A field in an update request is either ``UNSET`` (the client did not supply
it, keep the stored value) or ``Set(value)`` (replace the stored value).
"""
from dataclasses import dataclass


class _Unset:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'UNSET'

    def __bool__(self):
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class Set:
    value: object


def from_mapping(data, key):
    """Read ``key`` from request data; only a missing key is UNSET, null is Set(None)."""
    if key not in data:
        return UNSET
    return Set(data[key])


def is_set(field):
    return isinstance(field, Set)


def resolve(field, current):
    """Return the value to store: the supplied one, or ``current`` when unset."""
    if isinstance(field, Set):
        return field.value
    return current
