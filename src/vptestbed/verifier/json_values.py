"""Structural equality and sanity checks for opaque JSON payloads."""

import math

from pydantic import JsonValue


def json_equal(left: JsonValue, right: JsonValue) -> bool:
    """Compare two decoded JSON values by structure.

    Object key order is irrelevant, array order is significant and booleans
    never compare equal to numbers (unlike Python's ``True == 1``). Integers
    and floats are distinct: ``1`` and ``1.0`` differ.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if isinstance(left, dict):
        if not isinstance(right, dict) or left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)

    if isinstance(left, list):
        if not isinstance(right, list) or len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))

    # int, float, str or None
    return type(left) is type(right) and left == right


def is_finite_json(value: JsonValue) -> bool:
    """Return False if a NaN or infinity appears anywhere in the value."""
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, dict):
        return all(is_finite_json(v) for v in value.values())
    if isinstance(value, list):
        return all(is_finite_json(v) for v in value)
    return True
