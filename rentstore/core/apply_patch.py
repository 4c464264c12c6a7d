"""Patch Merging — folds a caller's partial update into a stored record's JSON form.

Invariants:
    - Pure: returns a new dict, neither input is mutated
    - Nested objects merge key by key; lists and scalars replace wholesale
    - Patch keys are normalized to camelCase before merging, so snake_case
      and camelCase patches land on the same stored key
    - An explicit None in the patch clears the field (the schema decides
      whether that is allowed)
"""

import re
from collections.abc import Mapping

_SNAKE_PART = re.compile(r"_([a-z0-9])")
_CAMEL_HUMP = re.compile(r"(?<!^)([A-Z])")


def camel_key(key: str) -> str:
    return _SNAKE_PART.sub(lambda m: m.group(1).upper(), key)


def snake_key(key: str) -> str:
    return _CAMEL_HUMP.sub(lambda m: "_" + m.group(1).lower(), key)


def normalize_keys(value: object) -> object:
    """Recursively convert mapping keys to camelCase."""
    if isinstance(value, Mapping):
        return {camel_key(str(k)): normalize_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [normalize_keys(item) for item in value]
    return value


def merge_patch(current: Mapping, patch: Mapping) -> dict:
    merged = dict(current)
    for key, value in normalize_keys(patch).items():
        existing = merged.get(key)
        if isinstance(value, Mapping) and isinstance(existing, Mapping):
            merged[key] = merge_patch(existing, value)
        else:
            merged[key] = value
    return merged
