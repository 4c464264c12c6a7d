"""Entity Schemas — typed builders for the seven record kinds.

Invariants:
    - Every field and its default is enumerated; unknown fields are rejected
    - Python attributes are snake_case, the wire/persisted form is camelCase

Design Decisions:
    - Separate from models/: schemas are the entity contracts, models/ are
      the storage rows that carry their JSON dump
"""
