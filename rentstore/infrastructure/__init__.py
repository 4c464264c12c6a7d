"""Infrastructure Layer — database access, durable collections, logging setup.

Invariants:
    - Every SQLAlchemy failure is mapped to DatabaseError (core/errors.py)
    - Every write commits before returning (write-through)
"""
