"""Services Layer — entity repositories and the process-wide store.

Invariants:
    - Repositories are the only writers of their collection
    - Outcomes (ValidationError, NotFound) are returned, not raised
"""
