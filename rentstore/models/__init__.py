"""ORM Models — one table per record collection.

Invariants:
    - All tables inherit from Base (db/base.py) through CollectionRow
    - Importing this package registers every table on Base.metadata
"""

from rentstore.models.collection_rows import (  # noqa: F401
    ApplicationRow,
    CollectionRow,
    MaintenanceRow,
    MessageRow,
    PropertyRow,
    RentalRow,
    ReviewRow,
    UserRow,
)
