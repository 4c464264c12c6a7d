"""SQLAlchemy Declarative Base — shared base class for all collection tables.

Invariants:
    - All collection row models inherit from Base
    - Base.metadata is the single source of truth for table creation
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all record-store ORM models."""
    pass
