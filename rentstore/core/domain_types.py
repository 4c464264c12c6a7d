"""Domain Types — identifier aliases and enumerations shared by every entity.

Invariants:
    - One identifier alias per entity kind; a PropertyId is never passed where
      a UserId is expected (checked statically)
    - All enumerated fields are str Enums: serialize to their literal value
    - Status lifecycles live in core/enforce_transitions.py, not here

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, ids stay plain str in
      the persisted JSON
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
PropertyId = NewType("PropertyId", str)
ReviewId = NewType("ReviewId", str)
RentalId = NewType("RentalId", str)
ApplicationId = NewType("ApplicationId", str)
MessageId = NewType("MessageId", str)
MaintenanceId = NewType("MaintenanceId", str)
PaymentId = NewType("PaymentId", str)


# ─── Enums ───────────────────────────────────────────────────────

class UserType(str, Enum):
    TENANT = "tenant"
    LANDLORD = "landlord"
    AGENCY = "agency"


class PropertyType(str, Enum):
    APARTMENT = "apartment"
    HOUSE = "house"
    ROOM = "room"
    COMMERCIAL = "commercial"


class PropertyStatus(str, Enum):
    """Listing state. Only AVAILABLE properties are searchable."""
    AVAILABLE = "available"
    RENTED = "rented"
    MAINTENANCE = "maintenance"
    UNLISTED = "unlisted"


class RentalStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class MessageType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    DOCUMENT = "document"


class MaintenanceCategory(str, Enum):
    REPAIR = "repair"
    REPLACEMENT = "replacement"
    INSPECTION = "inspection"
    EMERGENCY = "emergency"


class MaintenanceStatus(str, Enum):
    """Ticket progress, declared in lifecycle order."""
    REPORTED = "reported"
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class MaintenancePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EMERGENCY = "emergency"


class RentalDocumentType(str, Enum):
    LEASE = "lease"
    ID = "id"
    PROOF_OF_INCOME = "proof_of_income"
    OTHER = "other"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    LATE = "late"
    MISSED = "missed"
