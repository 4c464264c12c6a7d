"""Message — direct message between two users, optionally about a property.

Only the read flag may change after creation (enforced by the repository).
"""

from rentstore.core.domain_types import MessageType
from rentstore.schemas.common import Entity, MessageRef, NonEmptyStr, PropertyRef, UserRef


class Message(Entity):
    id: MessageRef
    sender_id: UserRef
    receiver_id: UserRef
    property_id: PropertyRef | None = None
    content: NonEmptyStr
    type: MessageType = MessageType.TEXT
    read: bool = False
