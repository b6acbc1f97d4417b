"""Import all models so Base.metadata sees every table."""
from mitrai_chat.infrastructure.db.models.message import MessageModel
from mitrai_chat.infrastructure.db.models.notification import NotificationModel
from mitrai_chat.infrastructure.db.models.thread import ChatThreadModel

__all__ = [
    "ChatThreadModel",
    "MessageModel",
    "NotificationModel",
]
