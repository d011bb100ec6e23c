from datetime import datetime

from pydantic import BaseModel


class NotificationResponse(BaseModel):
    id: str
    message: str
    type: str
    read: bool
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class NotificationList(BaseModel):
    notifications: list[NotificationResponse]


class UnreadCount(BaseModel):
    unreadCount: int


class NotificationCreate(BaseModel):
    user_id: str
    message: str
    type: str | None = "info"


class NotificationCreated(BaseModel):
    message: str = "Notification created successfully"
    notificationId: str


class MessageCreate(BaseModel):
    candidateId: str | None = None
    message: str | None = None


class MessageSent(BaseModel):
    message: str = "Message sent successfully"
    messageId: str
