"""Coach chat schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ironlog.core.constants import NEW_CHAT_TITLE
from ironlog.core.enums import ChatRole


class ThreadCreate(BaseModel):
    title: str = Field(NEW_CHAT_TITLE, max_length=255)


class ThreadRename(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)


class ThreadRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    title: str
    preview: str = ""
    created_at: datetime
    updated_at: datetime


class ChatMessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    role: ChatRole
    text: str
    created_at: datetime


class SendMessage(BaseModel):
    text: str = Field(..., min_length=1, max_length=4000)


class SendResult(BaseModel):
    thread: ThreadRead
    messages: list[ChatMessageRead]


class CoachAskRequest(BaseModel):
    """Stateless question: nothing is persisted."""

    message: str = Field(..., min_length=1, max_length=4000)
    context: str | None = None


class CoachReply(BaseModel):
    reply: str
