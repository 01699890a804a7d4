"""User preference schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from ironlog.core.enums import NotificationPermission
from ironlog.services.reminders import REMINDER_TIME_PATTERN


class PreferencesRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    reminder_time: str
    notification_permission: NotificationPermission
    last_reminded_on: date | None = None


class ReminderUpdate(BaseModel):
    reminder_time: str = Field(..., pattern=REMINDER_TIME_PATTERN.pattern)


class PermissionUpdate(BaseModel):
    permission: NotificationPermission


class ReminderCheck(BaseModel):
    due: bool
    notified: bool
