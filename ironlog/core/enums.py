"""Shared enums for models and API."""

from enum import Enum


class TrendStatus(str, Enum):
    """Direction of an exercise's recent performance."""

    PROGRESSING = "Progressing"
    MAINTAINING = "Maintaining"
    REGRESSING = "Regressing"


class NotificationPermission(str, Enum):
    """Notification permission as reported by the client."""

    GRANTED = "granted"
    DENIED = "denied"
    DEFAULT = "default"


class ChatRole(str, Enum):
    """Author of a coach chat message."""

    USER = "user"
    MODEL = "model"
