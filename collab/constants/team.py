from enum import Enum


class TeamStatus(Enum):
    ACTIVE = "Active"


DEFAULT_EVENT_NAME = "General"
