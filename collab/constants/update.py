from enum import Enum


class UpdateType(Enum):
    PROGRESS = "Progress"
    ACHIEVEMENT = "Achievement"
    BLOCKER = "Blocker"
    GENERAL = "General"


DEFAULT_UPDATES_LIMIT = 50
