from pydantic import BaseModel, Field

from collab.constants.team import DEFAULT_EVENT_NAME, TeamStatus


class TeamModel(BaseModel):
    """
    Model for registered teams.
    """

    id: str
    teamName: str = Field(..., min_length=1)
    memberCount: int = Field(default=0, ge=0)
    eventName: str = DEFAULT_EVENT_NAME
    createdAt: str
    status: str = TeamStatus.ACTIVE.value
