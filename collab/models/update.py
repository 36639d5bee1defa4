from pydantic import BaseModel, Field

from collab.constants.update import UpdateType


class UpdateModel(BaseModel):
    """
    Model for free-text team status updates.
    """

    id: str
    teamName: str = Field(..., min_length=1)
    updateText: str = Field(..., min_length=1)
    updateType: str = UpdateType.GENERAL.value
    timestamp: str
    date: str
    time: str
