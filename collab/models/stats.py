from typing import Dict
from pydantic import BaseModel


class StatsModel(BaseModel):
    totalTeams: int = 0
    totalTasks: int = 0
    totalUpdates: int = 0
    tasksByStatus: Dict[str, int]
    tasksByPriority: Dict[str, int]
