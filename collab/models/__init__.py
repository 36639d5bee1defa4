from collab.models.team import TeamModel
from collab.models.task import TaskModel
from collab.models.update import UpdateModel
from collab.models.stats import StatsModel

__all__ = ["TeamModel", "TaskModel", "UpdateModel", "StatsModel"]
