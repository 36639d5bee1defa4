import logging
import threading
from collections import Counter
from datetime import tzinfo
from typing import Any, List, Optional
from zoneinfo import ZoneInfo

from collab.constants.messages import ValidationErrors
from collab.constants.task import DEFAULT_ASSIGNEE, TaskPriority, TaskStatus
from collab.constants.team import DEFAULT_EVENT_NAME, TeamStatus
from collab.constants.update import DEFAULT_UPDATES_LIMIT, UpdateType
from collab.exceptions.task_exceptions import TaskNotFoundException
from collab.exceptions.update_exceptions import UpdateNotFoundException
from collab.exceptions.validation_exceptions import ValidationException
from collab.models.stats import StatsModel
from collab.models.task import TaskModel
from collab.models.team import TeamModel
from collab.models.update import UpdateModel
from collab.utils.id_utils import generate_id
from collab.utils.limit_utils import parse_limit
from collab.utils.timestamp_utils import (
    format_display_date,
    format_display_time,
    format_iso_timestamp,
    utc_now,
)

logger = logging.getLogger(__name__)


class CollaborationStore:
    """
    In-memory holder of the teams, tasks and updates collections.

    Teams and tasks are kept in creation order. Updates are kept newest-first:
    a new update is inserted at the head, and reads never re-sort.

    Every public method runs under one re-entrant lock, so each call is atomic
    with respect to the others. Records are handed out as copies; the only way
    to change a stored record is through the store's own methods.
    """

    def __init__(self, time_zone: str | tzinfo = "UTC", default_updates_limit: int = DEFAULT_UPDATES_LIMIT):
        self._lock = threading.RLock()
        self._teams: List[TeamModel] = []
        self._tasks: List[TaskModel] = []
        self._updates: List[UpdateModel] = []
        self._tz = ZoneInfo(time_zone) if isinstance(time_zone, str) else time_zone
        self.default_updates_limit = default_updates_limit

    # ---- teams ----

    def create_team(
        self,
        team_name: Optional[str],
        member_count: Optional[int] = None,
        event_name: Optional[str] = None,
    ) -> TeamModel:
        if not team_name:
            raise ValidationException(ValidationErrors.TEAM_NAME_REQUIRED, field="teamName")

        team = TeamModel(
            id=generate_id(),
            teamName=team_name,
            memberCount=member_count or 0,
            eventName=event_name or DEFAULT_EVENT_NAME,
            createdAt=format_iso_timestamp(utc_now()),
            status=TeamStatus.ACTIVE.value,
        )
        with self._lock:
            self._teams.append(team)

        logger.info("Team created id=%s name=%s", team.id, team.teamName)
        return team.model_copy()

    def list_teams(self) -> List[TeamModel]:
        with self._lock:
            return [team.model_copy() for team in self._teams]

    # ---- tasks ----

    def create_task(
        self,
        team_name: Optional[str],
        task_title: Optional[str],
        assigned_to: Optional[str] = None,
        priority: Optional[str] = None,
        deadline: Optional[str] = None,
    ) -> TaskModel:
        if not team_name or not task_title:
            raise ValidationException(
                ValidationErrors.TASK_FIELDS_REQUIRED,
                field="teamName" if not team_name else "taskTitle",
            )

        now = utc_now()
        task = TaskModel(
            id=generate_id(),
            teamName=team_name,
            taskTitle=task_title,
            assignedTo=assigned_to or DEFAULT_ASSIGNEE,
            priority=priority or TaskPriority.MEDIUM.value,
            deadline=deadline or "",
            status=TaskStatus.TODO.value,
            createdAt=format_iso_timestamp(now),
            date=format_display_date(now, self._tz),
            time=format_display_time(now, self._tz),
        )
        with self._lock:
            self._tasks.append(task)

        logger.info("Task created id=%s team=%s priority=%s", task.id, task.teamName, task.priority)
        return task.model_copy()

    def list_tasks(self, team_name: Optional[str] = None, status: Optional[str] = None) -> List[TaskModel]:
        """
        Tasks matching every given filter by exact equality, in creation order.
        Empty filters impose no constraint.
        """
        with self._lock:
            return [
                task.model_copy()
                for task in self._tasks
                if (not team_name or task.teamName == team_name) and (not status or task.status == status)
            ]

    def update_task_status(self, task_id: str, new_status: str) -> TaskModel:
        """
        Overwrite a task's status.

        The new value is not checked against ``TaskStatus``: any string is stored.
        Values outside the canonical set are left out of the stats buckets.
        """
        with self._lock:
            task = self._find_task(task_id)
            previous_status = task.status
            task.status = new_status
            updated = task.model_copy()

        logger.info("Task status changed id=%s %s -> %s", task_id, previous_status, new_status)
        return updated

    def delete_task(self, task_id: str) -> None:
        with self._lock:
            remaining = [task for task in self._tasks if task.id != task_id]
            if len(remaining) == len(self._tasks):
                raise TaskNotFoundException(task_id)
            self._tasks = remaining

        logger.info("Task deleted id=%s", task_id)

    def _find_task(self, task_id: str) -> TaskModel:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundException(task_id)

    # ---- updates ----

    def create_update(
        self,
        team_name: Optional[str],
        update_text: Optional[str],
        update_type: Optional[str] = None,
    ) -> UpdateModel:
        if not team_name or not update_text:
            raise ValidationException(
                ValidationErrors.UPDATE_FIELDS_REQUIRED,
                field="teamName" if not team_name else "updateText",
            )

        now = utc_now()
        update = UpdateModel(
            id=generate_id(),
            teamName=team_name,
            updateText=update_text,
            updateType=update_type or UpdateType.GENERAL.value,
            timestamp=format_iso_timestamp(now),
            date=format_display_date(now, self._tz),
            time=format_display_time(now, self._tz),
        )
        with self._lock:
            self._updates.insert(0, update)

        logger.info("Update posted id=%s team=%s type=%s", update.id, update.teamName, update.updateType)
        return update.model_copy()

    def list_updates(self, team_name: Optional[str] = None, limit: Any = None) -> List[UpdateModel]:
        """
        Newest-first updates, optionally filtered by team, truncated to ``limit``.

        ``limit`` may be an int or text. Missing, non-numeric or negative values
        fall back to ``default_updates_limit``.
        """
        max_items = parse_limit(limit, self.default_updates_limit)
        with self._lock:
            matching = [update for update in self._updates if not team_name or update.teamName == team_name]
            return [update.model_copy() for update in matching[:max_items]]

    def delete_update(self, update_id: str) -> None:
        with self._lock:
            remaining = [update for update in self._updates if update.id != update_id]
            if len(remaining) == len(self._updates):
                raise UpdateNotFoundException(update_id)
            self._updates = remaining

        logger.info("Update deleted id=%s", update_id)

    # ---- aggregates ----

    def compute_stats(self) -> StatsModel:
        with self._lock:
            status_counts = Counter(task.status for task in self._tasks)
            priority_counts = Counter(task.priority for task in self._tasks)
            return StatsModel(
                totalTeams=len(self._teams),
                totalTasks=len(self._tasks),
                totalUpdates=len(self._updates),
                tasksByStatus={status.value: status_counts.get(status.value, 0) for status in TaskStatus},
                tasksByPriority={priority.value: priority_counts.get(priority.value, 0) for priority in TaskPriority},
            )

    def counts(self) -> dict[str, int]:
        with self._lock:
            return {"teams": len(self._teams), "tasks": len(self._tasks), "updates": len(self._updates)}

    def clear_all(self) -> None:
        with self._lock:
            self._teams = []
            self._tasks = []
            self._updates = []

        logger.info("All collaboration data cleared")
