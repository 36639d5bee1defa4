from pydantic import BaseModel, Field

from collab.constants.task import DEFAULT_ASSIGNEE, TaskPriority, TaskStatus


class TaskModel(BaseModel):
    """
    Model for tasks.

    ``teamName`` is a soft reference: it is matched by text and never checked
    against the registered teams. ``priority`` and ``status`` are open strings;
    the enums in ``collab.constants.task`` only name the conventional values.
    """

    id: str
    teamName: str = Field(..., min_length=1)
    taskTitle: str = Field(..., min_length=1)
    assignedTo: str = DEFAULT_ASSIGNEE
    priority: str = TaskPriority.MEDIUM.value
    deadline: str = ""
    status: str = TaskStatus.TODO.value
    createdAt: str
    date: str
    time: str
