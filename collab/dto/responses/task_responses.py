from typing import List

from collab.dto.responses.api_response import ApiResponse
from collab.models.task import TaskModel


class TaskResponse(ApiResponse):
    task: TaskModel


class GetTasksResponse(ApiResponse):
    tasks: List[TaskModel] = []
    count: int = 0
