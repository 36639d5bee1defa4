from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse, OpenApiExample
from drf_spectacular.types import OpenApiTypes

from collab.views.base import StoreAPIView
from collab.serializers.create_task_serializer import CreateTaskSerializer
from collab.serializers.get_tasks_serializer import GetTaskQueryParamsSerializer
from collab.serializers.update_task_serializer import UpdateTaskStatusSerializer
from collab.dto.responses.api_response import MessageResponse
from collab.dto.responses.task_responses import GetTasksResponse, TaskResponse
from collab.constants.messages import AppMessages


class TaskListView(StoreAPIView):
    @extend_schema(
        operation_id="get_tasks",
        summary="List tasks",
        description="Return tasks in creation order, optionally filtered by exact team name and status.",
        tags=["tasks"],
        parameters=[
            OpenApiParameter(
                name="teamName",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Only return tasks for this team",
                required=False,
            ),
            OpenApiParameter(
                name="status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Only return tasks with this status (To Do, In Progress, Completed)",
                required=False,
            ),
        ],
        responses={
            200: OpenApiResponse(description="Tasks retrieved successfully"),
            500: OpenApiResponse(description="Internal server error"),
        },
    )
    def get(self, request: Request):
        query = GetTaskQueryParamsSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        tasks = self.get_store().list_tasks(
            team_name=query.validated_data["teamName"],
            status=query.validated_data["status"],
        )
        response = GetTasksResponse(tasks=tasks, count=len(tasks))
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_task",
        summary="Create new task",
        description="Create a task for a team. New tasks always start in the To Do status.",
        tags=["tasks"],
        request=CreateTaskSerializer,
        responses={
            201: OpenApiResponse(
                description="Task created successfully",
                examples=[
                    OpenApiExample(
                        "Task Created Successfully",
                        value={
                            "success": True,
                            "task": {
                                "id": "3f1c9a52-0c1e-4a5b-9f0e-2b7c4d8e6a10",
                                "teamName": "Alpha",
                                "taskTitle": "Design doc",
                                "assignedTo": "Unassigned",
                                "priority": "Medium",
                                "deadline": "",
                                "status": "To Do",
                                "createdAt": "2026-10-19T09:05:03.120Z",
                                "date": "10/19/2026",
                                "time": "9:05:03 AM",
                            },
                        },
                        response_only=True,
                    ),
                ],
            ),
            400: OpenApiResponse(description="Bad request - team name or task title is missing"),
            500: OpenApiResponse(description="Internal server error"),
        },
    )
    def post(self, request: Request):
        serializer = CreateTaskSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        task = self.get_store().create_task(
            team_name=serializer.validated_data["teamName"],
            task_title=serializer.validated_data["taskTitle"],
            assigned_to=serializer.validated_data["assignedTo"],
            priority=serializer.validated_data["priority"],
            deadline=serializer.validated_data["deadline"],
        )
        response = TaskResponse(task=task)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class TaskDetailView(StoreAPIView):
    @extend_schema(
        operation_id="update_task_status",
        summary="Update task status",
        description="Overwrite the status of a task. The value is stored as given.",
        tags=["tasks"],
        parameters=[
            OpenApiParameter(
                name="task_id",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.PATH,
                description="Unique identifier of the task",
            ),
        ],
        request=UpdateTaskStatusSerializer,
        responses={
            200: OpenApiResponse(description="Task updated successfully"),
            400: OpenApiResponse(description="Bad request - status is missing"),
            404: OpenApiResponse(description="Task not found"),
            500: OpenApiResponse(description="Internal server error"),
        },
    )
    def patch(self, request: Request, task_id: str):
        serializer = UpdateTaskStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        task = self.get_store().update_task_status(task_id, serializer.validated_data["status"])
        response = TaskResponse(task=task)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_task",
        summary="Delete task",
        description="Delete a task by its identifier.",
        tags=["tasks"],
        parameters=[
            OpenApiParameter(
                name="task_id",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.PATH,
                description="Unique identifier of the task",
            ),
        ],
        responses={
            200: OpenApiResponse(description="Task deleted successfully"),
            404: OpenApiResponse(description="Task not found"),
            500: OpenApiResponse(description="Internal server error"),
        },
    )
    def delete(self, request: Request, task_id: str):
        self.get_store().delete_task(task_id)
        response = MessageResponse(message=AppMessages.TASK_DELETED)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)
