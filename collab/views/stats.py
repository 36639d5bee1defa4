from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request
from drf_spectacular.utils import extend_schema, OpenApiResponse

from collab.views.base import StoreAPIView
from collab.dto.responses.api_response import MessageResponse
from collab.dto.responses.stats_response import GetStatsResponse
from collab.constants.messages import AppMessages


class StatsView(StoreAPIView):
    @extend_schema(
        operation_id="get_stats",
        summary="Dashboard statistics",
        description=(
            "Collection sizes plus task counts per status (To Do, In Progress, Completed) "
            "and per priority (High, Medium, Low). Tasks holding any other value are not counted in a bucket."
        ),
        tags=["stats"],
        responses={
            200: OpenApiResponse(description="Statistics computed successfully"),
            500: OpenApiResponse(description="Internal server error"),
        },
    )
    def get(self, request: Request):
        response = GetStatsResponse(stats=self.get_store().compute_stats())
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class ClearAllView(StoreAPIView):
    @extend_schema(
        operation_id="clear_all",
        summary="Clear all data",
        description="Remove every team, task and update.",
        tags=["stats"],
        responses={
            200: OpenApiResponse(description="All data cleared"),
            500: OpenApiResponse(description="Internal server error"),
        },
    )
    def delete(self, request: Request):
        self.get_store().clear_all()
        response = MessageResponse(message=AppMessages.ALL_DATA_CLEARED)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)
