from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from collab.views.base import StoreAPIView
from collab.serializers.create_update_serializer import CreateUpdateSerializer
from collab.serializers.get_updates_serializer import GetUpdateQueryParamsSerializer
from collab.dto.responses.api_response import MessageResponse
from collab.dto.responses.update_responses import CreateUpdateResponse, GetUpdatesResponse
from collab.constants.messages import AppMessages


class UpdateListView(StoreAPIView):
    @extend_schema(
        operation_id="get_updates",
        summary="List team updates",
        description="Return updates newest first, optionally for one team, capped by limit.",
        tags=["updates"],
        parameters=[
            OpenApiParameter(
                name="teamName",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Only return updates posted by this team",
                required=False,
            ),
            OpenApiParameter(
                name="limit",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                description="Maximum number of updates to return (default: 50)",
                required=False,
            ),
        ],
        responses={
            200: OpenApiResponse(description="Updates retrieved successfully"),
            500: OpenApiResponse(description="Internal server error"),
        },
    )
    def get(self, request: Request):
        query = GetUpdateQueryParamsSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        updates = self.get_store().list_updates(
            team_name=query.validated_data["teamName"],
            limit=query.validated_data["limit"],
        )
        response = GetUpdatesResponse(updates=updates, count=len(updates))
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_update",
        summary="Post a team update",
        description="Post a free-text update. It becomes the first item returned by the list endpoint.",
        tags=["updates"],
        request=CreateUpdateSerializer,
        responses={
            201: OpenApiResponse(description="Update posted successfully"),
            400: OpenApiResponse(description="Bad request - team name or update text is missing"),
            500: OpenApiResponse(description="Internal server error"),
        },
    )
    def post(self, request: Request):
        serializer = CreateUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        update = self.get_store().create_update(
            team_name=serializer.validated_data["teamName"],
            update_text=serializer.validated_data["updateText"],
            update_type=serializer.validated_data["updateType"],
        )
        response = CreateUpdateResponse(update=update)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class UpdateDetailView(StoreAPIView):
    @extend_schema(
        operation_id="delete_update",
        summary="Delete update",
        description="Delete a team update by its identifier.",
        tags=["updates"],
        parameters=[
            OpenApiParameter(
                name="update_id",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.PATH,
                description="Unique identifier of the update",
            ),
        ],
        responses={
            200: OpenApiResponse(description="Update deleted successfully"),
            404: OpenApiResponse(description="Update not found"),
            500: OpenApiResponse(description="Internal server error"),
        },
    )
    def delete(self, request: Request, update_id: str):
        self.get_store().delete_update(update_id)
        response = MessageResponse(message=AppMessages.UPDATE_DELETED)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)
