from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request
from drf_spectacular.utils import extend_schema, OpenApiResponse

from collab.views.base import StoreAPIView
from collab.serializers.create_team_serializer import CreateTeamSerializer
from collab.dto.responses.team_responses import CreateTeamResponse, GetTeamsResponse


class TeamListView(StoreAPIView):
    @extend_schema(
        operation_id="get_teams",
        summary="List teams",
        description="Return every registered team in registration order.",
        tags=["teams"],
        responses={
            200: OpenApiResponse(description="Teams retrieved successfully"),
            500: OpenApiResponse(description="Internal server error"),
        },
    )
    def get(self, request: Request):
        teams = self.get_store().list_teams()
        response = GetTeamsResponse(teams=teams, count=len(teams))
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_team",
        summary="Register a new team",
        description="Register a team. memberCount defaults to 0 and eventName to General.",
        tags=["teams"],
        request=CreateTeamSerializer,
        responses={
            201: OpenApiResponse(description="Team created successfully"),
            400: OpenApiResponse(description="Bad request - team name is missing"),
            500: OpenApiResponse(description="Internal server error"),
        },
    )
    def post(self, request: Request):
        serializer = CreateTeamSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        team = self.get_store().create_team(
            team_name=serializer.validated_data["teamName"],
            member_count=serializer.validated_data["memberCount"],
            event_name=serializer.validated_data["eventName"],
        )
        response = CreateTeamResponse(team=team)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_201_CREATED)
