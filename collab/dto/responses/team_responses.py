from typing import List

from collab.dto.responses.api_response import ApiResponse
from collab.models.team import TeamModel


class CreateTeamResponse(ApiResponse):
    team: TeamModel


class GetTeamsResponse(ApiResponse):
    teams: List[TeamModel] = []
    count: int = 0
