from collab.dto.responses.api_response import ApiResponse
from collab.models.stats import StatsModel


class GetStatsResponse(ApiResponse):
    stats: StatsModel
