from typing import List

from collab.dto.responses.api_response import ApiResponse
from collab.models.update import UpdateModel


class CreateUpdateResponse(ApiResponse):
    update: UpdateModel


class GetUpdatesResponse(ApiResponse):
    updates: List[UpdateModel] = []
    count: int = 0
