from pydantic import BaseModel


class ApiResponse(BaseModel):
    success: bool = True


class MessageResponse(ApiResponse):
    message: str
