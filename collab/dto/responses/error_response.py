from enum import Enum
from typing import Dict, List
from pydantic import BaseModel


class ApiErrorSource(Enum):
    PARAMETER = "parameter"
    PATH = "path"
    HEADER = "header"


class ApiErrorDetail(BaseModel):
    source: Dict[ApiErrorSource, str] | None = None
    title: str | None = None
    detail: str | None = None


class ApiErrorResponse(BaseModel):
    success: bool = False
    error: str
    errors: List[ApiErrorDetail] | None = None
    detail: str | None = None
