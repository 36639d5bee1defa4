import logging
from typing import List
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework import status
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.utils.serializer_helpers import ReturnDict
from django.conf import settings

from collab.dto.responses.error_response import ApiErrorDetail, ApiErrorResponse, ApiErrorSource
from collab.constants.messages import ApiErrors
from collab.exceptions.task_exceptions import TaskNotFoundException
from collab.exceptions.update_exceptions import UpdateNotFoundException
from collab.exceptions.validation_exceptions import ValidationException

logger = logging.getLogger(__name__)


def format_validation_errors(errors) -> List[ApiErrorDetail]:
    formatted_errors = []
    if isinstance(errors, ReturnDict | dict):
        for field, messages in errors.items():
            details = messages if isinstance(messages, list) else [messages]
            for message_detail in details:
                if isinstance(message_detail, dict):
                    nested_errors = format_validation_errors(message_detail)
                    formatted_errors.extend(nested_errors)
                else:
                    formatted_errors.append(
                        ApiErrorDetail(
                            source={ApiErrorSource.PARAMETER: field},
                            title=ApiErrors.VALIDATION_ERROR,
                            detail=str(message_detail),
                        )
                    )
    elif isinstance(errors, list):
        for message_detail in errors:
            formatted_errors.append(ApiErrorDetail(title=ApiErrors.VALIDATION_ERROR, detail=str(message_detail)))
    return formatted_errors


def handle_exception(exc, context):
    """
    Render every error raised inside a view as ``{"success": false, "error": ...}``.

    Known domain errors map to 400/404. Anything unexpected is logged and
    answered with a generic 500 so raw exceptions never reach the client.
    """
    response = drf_exception_handler(exc, context)
    kwargs = context.get("kwargs", {})

    error_list = []
    debug_detail = None

    if isinstance(exc, ValidationException):
        status_code = status.HTTP_400_BAD_REQUEST
        error_message = exc.message
        error_list.append(
            ApiErrorDetail(
                source={ApiErrorSource.PARAMETER: exc.field} if exc.field else None,
                title=ApiErrors.VALIDATION_ERROR,
                detail=exc.message,
            )
        )
    elif isinstance(exc, TaskNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
        error_message = exc.message
        error_list.append(
            ApiErrorDetail(
                source={ApiErrorSource.PATH: "task_id"} if kwargs.get("task_id") else None,
                title=ApiErrors.RESOURCE_NOT_FOUND_TITLE,
                detail=exc.message,
            )
        )
    elif isinstance(exc, UpdateNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
        error_message = exc.message
        error_list.append(
            ApiErrorDetail(
                source={ApiErrorSource.PATH: "update_id"} if kwargs.get("update_id") else None,
                title=ApiErrors.RESOURCE_NOT_FOUND_TITLE,
                detail=exc.message,
            )
        )
    elif isinstance(exc, DRFValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        error_list = format_validation_errors(exc.detail)
        error_message = error_list[0].detail if error_list else ApiErrors.VALIDATION_ERROR
    elif response is not None:
        # Framework-level errors such as 405 or malformed JSON
        status_code = response.status_code
        if isinstance(response.data, dict) and "detail" in response.data:
            error_message = str(response.data["detail"])
        else:
            error_message = str(response.data)
        error_list.append(ApiErrorDetail(title=str(exc), detail=error_message))
    else:
        logger.error(f"Unhandled error in {context.get('view').__class__.__name__}: {exc}", exc_info=exc)
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        error_message = ApiErrors.SERVER_ERROR
        error_list = []
        if settings.DEBUG:
            debug_detail = str(exc)

    final_response_data = ApiErrorResponse(
        error=error_message,
        errors=error_list or None,
        detail=debug_detail,
    )
    return Response(data=final_response_data.model_dump(mode="json", exclude_none=True), status=status_code)
