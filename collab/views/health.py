from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from collab.views.base import StoreAPIView
from collab.constants.health import AppHealthStatus, ComponentHealthStatus


class HealthView(StoreAPIView):
    @extend_schema(
        operation_id="health_check",
        summary="Health check",
        description="Check the health status of the application and its components",
        tags=["health"],
        responses={
            200: OpenApiResponse(description="Application is healthy"),
            503: OpenApiResponse(description="Application is unhealthy"),
        },
    )
    def get(self, request):
        store = self.get_store()
        is_store_ready = store is not None

        store_component = {
            "status": ComponentHealthStatus.UP.name if is_store_ready else ComponentHealthStatus.DOWN.name,
        }
        if is_store_ready:
            store_component["records"] = store.counts()

        overall_status = AppHealthStatus.UP if is_store_ready else AppHealthStatus.DOWN

        response = {
            "status": overall_status.name,
            "components": {
                "store": store_component,
            },
        }
        return Response(response, overall_status.http_status)
