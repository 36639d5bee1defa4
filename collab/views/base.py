from django.apps import apps
from rest_framework.views import APIView

from collab.store.collaboration_store import CollaborationStore


class StoreAPIView(APIView):
    """
    Base view for endpoints backed by the collaboration store.

    ``store`` can be injected with ``View.as_view(store=...)``; otherwise the
    instance built by the app config at startup is used.
    """

    store: CollaborationStore | None = None

    def get_store(self) -> CollaborationStore:
        if self.store is not None:
            return self.store
        return apps.get_app_config("collab").store
