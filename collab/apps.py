from django.apps import AppConfig
from django.conf import settings
import logging

from collab.store.collaboration_store import CollaborationStore

logger = logging.getLogger(__name__)


class CollabConfig(AppConfig):
    name = "collab"
    store: CollaborationStore | None = None

    def ready(self):
        """Build the process-wide collaboration store when Django starts"""
        self.store = CollaborationStore(
            time_zone=settings.TIME_ZONE,
            default_updates_limit=settings.COLLAB_SETTINGS["DEFAULT_UPDATES_LIMIT"],
        )
        logger.info("Collaboration store initialized (time_zone=%s)", settings.TIME_ZONE)
