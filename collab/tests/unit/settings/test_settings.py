from unittest import TestCase
from corsheaders.conf import conf as cors_conf
from django.apps import apps
from django.conf import settings
from django.db import connections
from django.urls import reverse

from collab.store.collaboration_store import CollaborationStore


class SettingsTest(TestCase):
    """Tests for Django project settings configuration"""

    def test_exception_handler_is_registered(self):
        self.assertEqual(
            settings.REST_FRAMEWORK["EXCEPTION_HANDLER"],
            "collab.exceptions.exception_handler.handle_exception",
        )

    def test_default_updates_limit(self):
        self.assertEqual(settings.COLLAB_SETTINGS["DEFAULT_UPDATES_LIMIT"], 50)

    def test_no_database_is_configured(self):
        self.assertEqual(connections.settings["default"]["ENGINE"], "django.db.backends.dummy")

    def test_collab_logger_is_configured(self):
        collab_logger = settings.LOGGING["loggers"]["collab"]
        self.assertEqual(collab_logger["handlers"], ["console"])
        self.assertIn(collab_logger["level"], {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

    def test_app_config_builds_store(self):
        store = apps.get_app_config("collab").store
        self.assertIsInstance(store, CollaborationStore)
        self.assertEqual(store.default_updates_limit, settings.COLLAB_SETTINGS["DEFAULT_UPDATES_LIMIT"])

    def test_cors_allowed_headers_use_the_library_setting_name(self):
        self.assertIn("content-type", cors_conf.CORS_ALLOW_HEADERS)
        self.assertFalse(hasattr(settings, "CORS_ALLOWED_HEADERS"))

    def test_swagger_ui_uses_the_mounted_schema_route(self):
        swagger_url = settings.SPECTACULAR_SETTINGS.get("SWAGGER_UI_SETTINGS", {}).get("url")
        self.assertIn(swagger_url, (None, reverse("schema")))
