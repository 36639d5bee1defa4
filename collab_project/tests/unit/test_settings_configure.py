import unittest
import os
from unittest.mock import patch
from collab_project.settings.configure import configure_settings_module, SETTINGS_MODULE


class SettingModuleConfigTests(unittest.TestCase):
    def test_uses_consolidated_settings(self):
        """The consolidated settings module is used when nothing else is configured."""
        with patch.dict(os.environ, {}, clear=True):
            configure_settings_module()
            self.assertEqual(os.getenv("DJANGO_SETTINGS_MODULE"), SETTINGS_MODULE)

    def test_keeps_explicit_settings_module(self):
        with patch.dict(os.environ, {"DJANGO_SETTINGS_MODULE": "custom.settings"}, clear=True):
            configure_settings_module()
            self.assertEqual(os.getenv("DJANGO_SETTINGS_MODULE"), "custom.settings")
