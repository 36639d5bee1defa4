import os
from dotenv import load_dotenv

load_dotenv()

SETTINGS_MODULE = "collab_project.settings.settings"


def configure_settings_module():
    """
    Point Django at the consolidated settings module.
    All environment-specific configuration is handled through environment variables.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", SETTINGS_MODULE)
