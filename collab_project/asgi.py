"""
ASGI config for the collaboration hub.

It exposes the ASGI callable as a module-level variable named ``application``.
"""

from django.core.asgi import get_asgi_application

from collab_project.settings.configure import configure_settings_module

configure_settings_module()

application = get_asgi_application()
