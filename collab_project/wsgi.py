"""
WSGI config for the collaboration hub.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

from django.core.wsgi import get_wsgi_application

from collab_project.settings.configure import configure_settings_module

configure_settings_module()

application = get_wsgi_application()
