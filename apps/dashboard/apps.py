import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class DashboardConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.dashboard'

    def ready(self):
        env = settings.API_ENVIRONMENTS.get(settings.ACTIVE_ENVIRONMENT, {})
        logger.info(
            f"API configuration: {env.get('DESCRIPTION', settings.ACTIVE_ENVIRONMENT)} -> {settings.API_BASE_URL}"
        )
