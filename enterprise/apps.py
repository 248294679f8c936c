import logging

from django.apps import AppConfig, apps

from .licensing import LicenseConfig, Resources, register_service

logger = logging.getLogger(__name__)


class EnterpriseConfig(AppConfig):
    name = 'enterprise'
    verbose_name = 'Enterprise License'

    resources = None

    def ready(self):
        self.resources = Resources(logger=logging.getLogger('enterprise.licensing'))
        register_service(self.resources, LicenseConfig.from_settings())
        logger.debug("Enterprise license service registered")


def get_resources() -> Resources:
    """Resources of the running application, including the license service."""
    return apps.get_app_config('enterprise').resources
