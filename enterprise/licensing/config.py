"""
License Configuration

Where the license comes from. An inline license always wins over an explicit
file path, which wins over the default file path.
"""

import os
from dataclasses import dataclass

from django.conf import settings

from . import keys

DEFAULT_LICENSE_FILEPATH = '/etc/redpanda/redpanda.license'

LICENSE_ENV_VAR = 'REDPANDA_LICENSE'
LICENSE_FILEPATH_ENV_VAR = 'REDPANDA_LICENSE_FILEPATH'


@dataclass(frozen=True)
class LicenseConfig:
    license: str = ''
    license_filepath: str = ''

    # Just for testing
    custom_public_key_pem: bytes = b''
    custom_default_license_filepath: str = ''

    @classmethod
    def from_settings(cls) -> 'LicenseConfig':
        """
        Build a config from Django settings, falling back to the environment.

        Settings:
            ENTERPRISE_LICENSE: Inline license text
            ENTERPRISE_LICENSE_FILEPATH: Path to a license file
            ENTERPRISE_LICENSE_DEFAULT_FILEPATH: Override of the default path
        """
        inline = getattr(settings, 'ENTERPRISE_LICENSE', '') or os.environ.get(LICENSE_ENV_VAR, '')
        license_filepath = (
            getattr(settings, 'ENTERPRISE_LICENSE_FILEPATH', '')
            or os.environ.get(LICENSE_FILEPATH_ENV_VAR, '')
        )
        return cls(
            license=inline,
            license_filepath=license_filepath,
            custom_default_license_filepath=getattr(settings, 'ENTERPRISE_LICENSE_DEFAULT_FILEPATH', ''),
        )

    def public_key_pem(self) -> bytes:
        if self.custom_public_key_pem:
            return self.custom_public_key_pem
        return keys.PUBLIC_KEY_PEM

    def default_license_filepath(self) -> str:
        if self.custom_default_license_filepath:
            return self.custom_default_license_filepath
        return DEFAULT_LICENSE_FILEPATH
