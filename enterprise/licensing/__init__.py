"""
Enterprise Licensing Module

Provides license key verification and enterprise feature gating.
"""

from .config import LicenseConfig
from .errors import (
    EnterpriseLicenseRequiredError,
    KeyParseError,
    LicenseDecodeError,
    LicenseError,
    LicenseExpiredError,
    LicenseInvalidError,
    MalformedCredentialError,
    SignatureInvalidError,
    SourceReadError,
    TrialsUnsupportedError,
)
from .keys import get_public_key, verify_license_key
from .license import EnterpriseLicense, type_display_name
from .resources import Resources
from .service import (
    LicenseService,
    check_running_enterprise,
    get_shared_service,
    inject_test_service,
    register_service,
)

__all__ = [
    'EnterpriseLicense',
    'EnterpriseLicenseRequiredError',
    'KeyParseError',
    'LicenseConfig',
    'LicenseDecodeError',
    'LicenseError',
    'LicenseExpiredError',
    'LicenseInvalidError',
    'LicenseService',
    'MalformedCredentialError',
    'Resources',
    'SignatureInvalidError',
    'SourceReadError',
    'TrialsUnsupportedError',
    'check_running_enterprise',
    'get_public_key',
    'get_shared_service',
    'inject_test_service',
    'register_service',
    'type_display_name',
    'verify_license_key',
]
