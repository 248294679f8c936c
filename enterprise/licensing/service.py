"""
License Service

Loads the enterprise license once at startup and publishes the result for
the rest of the process. Consumers read the published license through
current_license(); it is never re-validated after loading.
"""

import logging
from datetime import timedelta
from typing import Optional

from .config import LicenseConfig
from .errors import (
    EnterpriseLicenseRequiredError,
    LicenseError,
    LicenseInvalidError,
    SourceReadError,
    TrialsUnsupportedError,
)
from .keys import verify_license_key
from .license import (
    LICENSE_TYPE_ENTERPRISE,
    LICENSE_TYPE_OPEN_SOURCE,
    LICENSE_TYPE_TRIAL,
    EnterpriseLicense,
    unix_now,
)
from .resources import Resources

# =============================================================================
# Constants
# =============================================================================

OPEN_SOURCE_LICENSE_TTL = int(timedelta(days=365 * 10).total_seconds())
TEST_LICENSE_TTL = int(timedelta(hours=1).total_seconds())


class LicenseService:
    """
    Service holding the loaded enterprise license.

    The loaded license is replaced as a whole by a single writer and read
    without locking; rebinding an attribute is atomic, so readers see either
    the previous record or the new one.
    """

    def __init__(self, logger: logging.Logger, conf: Optional[LicenseConfig] = None):
        self.logger = logger
        self.conf = conf or LicenseConfig()
        self._loaded_license: Optional[EnterpriseLicense] = None

    def current_license(self) -> Optional[EnterpriseLicense]:
        """The most recently published license, or None before loading."""
        return self._loaded_license

    def _store(self, loaded: EnterpriseLicense) -> None:
        self._loaded_license = loaded

    def read_and_validate_license(self) -> EnterpriseLicense:
        """
        Locate, verify and apply policy to the configured license.

        Raises:
            LicenseError: Any failure along the way
        """
        license_bytes = self.read_license()

        if license_bytes:
            try:
                loaded = self.validate_license(license_bytes)
            except LicenseError as e:
                raise LicenseInvalidError(f"failed to validate license: {e}") from e
            if loaded.type == LICENSE_TYPE_TRIAL:
                raise TrialsUnsupportedError(
                    "trial license detected, enterprise license trials are not supported"
                )
        else:
            # An open source license is the final fall back.
            loaded = EnterpriseLicense(
                type=LICENSE_TYPE_OPEN_SOURCE,
                expiry=unix_now() + OPEN_SOURCE_LICENSE_TTL,
            )

        loaded.check_expiry()

        self.logger.debug(
            f"Successfully loaded enterprise license: "
            f"license_org={loaded.organization} "
            f"license_type={loaded.type_name()} "
            f"expires_at={loaded.expiry_display()}"
        )
        return loaded

    def read_license(self) -> Optional[bytes]:
        """
        Read the raw license bytes from the highest priority source.

        Returns:
            The license contents, or None if no license was provided at all.

        Raises:
            SourceReadError: An explicitly configured file could not be read
        """
        # Explicit license takes priority.
        if self.conf.license:
            self.logger.debug("Loading explicitly defined enterprise license")
            return self.conf.license.encode('utf-8')

        # Followed by explicit license file path.
        if self.conf.license_filepath:
            self.logger.debug("Loading enterprise license from explicit file path")
            try:
                with open(self.conf.license_filepath, 'rb') as f:
                    return f.read()
            except OSError as e:
                raise SourceReadError(f"failed to read license file: {e}") from e

        # Followed by the default file path, where a missing file means no license.
        try:
            with open(self.conf.default_license_filepath(), 'rb') as f:
                contents = f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise SourceReadError(f"failed to read default path license file: {e}") from e

        self.logger.debug("Loaded enterprise license from default file path")
        return contents

    def validate_license(self, license_bytes: bytes) -> EnterpriseLicense:
        return verify_license_key(license_bytes, self.conf.public_key_pem())


def register_service(resources: Resources, conf: LicenseConfig) -> LicenseService:
    """
    Create a license service, load the license and register the service.

    A license that fails to load is logged and replaced with an empty license,
    so the hosting application keeps running without enterprise features.
    """
    service = LicenseService(resources.logger(), conf)

    try:
        loaded = service.read_and_validate_license()
    except LicenseError as e:
        resources.logger().error(f"Failed to read enterprise license: {e}")
        loaded = EnterpriseLicense()
    service._store(loaded)

    set_shared_service(resources, service)
    return service


def inject_test_service(resources: Resources) -> LicenseService:
    """
    Register a service holding a short-lived enterprise license so that test
    suites can exercise enterprise components without a signed license.
    """
    service = LicenseService(resources.logger())
    service._store(EnterpriseLicense(
        version=1,
        organization='test',
        type=LICENSE_TYPE_ENTERPRISE,
        expiry=unix_now() + TEST_LICENSE_TTL,
    ))
    set_shared_service(resources, service)
    return service


def set_shared_service(resources: Resources, service: LicenseService) -> None:
    resources.set_generic(LicenseService, service)


def get_shared_service(resources: Resources) -> Optional[LicenseService]:
    return resources.get_generic(LicenseService)


def check_running_enterprise(resources: Resources) -> None:
    """
    Raise unless the registered license allows enterprise features.

    Raises:
        EnterpriseLicenseRequiredError: No service registered, or the loaded
            license is open source, a failed load, or expired
    """
    service = get_shared_service(resources)
    if service is None:
        raise EnterpriseLicenseRequiredError("unable to access license service")

    loaded = service.current_license()
    if loaded is None or not loaded.allows_enterprise_features():
        raise EnterpriseLicenseRequiredError(
            "this feature requires a valid enterprise license"
        )
