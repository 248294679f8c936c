"""
Enterprise License Record

The decoded claims of a verified license. Records are immutable; the service
replaces the published record as a whole rather than editing it.
"""

import time
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Optional

from .errors import LicenseDecodeError, LicenseExpiredError

# Reserved tier codes
LICENSE_TYPE_OPEN_SOURCE = -1
LICENSE_TYPE_TRIAL = 0
LICENSE_TYPE_ENTERPRISE = 1

_TYPE_DISPLAY_NAMES = {
    LICENSE_TYPE_OPEN_SOURCE: 'open source',
    LICENSE_TYPE_TRIAL: 'free trial',
    LICENSE_TYPE_ENTERPRISE: 'enterprise',
}


def unix_now() -> int:
    """Current UNIX time in whole seconds."""
    return int(time.time())


def type_display_name(license_type: int) -> str:
    """Human readable name for a license tier code."""
    return _TYPE_DISPLAY_NAMES.get(license_type, 'unknown')


@dataclass(frozen=True)
class EnterpriseLicense:
    """
    A license record.

    The zero value (``EnterpriseLicense()``) is what gets published when a
    license was provided but failed to load: type 0 with expiry 0, which
    never allows enterprise features.
    """
    version: int = 0
    organization: str = ''
    type: int = 0
    expiry: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> 'EnterpriseLicense':
        """
        Build a record from a decoded JSON payload.

        Missing or null fields keep their zero value and unknown fields are
        ignored. A field of the wrong type raises LicenseDecodeError.
        """
        if not isinstance(data, dict):
            raise LicenseDecodeError(
                f"license payload must be a JSON object, got {type(data).__name__}"
            )

        values = {}
        for field in fields(cls):
            value = data.get(field.name)
            if value is None:
                continue
            expected = str if field.type in (str, 'str') else int
            # bool is an int subclass but never a valid claim here
            if isinstance(value, bool) or not isinstance(value, expected):
                raise LicenseDecodeError(
                    f"license field '{field.name}' must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            values[field.name] = value
        return cls(**values)

    def expires_at(self) -> Optional[datetime]:
        """Expiry as an aware UTC datetime, or None if datetime cannot represent it."""
        try:
            return datetime.fromtimestamp(self.expiry, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    def expiry_display(self) -> str:
        """RFC 3339 expiry, falling back to the raw UNIX timestamp."""
        expires_at = self.expires_at()
        if expires_at is None:
            return str(self.expiry)
        return expires_at.isoformat()

    def type_name(self) -> str:
        return type_display_name(self.type)

    def check_expiry(self, now: Optional[int] = None) -> None:
        """Raise LicenseExpiredError unless the expiry is strictly in the future."""
        if now is None:
            now = unix_now()
        if self.expiry <= now:
            raise LicenseExpiredError(
                f"license expired on {self.expiry_display()}"
            )

    def allows_enterprise_features(self, now: Optional[int] = None) -> bool:
        """Whether this license unlocks enterprise functionality right now."""
        if self.type < LICENSE_TYPE_ENTERPRISE:
            return False
        if now is None:
            now = unix_now()
        return self.expiry > now
