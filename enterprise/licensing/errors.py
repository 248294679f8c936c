"""
License Errors

Every failure the license pipeline can hit. Callers at the service boundary
catch LicenseError; the subclasses say which stage rejected the credential.
"""


class LicenseError(Exception):
    """Base exception for license loading errors."""
    pass


class SourceReadError(LicenseError):
    """An explicitly configured license file could not be read."""
    pass


class KeyParseError(LicenseError):
    """The embedded (or overridden) public key is malformed or not RSA."""
    pass


class MalformedCredentialError(LicenseError):
    """License text is not two valid base64 segments joined by a dot."""
    pass


class SignatureInvalidError(LicenseError):
    """License signature does not match the public key."""
    pass


class LicenseDecodeError(LicenseError):
    """Verified payload is not the expected JSON shape."""
    pass


class LicenseInvalidError(LicenseError):
    """A license was provided but failed validation."""
    pass


class TrialsUnsupportedError(LicenseError):
    """License is a free trial, which is never accepted."""
    pass


class LicenseExpiredError(LicenseError):
    """License expiry timestamp has passed."""
    pass


class EnterpriseLicenseRequiredError(LicenseError):
    """An enterprise feature was used without an active enterprise license."""
    pass
