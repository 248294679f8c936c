"""
License Key Verification

RSA signature verification for enterprise license keys.
License keys are in the format: base64(json_payload).base64(signature)

The signature is RSA PKCS#1 v1.5 over the SHA-256 digest of the *encoded*
payload segment, exactly as it appears in the license text.
"""

import base64
import binascii
import json
import logging
from typing import Optional, Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed
from cryptography.hazmat.primitives.serialization import load_pem_public_key

from .errors import (
    KeyParseError,
    LicenseDecodeError,
    MalformedCredentialError,
    SignatureInvalidError,
)
from .license import EnterpriseLicense

logger = logging.getLogger(__name__)

# =============================================================================
# PUBLIC KEY
# =============================================================================
# This is the public key used to verify license signatures.
# The corresponding private key is kept secret and used only for license generation.
#
# The key below is a placeholder with no matching issuer. Licenses will only
# verify once it is replaced with the issuer's public key:
#   openssl rsa -in issuer.pem -pubout
# =============================================================================

PUBLIC_KEY_PEM = b"""-----BEGIN PUBLIC KEY-----
MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEAqrCHY3H0jUXdQscAJSVn
nHxQDjZiHeD9hTb4VnOJzm6RMNgZR6r9pzVvPNUwXDJ3n7sGK8NBYIeFOgMHBS2v
4rGtD3Nx2oC/pmmFO1SC9Neo3c27qdKTQ2whE9Rs2U2xqV+QLK31kFNGjiJVfRMl
I2P2SY3Gi2CX09uSGijflZOuedI27eFj6zB/8cqN8tSvNYHMfAHQkqWhm746HQ4S
KZWN2A1x2corLTuCzvezok4BzFLYns4yQA87GZqciFs4KrZzribsfgZZivmJfCgB
7Usqy8j7OsRpr5Nv2SndgTcch+tiWVYzr83lLEKSanBTUBNBMX0rlncALz/bHuE4
gQIDAQAB
-----END PUBLIC KEY-----"""

# TODO: Replace the above with the license issuer's public key before release

_URLSAFE_TO_STANDARD = bytes.maketrans(b'-_', b'+/')


def get_public_key(public_key_pem: Optional[bytes] = None) -> RSAPublicKey:
    """
    Load an RSA public key from PEM, defaulting to the embedded key.

    Raises:
        KeyParseError: If the PEM is missing, malformed or not an RSA key
    """
    if public_key_pem is None:
        public_key_pem = PUBLIC_KEY_PEM
    if isinstance(public_key_pem, str):
        public_key_pem = public_key_pem.encode('utf-8')

    try:
        public_key = load_pem_public_key(public_key_pem)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyParseError(f"failed to parse public key: {e}") from e

    if not isinstance(public_key, RSAPublicKey):
        raise KeyParseError("failed to parse public key, expected an RSA key")
    return public_key


def _add_base64_padding(data: bytes) -> bytes:
    """Add padding to base64 string if needed."""
    missing_padding = len(data) % 4
    if missing_padding:
        data += b'=' * (4 - missing_padding)
    return data


def _b64decode(data: bytes) -> bytes:
    """Strict base64 decode accepting both the standard and URL-safe alphabets."""
    data = data.translate(_URLSAFE_TO_STANDARD)
    return base64.b64decode(_add_base64_padding(data), validate=True)


def split_license_key(license_key: Union[str, bytes]) -> tuple[bytes, bytes, bytes]:
    """
    Split a license key into its encoded payload, payload and signature.

    Returns:
        Tuple of (payload_b64, payload_bytes, signature)

    Raises:
        MalformedCredentialError: If the key is not two base64 segments
    """
    if isinstance(license_key, str):
        license_key = license_key.encode('utf-8')

    # Trim whitespace and line breaks around the license
    license_key = license_key.strip()

    parts = license_key.split(b'.')
    if len(parts) != 2:
        raise MalformedCredentialError("failed to split license contents by delimiter")

    payload_b64, sig_b64 = parts

    try:
        payload_bytes = _b64decode(payload_b64)
    except (binascii.Error, ValueError) as e:
        raise MalformedCredentialError(f"failed to decode license data: {e}") from e

    try:
        signature = _b64decode(sig_b64)
    except (binascii.Error, ValueError) as e:
        raise MalformedCredentialError(f"failed to decode license signature: {e}") from e

    return payload_b64, payload_bytes, signature


def verify_license_key(
    license_key: Union[str, bytes],
    public_key_pem: Optional[bytes] = None,
) -> EnterpriseLicense:
    """
    Verify a license key signature and return the decoded license.

    Nothing in the payload is parsed until the signature checks out.

    Args:
        license_key: The license key in format "base64(payload).base64(signature)"
        public_key_pem: PEM public key to verify with (embedded key by default)

    Returns:
        The verified EnterpriseLicense.

    Raises:
        KeyParseError: The public key is unusable
        MalformedCredentialError: The key is not two base64 segments
        SignatureInvalidError: The signature does not match
        LicenseDecodeError: The verified payload is not a valid license object
    """
    public_key = get_public_key(public_key_pem)
    payload_b64, payload_bytes, signature = split_license_key(license_key)

    digest = hashes.Hash(hashes.SHA256())
    digest.update(payload_b64)

    try:
        public_key.verify(
            signature,
            digest.finalize(),
            padding.PKCS1v15(),
            Prehashed(hashes.SHA256()),
        )
    except InvalidSignature as e:
        raise SignatureInvalidError("failed to verify license signature") from e

    try:
        payload = json.loads(payload_bytes.decode('utf-8'))
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, UnicodeDecodeError, over-long integers and deep nesting
        raise LicenseDecodeError(f"failed to unmarshal license data: {e}") from e

    verified = EnterpriseLicense.from_dict(payload)
    logger.debug(f"License key verified for organization: {verified.organization}")
    return verified
