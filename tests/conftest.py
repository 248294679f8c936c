# tests/conftest.py
import base64
import json
import logging
import time

import django
import pytest
from django.conf import settings
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from tests.helpers import MISSING_DEFAULT_LICENSE_FILEPATH


def pytest_configure(config):
    if not settings.configured:
        settings.configure(
            SECRET_KEY='enterprise-tests',
            INSTALLED_APPS=['enterprise'],
            ROOT_URLCONF='enterprise.urls',
            ENTERPRISE_LICENSE='',
            ENTERPRISE_LICENSE_FILEPATH='',
            ENTERPRISE_LICENSE_DEFAULT_FILEPATH=MISSING_DEFAULT_LICENSE_FILEPATH,
        )
        django.setup()


@pytest.fixture(scope="session")
def private_key():
    """RSA keypair used to sign licenses for the whole test session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_key_pem(private_key):
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


@pytest.fixture(scope="session")
def sign_payload(private_key):
    """
    Sign raw payload bytes the way the license issuer does.

    Returns a function (payload_bytes, key=None) -> license text.
    """
    def _sign(payload: bytes, key=None) -> str:
        payload_b64 = base64.b64encode(payload)
        signature = (key or private_key).sign(payload_b64, padding.PKCS1v15(), hashes.SHA256())
        return f"{payload_b64.decode()}.{base64.b64encode(signature).decode()}"
    return _sign


@pytest.fixture(scope="session")
def sign_license(sign_payload):
    """Sign a license dict, returning the license text."""
    def _sign(claims: dict, key=None) -> str:
        return sign_payload(json.dumps(claims).encode('utf-8'), key=key)
    return _sign


@pytest.fixture
def future_expiry():
    return int(time.time()) + 3600


@pytest.fixture
def enterprise_claims(future_expiry):
    return {"version": 1, "organization": "acme", "type": 2, "expiry": future_expiry}


@pytest.fixture
def resources():
    from enterprise.licensing import Resources
    return Resources(logger=logging.getLogger('tests.enterprise'))


@pytest.fixture
def make_config(public_key_pem, tmp_path):
    """Build a LicenseConfig verifying with the test key and an isolated default path."""
    from enterprise.licensing import LicenseConfig

    def _make(**kwargs):
        kwargs.setdefault('custom_public_key_pem', public_key_pem)
        kwargs.setdefault('custom_default_license_filepath', str(tmp_path / 'default' / 'redpanda.license'))
        return LicenseConfig(**kwargs)
    return _make
