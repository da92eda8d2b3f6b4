"""
Shared fixtures for access-jwt tests.

Asymmetric keys are generated once per session; RSA generation dominates
test runtime otherwise.
"""

import pytest
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa


@pytest.fixture(scope="session")
def rsa_key():
    """2048-bit RSA private key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_rsa_key():
    """A second, unrelated RSA private key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_p256_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ec_p384_key():
    return ec.generate_private_key(ec.SECP384R1())


@pytest.fixture(scope="session")
def ec_p521_key():
    return ec.generate_private_key(ec.SECP521R1())


@pytest.fixture(scope="session")
def ed25519_key():
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture
def hmac_secret():
    """Shared secret long enough for HS512."""
    return "access-layer-signing-secret-0123456789-abcdefghijklmnopqrstuvwxyz"


@pytest.fixture
def signing_keys(rsa_key, ec_p256_key, ec_p384_key, ec_p521_key, ed25519_key, hmac_secret):
    """Algorithm name -> private key able to sign with it."""
    return {
        "HS256": hmac_secret,
        "HS384": hmac_secret,
        "HS512": hmac_secret,
        "RS256": rsa_key,
        "RS384": rsa_key,
        "RS512": rsa_key,
        "PS256": rsa_key,
        "PS384": rsa_key,
        "PS512": rsa_key,
        "ES256": ec_p256_key,
        "ES384": ec_p384_key,
        "ES512": ec_p521_key,
        "EdDSA": ed25519_key,
    }
