"""
Interoperability tests against PyJWT and python-jose.
"""

import json

import jwt as pyjwt
import pytest
from jose import jwt as jose_jwt
from jwt.algorithms import RSAAlgorithm

from access_jwt import decode, encode
from access_jwt.jwk import JWK
from access_jwt.signer import Signer

PAYLOAD = {"sub": "user-1", "tenant_id": "tenant-1", "roles": ["user", "analyst"]}

ALGORITHMS = ["HS256", "RS512", "PS256", "ES256", "ES512", "EdDSA"]


def public(key):
    return key if isinstance(key, str) else key.public_key()


class TestPyJWT:
    """Tokens must verify in both directions with PyJWT."""

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_pyjwt_verifies_our_tokens(self, signing_keys, algorithm):
        key = signing_keys[algorithm]
        token = encode(PAYLOAD, header_fields={"typ": "JWT"}, signer=Signer(key, algorithm))

        assert pyjwt.decode(token, public(key), algorithms=[algorithm]) == PAYLOAD

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_we_verify_pyjwt_tokens(self, signing_keys, algorithm):
        key = signing_keys[algorithm]
        token = pyjwt.encode(PAYLOAD, key, algorithm=algorithm)

        payload, header = decode(token, public(key), options={"algorithms": [algorithm]})

        assert payload == PAYLOAD
        assert header["alg"] == algorithm

    def test_rsa_jwk_matches_pyjwt(self, rsa_key):
        theirs = RSAAlgorithm.to_jwk(rsa_key.public_key(), as_dict=True)
        ours = JWK.from_key(rsa_key.public_key()).export()

        assert ours["n"] == theirs["n"]
        assert ours["e"] == theirs["e"]

    def test_pyjwt_loads_our_jwk(self, rsa_key):
        token = encode(PAYLOAD, signer=Signer(rsa_key, "RS256"))
        exported = JWK.from_key(rsa_key.public_key()).export()

        public_key = RSAAlgorithm.from_jwk(json.dumps(exported))

        assert pyjwt.decode(token, public_key, algorithms=["RS256"]) == PAYLOAD


class TestPythonJose:
    """HMAC tokens must verify in both directions with python-jose."""

    def test_jose_verifies_our_tokens(self, hmac_secret):
        token = encode(PAYLOAD, signer=Signer(hmac_secret, "HS256"))

        assert jose_jwt.decode(token, hmac_secret, algorithms=["HS256"]) == PAYLOAD

    def test_we_verify_jose_tokens(self, hmac_secret):
        token = jose_jwt.encode(PAYLOAD, hmac_secret, algorithm="HS256")

        payload, header = decode(token, hmac_secret, options={"algorithms": ["HS256"]})

        assert payload == PAYLOAD
        assert header["typ"] == "JWT"
