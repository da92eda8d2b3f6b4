"""
Integration tests for verifying tokens against JSON Web Key Sets.
"""

import json
from unittest.mock import MagicMock

import pytest

from access_jwt import decode, encode
from access_jwt.errors import DecodeError, IncorrectAlgorithm, VerificationError
from access_jwt.jwk import JWK, KeyFinder, KeySet
from access_jwt.signer import Signer

PAYLOAD = {"data": "something"}


class TestDecodeWithJwk:
    """Full flow: sign with a private JWK, publish the public set, verify by kid."""

    @pytest.fixture
    def jwk(self, rsa_key):
        return JWK.from_key(rsa_key)

    @pytest.fixture
    def public_jwks(self, jwk):
        return {"keys": [jwk.export()]}

    @pytest.fixture
    def signed_token(self, jwk):
        return encode(PAYLOAD, signer=Signer.from_jwk(jwk, "RS512"))

    def test_token_carries_thumbprint_kid(self, signed_token, jwk):
        _, header = decode(signed_token, verify=False)

        assert header == {"alg": "RS512", "kid": jwk.thumbprint()}

    def test_public_set_has_no_private_members(self, public_jwks):
        assert "d" not in public_jwks["keys"][0]

    def test_decode_with_jwks(self, signed_token, public_jwks):
        payload, header = decode(signed_token, options={"algorithms": ["RS512"], "jwks": public_jwks})

        assert payload == PAYLOAD
        assert header["alg"] == "RS512"

    def test_decode_with_json_set(self, signed_token, public_jwks):
        key_set = KeySet.import_set(json.dumps(public_jwks))

        payload, _ = decode(signed_token, options={"algorithms": ["RS512"], "jwks": key_set})

        assert payload == PAYLOAD

    def test_decode_with_manual_keyfinder(self, signed_token, public_jwks):
        finder = KeyFinder(public_jwks)

        payload, _ = decode(
            signed_token,
            keyfinder=lambda header, payload: finder.key_for(header["kid"]),
            options={"algorithms": ["RS512"]},
        )

        assert payload == PAYLOAD

    def test_kid_not_in_set(self, signed_token, other_rsa_key):
        other_set = {"keys": [JWK.from_key(other_rsa_key).export()]}

        with pytest.raises(DecodeError, match="Could not find public key for kid"):
            decode(signed_token, options={"algorithms": ["RS512"], "jwks": other_set})

    def test_empty_set(self, signed_token):
        with pytest.raises(DecodeError, match="No keys found in jwks"):
            decode(signed_token, options={"algorithms": ["RS512"], "jwks": {"keys": []}})

    def test_token_without_kid(self, rsa_key, public_jwks):
        token = encode(PAYLOAD, signer=Signer(rsa_key, "RS512"))

        with pytest.raises(DecodeError, match=r"No key id \(kid\) found from token headers"):
            decode(token, options={"algorithms": ["RS512"], "jwks": public_jwks})

    def test_loader(self, signed_token, public_jwks):
        loader = MagicMock(return_value=public_jwks)

        payload, _ = decode(signed_token, options={"algorithms": ["RS512"], "jwks": loader})

        assert payload == PAYLOAD
        loader.assert_called_once()

    def test_rotated_loader(self, signed_token, public_jwks, other_rsa_key):
        stale = {"keys": [JWK.from_key(other_rsa_key).export()]}
        loader = MagicMock(side_effect=lambda context: public_jwks if context.invalidate else stale)

        payload, _ = decode(signed_token, options={"algorithms": ["RS512"], "jwks": loader})

        assert payload == PAYLOAD
        assert loader.call_count == 2
        assert [call.args[0].invalidate for call in loader.call_args_list] == [False, True]


class TestMixingAlgorithms:
    """A kid resolving to a key from another family must never verify."""

    @pytest.fixture
    def rsa_jwk(self, rsa_key):
        return JWK.from_key(rsa_key, kid="rsa-kid")

    @pytest.fixture
    def ec_jwk(self, ec_p384_key):
        return JWK.from_key(ec_p384_key, kid="ec-kid")

    @pytest.fixture
    def hmac_jwk(self, hmac_secret):
        return JWK.from_key(hmac_secret, kid="hmac-kid")

    @pytest.fixture
    def jwks(self, rsa_jwk, ec_jwk, hmac_jwk):
        return KeySet.from_keys(rsa_jwk, ec_jwk, hmac_jwk)

    def test_each_key_verifies_its_own_family(self, jwks, rsa_jwk, ec_jwk, hmac_jwk):
        for jwk, algorithm in ((rsa_jwk, "RS512"), (ec_jwk, "ES384"), (hmac_jwk, "HS256")):
            token = encode(PAYLOAD, signer=Signer.from_jwk(jwk, algorithm))

            payload, _ = decode(token, options={"algorithms": [algorithm], "jwks": jwks})

            assert payload == PAYLOAD

    def test_hmac_token_with_rsa_kid(self, jwks, hmac_secret):
        token = encode(PAYLOAD, signer=Signer(hmac_secret, "HS256", kid="rsa-kid"))

        with pytest.raises(VerificationError, match="Signature verification raised"):
            decode(token, options={"algorithms": ["HS256"], "jwks": jwks})

    def test_hmac_token_with_ec_kid(self, jwks, hmac_secret):
        token = encode(PAYLOAD, signer=Signer(hmac_secret, "HS256", kid="ec-kid"))

        with pytest.raises(VerificationError):
            decode(token, options={"algorithms": ["HS256"], "jwks": jwks})

    def test_rsa_token_with_hmac_kid(self, jwks, rsa_key):
        token = encode(PAYLOAD, signer=Signer(rsa_key, "RS512", kid="hmac-kid"))

        with pytest.raises(VerificationError):
            decode(token, options={"algorithms": ["RS512"], "jwks": jwks})

    def test_ec_token_with_rsa_kid(self, jwks, ec_p384_key):
        token = encode(PAYLOAD, signer=Signer(ec_p384_key, "ES384", kid="rsa-kid"))

        with pytest.raises(VerificationError):
            decode(token, options={"algorithms": ["ES384"], "jwks": jwks})

    def test_ec_key_with_wrong_curve_algorithm_on_encode(self, ec_jwk):
        with pytest.raises(IncorrectAlgorithm, match="payload algorithm is ES512 but ES384 signing key was provided"):
            encode(PAYLOAD, signer=Signer.from_jwk(ec_jwk, "ES512"))

    def test_ec_key_with_wrong_curve_algorithm_on_decode(self, jwks, ec_p521_key):
        token = encode(PAYLOAD, signer=Signer(ec_p521_key, "ES512", kid="ec-kid"))

        with pytest.raises(IncorrectAlgorithm, match="ES384 verification key was provided"):
            decode(token, options={"algorithms": ["ES512"], "jwks": jwks})
