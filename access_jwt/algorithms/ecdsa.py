"""
ECDSA algorithms (ES256, ES384, ES512, ES256K).

Signatures use the JOSE raw ``r || s`` form rather than DER, and every
algorithm is pinned to one named curve.
"""

from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from ..errors import IncorrectAlgorithm, VerificationError
from .base import Algorithm, public_half

# Curve name (as reported by cryptography) -> JWS algorithm name.
CURVE_ALGORITHMS = {
    "secp256r1": "ES256",
    "secp384r1": "ES384",
    "secp521r1": "ES512",
    "secp256k1": "ES256K",
}


def curve_byte_length(curve: ec.EllipticCurve) -> int:
    return (curve.key_size + 7) // 8


class ECDSAAlgorithm(Algorithm):
    """ECDSA with SHA-2 over the curve named by ``self.curve``."""

    def check_curve(self, key: Any, role: str) -> None:
        curve_name = key.curve.name
        if curve_name != self.curve:
            provided = CURVE_ALGORITHMS.get(curve_name, curve_name)
            raise IncorrectAlgorithm(
                f"payload algorithm is {self.name} but {provided} {role} key was provided",
                details={"expected_curve": self.curve, "actual_curve": curve_name},
            )

    def _sign(self, key: Any, message: bytes) -> bytes:
        if not isinstance(key, ec.EllipticCurvePrivateKey):
            raise VerificationError(
                "Signature generation raised",
                details={"algorithm": self.name, "reason": "EC private key required for signing"},
            )
        self.check_curve(key, "signing")

        der_signature = key.sign(message, ec.ECDSA(self.hash_algorithm()))
        r, s = decode_dss_signature(der_signature)
        size = curve_byte_length(key.curve)
        return r.to_bytes(size, "big") + s.to_bytes(size, "big")

    def _verify(self, key: Any, message: bytes, signature: bytes) -> bool:
        self.check_curve(key, "verification")

        size = curve_byte_length(key.curve)
        if len(signature) != 2 * size:
            return False

        r = int.from_bytes(signature[:size], "big")
        s = int.from_bytes(signature[size:], "big")
        try:
            public_half(key).verify(
                encode_dss_signature(r, s),
                message,
                ec.ECDSA(self.hash_algorithm()),
            )
        except InvalidSignature:
            return False
        return True
