"""
Elliptic-curve keys over the NIST P-curves and secp256k1.
"""

from typing import Any, Dict, Mapping

from cryptography.hazmat.primitives.asymmetric import ec

from ..algorithms.ecdsa import curve_byte_length
from ..errors import JwkError
from ..utils import int_to_base64url
from .base import JWK

CURVES = {
    "P-256": ec.SECP256R1,
    "P-384": ec.SECP384R1,
    "P-521": ec.SECP521R1,
    "secp256k1": ec.SECP256K1,
}

# cryptography curve name -> JWK crv
CURVE_NAMES = {curve.name: crv for crv, curve in CURVES.items()}


class ECKey(JWK):
    KTY = "EC"
    THUMBPRINT_MEMBERS = ("crv", "x", "y")

    __slots__ = ()

    @property
    def is_private(self) -> bool:
        return isinstance(self._keypair, ec.EllipticCurvePrivateKey)

    @property
    def crv(self) -> str:
        curve_name = self._keypair.curve.name
        if curve_name not in CURVE_NAMES:
            raise JwkError(f"Unsupported curve {curve_name}", details={"curve": curve_name})
        return CURVE_NAMES[curve_name]

    def public_members(self) -> Dict[str, str]:
        public_key = self._keypair.public_key() if self.is_private else self._keypair
        numbers = public_key.public_numbers()
        size = curve_byte_length(public_key.curve)
        return {
            "crv": self.crv,
            "x": int_to_base64url(numbers.x, size),
            "y": int_to_base64url(numbers.y, size),
        }

    def private_members(self) -> Dict[str, str]:
        if not self.is_private:
            return {}
        size = curve_byte_length(self._keypair.curve)
        return {"d": int_to_base64url(self._keypair.private_numbers().private_value, size)}

    @classmethod
    def load_keypair(cls, data: Mapping[str, Any]) -> Any:
        crv = cls.required_member(data, "crv")
        if crv not in CURVES:
            raise JwkError(f"Unsupported curve {crv}", details={"crv": crv})

        public_numbers = ec.EllipticCurvePublicNumbers(
            cls.int_member(data, "x"),
            cls.int_member(data, "y"),
            CURVES[crv](),
        )
        if "d" not in data:
            return public_numbers.public_key()

        return ec.EllipticCurvePrivateNumbers(cls.int_member(data, "d"), public_numbers).private_key()
