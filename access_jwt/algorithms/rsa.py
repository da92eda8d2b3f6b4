"""
RSA algorithms: RSASSA-PKCS1-v1_5 (RS*) and RSASSA-PSS (PS*).
"""

from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..errors import VerificationError
from .base import Algorithm, public_half


class RSAAlgorithm(Algorithm):
    """RSASSA-PKCS1-v1_5 with SHA-2."""

    def padding(self) -> padding.AsymmetricPadding:
        return padding.PKCS1v15()

    def _sign(self, key: Any, message: bytes) -> bytes:
        if not isinstance(key, rsa.RSAPrivateKey):
            raise VerificationError(
                "Signature generation raised",
                details={"algorithm": self.name, "reason": "RSA private key required for signing"},
            )
        return key.sign(message, self.padding(), self.hash_algorithm())

    def _verify(self, key: Any, message: bytes, signature: bytes) -> bool:
        try:
            public_half(key).verify(signature, message, self.padding(), self.hash_algorithm())
        except InvalidSignature:
            return False
        return True


class RSAPSSAlgorithm(RSAAlgorithm):
    """RSASSA-PSS with MGF1 and a digest-sized salt."""

    def padding(self) -> padding.AsymmetricPadding:
        hash_algorithm = self.hash_algorithm()
        return padding.PSS(
            mgf=padding.MGF1(hash_algorithm),
            salt_length=hash_algorithm.digest_size,
        )
