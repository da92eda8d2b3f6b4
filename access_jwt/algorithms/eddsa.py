"""
EdDSA over Ed25519 and Ed448.
"""

from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed448, ed25519

from ..errors import VerificationError
from .base import Algorithm, public_half


class EdDSAAlgorithm(Algorithm):
    def _sign(self, key: Any, message: bytes) -> bytes:
        if not isinstance(key, (ed25519.Ed25519PrivateKey, ed448.Ed448PrivateKey)):
            raise VerificationError(
                "Signature generation raised",
                details={"algorithm": self.name, "reason": "OKP private key required for signing"},
            )
        return key.sign(message)

    def _verify(self, key: Any, message: bytes, signature: bytes) -> bool:
        try:
            public_half(key).verify(signature, message)
        except InvalidSignature:
            return False
        return True
