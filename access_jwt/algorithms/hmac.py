"""
HMAC-SHA-2 algorithms (HS256, HS384, HS512).
"""

from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hmac

from ..utils import to_bytes
from .base import Algorithm


class HMACAlgorithm(Algorithm):
    """Symmetric signatures keyed by a shared secret."""

    def _mac(self, key: Any) -> hmac.HMAC:
        return hmac.HMAC(to_bytes(key), self.hash_algorithm())

    def _sign(self, key: Any, message: bytes) -> bytes:
        mac = self._mac(key)
        mac.update(message)
        return mac.finalize()

    def _verify(self, key: Any, message: bytes, signature: bytes) -> bool:
        mac = self._mac(key)
        mac.update(message)
        try:
            mac.verify(signature)
        except InvalidSignature:
            return False
        return True
