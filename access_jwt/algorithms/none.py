"""
The unsecured ``none`` algorithm.
"""

from typing import Any

from .base import Algorithm


class NoneAlgorithm(Algorithm):
    """Empty signature; verifies only an empty signature."""

    def _sign(self, key: Any, message: bytes) -> bytes:
        return b""

    def _verify(self, key: Any, message: bytes, signature: bytes) -> bool:
        return signature == b""
