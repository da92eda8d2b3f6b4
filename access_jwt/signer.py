"""
Token signer: one algorithm bound to one key.
"""

from typing import Any, Optional

from .algorithms import Algorithm, find
from .jwk import JWK


class Signer:
    """Signs the encoded header and payload of a token.

    The algorithm name is looked up when the signer is built, so an unknown
    name fails immediately with ``UnsupportedAlgorithm``.

    A ``JWK`` key contributes its kid unless one is given.
    """

    def __init__(self, key: Any, algorithm: str = "HS256", kid: Optional[str] = None):
        if isinstance(key, JWK):
            kid = kid or key.kid
            key = key.keypair
        self.key = key
        self.kid = kid
        self._algorithm: Algorithm = find(algorithm)

    @classmethod
    def from_jwk(cls, jwk: JWK, algorithm: str) -> "Signer":
        return cls(jwk, algorithm)

    @property
    def algorithm(self) -> str:
        return self._algorithm.name

    def sign(self, message: bytes) -> bytes:
        return self._algorithm.sign(self.key, message)

    def __repr__(self) -> str:
        return f"<Signer algorithm={self.algorithm!r} kid={self.kid!r}>"
