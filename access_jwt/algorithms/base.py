"""
Algorithm descriptor and key-kind dispatch.

Every registered algorithm is bound to exactly one ``KeyKind``; sign and
verify reject keys of any other kind with a ``VerificationError`` before a
cryptographic primitive ever sees them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, ed448, ed25519, rsa

from ..errors import VerificationError

# Secrets starting with these are asymmetric key material, never HMAC keys.
_ASYMMETRIC_MARKERS = (
    b"-----BEGIN ",
    b"ssh-rsa ",
    b"ssh-ed25519 ",
    b"ssh-dss ",
    b"ecdsa-sha2-",
)


class KeyKind(str, Enum):
    """Key families understood by the registry."""

    OCT = "oct"
    RSA = "RSA"
    EC = "EC"
    OKP = "OKP"


def key_kind(key: Any) -> Optional[KeyKind]:
    """Classify a native key, or return None when it is not usable at all."""
    if isinstance(key, (str, bytes)):
        raw = key.encode("utf-8") if isinstance(key, str) else key
        if raw.lstrip().startswith(_ASYMMETRIC_MARKERS):
            return None
        return KeyKind.OCT
    if isinstance(key, (rsa.RSAPrivateKey, rsa.RSAPublicKey)):
        return KeyKind.RSA
    if isinstance(key, (ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey)):
        return KeyKind.EC
    if isinstance(
        key,
        (
            ed25519.Ed25519PrivateKey,
            ed25519.Ed25519PublicKey,
            ed448.Ed448PrivateKey,
            ed448.Ed448PublicKey,
        ),
    ):
        return KeyKind.OKP
    return None


def public_half(key: Any) -> Any:
    """Return the public key for a private key, or the key unchanged."""
    if hasattr(key, "public_key"):
        return key.public_key()
    return key


HASHES = {
    256: hashes.SHA256,
    384: hashes.SHA384,
    512: hashes.SHA512,
}


@dataclass(frozen=True)
class Algorithm:
    """Immutable algorithm descriptor with its sign/verify behaviour."""

    name: str
    family: str
    key_kind: Optional[KeyKind]
    hash_size: Optional[int] = None
    curve: Optional[str] = None

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        return HASHES[self.hash_size]()

    def sign(self, key: Any, message: bytes) -> bytes:
        self.check_key(key, "generation")
        return self._sign(key, message)

    def verify(self, key: Any, message: bytes, signature: bytes) -> bool:
        self.check_key(key, "verification")
        return self._verify(key, message, signature)

    def check_key(self, key: Any, operation: str) -> None:
        """Reject keys whose kind does not belong to this algorithm."""
        if self.key_kind is None:
            return

        actual = key_kind(key)
        if actual is not self.key_kind:
            raise VerificationError(
                f"Signature {operation} raised",
                details={
                    "algorithm": self.name,
                    "expected_key": self.key_kind.value,
                    "actual_key": actual.value if actual else type(key).__name__,
                },
            )

    def _sign(self, key: Any, message: bytes) -> bytes:
        raise NotImplementedError

    def _verify(self, key: Any, message: bytes, signature: bytes) -> bool:
        raise NotImplementedError
