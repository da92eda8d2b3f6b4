"""
Octet key pair (``OKP``) keys for EdDSA: Ed25519 and Ed448.
"""

from typing import Any, Dict, Mapping

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed448, ed25519

from ..errors import JwkError
from ..utils import base64url_encode
from .base import JWK

# crv -> (public key class, private key class)
CURVES = {
    "Ed25519": (ed25519.Ed25519PublicKey, ed25519.Ed25519PrivateKey),
    "Ed448": (ed448.Ed448PublicKey, ed448.Ed448PrivateKey),
}


def _raw_public(key: Any) -> bytes:
    return key.public_bytes(serialization.Encoding.Raw, serialization.PublicFormat.Raw)


class OKPKey(JWK):
    KTY = "OKP"
    THUMBPRINT_MEMBERS = ("crv", "x")

    __slots__ = ()

    @property
    def is_private(self) -> bool:
        return isinstance(self._keypair, (ed25519.Ed25519PrivateKey, ed448.Ed448PrivateKey))

    @property
    def crv(self) -> str:
        for crv, key_classes in CURVES.items():
            if isinstance(self._keypair, key_classes):
                return crv
        raise JwkError("Unsupported OKP key", details={"type": type(self._keypair).__name__})

    def public_members(self) -> Dict[str, str]:
        public_key = self._keypair.public_key() if self.is_private else self._keypair
        return {"crv": self.crv, "x": base64url_encode(_raw_public(public_key))}

    def private_members(self) -> Dict[str, str]:
        if not self.is_private:
            return {}
        raw = self._keypair.private_bytes(
            serialization.Encoding.Raw,
            serialization.PrivateFormat.Raw,
            serialization.NoEncryption(),
        )
        return {"d": base64url_encode(raw)}

    @classmethod
    def load_keypair(cls, data: Mapping[str, Any]) -> Any:
        crv = cls.required_member(data, "crv")
        if crv not in CURVES:
            raise JwkError(f"Unsupported curve {crv}", details={"crv": crv})
        public_class, private_class = CURVES[crv]

        x = cls.bytes_member(data, "x")
        if "d" not in data:
            return public_class.from_public_bytes(x)

        private_key = private_class.from_private_bytes(cls.bytes_member(data, "d"))
        if _raw_public(private_key.public_key()) != x:
            raise JwkError("OKP private key does not match its public key x")
        return private_key
