"""
Symmetric (``oct``) keys.
"""

from typing import Any, Dict, Mapping, Optional, Union

from ..utils import base64url_encode, to_bytes
from .base import JWK


class OctKey(JWK):
    """Shared HMAC secret; the secret itself is its only member."""

    KTY = "oct"
    THUMBPRINT_MEMBERS = ("k",)

    __slots__ = ()

    def __init__(
        self,
        keypair: Union[str, bytes],
        kid: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(to_bytes(keypair), kid=kid, params=params)

    @property
    def is_private(self) -> bool:
        return True

    def public_members(self) -> Dict[str, str]:
        return {}

    def private_members(self) -> Dict[str, str]:
        return {"k": base64url_encode(self._keypair)}

    def thumbprint_source(self) -> Dict[str, str]:
        return self.private_members()

    @classmethod
    def load_keypair(cls, data: Mapping[str, Any]) -> bytes:
        return cls.bytes_member(data, "k")
