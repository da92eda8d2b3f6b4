"""
Base JSON Web Key model.

A ``JWK`` wraps one native ``cryptography`` key (or a shared secret) and
knows how to render it in the RFC 7517 member layout for its ``kty``.
Concrete key types register themselves by ``KTY`` so ``import_key`` can
dispatch on the ``kty`` member of incoming JSON.
"""

import hashlib
import json
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union

from ..algorithms.base import key_kind
from ..errors import JwkError
from ..utils import base64url_decode, base64url_encode, base64url_to_int

COMMON_PARAMS = ("use", "key_ops", "alg")


class JWK:
    """A single JSON Web Key."""

    KTY = ""
    # Members hashed into the RFC 7638 thumbprint, besides ``kty``.
    THUMBPRINT_MEMBERS: Tuple[str, ...] = ()

    _registry: Dict[str, Type["JWK"]] = {}

    __slots__ = ("_keypair", "_kid", "_params")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.KTY:
            JWK._registry[cls.KTY] = cls

    def __init__(self, keypair: Any, kid: Optional[str] = None, params: Optional[Mapping[str, Any]] = None):
        self._keypair = keypair
        self._kid = kid
        self._params = {name: value for name, value in (params or {}).items() if name in COMMON_PARAMS}

    @property
    def keypair(self) -> Any:
        """Native key usable by the algorithm registry."""
        return self._keypair

    @property
    def kid(self) -> str:
        """Declared key id, or the computed thumbprint when none was declared."""
        return self._kid or self.thumbprint()

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self._params)

    @property
    def is_private(self) -> bool:
        raise NotImplementedError

    def public_members(self) -> Dict[str, str]:
        raise NotImplementedError

    def private_members(self) -> Dict[str, str]:
        raise NotImplementedError

    def thumbprint_source(self) -> Dict[str, str]:
        return self.public_members()

    def thumbprint(self) -> str:
        """RFC 7638 SHA-256 thumbprint over the required public members."""
        source = self.thumbprint_source()
        members = {name: source[name] for name in self.THUMBPRINT_MEMBERS}
        members["kty"] = self.KTY
        canonical = json.dumps(members, separators=(",", ":"), sort_keys=True)
        return base64url_encode(hashlib.sha256(canonical.encode("utf-8")).digest())

    def export(self, include_private: bool = False) -> Dict[str, Any]:
        """Render as a JWK mapping; private members only on request."""
        data: Dict[str, Any] = {"kty": self.KTY}
        data.update(self.public_members())
        if include_private:
            data.update(self.private_members())
        data["kid"] = self.kid
        data.update(self._params)
        return data

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, JWK):
            return NotImplemented
        return self.export(include_private=True) == other.export(include_private=True)

    def __hash__(self) -> int:
        return hash((self.KTY, self.thumbprint()))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} kid={self.kid!r} private={self.is_private}>"

    @classmethod
    def load_keypair(cls, data: Mapping[str, Any]) -> Any:
        """Build the native key from JWK members."""
        raise NotImplementedError

    @classmethod
    def import_key(cls, data: Union[str, bytes, Mapping[str, Any]]) -> "JWK":
        """Build a JWK of the right type from a mapping or JSON text."""
        if isinstance(data, (str, bytes)):
            try:
                data = json.loads(data)
            except ValueError as exc:
                raise JwkError("JWK is not valid JSON") from exc

        if not isinstance(data, Mapping):
            raise JwkError("JWK must be a JSON object", details={"type": type(data).__name__})

        kty = data.get("kty")
        key_class = JWK._registry.get(kty) if isinstance(kty, str) else None
        if key_class is None:
            raise JwkError(f"Key type {kty} not supported", details={"kty": kty})

        try:
            keypair = key_class.load_keypair(data)
        except JwkError:
            raise
        except (ValueError, TypeError) as exc:
            raise JwkError(f"Invalid {kty} key material", details={"error": str(exc)}) from exc

        kid = data.get("kid")
        if kid is not None and not isinstance(kid, str):
            raise JwkError("JWK kid must be a string", details={"kid": kid})

        return key_class(keypair, kid=kid, params=data)

    @classmethod
    def from_key(cls, key: Any, kid: Optional[str] = None, **params: Any) -> "JWK":
        """Wrap a native key or shared secret."""
        kind = key_kind(key)
        if kind is None:
            raise JwkError("Unsupported key type", details={"type": type(key).__name__})
        return JWK._registry[kind.value](key, kid=kid, params=params)

    @classmethod
    def required_member(cls, data: Mapping[str, Any], name: str) -> str:
        value = data.get(name)
        if not isinstance(value, str) or not value:
            raise JwkError(
                f"Missing or invalid '{name}' member for kty {cls.KTY}",
                details={"member": name},
            )
        return value

    @classmethod
    def int_member(cls, data: Mapping[str, Any], name: str) -> int:
        return base64url_to_int(cls.required_member(data, name))

    @classmethod
    def bytes_member(cls, data: Mapping[str, Any], name: str) -> bytes:
        return base64url_decode(cls.required_member(data, name))
