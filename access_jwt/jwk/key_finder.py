"""
Key-id based key resolution against a JWK Set.

The source is either a JWK Set value or a loader callable. A loader gets a
``LoaderContext`` and returns a JWK Set; when the token's kid is missing
from the first result the loader is called once more with
``invalidate=True`` so it can refetch a rotated set.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..errors import DecodeError
from ..logging import get_logger
from .base import JWK
from .key_set import Entry, KeySet


@dataclass(frozen=True)
class LoaderContext:
    """Arguments handed to a JWKS loader."""

    kid: str
    invalidate: bool = False


class KeyFinder:
    """Resolve the verification key for a token kid."""

    def __init__(self, jwks: Any):
        self._source = jwks
        self._keys: Optional[KeySet] = None
        self.logger = get_logger("access_jwt.jwk.key_finder")

    @property
    def reloadable(self) -> bool:
        return callable(self._source)

    def key_for(self, kid: Any) -> Any:
        """Return the native key for ``kid``."""
        if kid is None or kid == "":
            raise DecodeError("No key id (kid) found from token headers")

        entry = self._resolve(kid)

        if not self._keys:
            raise DecodeError("No keys found in jwks")
        if entry is None:
            raise DecodeError(f"Could not find public key for kid {kid}", details={"kid": kid})

        jwk = entry if isinstance(entry, JWK) else JWK.import_key(entry)
        self.logger.debug("JWKS key resolved", kid=kid, kty=jwk.KTY)
        return jwk.keypair

    def _resolve(self, kid: Any) -> Optional[Entry]:
        self._load(kid, invalidate=False)
        entry = self._keys.find(kid)
        if entry is not None or not self.reloadable:
            return entry

        # Key might be rotated; ask the loader for a fresh set once.
        self.logger.debug("JWKS kid not found, invalidating loader cache", kid=kid)
        self._load(kid, invalidate=True)
        return self._keys.find(kid)

    def _load(self, kid: Any, *, invalidate: bool) -> None:
        if self.reloadable:
            source = self._source(LoaderContext(kid=kid, invalidate=invalidate))
        else:
            source = self._source
        self._keys = KeySet.coerce(source)
        self.logger.debug(
            "JWKS loaded",
            kid=kid,
            invalidate=invalidate,
            keys_count=len(self._keys),
        )
