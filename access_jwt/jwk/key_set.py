"""
JSON Web Key Set.

A ``KeySet`` is an ordered, read-only view over its entries. Entries may be
``JWK`` objects or raw JWK mappings; raw entries are only parsed when they
are actually selected, so unrelated malformed entries never break a lookup.
"""

import json
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Union

from ..errors import ConfigurationError, JwkError
from .base import JWK

Entry = Union[JWK, Mapping[str, Any]]


def entry_kid(entry: Any) -> Optional[str]:
    """Key id of a set entry without parsing its key material."""
    if isinstance(entry, JWK):
        return entry.kid
    if isinstance(entry, Mapping):
        return entry.get("kid")
    return None


class KeySet(Sequence):
    """Ordered collection of JWKs; duplicates allowed, first match wins."""

    def __init__(self, keys: Iterable[Entry] = ()):
        self._keys = tuple(keys)

    def __getitem__(self, index):
        return self._keys[index]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._keys)

    def __repr__(self) -> str:
        return f"<KeySet keys={len(self._keys)}>"

    def find(self, kid: Any) -> Optional[Entry]:
        """First entry whose kid equals ``kid``."""
        for entry in self._keys:
            if entry_kid(entry) == kid:
                return entry
        return None

    def export(self, include_private: bool = False) -> Dict[str, List[Dict[str, Any]]]:
        keys = []
        for entry in self._keys:
            if isinstance(entry, JWK):
                keys.append(entry.export(include_private=include_private))
            else:
                keys.append(dict(entry))
        return {"keys": keys}

    @classmethod
    def from_keys(cls, *keys: JWK) -> "KeySet":
        return cls(keys)

    @classmethod
    def import_set(cls, data: Union[str, bytes, Mapping[str, Any]]) -> "KeySet":
        """Build a set from ``{"keys": [...]}`` JSON text or mapping."""
        if isinstance(data, (str, bytes)):
            try:
                data = json.loads(data)
            except ValueError as exc:
                raise JwkError("JWK Set is not valid JSON") from exc
        return cls.coerce(data)

    @classmethod
    def coerce(cls, source: Any) -> "KeySet":
        """Normalize any accepted JWK Set shape into a ``KeySet``."""
        if isinstance(source, KeySet):
            return source
        if isinstance(source, Mapping):
            keys = source.get("keys") or []
        elif isinstance(source, Sequence) and not isinstance(source, (str, bytes)):
            keys = source
        else:
            raise ConfigurationError(
                "Unsupported jwks source",
                details={"type": type(source).__name__},
            )

        if not isinstance(keys, Sequence) or isinstance(keys, (str, bytes)):
            raise ConfigurationError(
                "jwks 'keys' member must be a list",
                details={"type": type(keys).__name__},
            )
        return cls(keys)
