"""
JSON Web Key package.

- base: the ``JWK`` model, import/export and RFC 7638 thumbprints.
- oct / rsa / ec / okp: one module per ``kty``.
- key_set: ``KeySet``, an ordered JWK Set.
- key_finder: ``KeyFinder``, kid lookup with loader rotation retry.
"""

from .base import JWK
from .ec import ECKey
from .key_finder import KeyFinder, LoaderContext
from .key_set import KeySet
from .oct import OctKey
from .okp import OKPKey
from .rsa import RSAKey

__all__ = [
    "ECKey",
    "JWK",
    "KeyFinder",
    "KeySet",
    "LoaderContext",
    "OKPKey",
    "OctKey",
    "RSAKey",
]
