"""
Algorithm registry.

Maps a JWS ``alg`` name to the descriptor that signs and verifies with it.
Lookup is case-sensitive and fails closed: an unknown name never falls
back to ``none``.
"""

from typing import Any, Dict, List

from ..errors import UnsupportedAlgorithm
from .base import Algorithm, KeyKind, key_kind
from .ecdsa import ECDSAAlgorithm
from .eddsa import EdDSAAlgorithm
from .hmac import HMACAlgorithm
from .none import NoneAlgorithm
from .rsa import RSAAlgorithm, RSAPSSAlgorithm

_ALGORITHMS = (
    HMACAlgorithm("HS256", "HMAC", KeyKind.OCT, hash_size=256),
    HMACAlgorithm("HS384", "HMAC", KeyKind.OCT, hash_size=384),
    HMACAlgorithm("HS512", "HMAC", KeyKind.OCT, hash_size=512),
    RSAAlgorithm("RS256", "RSASSA-PKCS1", KeyKind.RSA, hash_size=256),
    RSAAlgorithm("RS384", "RSASSA-PKCS1", KeyKind.RSA, hash_size=384),
    RSAAlgorithm("RS512", "RSASSA-PKCS1", KeyKind.RSA, hash_size=512),
    RSAPSSAlgorithm("PS256", "RSA-PSS", KeyKind.RSA, hash_size=256),
    RSAPSSAlgorithm("PS384", "RSA-PSS", KeyKind.RSA, hash_size=384),
    RSAPSSAlgorithm("PS512", "RSA-PSS", KeyKind.RSA, hash_size=512),
    ECDSAAlgorithm("ES256", "ECDSA", KeyKind.EC, hash_size=256, curve="secp256r1"),
    ECDSAAlgorithm("ES384", "ECDSA", KeyKind.EC, hash_size=384, curve="secp384r1"),
    ECDSAAlgorithm("ES512", "ECDSA", KeyKind.EC, hash_size=512, curve="secp521r1"),
    ECDSAAlgorithm("ES256K", "ECDSA", KeyKind.EC, hash_size=256, curve="secp256k1"),
    EdDSAAlgorithm("EdDSA", "EdDSA", KeyKind.OKP),
    NoneAlgorithm("none", "none", None),
)

ALGORITHMS: Dict[str, Algorithm] = {algorithm.name: algorithm for algorithm in _ALGORITHMS}


def find(name: Any) -> Algorithm:
    """Return the registered algorithm called ``name``."""
    if isinstance(name, str) and name in ALGORITHMS:
        return ALGORITHMS[name]
    raise UnsupportedAlgorithm(f"Unsupported signing method {name}", details={"algorithm": name})


def supported_algorithms() -> List[str]:
    return list(ALGORITHMS)


__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "KeyKind",
    "find",
    "key_kind",
    "supported_algorithms",
]
