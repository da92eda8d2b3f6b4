"""
access-jwt: JWS/JWT encoding and verification for the 254Carbon Access Layer.

- api: ``encode`` / ``decode`` / ``get_unverified_header`` entry points.
- algorithms: algorithm registry (HMAC, RSA, RSA-PSS, ECDSA, EdDSA, none).
- jwk: JSON Web Keys, JWK Sets and kid-based key resolution.
- validation: registered claim checks.
- config, errors, logging: shared configuration, error taxonomy, structlog.

Package import performs no IO; JWKS retrieval belongs to the caller's loader.
"""

from .api import decode, encode, get_unverified_header
from .config import DecodeConfig, DecodeOptions, get_config
from .errors import (
    ConfigurationError,
    DecodeError,
    EncodeError,
    ExpiredSignature,
    ImmatureSignature,
    IncorrectAlgorithm,
    InvalidAudError,
    InvalidIatError,
    InvalidIssuerError,
    InvalidJtiError,
    InvalidPayload,
    InvalidSubError,
    JwkError,
    JWTError,
    MissingRequiredClaim,
    UnsupportedAlgorithm,
    VerificationError,
)
from .jwk import JWK, KeyFinder, KeySet, LoaderContext
from .signer import Signer

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "DecodeConfig",
    "DecodeError",
    "DecodeOptions",
    "EncodeError",
    "ExpiredSignature",
    "ImmatureSignature",
    "IncorrectAlgorithm",
    "InvalidAudError",
    "InvalidIatError",
    "InvalidIssuerError",
    "InvalidJtiError",
    "InvalidPayload",
    "InvalidSubError",
    "JWK",
    "JWTError",
    "JwkError",
    "KeyFinder",
    "KeySet",
    "LoaderContext",
    "MissingRequiredClaim",
    "Signer",
    "UnsupportedAlgorithm",
    "VerificationError",
    "decode",
    "encode",
    "get_config",
    "get_unverified_header",
]
