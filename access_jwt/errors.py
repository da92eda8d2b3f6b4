"""
Error taxonomy for access-jwt.

Every error carries a machine readable ``code``, a human readable
``message`` and a ``details`` mapping, and can be rendered into the
standard ``ErrorResponse`` shape used by the Access Layer services.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class JWTError(Exception):
    """Base exception for token encoding, decoding and key handling."""

    code = "JWT_ERROR"
    default_message = "JWT processing failed"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(code=self.code, message=self.message, details=self.details)


class EncodeError(JWTError):
    """Token could not be produced."""

    code = "ENCODE_ERROR"
    default_message = "Token encoding failed"


class InvalidPayload(EncodeError):
    """Payload failed the structural checks run before encoding."""

    code = "INVALID_PAYLOAD"
    default_message = "Invalid payload"


class DecodeError(JWTError):
    """Malformed token or missing key material."""

    code = "DECODE_ERROR"
    default_message = "Token decoding failed"


class VerificationError(DecodeError):
    """Signature check failed or the cryptographic check itself errored."""

    code = "VERIFICATION_ERROR"
    default_message = "Signature verification failed"


class IncorrectAlgorithm(DecodeError):
    """Token algorithm does not match the allow-list or the key."""

    code = "INCORRECT_ALGORITHM"
    default_message = "Expected a different algorithm"


class ExpiredSignature(DecodeError):
    code = "EXPIRED_SIGNATURE"
    default_message = "Signature has expired"


class ImmatureSignature(DecodeError):
    code = "IMMATURE_SIGNATURE"
    default_message = "Signature nbf has not been reached"


class InvalidIatError(DecodeError):
    code = "INVALID_IAT"
    default_message = "Invalid iat"


class InvalidIssuerError(DecodeError):
    code = "INVALID_ISSUER"
    default_message = "Invalid issuer"


class InvalidAudError(DecodeError):
    code = "INVALID_AUDIENCE"
    default_message = "Invalid audience"


class InvalidSubError(DecodeError):
    code = "INVALID_SUBJECT"
    default_message = "Invalid subject"


class InvalidJtiError(DecodeError):
    code = "INVALID_JTI"
    default_message = "Invalid jti"


class MissingRequiredClaim(DecodeError):
    code = "MISSING_REQUIRED_CLAIM"
    default_message = "Missing required claim"


class JwkError(DecodeError):
    """Malformed or unsupported JSON Web Key."""

    code = "JWK_ERROR"
    default_message = "Invalid JWK"


class UnsupportedAlgorithm(JWTError):
    """Algorithm name is not registered."""

    code = "UNSUPPORTED_ALGORITHM"
    default_message = "Unsupported signing method"


class ConfigurationError(JWTError):
    """Decode options or configuration values are invalid."""

    code = "CONFIGURATION_ERROR"
    default_message = "Invalid configuration"
