"""
Claim validation package.

Registered claims (``exp``, ``nbf``, ``iat``, ``iss``, ``aud``, ``sub``,
``jti``) are checked in a fixed order and the first violation is raised.
Encoding runs only the structural pre-flight checks.
"""

from .claims_validator import ClaimsValidator, validate_claims

__all__ = ["ClaimsValidator", "validate_claims"]
