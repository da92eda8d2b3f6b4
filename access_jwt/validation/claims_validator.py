"""
Registered claim checks for encode pre-flight and decode verification.
"""

import inspect
import time
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from ..config import DecodeOptions
from ..errors import (
    ExpiredSignature,
    ImmatureSignature,
    InvalidAudError,
    InvalidIatError,
    InvalidIssuerError,
    InvalidJtiError,
    InvalidPayload,
    InvalidSubError,
    MissingRequiredClaim,
)

NUMERIC_CLAIMS = ("exp", "iat", "nbf")


def is_numeric(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_list(value: Union[str, Iterable[str], None]) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


class ClaimsValidator:
    """Structural checks run on mapping payloads before encoding."""

    def __init__(self, payload: Mapping[str, Any]):
        self.payload = payload

    def validate(self) -> bool:
        for claim in NUMERIC_CLAIMS:
            if claim in self.payload and not is_numeric(self.payload[claim]):
                kind = type(self.payload[claim]).__name__
                raise InvalidPayload(
                    f"{claim} claim must be a Numeric value but it is a {kind}",
                    details={"claim": claim},
                )
        return True


def validate_claims(payload: Any, options: DecodeOptions, now: Optional[float] = None) -> None:
    """Verify registered claims of a decoded payload against ``options``."""
    if not isinstance(payload, Mapping):
        return

    now = time.time() if now is None else now

    if options.verify_expiration:
        _verify_exp(payload, now, options.effective_exp_leeway)
    if options.verify_not_before:
        _verify_nbf(payload, now, options.effective_nbf_leeway)
    if options.verify_iat:
        _verify_iat(payload, now, options.leeway)
    if options.iss is not None:
        _verify_iss(payload, options.iss)
    if options.aud is not None:
        _verify_aud(payload, options.aud)
    if options.sub is not None:
        _verify_sub(payload, options.sub)
    if options.verify_jti:
        _verify_jti(payload, options.verify_jti)
    for claim in options.required_claims:
        if claim not in payload:
            raise MissingRequiredClaim(f"Missing required claim {claim}", details={"claim": claim})


def _verify_exp(payload: Mapping[str, Any], now: float, leeway: float) -> None:
    if "exp" not in payload:
        return
    exp = payload["exp"]
    if not is_numeric(exp):
        raise ExpiredSignature("exp claim must be a Numeric value", details={"claim": "exp"})
    if now >= exp + leeway:
        raise ExpiredSignature("Signature has expired", details={"exp": exp})


def _verify_nbf(payload: Mapping[str, Any], now: float, leeway: float) -> None:
    if "nbf" not in payload:
        return
    nbf = payload["nbf"]
    if not is_numeric(nbf):
        raise ImmatureSignature("nbf claim must be a Numeric value", details={"claim": "nbf"})
    if now < nbf - leeway:
        raise ImmatureSignature("Signature nbf has not been reached", details={"nbf": nbf})


def _verify_iat(payload: Mapping[str, Any], now: float, leeway: float) -> None:
    if "iat" not in payload:
        return
    iat = payload["iat"]
    if not is_numeric(iat) or iat > now + leeway:
        raise InvalidIatError("Invalid iat", details={"iat": iat})


def _verify_iss(payload: Mapping[str, Any], expected: Union[str, List[str]]) -> None:
    issuers = _as_list(expected)
    iss = payload.get("iss")
    if iss not in issuers:
        raise InvalidIssuerError(
            f"Invalid issuer. Expected {expected}, received {iss or '<none>'}",
            details={"expected": issuers, "received": iss},
        )


def _verify_aud(payload: Mapping[str, Any], expected: Union[str, List[str]]) -> None:
    audiences = _as_list(expected)
    aud = payload.get("aud")
    received = [item for item in _as_list(aud) if isinstance(item, str)] if isinstance(aud, (str, list)) else []
    if not set(audiences).intersection(received):
        raise InvalidAudError(
            f"Invalid audience. Expected {expected}, received {aud or '<none>'}",
            details={"expected": audiences, "received": aud},
        )


def _verify_sub(payload: Mapping[str, Any], expected: str) -> None:
    sub = payload.get("sub")
    if sub != expected:
        raise InvalidSubError(
            f"Invalid subject. Expected {expected}, received {sub or '<none>'}",
            details={"expected": expected, "received": sub},
        )


def _verify_jti(payload: Mapping[str, Any], verifier: Union[bool, Callable[..., Any]]) -> None:
    jti = payload.get("jti")
    if callable(verifier):
        if _arity(verifier) >= 2:
            valid = verifier(jti, payload)
        else:
            valid = verifier(jti)
        if not valid:
            raise InvalidJtiError("Invalid jti", details={"jti": jti})
    elif jti is None or not str(jti).strip():
        raise InvalidJtiError("Missing jti")


def _arity(func: Callable[..., Any]) -> int:
    try:
        parameters = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return 1
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters):
        return 2
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return sum(1 for p in parameters if p.kind in positional)
