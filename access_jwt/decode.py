"""
Compact JWS decoding and verification.

The pipeline runs split, header/payload decoding, algorithm allow-list
check, key resolution, signature verification and claim validation, in
that order. Without verification the signature stages are skipped but
claims are still validated. Any stage may raise; nothing partial is ever
returned.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .algorithms import find
from .config import DecodeOptions
from .errors import DecodeError, IncorrectAlgorithm, VerificationError
from .jwk import JWK, KeyFinder
from .utils import base64url_decode, json_loads
from .validation import validate_claims

ALG_NONE = "none"

Keyfinder = Callable[[Dict[str, Any], Any], Any]


class Decode:
    """Decode one token against one set of options."""

    def __init__(
        self,
        token: Union[str, bytes],
        key: Any,
        verify: bool,
        options: DecodeOptions,
        keyfinder: Optional[Keyfinder] = None,
    ):
        if isinstance(token, bytes):
            try:
                token = token.decode("ascii")
            except UnicodeDecodeError as exc:
                raise DecodeError("Invalid token encoding") from exc
        if not isinstance(token, str):
            raise DecodeError("Invalid token type", details={"type": type(token).__name__})

        self.token = token
        self.key = key
        self.verify = verify
        self.options = options
        self.keyfinder = keyfinder

        self.segments: List[str] = []
        self.header: Dict[str, Any] = {}
        self.payload: Any = None
        self.signature = b""

    def decode_segments(self) -> Tuple[Any, Dict[str, Any]]:
        self._split()
        self._decode_header()
        self._decode_payload()

        if self.verify:
            self._decode_signature()
            self._verify_algorithm()
            key = self._resolve_key()
            self._verify_signature(key)
        validate_claims(self.payload, self.options)

        return self.payload, self.header

    def decode_header(self) -> Dict[str, Any]:
        """Split the token and decode only its header."""
        self._split()
        self._decode_header()
        return self.header

    @property
    def signing_input(self) -> bytes:
        return ".".join(self.segments[:2]).encode("ascii")

    @property
    def algorithm(self) -> Any:
        return self.header.get("alg")

    def _split(self) -> None:
        segments = self.token.split(".")
        if len(segments) not in (2, 3):
            raise DecodeError("Not enough or too many segments")
        self.segments = segments

    def _decode_header(self) -> None:
        header = self._decode_json(self.segments[0])
        if not isinstance(header, dict):
            raise DecodeError("Invalid header")
        self.header = header

    def _decode_payload(self) -> None:
        self.payload = self._decode_json(self.segments[1])

    def _decode_signature(self) -> None:
        if len(self.segments) < 3:
            return
        try:
            self.signature = base64url_decode(self.segments[2])
        except ValueError as exc:
            raise DecodeError("Invalid segment encoding") from exc

    @staticmethod
    def _decode_json(segment: str) -> Any:
        try:
            return json_loads(base64url_decode(segment))
        except ValueError as exc:
            raise DecodeError("Invalid segment encoding") from exc

    def _verify_algorithm(self) -> None:
        allowed = self.options.algorithms
        if not allowed:
            raise IncorrectAlgorithm("An algorithm must be specified")
        if self.algorithm not in allowed:
            raise IncorrectAlgorithm(
                "Expected a different algorithm",
                details={"algorithm": self.algorithm, "allowed": list(allowed)},
            )

    def _resolve_key(self) -> Any:
        key = self.key
        if key is None and self.keyfinder is not None:
            key = self.keyfinder(self.header, self.payload)
        elif key is None and self.options.jwks is not None:
            key = KeyFinder(self.options.jwks).key_for(self.header.get("kid"))

        if isinstance(key, JWK):
            key = key.keypair
        if key is None and self.algorithm != ALG_NONE:
            raise DecodeError("No verification key available")
        return key

    def _verify_signature(self, key: Any) -> None:
        algorithm = find(self.algorithm)
        try:
            verified = algorithm.verify(key, self.signing_input, self.signature)
        except (IncorrectAlgorithm, VerificationError):
            raise
        except Exception as exc:
            raise VerificationError(
                "Signature verification raised",
                details={"algorithm": algorithm.name, "error": str(exc)},
            ) from exc

        if not verified:
            raise VerificationError("Signature verification failed")
