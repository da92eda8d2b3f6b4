"""
Compact JWS serialization.
"""

from typing import Any, Dict, Mapping, Optional

from .errors import EncodeError
from .signer import Signer
from .utils import base64url_encode, json_dumps
from .validation import ClaimsValidator

ALG_NONE = "none"
ALG_KEY = "alg"
KID_KEY = "kid"


class Encode:
    """Builds ``header.payload.signature`` from its parts."""

    def __init__(
        self,
        payload: Any,
        headers: Optional[Mapping[str, Any]] = None,
        signer: Optional[Signer] = None,
    ):
        self.payload = payload
        self.signer = signer
        self.headers: Dict[str, Any] = {str(name): value for name, value in (headers or {}).items()}

    @property
    def algorithm(self) -> str:
        return self.signer.algorithm if self.signer is not None else ALG_NONE

    def segments(self) -> str:
        signing_input = f"{self._encode_header()}.{self._encode_payload()}"
        return f"{signing_input}.{self._encode_signature(signing_input)}"

    def _encode_header(self) -> str:
        header = dict(self.headers)
        header[ALG_KEY] = self.algorithm
        if self.signer is not None and self.signer.kid:
            header[KID_KEY] = self.signer.kid
        return self._encode(header)

    def _encode_payload(self) -> str:
        if isinstance(self.payload, Mapping):
            ClaimsValidator(self.payload).validate()
        return self._encode(self.payload)

    def _encode_signature(self, signing_input: str) -> str:
        if self.signer is None or self.algorithm == ALG_NONE:
            return ""
        return base64url_encode(self.signer.sign(signing_input.encode("utf-8")))

    @staticmethod
    def _encode(data: Any) -> str:
        try:
            return base64url_encode(json_dumps(data))
        except (TypeError, ValueError) as exc:
            raise EncodeError("Token segment is not JSON serializable", details={"error": str(exc)}) from exc
