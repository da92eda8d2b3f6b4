"""
Segment codec helpers shared by the encoder, decoder and JWK model.

base64url work is delegated to ``jose.utils``; JSON goes through the
standard library with compact separators.
"""

import json
import re
from typing import Any, Union

from jose import utils as jose_utils

_BASE64URL = re.compile(rb"[A-Za-z0-9_-]*")


def _check_base64url(data: bytes) -> bytes:
    if not _BASE64URL.fullmatch(data) or len(data) % 4 == 1:
        raise ValueError("Invalid base64url segment")
    return data


def base64url_encode(data: bytes) -> str:
    """Encode bytes as unpadded base64url text."""
    return jose_utils.base64url_encode(data).decode("ascii")


def base64url_decode(data: Union[str, bytes]) -> bytes:
    """Decode unpadded base64url text; raises ``ValueError`` on bad input.

    Padding and characters outside the base64url alphabet are rejected.
    """
    if isinstance(data, str):
        data = data.encode("ascii")
    return jose_utils.base64url_decode(_check_base64url(data))


def int_to_base64url(value: int, size: int = 0) -> str:
    """Big-endian base64url form of ``value``, left-padded to ``size`` bytes."""
    return jose_utils.long_to_base64(value, size=size).decode("ascii")


def base64url_to_int(data: str) -> int:
    return jose_utils.base64_to_long(_check_base64url(data.encode("ascii")))


def json_dumps(data: Any) -> bytes:
    return json.dumps(data, separators=(",", ":")).encode("utf-8")


def json_loads(data: bytes) -> Any:
    return json.loads(data.decode("utf-8"))


def to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")
