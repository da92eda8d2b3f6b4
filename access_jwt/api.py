"""
Public entry points: ``encode``, ``decode`` and ``get_unverified_header``.
"""

from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .config import DecodeConfig, DecodeOptions
from .decode import Decode, Keyfinder
from .encode import Encode
from .signer import Signer


def encode(
    payload: Any,
    header_fields: Optional[Mapping[str, Any]] = None,
    signer: Optional[Signer] = None,
) -> str:
    """Produce a compact token; unsigned (``alg: none``) without a signer."""
    return Encode(payload, headers=header_fields, signer=signer).segments()


def decode(
    token: Union[str, bytes],
    key: Any = None,
    verify: bool = True,
    options: Optional[Mapping[str, Any]] = None,
    keyfinder: Optional[Keyfinder] = None,
    config: Optional[DecodeConfig] = None,
) -> Tuple[Any, Dict[str, Any]]:
    """Decode ``token`` and return ``(payload, header)``.

    With ``verify`` the header ``alg`` must be in ``options["algorithms"]``
    and the signature is checked with the first available of: ``key``,
    ``keyfinder(header, payload)``, or the ``options["jwks"]`` key set or
    loader. Registered claims are validated whether or not ``verify`` is set.

    ``config`` supplies defaults under ``options``; without it only the
    built-in defaults apply.
    """
    if config is not None:
        decode_options = config.merge(options)
    else:
        decode_options = DecodeOptions.from_mapping(options)
    return Decode(token, key, verify, decode_options, keyfinder=keyfinder).decode_segments()


def get_unverified_header(token: Union[str, bytes]) -> Dict[str, Any]:
    """Header of ``token`` without any verification or claim checks."""
    return Decode(token, None, False, DecodeOptions()).decode_header()
