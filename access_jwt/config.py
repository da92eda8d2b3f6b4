"""
Decode configuration for access-jwt.

``DecodeConfig`` holds defaults read from ``ACCESS_JWT_*`` environment
variables or a ``.env`` file. It only takes effect when passed explicitly
into a decode call; per-call options are overlaid on top of it and
validated into an immutable ``DecodeOptions`` value. Without it, options
are validated on their own and the environment is never consulted.
"""

from typing import Any, Callable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class DecodeOptions(BaseModel):
    """Validated options for a single decode call."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    algorithms: List[str] = []
    jwks: Any = None

    leeway: float = 0
    exp_leeway: Optional[float] = None
    nbf_leeway: Optional[float] = None

    verify_expiration: bool = True
    verify_not_before: bool = True
    verify_iat: bool = False

    iss: Optional[Union[str, List[str]]] = None
    aud: Optional[Union[str, List[str]]] = None
    sub: Optional[str] = None
    verify_jti: Union[bool, Callable[..., Any]] = False
    required_claims: List[str] = []

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None) -> "DecodeOptions":
        """Validate a plain options mapping."""
        try:
            return cls(**dict(options or {}))
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid decode options",
                details={"errors": str(exc)},
            ) from exc

    @property
    def effective_exp_leeway(self) -> float:
        return self.leeway if self.exp_leeway is None else self.exp_leeway

    @property
    def effective_nbf_leeway(self) -> float:
        return self.leeway if self.nbf_leeway is None else self.nbf_leeway


class DecodeConfig(BaseSettings):
    """Default decode settings."""

    model_config = SettingsConfigDict(
        env_prefix="ACCESS_JWT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    algorithms: List[str] = []
    leeway: float = 0
    exp_leeway: Optional[float] = None
    nbf_leeway: Optional[float] = None
    verify_expiration: bool = True
    verify_not_before: bool = True
    verify_iat: bool = False
    required_claims: List[str] = []

    log_level: str = "info"

    def merge(self, options: Optional[Mapping[str, Any]] = None) -> DecodeOptions:
        """Overlay per-call ``options`` on these defaults."""
        merged = self.model_dump(exclude={"log_level"})
        merged.update(dict(options or {}))
        return DecodeOptions.from_mapping(merged)


def get_config(**overrides: Any) -> DecodeConfig:
    """Build decode configuration from the environment."""
    return DecodeConfig(**overrides)
