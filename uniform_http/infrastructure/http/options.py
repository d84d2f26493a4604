"""Transport configuration.

TransportOptions enumerates everything the httpx-backed transport accepts at
construction time. Options are fixed for the lifetime of a facade.

Usage:
    from uniform_http.infrastructure.http import TransportOptions

    options = TransportOptions(
        headers={"Accept": "application/json"},
        timeout=10.0,
    )
    client = HttpClient("https://api.example.com", options)

    # Defaults from environment (HTTP_TIMEOUT, HTTP_VERIFY_SSL, ...)
    options = TransportOptions.from_settings(headers={"X-Api-Key": key})
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from uniform_http.core.config import Settings, get_settings
from uniform_http.core.constants import (
    MAX_REDIRECTS_DEFAULT,
    SUCCESS_STATUS_RANGE,
    TRANSPORT_TIMEOUT_DEFAULT,
)


class TransportOptions(BaseModel):
    """Construction-time transport configuration.

    Attributes:
        headers: Default headers sent with every request. Per-call headers
            override entries with the same name.
        timeout: Timeout in seconds applied to connect, read, write and pool
            acquisition. None disables timeouts.
        follow_redirects: Follow 3xx redirects automatically.
        max_redirects: Redirect limit; exceeding it fails the call.
        verify: Verify TLS certificates.
        trust_env: Honor proxy and certificate environment variables.
        auth: Basic auth ``(username, password)`` sent with every request.
        success_statuses: Inclusive ``(low, high)`` range of statuses the
            transport resolves with. Any other status is raised as a
            TransportError carrying the nested response.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float | None = Field(default=TRANSPORT_TIMEOUT_DEFAULT, gt=0)
    follow_redirects: bool = True
    max_redirects: int = Field(default=MAX_REDIRECTS_DEFAULT, ge=0)
    verify: bool = True
    trust_env: bool = True
    auth: tuple[str, str] | None = None
    success_statuses: tuple[int, int] = SUCCESS_STATUS_RANGE

    @field_validator("success_statuses")
    @classmethod
    def validate_success_statuses(cls, v: tuple[int, int]) -> tuple[int, int]:
        """
        Validate the success range is ordered and within HTTP status bounds.

        Raises:
            ValueError: If bounds are outside 100-599 or reversed.
        """
        low, high = v
        if not (100 <= low <= high <= 599):
            raise ValueError(
                "success_statuses must be an ordered (low, high) pair within 100-599"
            )
        return v

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides: Any) -> Self:
        """Build options from Settings, with explicit overrides taking precedence.

        Args:
            settings: Settings to read; defaults to the cached process settings.
            **overrides: Any TransportOptions field.

        Returns:
            TransportOptions populated from settings.
        """
        settings = settings or get_settings()
        values: dict[str, Any] = {
            "timeout": settings.http_timeout,
            "follow_redirects": settings.http_follow_redirects,
            "max_redirects": settings.http_max_redirects,
            "verify": settings.http_verify_ssl,
        }
        values.update(overrides)
        return cls(**values)

    def is_success(self, status: int) -> bool:
        """Whether a status falls in the success range."""
        low, high = self.success_statuses
        return low <= status <= high

    def client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``httpx.AsyncClient``."""
        return {
            "headers": dict(self.headers),
            "timeout": self.timeout,
            "follow_redirects": self.follow_redirects,
            "max_redirects": self.max_redirects,
            "verify": self.verify,
            "trust_env": self.trust_env,
            "auth": self.auth,
        }
