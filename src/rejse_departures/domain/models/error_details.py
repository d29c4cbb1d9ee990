"""Error details domain model."""

from pydantic import BaseModel, ConfigDict

from rejse_departures.domain.models.errors import (
    GatewayTransportError,
    GeolocationError,
    MissingCredentialError,
    UpstreamError,
)


class ErrorDetails(BaseModel):
    """Details about an error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    @classmethod
    def from_exception(cls, error: BaseException) -> "ErrorDetails":
        """Summarize an exception for logging and redirect reasons."""
        if isinstance(error, UpstreamError):
            status_code = error.status_code
            if status_code == 429:
                reason = "Rate limit exceeded"
            elif status_code in (401, 403):
                reason = "Access denied by journey planner"
            elif status_code is not None and status_code >= 500:
                reason = f"Journey planner error (HTTP {status_code})"
            elif status_code is not None:
                reason = f"HTTP {status_code}"
            else:
                reason = f"Malformed response: {error}"
            return cls(status_code=status_code, reason=reason)
        if isinstance(error, GatewayTransportError):
            return cls(reason=f"Network error: {error}")
        if isinstance(error, MissingCredentialError):
            return cls(reason="No access token configured")
        if isinstance(error, GeolocationError):
            return cls(reason=f"Location unavailable: {error}")
        return cls(reason=str(error) or type(error).__name__)
