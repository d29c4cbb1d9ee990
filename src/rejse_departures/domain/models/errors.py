"""Errors raised at the edges of the departure board."""


class GatewayError(Exception):
    """Base class for failures talking to the journey planner."""


class UpstreamError(GatewayError):
    """The journey planner answered with a non-success status or a malformed body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GatewayTransportError(GatewayError):
    """The network call to the journey planner could not complete."""


class MissingCredentialError(GatewayError):
    """No access token is configured for the journey planner."""


class GeolocationError(Exception):
    """The device position is unavailable or access to it was denied."""


class ConfigurationValidationError(ValueError):
    """A trip configuration entered in the setup flow is invalid."""
