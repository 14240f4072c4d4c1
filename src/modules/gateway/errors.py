class GatewayError(Exception):
    """Base class for failures surfaced to callers as ``{"error": ...}``."""


class UnsupportedProviderError(GatewayError):
    def __init__(self, provider: object) -> None:
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")


class MissingParameterError(GatewayError):
    pass


class UpstreamRequestError(GatewayError):
    """The gateway answered with a non-2xx status."""

    def __init__(self, label: str, status_code: int, reason: str) -> None:
        self.label = label
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"{label} failed: {reason}")
