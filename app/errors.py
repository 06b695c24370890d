"""Error taxonomy shared by the HTTP client, the domain clients and the aggregator."""


class HttpError(Exception):
    """A failed upstream interaction. `status_code` is always set."""

    default_status = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status

    def __str__(self) -> str:
        return f"{self.message} (status {self.status_code})"


class NetworkError(HttpError):
    """No response was received (DNS, refused connection, timeout)."""

    default_status = 500


class UpstreamError(HttpError):
    """The provider or the proxy answered with a non-2xx status."""


class ValidationError(HttpError):
    """The caller omitted or malformed a required parameter; raised before any network call."""

    default_status = 400


class NotFoundError(HttpError):
    """A lookup resolved to zero results."""

    default_status = 404


class SchemaError(HttpError):
    """The provider answered 2xx but the body does not match the expected shape."""

    default_status = 502
