"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class MissingCredentialError(ConfigError):
    """Raised when WEATHER_API_KEY is absent at startup."""


class FetchError(Exception):
    """Raised when a JSON document could not be retrieved."""


class NetworkError(FetchError):
    """Raised for transport-level failures (DNS, refused connection, timeout)."""


class ParseError(FetchError):
    """Raised when a response body is not JSON or has an unexpected shape."""


class ProviderError(Exception):
    """Raised when the weather provider signals an error in its payload."""

    def __init__(self, message: str, *, code: object = None) -> None:
        super().__init__(message)
        self.code = code


class InstallError(Exception):
    """Raised when wth-setup cannot update the profile or install the command."""
