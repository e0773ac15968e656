class TwitterSearchError(Exception):
    """Base class for errors raised by the Twitter search gateway."""


class ConfigurationError(TwitterSearchError):
    """Raised before any network call when the RapidAPI key is not configured."""


class UpstreamError(TwitterSearchError):
    """Transport or HTTP failure talking to the upstream search API."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.status_code = status_code
