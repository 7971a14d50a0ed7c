"""Errors raised while fetching news."""


class FetchError(Exception):
    """Base class for failures of a single fetch cycle."""


class NetworkError(FetchError):
    """The request could not be completed or its body could not be decoded."""


class HttpError(FetchError):
    """The news API answered with a non-success status.

    Args:
        message: Server-provided error messages joined into one string, or a
            generic status message when the body carries none.
        status_code: HTTP status of the response.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(FetchError):
    """A success response did not contain an ``articles`` list."""

    def __init__(self, message: str = "Expected an array of articles.") -> None:
        super().__init__(message)
