class NewsDeskError(Exception):
    """Base class for errors raised by the news desk."""


class NewsFetchError(NewsDeskError):
    """Fetching articles from the news API failed."""


class NetworkFailure(NewsFetchError):
    """The request never produced an HTTP response."""


class ApiError(NewsFetchError):
    """The news API answered with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"API Error: {status_code}")


class MalformedResponse(NewsFetchError):
    """The response body was not the expected JSON document."""


class EmptyResult(NewsDeskError):
    """A well-formed response carried zero articles."""
