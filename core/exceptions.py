# core/exceptions.py


class LookupServiceError(Exception):
    """Base class for every error raised by the lookup tool."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.message = message
        self.url = url


class PayloadError(LookupServiceError):
    """The translation payload does not have the expected shape."""


class FetchError(LookupServiceError):
    """A supplementary page could not be fetched (non-ok response)."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message, url=url)
        self.status_code = status_code


class TranslationRequestError(LookupServiceError):
    """The primary translation API call failed."""
