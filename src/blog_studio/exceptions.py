"""Error taxonomy mapped to HTTP responses by the app factory."""

from __future__ import annotations


class BlogStudioError(Exception):
    """Base class for errors raised by services and routes."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(BlogStudioError):
    """The request was malformed; nothing was changed."""

    status_code = 400


class VersionOutOfRangeError(InvalidRequestError):
    """A version index falls outside the document's history."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__("Invalid version index")
        self.index = index
        self.length = length


class ProtectedVersionError(InvalidRequestError):
    """The original version (index 0) cannot be deleted."""

    def __init__(self) -> None:
        super().__init__("Cannot delete original version")


class NotFoundError(BlogStudioError):
    status_code = 404


class UpstreamError(BlogStudioError):
    """The generation backend or another dependency failed."""

    status_code = 500
