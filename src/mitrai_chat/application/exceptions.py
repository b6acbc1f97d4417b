from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class ForbiddenError(AppError):
    pass


class ValidationError(AppError):
    pass


class RateLimitedError(AppError):
    pass


class StorageError(AppError):
    """The backing store rejected a read or write."""


class UpstreamError(AppError):
    """A third-party service answered with an error or an unusable payload."""

    def __init__(self, detail: str = "", status_code: int | None = None) -> None:
        super().__init__(detail)
        self.status_code = status_code
