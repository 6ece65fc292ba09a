"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class ItemRepositoryError(ApplicationError):
    """Raised when inventory records cannot be read."""


class PageWriteError(ApplicationError):
    """Raised when a generated page cannot be written."""
