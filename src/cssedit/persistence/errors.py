"""Storage error types."""


class StorageError(Exception):
    """Base class for key-value store failures."""


class StorageUnavailableError(StorageError):
    """Raised when the backing store cannot be used at all."""


class QuotaExceededError(StorageError):
    """Raised when a write would exceed the store's capacity."""

    def __init__(self, message: str, requested: int | None = None, quota: int | None = None):
        self.requested = requested
        self.quota = quota
        super().__init__(message)
