"""Custom exceptions for TaskDesk."""


class TaskDeskError(Exception):
    """Base exception for all TaskDesk errors."""


class StorageError(TaskDeskError):
    """Base class for persistence failures that callers recover from locally."""


class StorageUnavailable(StorageError):
    """Raised when the persistence substrate cannot be read."""


class StorageCorrupt(StorageError):
    """Raised when stored bytes cannot be decoded into a task collection."""


class FetchFailure(TaskDeskError):
    """Raised when the remote article source cannot deliver its collection."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
