"""Application-specific exception classes."""

from pathlib import Path

from .base import ApplicationError


class FixtureNotFoundError(ApplicationError, FileNotFoundError):
    """Raised when a named JSON test fixture does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Test data file not found: {path}", details={"path": str(path)})
        self.path = path
