"""Domain enums for HTTP status classification."""

from enum import Enum


class StatusClass(Enum):
    """Enumeration of HTTP status code classes."""

    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"

    @classmethod
    def from_status(cls, status_code: int) -> "StatusClass":
        """Classify a status code by its hundreds digit."""
        classes = {
            1: cls.INFORMATIONAL,
            2: cls.SUCCESS,
            3: cls.REDIRECTION,
            4: cls.CLIENT_ERROR,
            5: cls.SERVER_ERROR,
        }
        return classes.get(status_code // 100, cls.UNKNOWN)
