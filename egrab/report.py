from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NO_SELECTION = "no_selection"
    ACCESS_DENIED = "access_denied"
    SERIALIZATION_FAILURE = "serialization_failure"
    UNKNOWN_ACTION = "unknown_action"


DEFAULT_MESSAGES = {
    ErrorKind.NO_SELECTION: "No element selected",
    ErrorKind.ACCESS_DENIED: "Access denied",
    ErrorKind.SERIALIZATION_FAILURE: "Serialization failed",
    ErrorKind.UNKNOWN_ACTION: "Unknown action",
}


class EgrabError(Exception):
    pass


class SnapshotError(EgrabError):
    """Raised when a page snapshot payload cannot be interpreted."""


@dataclass(frozen=True)
class CaptureReport:
    """Result envelope shared by every extractor.

    Exactly one of ``data`` or ``error`` is set. ``message`` carries the
    human-readable failure text shown in place of a section.
    """

    success: bool
    data: Optional[str] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def ok(cls, data: str) -> "CaptureReport":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, kind: ErrorKind, message: Optional[str] = None) -> "CaptureReport":
        return cls(success=False, error=kind, message=message or DEFAULT_MESSAGES[kind])

    @classmethod
    def no_selection(cls) -> "CaptureReport":
        return cls.fail(ErrorKind.NO_SELECTION)

    def render(self) -> str:
        if self.success:
            return self.data or ""
        return f"Error: {self.message}"
