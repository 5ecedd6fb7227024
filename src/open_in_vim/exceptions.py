"""Errors raised while resolving and launching an open-in-vim request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Remediation:
    """Optional follow-up offered next to an error message."""

    title: str
    url: str


class OpenInVimError(Exception):
    """Base exception for all open-in-vim errors."""

    def __init__(self, message: str, remediation: Remediation | None = None) -> None:
        super().__init__(message)
        self.remediation = remediation


class NoActiveDocumentError(OpenInVimError):
    """Raised when no document is focused in the host editor."""


class UnsavedDocumentError(OpenInVimError):
    """Raised when the active document has never been written to disk."""


class UnsupportedStrategyError(OpenInVimError):
    """Raised when the configured open method has no handler."""

    def __init__(self, method: str, available: list[str]) -> None:
        quoted = ", ".join(f'"{name}"' for name in available)
        super().__init__(
            f'Check your settings. Method "{method}" is not supported. '
            f"Currently, you can use {quoted}."
        )
        self.method = method
        self.available = available


class MissingShellError(OpenInVimError):
    """Raised when the shell for the integrated terminal does not exist."""


class UnsupportedPlatformError(OpenInVimError):
    """Raised when an open method cannot run on the current OS."""


class ExternalProcessError(OpenInVimError):
    """Raised when a launched process fails or writes to stderr."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class ConfigurationError(OpenInVimError):
    """Raised for unreadable or ill-typed settings."""
