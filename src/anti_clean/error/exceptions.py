"""
Centralized exception definitions for the cache cleaner.
"""
from typing import Optional


class FailureKind:
    """Failure kinds reported by the clean operation."""
    UNSUPPORTED_PLATFORM = "UnsupportedPlatform"
    WRITE_FAILURE = "WriteFailure"
    PERMISSION_FAILURE = "PermissionFailure"
    SPAWN_FAILURE = "SpawnFailure"
    SCRIPT_FAILURE = "ScriptFailure"
    CONFIGURATION = "Configuration"


class ErrorContext:
    """Context information for errors."""

    def __init__(self, component: str = None, operation: str = None, **kwargs):
        self.component = component
        self.operation = operation
        self.details = kwargs


class CleanError(Exception):
    """Base class for all clean errors."""

    kind: str = FailureKind.SCRIPT_FAILURE

    def __init__(self, message: str, context: Optional[ErrorContext] = None):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def __str__(self):
        base_str = super().__str__()
        if self.context.component and self.context.operation:
            return f"{base_str} [in {self.context.component}.{self.context.operation}]"
        return base_str


class ConfigurationError(CleanError):
    """Error in configuration."""
    kind = FailureKind.CONFIGURATION


class UnsupportedPlatformError(CleanError):
    """The current platform cannot run the clean script."""
    kind = FailureKind.UNSUPPORTED_PLATFORM


class ScriptWriteError(CleanError):
    """The embedded script could not be written to the temp directory."""
    kind = FailureKind.WRITE_FAILURE


class ScriptPermissionError(CleanError):
    """The temporary script could not be made executable."""
    kind = FailureKind.PERMISSION_FAILURE


class ScriptSpawnError(CleanError):
    """The interpreter could not be launched or waited on."""
    kind = FailureKind.SPAWN_FAILURE


class ScriptFailedError(CleanError):
    """The script ran and exited with a non-zero status."""
    kind = FailureKind.SCRIPT_FAILURE

    def __init__(self, message: str, exit_code: int, context: Optional[ErrorContext] = None):
        super().__init__(message, context)
        self.exit_code = exit_code
