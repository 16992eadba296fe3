"""
Error types for the clean operation.
"""
from .exceptions import (
    FailureKind,
    ErrorContext,
    CleanError,
    ConfigurationError,
    UnsupportedPlatformError,
    ScriptWriteError,
    ScriptPermissionError,
    ScriptSpawnError,
    ScriptFailedError
)

__all__ = [
    'FailureKind',
    'ErrorContext',
    'CleanError',
    'ConfigurationError',
    'UnsupportedPlatformError',
    'ScriptWriteError',
    'ScriptPermissionError',
    'ScriptSpawnError',
    'ScriptFailedError'
]
