"""
Platform detection utilities for gating the clean script.
"""
import logging
import platform
import tempfile
from typing import Dict, Any

logger = logging.getLogger(__name__)

# Platform types
PLATFORM_WINDOWS = "windows"
PLATFORM_LINUX = "linux"
PLATFORM_MACOS = "macos"
PLATFORM_UNKNOWN = "unknown"

UNIX_PLATFORMS = (PLATFORM_LINUX, PLATFORM_MACOS)


def get_platform() -> str:
    """
    Get the current platform in a standardized way.

    Returns:
        Standardized platform string (windows, linux, macos, or unknown)
    """
    system = platform.system().lower()

    if system == 'windows':
        return PLATFORM_WINDOWS
    elif system == 'linux':
        return PLATFORM_LINUX
    elif system == 'darwin':
        return PLATFORM_MACOS
    else:
        logger.warning(f"Unknown platform detected: {system}")
        return PLATFORM_UNKNOWN


def is_unix_like() -> bool:
    """
    Check whether the clean script can run on this platform.

    Returns:
        True on Linux and macOS, False otherwise
    """
    return get_platform() in UNIX_PLATFORMS


def get_platform_temp_dir() -> str:
    """Get the platform-specific temporary directory."""
    return tempfile.gettempdir()


def get_platform_info() -> Dict[str, Any]:
    """
    Get platform details for the CLI info command.

    Returns:
        Dictionary with platform details
    """
    return {
        "platform": get_platform(),
        "platform_system": platform.system(),
        "platform_release": platform.release(),
        "platform_machine": platform.machine(),
        "python_version": platform.python_version(),
        "supported": is_unix_like(),
        "temp_dir": get_platform_temp_dir(),
    }
