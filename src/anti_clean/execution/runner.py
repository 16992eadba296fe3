"""
Clean script runner.

The embedded script is written to the temp directory, made owner-executable,
run through the configured interpreter and removed again before the result is
returned. Every failure is reported as a CleanResult rather than raised.
"""
import logging
import os
import secrets
from pathlib import Path
from typing import List, Optional

from ..config.configuration import CleanConfiguration
from ..config.loader import load_config
from ..error.exceptions import (
    CleanError,
    ErrorContext,
    ScriptFailedError,
    ScriptPermissionError,
    ScriptWriteError,
    UnsupportedPlatformError,
)
from ..models import CleanResult
from ..scripts import ANTI_CLEAN_SCRIPT
from ..utils.platform_utils import get_platform_temp_dir, is_unix_like
from ..utils.subprocess_utils import run_captured

logger = logging.getLogger(__name__)

UNSUPPORTED_PLATFORM_MESSAGE = "Cache cleaning is only supported on macOS/Linux"
SCRIPT_MODE = 0o700


class ScriptRunner:
    """Runs the embedded clean script through a shell interpreter."""

    def __init__(self, config: Optional[CleanConfiguration] = None, script: str = ANTI_CLEAN_SCRIPT):
        """
        Args:
            config: Runner configuration, defaults when omitted
            script: Script payload to execute
        """
        self.config = config or CleanConfiguration()
        self.script = script

    def run_clean(self, force: bool = False) -> CleanResult:
        """
        Run the clean script.

        Args:
            force: Pass the force flag so the script removes more data

        Returns:
            CleanResult with the script's trimmed stdout on success, or the
            diagnostic text and failure kind on failure
        """
        try:
            output = self._run(force)
        except CleanError as e:
            logger.error(f"Clean failed ({e.kind}): {e.message[:500]}")
            return CleanResult.from_error(e)

        logger.info("Clean script completed successfully")
        return CleanResult.ok(output)

    def script_path(self) -> Path:
        """Resolve where the temporary script is written."""
        temp_dir = self.config.temp_dir or Path(get_platform_temp_dir())
        name = self.config.script_name
        if self.config.unique_temp_path:
            stem, dot, suffix = name.rpartition(".")
            if not stem:
                stem, dot, suffix = name, "", ""
            name = f"{stem}-{os.getpid()}-{secrets.token_hex(4)}{dot}{suffix}"
        return temp_dir / name

    def build_command(self, script_path: Path, force: bool) -> List[str]:
        """Build the interpreter invocation; the force flag is always last."""
        command = [self.config.interpreter, str(script_path)]
        if force:
            command.append(self.config.force_flag)
        return command

    def _run(self, force: bool) -> str:
        supported = is_unix_like()
        logger.debug(f"Platform supported: {supported}, force: {force}")
        if not supported:
            raise UnsupportedPlatformError(
                UNSUPPORTED_PLATFORM_MESSAGE,
                ErrorContext(component="ScriptRunner", operation="run_clean")
            )

        script_path = self.script_path()
        self._write_script(script_path)

        # The script is on disk from here on, so it must be removed on every path.
        try:
            self._make_executable(script_path)
            result = run_captured(self.build_command(script_path, force))
        finally:
            self._remove_script(script_path)

        logger.info(f"Clean script exited with code {result.exit_code}")
        if not result.succeeded:
            raise ScriptFailedError(result.failure_message(), result.exit_code)

        return result.stdout

    def _write_script(self, script_path: Path) -> None:
        logger.debug(f"Writing clean script to {script_path}")
        try:
            script_path.write_text(self.script, encoding="utf-8")
        except (OSError, ValueError) as e:
            raise ScriptWriteError(
                f"Failed to write temporary script: {e}",
                ErrorContext(component="ScriptRunner", operation="write", path=str(script_path))
            ) from e

    def _make_executable(self, script_path: Path) -> None:
        try:
            os.chmod(script_path, SCRIPT_MODE)
        except (OSError, ValueError) as e:
            raise ScriptPermissionError(
                f"Failed to set script permissions: {e}",
                ErrorContext(component="ScriptRunner", operation="chmod", path=str(script_path))
            ) from e

    @staticmethod
    def _remove_script(script_path: Path) -> None:
        try:
            script_path.unlink()
        except OSError:
            pass


def run_clean(force: bool = False, config: Optional[CleanConfiguration] = None) -> CleanResult:
    """
    Run the embedded clean script with configuration from file and environment.

    Args:
        force: Pass the force flag to the script
        config: Explicit configuration; loaded via load_config when omitted

    Returns:
        CleanResult describing the outcome
    """
    if config is None:
        try:
            config = load_config()
        except CleanError as e:
            logger.error(f"Could not load configuration: {e.message}")
            return CleanResult.from_error(e)

    return ScriptRunner(config).run_clean(force)
