"""
Subprocess execution utilities for running the clean script.
"""
import logging
import shlex
import subprocess
from typing import List

from ..error.exceptions import ErrorContext, ScriptSpawnError
from ..models import ExecutionResult

logger = logging.getLogger(__name__)


def secure_join_args(args: List[str]) -> str:
    """
    Join command arguments into a shell-quoted string for logging.

    Args:
        args: List of command arguments

    Returns:
        Joined command as string
    """
    return ' '.join(shlex.quote(str(arg)) for arg in args)


def decode_output(data: bytes) -> str:
    """
    Decode captured output, replacing invalid byte sequences.

    Args:
        data: Raw bytes from a captured stream

    Returns:
        Decoded text with leading and trailing whitespace removed
    """
    return (data or b"").decode("utf-8", errors="replace").strip()


def run_captured(args: List[str]) -> ExecutionResult:
    """
    Run a command to completion with stdout and stderr captured in memory.

    The call blocks until the child exits. No timeout is applied.

    Args:
        args: Command and arguments, executed without a shell

    Returns:
        ExecutionResult with decoded, trimmed output

    Raises:
        ScriptSpawnError: If the process cannot be started or waited on
    """
    cmd_str = secure_join_args(args)
    logger.debug(f"Executing command: {cmd_str}")

    try:
        proc = subprocess.run(
            args,
            shell=False,
            stdin=subprocess.DEVNULL,
            capture_output=True,
        )
    except (OSError, ValueError, subprocess.SubprocessError) as e:
        logger.error(f"Command execution failed: {e}")
        raise ScriptSpawnError(
            f"Failed to execute script: {e}",
            ErrorContext(component="subprocess", operation="run", command=cmd_str)
        ) from e

    result = ExecutionResult(
        exit_code=proc.returncode,
        stdout=decode_output(proc.stdout),
        stderr=decode_output(proc.stderr),
    )

    if result.exit_code != 0:
        logger.warning(f"Command exited with non-zero code {result.exit_code}: {cmd_str}")
        logger.debug(f"Command stderr: {result.stderr[:500]}")

    return result
