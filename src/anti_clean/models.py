"""
Result models for script execution and the clean operation.
"""
from typing import Optional

from pydantic import BaseModel

from .error.exceptions import CleanError


class ExecutionResult(BaseModel):
    """Represents output from a finished script process."""
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    class Config:
        frozen = True

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    def failure_message(self) -> str:
        """Combine the captured streams into a single diagnostic."""
        if not self.stderr:
            return self.stdout
        if not self.stdout:
            return self.stderr
        return f"{self.stdout}\n{self.stderr}"


class CleanResult(BaseModel):
    """Outcome of a clean run, either the script report or a diagnostic."""
    success: bool
    message: str = ""
    kind: Optional[str] = None

    class Config:
        frozen = True

    @classmethod
    def ok(cls, output: str) -> "CleanResult":
        return cls(success=True, message=output)

    @classmethod
    def from_error(cls, error: CleanError) -> "CleanResult":
        return cls(success=False, message=error.message, kind=error.kind)

    def unwrap(self) -> str:
        """
        Return the script report.

        Raises:
            CleanError: If the run failed
        """
        if not self.success:
            error = CleanError(self.message)
            if self.kind:
                error.kind = self.kind
            raise error
        return self.message
