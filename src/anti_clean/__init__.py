"""
Anti Clean: removes Antigravity's cached conversation and session data.
"""
__version__ = "1.0.0"

from .execution.runner import ScriptRunner, run_clean
from .models import CleanResult, ExecutionResult
from .config.configuration import CleanConfiguration

__all__ = [
    "ScriptRunner",
    "run_clean",
    "CleanResult",
    "ExecutionResult",
    "CleanConfiguration",
    "__version__"
]
