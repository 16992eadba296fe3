"""
Execution module for running the embedded clean script.
"""
from .runner import ScriptRunner, run_clean, UNSUPPORTED_PLATFORM_MESSAGE

__all__ = [
    'ScriptRunner',
    'run_clean',
    'UNSUPPORTED_PLATFORM_MESSAGE'
]
