"""
Utility functions and classes.
"""
from .logging import configure_logging, JsonFormatter
from .platform_utils import get_platform, get_platform_info, get_platform_temp_dir, is_unix_like
from .subprocess_utils import decode_output, run_captured, secure_join_args

__all__ = [
    'configure_logging',
    'JsonFormatter',
    'get_platform',
    'get_platform_info',
    'get_platform_temp_dir',
    'is_unix_like',
    'decode_output',
    'run_captured',
    'secure_join_args'
]
