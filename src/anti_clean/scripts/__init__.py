"""
Shell scripts shipped as package data.

The clean script is read once at import time and kept as an immutable string,
so the runner never depends on an installed file at a known path.
"""
from importlib import resources

ANTI_CLEAN_SCRIPT_NAME = "anti-clean.sh"


def load_script(name: str) -> str:
    """Read a bundled script by file name."""
    return resources.files(__name__).joinpath(name).read_text(encoding="utf-8")


ANTI_CLEAN_SCRIPT: str = load_script(ANTI_CLEAN_SCRIPT_NAME)

__all__ = ["ANTI_CLEAN_SCRIPT", "ANTI_CLEAN_SCRIPT_NAME", "load_script"]
