"""Pytest configuration and fixtures."""
import pytest

from anti_clean.config.configuration import CleanConfiguration
from anti_clean.execution.runner import ScriptRunner


@pytest.fixture
def temp_dir(tmp_path):
    """Private stand-in for the platform temp directory."""
    path = tmp_path / "tmp"
    path.mkdir()
    return path


@pytest.fixture
def config(temp_dir):
    """Create a test configuration writing scripts into temp_dir."""
    return CleanConfiguration(temp_dir=temp_dir)


@pytest.fixture
def make_runner(config):
    """Build a runner around an arbitrary script payload."""
    def _make(script: str, **overrides) -> ScriptRunner:
        runner_config = CleanConfiguration(**{**config.model_dump(), **overrides})
        return ScriptRunner(runner_config, script=script)
    return _make


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Keep config discovery and .env loading away from the developer's files."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in list(CleanConfiguration.model_fields):
        monkeypatch.delenv(f"ANTI_CLEAN_{name.upper()}", raising=False)
    return tmp_path
