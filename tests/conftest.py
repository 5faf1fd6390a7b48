import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'inspire_core'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from helpers.cache_utils import reset_inspire_caches


@pytest.fixture(autouse=True)
def _isolate_inspire(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every test from an empty project with no INSPIRE_* overrides."""
    for key in list(os.environ):
        if key.startswith("INSPIRE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_inspire_caches()
    yield
    reset_inspire_caches()


@pytest.fixture
def isolated_project_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Project root with an empty ``.inspire/config`` directory."""
    monkeypatch.setenv("INSPIRE_PROJECT_ROOT", str(tmp_path))
    (tmp_path / ".inspire" / "config").mkdir(parents=True, exist_ok=True)
    return tmp_path


@pytest.fixture(scope="session")
def repo_root() -> Path:
    return REPO_ROOT
