import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'plugconf'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from helpers.cache_utils import reset_plugconf_caches


@pytest.fixture(autouse=True)
def isolated_plugconf_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every test with a private HOME, working directory and clean plugconf state.

    The working directory is ``tmp_path / "workdir"`` so that resource roots
    created directly under ``tmp_path`` never shadow as on-disk paths.
    """
    for key in list(os.environ):
        if key.startswith("PLUGCONF_"):
            monkeypatch.delenv(key, raising=False)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))

    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    reset_plugconf_caches()
    yield workdir
    reset_plugconf_caches()


@pytest.fixture
def write_file(tmp_path: Path):
    """Write text to ``tmp_path / relative`` (parents created) and return the path."""

    def _write(relative: str, content: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=encoding)
        return path

    return _write
