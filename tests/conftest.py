from pathlib import Path
from typing import Iterable

import pytest
from hypothesis import settings

# Prevent Hypothesis from writing a local example database (e.g. `.hypothesis/`) during tests.
settings.register_profile("spark-tests", database=None)
settings.load_profile("spark-tests")


def make_project_dir(
    root: Path,
    *,
    git: bool = False,
    files: Iterable[str] = ("README.md", "src/main.py"),
) -> Path:
    """Create a project directory under ``root`` for tests.

    Args:
        root: Directory to create the project in (usually tmp_path).
        git: Create a ``.git`` folder at the project root.
        files: Relative file paths to create with placeholder content.

    Returns:
        The project root.
    """
    root.mkdir(parents=True, exist_ok=True)
    if git:
        (root / ".git").mkdir(exist_ok=True)
        (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    for rel in files:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"# {rel}\n", encoding="utf-8")
    return root


@pytest.fixture
def git_project_dir(tmp_path: Path) -> Path:
    return make_project_dir(tmp_path / "p1", git=True)


@pytest.fixture
def plain_project_dir(tmp_path: Path) -> Path:
    return make_project_dir(tmp_path / "p2", git=False)
