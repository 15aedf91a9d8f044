"""Shared test fixtures — sample status outputs, temp git repos."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

NUL = "\0"


def join_records(*records: str) -> str:
    """Join records the way ``git status --null`` terminates them."""
    return "".join(f"{r}{NUL}" for r in records)


@pytest.fixture
def status_clean() -> str:
    """Branch header only — nothing to commit."""
    return join_records("## main...origin/main")


@pytest.fixture
def status_mixed() -> str:
    """A realistic mix of staged, unstaged, renamed and untracked entries."""
    return join_records(
        "## feature/login...origin/feature/login [ahead 2, behind 1]",
        "M  app.py",
        " M README.md",
        "A  new_module.py",
        "AM half_staged.py",
        "R  docs/guide.md",
        "docs/old_guide.md",
        " D removed.txt",
        "?? scratch.txt",
    )


@pytest.fixture
def status_conflicts() -> str:
    """A merge in progress with several unmerged paths."""
    return join_records(
        "## main",
        "UU both_modified.py",
        "AA both_added.py",
        "DU deleted_by_us.py",
        "M  merged_cleanly.py",
    )


@pytest.fixture
def status_ignored() -> str:
    """Output with --ignored: ignored files listed after everything else."""
    return join_records(
        "## main",
        "?? notes.txt",
        "!! build/",
        "!! debug.log",
    )


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
