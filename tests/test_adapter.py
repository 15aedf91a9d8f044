"""Tests for the git adapter — argument building and live status runs."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from porcelain.git.adapter import (
    GitError,
    build_status_args,
    get_repo_root,
    get_status_text,
    status,
)
from porcelain.git.models import RenamedFile


class TestBuildStatusArgs:
    def test_defaults(self):
        assert build_status_args() == ["status", "--porcelain", "-b", "-uall", "--null"]

    def test_ignored_and_mode(self):
        args = build_status_args(untracked="no", ignored=True)
        assert "-uno" in args
        assert args[-1] == "--ignored"

    def test_invalid_mode(self):
        with pytest.raises(GitError):
            build_status_args(untracked="sometimes")


class TestErrors:
    def test_git_missing(self, tmp_path: Path):
        with patch("porcelain.git.adapter.subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(GitError, match="not installed"):
                get_status_text(tmp_path)

    def test_timeout(self, tmp_path: Path):
        with patch(
            "porcelain.git.adapter.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="git", timeout=1),
        ):
            with pytest.raises(GitError, match="timed out"):
                get_status_text(tmp_path, timeout=1)

    def test_not_a_repo(self, tmp_path: Path):
        with pytest.raises(GitError):
            get_repo_root(tmp_path)


class TestLiveStatus:
    def test_repo_root(self, tmp_git_repo: Path):
        assert get_repo_root(tmp_git_repo).resolve() == tmp_git_repo.resolve()

    def test_clean_repo(self, tmp_git_repo: Path):
        summary = status(tmp_git_repo)
        assert summary.is_clean() is True
        assert summary.current is not None
        assert summary.tracking is None
        assert summary.detached is False

    def test_staged_untracked_and_modified(self, tmp_git_repo: Path):
        (tmp_git_repo / "staged.py").write_text("x = 1\n")
        subprocess.run(["git", "add", "staged.py"], cwd=tmp_git_repo, capture_output=True, check=True)
        (tmp_git_repo / "untracked.txt").write_text("notes\n")
        (tmp_git_repo / "README.md").write_text("# Changed\n")

        summary = status(tmp_git_repo)
        assert summary.created == ["staged.py"]
        assert summary.staged == ["staged.py"]
        assert summary.modified == ["README.md"]
        assert summary.not_added == ["untracked.txt"]

    def test_rename(self, tmp_git_repo: Path):
        subprocess.run(
            ["git", "mv", "README.md", "GUIDE.md"],
            cwd=tmp_git_repo, capture_output=True, check=True,
        )
        summary = status(tmp_git_repo)
        assert summary.renamed == [RenamedFile(from_path="README.md", to_path="GUIDE.md")]
        assert [f.path for f in summary.files] == ["GUIDE.md"]

    def test_ignored_files(self, tmp_git_repo: Path):
        (tmp_git_repo / ".gitignore").write_text("*.log\n")
        subprocess.run(["git", "add", ".gitignore"], cwd=tmp_git_repo, capture_output=True, check=True)
        subprocess.run(["git", "commit", "-m", "ignore"], cwd=tmp_git_repo, capture_output=True, check=True)
        (tmp_git_repo / "debug.log").write_text("noise\n")

        assert status(tmp_git_repo).ignored is None
        summary = status(tmp_git_repo, ignored=True)
        assert summary.ignored == ["debug.log"]
        assert summary.is_clean() is True
