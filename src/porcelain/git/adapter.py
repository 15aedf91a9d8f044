"""Git subprocess wrapper — repo root lookup and porcelain status capture."""

from __future__ import annotations

import subprocess
import time
from pathlib import Path
from typing import List, Optional

import structlog

from porcelain.git.models import StatusSummary
from porcelain.git.status_parser import parse_status_summary

logger = structlog.get_logger()

UNTRACKED_MODES = ("all", "normal", "no")
_DEFAULT_TIMEOUT = 30


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: List[str], cwd: Path, timeout: int = _DEFAULT_TIMEOUT) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    start = time.perf_counter()
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    logger.debug(
        "git_command_finished",
        args=args,
        cwd=str(cwd),
        returncode=result.returncode,
        duration_ms=round((time.perf_counter() - start) * 1000, 1),
    )

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(f"git error: {stderr or f'exit code {result.returncode}'}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def build_status_args(untracked: str = "all", ignored: bool = False) -> List[str]:
    """Return the ``git status`` arguments that produce decodable output."""
    if untracked not in UNTRACKED_MODES:
        raise GitError(f"Invalid untracked mode: {untracked}")
    args = ["status", "--porcelain", "-b", f"-u{untracked}", "--null"]
    if ignored:
        args.append("--ignored")
    return args


def get_status_text(
    repo_root: Path,
    untracked: str = "all",
    ignored: bool = False,
    timeout: int = _DEFAULT_TIMEOUT,
) -> str:
    """Return the raw NUL-delimited status output for *repo_root*."""
    return _run_git(build_status_args(untracked, ignored), cwd=repo_root, timeout=timeout)


def status(
    repo_root: Path,
    untracked: str = "all",
    ignored: bool = False,
    timeout: int = _DEFAULT_TIMEOUT,
) -> StatusSummary:
    """Run ``git status`` in *repo_root* and decode the result."""
    text = get_status_text(repo_root, untracked=untracked, ignored=ignored, timeout=timeout)
    summary = parse_status_summary(text)
    logger.info(
        "status_decoded",
        repo_root=str(repo_root),
        files=len(summary.files),
        current=summary.current,
    )
    return summary
