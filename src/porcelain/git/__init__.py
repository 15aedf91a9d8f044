"""Git interface layer — adapter, status decoding, models."""

from porcelain.git.adapter import (
    GitError,
    build_status_args,
    get_repo_root,
    get_status_text,
    status,
)
from porcelain.git.models import (
    FileStatusSummary,
    PorcelainFileStatus,
    RenamedFile,
    StatusSummary,
)
from porcelain.git.status_parser import (
    parse_branch_header,
    parse_status_summary,
    renamed_file,
    split_line,
)

__all__ = [
    "FileStatusSummary",
    "GitError",
    "PorcelainFileStatus",
    "RenamedFile",
    "StatusSummary",
    "build_status_args",
    "get_repo_root",
    "get_status_text",
    "parse_branch_header",
    "parse_status_summary",
    "renamed_file",
    "split_line",
    "status",
]
