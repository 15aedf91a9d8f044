"""Data models for decoded status output."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class PorcelainFileStatus(str, Enum):
    ADDED = "A"
    DELETED = "D"
    MODIFIED = "M"
    RENAMED = "R"
    COPIED = "C"
    UNMERGED = "U"
    UNTRACKED = "?"
    IGNORED = "!"
    NONE = " "


@dataclass(frozen=True)
class RenamedFile:
    """Source and destination of a rename entry."""

    from_path: str
    to_path: str


@dataclass(frozen=True)
class FileStatusSummary:
    """One file line from the status output."""

    path: str  # destination path for renames
    index: str
    working_dir: str
    from_path: Optional[str] = None  # set on renames


@dataclass
class StatusSummary:
    """Everything decoded from a single status run."""

    not_added: List[str] = field(default_factory=list)
    conflicted: List[str] = field(default_factory=list)
    created: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)
    ignored: Optional[List[str]] = None  # stays None until an ignored entry is seen
    modified: List[str] = field(default_factory=list)
    renamed: List[RenamedFile] = field(default_factory=list)
    files: List[FileStatusSummary] = field(default_factory=list)
    staged: List[str] = field(default_factory=list)
    ahead: int = 0
    behind: int = 0
    current: Optional[str] = None
    tracking: Optional[str] = None
    detached: bool = False

    def is_clean(self) -> bool:
        return not self.files
