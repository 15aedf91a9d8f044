"""JSON reporter for scripts and CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from porcelain.git.models import FileStatusSummary, StatusSummary


def _file_dict(f: FileStatusSummary) -> Dict[str, Any]:
    return {
        "path": f.path,
        "index": f.index,
        "working_dir": f.working_dir,
        **({"from": f.from_path} if f.from_path is not None else {}),
    }


def to_dict(summary: StatusSummary) -> Dict[str, Any]:
    """Convert a StatusSummary to a JSON-serialisable dict."""
    renamed: List[Dict[str, str]] = [
        {"from": r.from_path, "to": r.to_path} for r in summary.renamed
    ]

    return {
        "current": summary.current,
        "tracking": summary.tracking,
        "detached": summary.detached,
        "ahead": summary.ahead,
        "behind": summary.behind,
        "is_clean": summary.is_clean(),
        "not_added": list(summary.not_added),
        "conflicted": list(summary.conflicted),
        "created": list(summary.created),
        "deleted": list(summary.deleted),
        "ignored": list(summary.ignored) if summary.ignored is not None else None,
        "modified": list(summary.modified),
        "renamed": renamed,
        "staged": list(summary.staged),
        "files": [_file_dict(f) for f in summary.files],
    }


def render(summary: StatusSummary) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(summary), indent=2)
