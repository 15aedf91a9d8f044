"""porcelain — decode ``git status --porcelain`` output into a typed summary."""

__version__ = "0.1.0"

from porcelain.git.models import FileStatusSummary, RenamedFile, StatusSummary
from porcelain.git.status_parser import parse_status_summary

__all__ = [
    "FileStatusSummary",
    "RenamedFile",
    "StatusSummary",
    "__version__",
    "parse_status_summary",
]
