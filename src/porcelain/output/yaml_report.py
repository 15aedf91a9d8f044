"""YAML reporter — same document shape as the JSON reporter."""

from __future__ import annotations

import yaml

from porcelain.git.models import StatusSummary
from porcelain.output.json_report import to_dict


def render(summary: StatusSummary) -> str:
    """Return the summary as a YAML document."""
    return yaml.safe_dump(to_dict(summary), sort_keys=False, allow_unicode=True)
