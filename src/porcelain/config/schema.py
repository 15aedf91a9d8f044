"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json", "yaml"]
UntrackedMode = Literal["all", "normal", "no"]

OUTPUT_FORMATS = ("terminal", "json", "yaml")
UNTRACKED_MODES = ("all", "normal", "no")


@dataclass
class StatusConfig:
    untracked: UntrackedMode = "all"
    ignored: bool = False  # pass --ignored to git status
    timeout: int = 30


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_branch: bool = True
    show_summary: bool = True


@dataclass
class PorcelainConfig:
    version: str = "1.0"
    status: StatusConfig = field(default_factory=StatusConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
