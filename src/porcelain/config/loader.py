"""Load and merge configuration from .porcelain.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import structlog

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from porcelain.config.schema import (
    OUTPUT_FORMATS,
    UNTRACKED_MODES,
    OutputConfig,
    PorcelainConfig,
    StatusConfig,
)

logger = structlog.get_logger()

CONFIG_FILENAME = ".porcelain.toml"
_TRUTHY = ("1", "true", "yes")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: PorcelainConfig) -> None:
    """Apply PORCELAIN_* environment variable overrides."""
    if val := os.environ.get("PORCELAIN_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("PORCELAIN_UNTRACKED"):
        if val in UNTRACKED_MODES:
            cfg.status.untracked = val  # type: ignore[assignment]
    if val := os.environ.get("PORCELAIN_IGNORED"):
        cfg.status.ignored = val.lower() in _TRUTHY
    if val := os.environ.get("PORCELAIN_TIMEOUT"):
        try:
            cfg.status.timeout = int(val)
        except ValueError:
            logger.warning("invalid_env_override", name="PORCELAIN_TIMEOUT", value=val)


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.get(section, {}).items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> PorcelainConfig:
    """Load, validate, and return a PorcelainConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = PorcelainConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = PorcelainConfig(
            version=raw.get("version", "1.0"),
            status=_build_section(raw, StatusConfig, "status"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        logger.debug("config_loaded", path=str(config_path))

    _merge_env_overrides(cfg)
    return cfg
