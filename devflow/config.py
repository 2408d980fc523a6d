"""
Runtime configuration.

Defaults live here as module constants; `AppConfig.from_env` lets the
environment override them without touching the discovery code.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SEARCH_PATHS = (
    ".",
    "~/dev",
    "~/Projects",
    "~/code",
    "~/workspace",
)

# Build output and dependency directories never worth classifying
DEFAULT_SKIP_DIRS = frozenset({"node_modules", "target", "build", "dist"})

# Levels below a search root the walk may visit
DEFAULT_MAX_DEPTH = 3

ENV_SEARCH_PATHS = "DEVFLOW_SEARCH_PATHS"
ENV_MAX_DEPTH = "DEVFLOW_MAX_DEPTH"
ENV_LOG_LEVEL = "DEVFLOW_LOG_LEVEL"
ENV_LOG_FILE = "DEVFLOW_LOG_FILE"


class ConfigError(ValueError):
    """Raised when an environment override cannot be parsed."""


@dataclass(frozen=True)
class DiscoveryConfig:
    """Where and how deep the project walk goes."""

    search_paths: tuple[str, ...] = DEFAULT_SEARCH_PATHS
    skip_dirs: frozenset[str] = DEFAULT_SKIP_DIRS
    max_depth: int = DEFAULT_MAX_DEPTH

    def roots(self) -> list[Path]:
        """Search paths with `~` expanded, in configured order."""
        return [Path(p).expanduser() for p in self.search_paths]

    def is_pruned(self, name: str) -> bool:
        """True for directory names the walk must neither classify nor enter."""
        return name.startswith(".") or name in self.skip_dirs


@dataclass(frozen=True)
class AppConfig:
    """Top-level configuration handed to the application at startup."""

    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)
    log_level: int = logging.WARNING
    log_file: Path | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        env = os.environ if environ is None else environ

        search_paths = DEFAULT_SEARCH_PATHS
        raw_paths = env.get(ENV_SEARCH_PATHS, "").strip()
        if raw_paths:
            search_paths = tuple(p for p in raw_paths.split(os.pathsep) if p)

        max_depth = DEFAULT_MAX_DEPTH
        raw_depth = env.get(ENV_MAX_DEPTH, "").strip()
        if raw_depth:
            try:
                max_depth = int(raw_depth)
            except ValueError:
                raise ConfigError(
                    f"{ENV_MAX_DEPTH} must be an integer, got {raw_depth!r}"
                ) from None
            if max_depth < 0:
                raise ConfigError(f"{ENV_MAX_DEPTH} must not be negative")

        log_level = logging.WARNING
        raw_level = env.get(ENV_LOG_LEVEL, "").strip()
        if raw_level:
            resolved = logging.getLevelName(raw_level.upper())
            if not isinstance(resolved, int):
                raise ConfigError(f"Unknown log level: {raw_level!r}")
            log_level = resolved

        raw_file = env.get(ENV_LOG_FILE, "").strip()
        log_file = Path(raw_file).expanduser() if raw_file else None

        return cls(
            discovery=DiscoveryConfig(search_paths=search_paths, max_depth=max_depth),
            log_level=log_level,
            log_file=log_file,
        )
