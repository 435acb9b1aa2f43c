"""Runner configuration read from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from yamlmatrix.fetch import REPO_URL, REVISION

_TRUTHY = ("1", "true", "yes", "on")


def _path(value: str | None) -> Path | None:
    value = (value or "").strip()
    return Path(value) if value else None


@dataclass(frozen=True)
class RunnerConfig:
    """Settings for a matrix run.

    ``matrix_dir`` of ``None`` means the test data is fetched into
    ``cache_dir`` (or the default cache directory) before running.
    """

    matrix_dir: Path | None = None
    cache_dir: Path | None = None
    repo_url: str = REPO_URL
    revision: str = REVISION
    save_failed: bool = False
    output_dir: Path | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RunnerConfig:
        """Build a config from *environ* (``os.environ`` by default)."""
        env = os.environ if environ is None else environ
        return cls(
            matrix_dir=_path(env.get("YAML_MATRIX_DIR")),
            cache_dir=_path(env.get("YAML_MATRIX_CACHE_DIR")),
            repo_url=(env.get("YAML_MATRIX_REPO_URL") or "").strip() or REPO_URL,
            revision=(env.get("YAML_MATRIX_REVISION") or "").strip() or REVISION,
            save_failed=(env.get("YAML_MATRIX_SAVE_FAILED") or "0").strip().lower() in _TRUTHY,
            output_dir=_path(env.get("YAML_MATRIX_OUTPUT_DIR")),
            log_level=(env.get("LOG_LEVEL") or "INFO").strip().upper(),
        )
