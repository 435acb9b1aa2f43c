"""Fetch the YAML test suite data from its pinned git revision.

Only the pinned commit is fetched into an empty repository, so the full
history of the test suite fork is never cloned.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
from pathlib import Path

from yamlmatrix.fixtures.errors import LoadingError

logger = logging.getLogger("yamlmatrix.fetch")

REPO_URL = "https://github.com/kekavc24/yaml_test_suite_dart"
REVISION = "8a482865bd22d96f9da4cead1840c297e1de7979"
CACHE_DIR_NAME = "yaml-test-suite"


def default_cache_dir() -> Path:
    return Path(tempfile.gettempdir()).absolute() / CACHE_DIR_NAME


def fetch_test_data(
    cache_dir: str | Path | None = None,
    *,
    repo_url: str = REPO_URL,
    revision: str = REVISION,
) -> Path:
    """Check out *revision* of *repo_url* into *cache_dir* and return its path.

    An existing *cache_dir* is assumed to hold the data already and is
    returned untouched.

    Raises:
        LoadingError: if ``git`` is missing or any git command fails.
    """
    test_path = Path(cache_dir) if cache_dir is not None else default_cache_dir()
    if test_path.exists():
        logger.debug("Using cached test data at %s", test_path)
        return test_path

    test_path.mkdir(parents=True)
    logger.info("Fetching test data from %s@%s", repo_url, revision)

    try:
        _run_git(["init"], test_path)
        _run_git(["remote", "add", "origin", repo_url], test_path)
        _run_git(["fetch", "origin", revision], test_path)
        _run_git(["checkout", "FETCH_HEAD"], test_path)
    except LoadingError:
        # A partial checkout must not be mistaken for a cached one.
        shutil.rmtree(test_path, ignore_errors=True)
        raise
    return test_path


def _run_git(args: list[str], cwd: Path) -> None:
    try:
        result = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise LoadingError("Failed to load test suite repo. git is not installed") from e

    if result.returncode != 0:
        logger.debug("git %s: %s", " ".join(args), result.stderr.strip())
        raise LoadingError(
            "Failed to load test suite repo. Process exited with a"
            f' "{result.returncode}" code'
        )
