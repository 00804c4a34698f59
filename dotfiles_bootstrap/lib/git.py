from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..errors import CommandError
from .command import run_cmd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepoSpec:
    """A repository to keep checked out at ``dest``."""

    url: str
    dest: Path
    name: str
    shallow: bool = False
    tolerate_update_failure: bool = False


def git_clone(url: str, dest: Path, *, shallow: bool = False, dry_run: bool = False) -> None:
    argv = ["git", "clone"]
    if shallow:
        argv.append("--depth=1")
    argv += [url, str(dest)]
    run_cmd(argv, dry_run=dry_run)


def git_pull(dest: Path, *, dry_run: bool = False) -> None:
    run_cmd(["git", "-C", str(dest), "pull"], dry_run=dry_run)


def sync_repo(spec: RepoSpec, *, dry_run: bool = False) -> str:
    """Clone the repository if its destination is missing, otherwise pull it.

    Returns "cloned", "updated" or "update_failed". Clone failures always
    propagate; pull failures only when the RepoSpec does not tolerate them.
    """

    if not spec.dest.is_dir():
        logger.info("Installing %s...", spec.name)
        git_clone(spec.url, spec.dest, shallow=spec.shallow, dry_run=dry_run)
        return "cloned"

    logger.info("Updating %s...", spec.name)
    try:
        git_pull(spec.dest, dry_run=dry_run)
    except CommandError as e:
        if not spec.tolerate_update_failure:
            raise
        logger.warning("Update of %s failed (ignored): %s", spec.name, e)
        return "update_failed"
    return "updated"
