from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".backup"


def backup_path(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


def link_file(src: Path, dst: Path, *, dry_run: bool = False) -> Path | None:
    """Point ``dst`` at ``src``, moving whatever was at ``dst`` aside first.

    Anything at ``dst`` counts as existing, including a symlink (even a
    dangling one). A previous backup is overwritten. Returns the backup path
    when one was made.
    """

    backup = None
    if os.path.lexists(dst):
        backup = backup_path(dst)
        if dry_run:
            logger.info("Would move %s -> %s", dst, backup)
        else:
            os.replace(dst, backup)
            logger.info("Backed up %s -> %s", dst, backup)

    if dry_run:
        logger.info("Would link %s -> %s", dst, src)
        return backup

    dst.parent.mkdir(parents=True, exist_ok=True)
    dst.symlink_to(src)
    logger.info("Linked %s -> %s", dst, src)
    return backup


def link_config_files(
    repo_dir: Path,
    home: Path,
    files: Sequence[str],
    *,
    dry_run: bool = False,
) -> list[Path]:
    """Link each of ``files`` that exists in ``repo_dir`` into ``home``.

    Returns the home paths that were linked.
    """

    linked: list[Path] = []
    for name in files:
        src = repo_dir / name
        if not src.is_file():
            logger.debug("Not in repository, skipping: %s", src)
            continue
        dst = home / name
        link_file(src, dst, dry_run=dry_run)
        linked.append(dst)
    return linked
