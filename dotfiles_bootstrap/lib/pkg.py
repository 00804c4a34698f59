from __future__ import annotations

import logging
import os
import shlex
import shutil
from typing import Iterable, Mapping, Sequence

from .command import run_cmd

logger = logging.getLogger(__name__)


def missing_executables(names: Iterable[str]) -> list[str]:
    """Return the names that do not resolve on PATH, in input order."""

    return [n for n in names if shutil.which(n) is None]


def privileged(argv: Sequence[str], privilege_command: str) -> list[str]:
    # Root needs no sudo; an empty privilege_command disables the prefix.
    if not privilege_command or os.geteuid() == 0:
        return list(argv)
    return [*shlex.split(privilege_command), *argv]


def apt_update(*, privilege_command: str = "sudo", dry_run: bool = False) -> None:
    run_cmd(privileged(["apt-get", "update"], privilege_command), interactive=True, dry_run=dry_run)


def apt_install(
    packages: Sequence[str],
    *,
    privilege_command: str = "sudo",
    dry_run: bool = False,
) -> None:
    if not packages:
        return
    run_cmd(
        privileged(["apt-get", "install", "-y", *packages], privilege_command),
        interactive=True,
        dry_run=dry_run,
    )


def packages_for(executables: Sequence[str], package_map: Mapping[str, str]) -> list[str]:
    """Map executable names to apt package names, dropping duplicates."""

    out: list[str] = []
    for name in executables:
        pkg = package_map.get(name, name)
        if pkg not in out:
            out.append(pkg)
    return out
