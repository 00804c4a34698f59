from __future__ import annotations

import logging
import os
import shutil

from ..errors import ShellNotFoundError
from .command import run_cmd

logger = logging.getLogger(__name__)


def resolve_shell(name: str) -> str:
    path = shutil.which(name)
    if path is None:
        raise ShellNotFoundError(f"Login shell {name!r} not found on PATH")
    return path


def needs_switch(current: str | None, target_path: str) -> bool:
    if not current:
        return True
    return os.path.realpath(current) != os.path.realpath(target_path)


def change_login_shell(target_path: str, *, dry_run: bool = False) -> None:
    # chsh may prompt for the user's password.
    run_cmd(["chsh", "-s", target_path], interactive=True, dry_run=dry_run)
