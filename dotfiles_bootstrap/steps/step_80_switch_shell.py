from __future__ import annotations

import logging
import os
import shutil

from ..lib.shell import change_login_shell, needs_switch, resolve_shell
from ..pipeline import BootstrapCtx

logger = logging.getLogger(__name__)


class SwitchShellStep:
    step_id = "80_switch_shell"

    def run(self, ctx: BootstrapCtx) -> None:
        login_shell = ctx.cfg.login_shell
        if ctx.dry_run and shutil.which(login_shell) is None:
            # The dependency step only logged its install, so the shell may not exist yet.
            logger.info("Would run chsh -s %s", login_shell)
            return

        target = resolve_shell(login_shell)
        current = os.environ.get("SHELL")
        if not needs_switch(current, target):
            logger.info("Login shell already %s", target)
            return

        logger.info("Changing default shell to %s...", target)
        change_login_shell(target, dry_run=ctx.dry_run)
