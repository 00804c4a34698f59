from __future__ import annotations

import logging

from ..lib.git import sync_repo
from ..pipeline import BootstrapCtx

logger = logging.getLogger(__name__)


class InstallTmuxPluginsStep:
    step_id = "60_install_tmux_plugins"

    def run(self, ctx: BootstrapCtx) -> None:
        # tpm update failures are tolerated by default (tolerate_update_failure).
        sync_repo(ctx.cfg.tmux_plugin_manager_repo, dry_run=ctx.dry_run)
