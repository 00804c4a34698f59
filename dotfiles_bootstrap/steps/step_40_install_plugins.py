from __future__ import annotations

import logging

from ..lib.git import sync_repo
from ..pipeline import BootstrapCtx

logger = logging.getLogger(__name__)


class InstallPluginsStep:
    step_id = "40_install_plugins"

    def run(self, ctx: BootstrapCtx) -> None:
        for spec in ctx.cfg.plugin_repos(ctx.cfg.zsh_custom):
            sync_repo(spec, dry_run=ctx.dry_run)
