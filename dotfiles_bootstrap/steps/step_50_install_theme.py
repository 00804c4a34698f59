from __future__ import annotations

import logging

from ..lib.git import sync_repo
from ..pipeline import BootstrapCtx

logger = logging.getLogger(__name__)


class InstallThemeStep:
    step_id = "50_install_theme"

    def run(self, ctx: BootstrapCtx) -> None:
        sync_repo(ctx.cfg.theme_repo(ctx.cfg.zsh_custom), dry_run=ctx.dry_run)
