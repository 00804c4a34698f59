from __future__ import annotations

import logging

from ..lib.git import sync_repo
from ..pipeline import BootstrapCtx

logger = logging.getLogger(__name__)


class SyncDotfilesStep:
    step_id = "20_sync_dotfiles"

    def run(self, ctx: BootstrapCtx) -> None:
        sync_repo(ctx.cfg.dotfiles_repo, dry_run=ctx.dry_run)
