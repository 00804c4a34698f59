from __future__ import annotations

import logging

from ..lib.links import link_config_files
from ..pipeline import BootstrapCtx

logger = logging.getLogger(__name__)


class LinkConfigFilesStep:
    step_id = "70_link_config_files"

    def run(self, ctx: BootstrapCtx) -> None:
        cfg = ctx.cfg
        logger.info("Linking configuration files...")
        linked = link_config_files(cfg.dotfiles_dir, cfg.home, cfg.config_files, dry_run=ctx.dry_run)
        logger.info("Linked %d of %d configuration files", len(linked), len(cfg.config_files))
