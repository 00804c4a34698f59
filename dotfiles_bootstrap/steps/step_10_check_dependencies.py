from __future__ import annotations

import logging

from ..lib.pkg import apt_install, apt_update, missing_executables, packages_for
from ..pipeline import BootstrapCtx

logger = logging.getLogger(__name__)


class CheckDependenciesStep:
    step_id = "10_check_dependencies"

    def run(self, ctx: BootstrapCtx) -> None:
        cfg = ctx.cfg
        missing = missing_executables(cfg.dependencies)
        if not missing:
            logger.info("All dependencies present: %s", " ".join(cfg.dependencies))
            return

        logger.info("Installing missing dependencies: %s", " ".join(missing))
        apt_update(privilege_command=cfg.privilege_command, dry_run=ctx.dry_run)
        apt_install(
            packages_for(missing, cfg.package_map),
            privilege_command=cfg.privilege_command,
            dry_run=ctx.dry_run,
        )
