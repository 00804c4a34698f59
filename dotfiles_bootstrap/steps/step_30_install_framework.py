from __future__ import annotations

import logging

from ..errors import CommandError
from ..lib.command import run_cmd
from ..lib.net import run_remote_script
from ..pipeline import BootstrapCtx

logger = logging.getLogger(__name__)


class InstallFrameworkStep:
    """Install Oh My Zsh, or run its upgrade script when already present.

    The framework's layout defines ZSH_CUSTOM, which later steps receive
    through the config rather than the process environment.
    """

    step_id = "30_install_framework"

    def run(self, ctx: BootstrapCtx) -> None:
        cfg = ctx.cfg
        framework_dir = cfg.framework_dir
        env = {"ZSH": str(framework_dir), "ZSH_CUSTOM": str(cfg.zsh_custom)}

        if not framework_dir.is_dir():
            logger.info("Installing Oh My Zsh...")
            run_remote_script(
                cfg.framework_installer_url,
                ["--unattended"],
                env={"ZSH": str(framework_dir)},
                dry_run=ctx.dry_run,
            )
            return

        logger.info("Updating Oh My Zsh...")
        upgrade = framework_dir / "tools" / "upgrade.sh"
        try:
            run_cmd([str(upgrade)], env=env, interactive=True, dry_run=ctx.dry_run)
        except CommandError as e:
            if not cfg.tolerate_framework_upgrade_failure:
                raise
            logger.warning("Oh My Zsh upgrade failed (ignored): %s", e)
