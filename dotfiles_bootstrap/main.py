from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import BootstrapConfig, load_config
from .errors import BootstrapError
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import BootstrapCtx, PipelineResult, StepFailed, run_pipeline
from .steps import (
    CheckDependenciesStep,
    InstallFrameworkStep,
    InstallPluginsStep,
    InstallThemeStep,
    InstallTmuxPluginsStep,
    LinkConfigFilesStep,
    SwitchShellStep,
    SyncDotfilesStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        CheckDependenciesStep(),
        SyncDotfilesStep(),
        InstallFrameworkStep(),
        InstallPluginsStep(),
        InstallThemeStep(),
        InstallTmuxPluginsStep(),
        LinkConfigFilesStep(),
        SwitchShellStep(),
    ]


def run(
    cfg: BootstrapConfig,
    *,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    dry_run: bool = False,
) -> PipelineResult:
    """Run the bootstrap pipeline. Errors propagate as StepFailed."""

    logger.info("Starting setup...")
    ctx = BootstrapCtx(cfg=cfg, dry_run=dry_run)
    steps = build_steps()
    result = run_pipeline(ctx=ctx, steps=steps, start_at=start_at, stop_after=stop_after)
    if steps[-1].step_id not in result.ran_steps:
        logger.info("Stopped after %s", result.ran_steps[-1])
        return result
    logger.info(
        "Setup complete! Please restart your terminal or run '%s' to start using your new setup.",
        cfg.login_shell,
    )
    return result


def exit_code_for(error: BaseException) -> int:
    if isinstance(error, BootstrapError):
        return error.exit_code
    return 1


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="dotfiles-bootstrap")
    p.add_argument("--config", default=None, help="YAML file overriding the built-in defaults")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to the log file")
    p.add_argument("--start-at", default=None, help="Start at step_id (e.g. 40_install_plugins)")
    p.add_argument("--stop-after", default=None, help="Stop after step_id")
    p.add_argument("--dry-run", action="store_true", help="Log commands without running them")
    p.add_argument("-v", "--verbose", action="store_true", help="Also log command output")

    args = p.parse_args(argv)

    configure_logging(log_path=args.log, level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        cfg = load_config(args.config)
        run(cfg, start_at=args.start_at, stop_after=args.stop_after, dry_run=bool(args.dry_run))
    except StepFailed as e:
        logger.error("An error occurred during step %s: %s", e.step_id, e.error)
        logger.debug("Traceback", exc_info=e.error)
        return exit_code_for(e.error)
    except (BootstrapError, OSError, ValueError) as e:
        logger.error("An error occurred: %s", e)
        return exit_code_for(e)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
