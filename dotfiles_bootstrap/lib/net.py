from __future__ import annotations

import logging

from ..errors import BootstrapError
from .command import run_cmd

logger = logging.getLogger(__name__)


def fetch_text(url: str, *, dry_run: bool = False) -> str:
    """Download ``url`` with curl and return the body.

    -f turns HTTP errors into a non-zero exit instead of an error page body.
    """

    r = run_cmd(["curl", "-fsSL", url], dry_run=dry_run)
    return r.stdout


def run_remote_script(
    url: str,
    args: list[str],
    *,
    env: dict[str, str] | None = None,
    dry_run: bool = False,
) -> None:
    """Equivalent of ``sh -c "$(curl -fsSL url)" "" args...``."""

    script = fetch_text(url, dry_run=dry_run)
    if not dry_run and not script.strip():
        raise BootstrapError(f"Empty installer script from {url}")
    run_cmd(["sh", "-c", script, "", *args], env=env, interactive=True, dry_run=dry_run)
