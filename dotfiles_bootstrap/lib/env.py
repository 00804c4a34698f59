from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Paths:
    log_default: str = "~/.cache/dotfiles-bootstrap/bootstrap.log"
    log_fallback_name: str = "dotfiles-bootstrap.log"


PATHS = Paths()
