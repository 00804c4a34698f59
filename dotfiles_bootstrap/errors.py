from __future__ import annotations

from typing import Sequence


class BootstrapError(RuntimeError):
    """Base error; ``exit_code`` is what the CLI exits with."""

    exit_code: int = 1


class CommandError(BootstrapError):
    # Captured stderr stays on the instance; run_cmd logs it at DEBUG.
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"Command failed ({returncode}): {' '.join(self.argv)}")

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        # Killed by signal N: report 128+N like a shell does.
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode or 1


class ConfigError(BootstrapError):
    pass


class ShellNotFoundError(BootstrapError):
    pass
