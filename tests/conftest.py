from __future__ import annotations

from pathlib import Path

import pytest

from dotfiles_bootstrap.config import BootstrapConfig
from tests.fakes.commands import FakeCommandRunner


@pytest.fixture
def fake_runner(monkeypatch: pytest.MonkeyPatch) -> FakeCommandRunner:
    runner = FakeCommandRunner()
    monkeypatch.setattr("subprocess.run", runner)
    return runner


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    d = tmp_path / "bin"
    d.mkdir()
    return d


@pytest.fixture
def path_tools(monkeypatch: pytest.MonkeyPatch, bin_dir: Path) -> set[str]:
    """Names that resolve on PATH; mutate the set to simulate missing tools."""

    available = {"git", "curl", "zsh", "tmux"}

    def fake_which(name: str, *args, **kwargs):
        return str(bin_dir / name) if name in available else None

    monkeypatch.setattr("shutil.which", fake_which)
    return available


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, bin_dir: Path) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    monkeypatch.setenv("HOME", str(h))
    monkeypatch.setenv("SHELL", str(bin_dir / "zsh"))
    return h


@pytest.fixture
def cfg(home: Path) -> BootstrapConfig:
    return BootstrapConfig(raw={"home": str(home), "privilege_command": "sudo"})
