from pathlib import Path

import pytest

from dotfiles_bootstrap.errors import CommandError
from dotfiles_bootstrap.lib.git import RepoSpec, sync_repo
from tests.fakes.commands import FakeCommandRunner


def test_missing_destination_is_cloned(fake_runner: FakeCommandRunner, tmp_path: Path) -> None:
    spec = RepoSpec(url="https://example.com/a.git", dest=tmp_path / "a", name="a")

    assert sync_repo(spec) == "cloned"
    assert fake_runner.calls == [["git", "clone", "https://example.com/a.git", str(tmp_path / "a")]]


def test_shallow_clone(fake_runner: FakeCommandRunner, tmp_path: Path) -> None:
    spec = RepoSpec(url="u", dest=tmp_path / "t", name="t", shallow=True)

    sync_repo(spec)

    assert fake_runner.calls == [["git", "clone", "--depth=1", "u", str(tmp_path / "t")]]


def test_existing_destination_is_pulled(fake_runner: FakeCommandRunner, tmp_path: Path) -> None:
    (tmp_path / "a").mkdir()
    spec = RepoSpec(url="u", dest=tmp_path / "a", name="a")

    assert sync_repo(spec) == "updated"
    assert fake_runner.calls == [["git", "-C", str(tmp_path / "a"), "pull"]]


def test_pull_failure_propagates_by_default(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("subprocess.run", FakeCommandRunner(failures={("git", "-C"): 1}))
    (tmp_path / "a").mkdir()

    with pytest.raises(CommandError):
        sync_repo(RepoSpec(url="u", dest=tmp_path / "a", name="a"))


def test_pull_failure_tolerated_when_flagged(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("subprocess.run", FakeCommandRunner(failures={("git", "-C"): 1}))
    (tmp_path / "tpm").mkdir()
    spec = RepoSpec(url="u", dest=tmp_path / "tpm", name="tpm", tolerate_update_failure=True)

    assert sync_repo(spec) == "update_failed"


def test_clone_failure_propagates_even_when_tolerant(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("subprocess.run", FakeCommandRunner(failures={("git", "clone"): 128}))
    spec = RepoSpec(url="u", dest=tmp_path / "tpm", name="tpm", tolerate_update_failure=True)

    with pytest.raises(CommandError) as exc_info:
        sync_repo(spec)
    assert exc_info.value.exit_code == 128
