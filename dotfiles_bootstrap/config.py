from __future__ import annotations

import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import ConfigError
from .lib.git import RepoSpec

DEFAULT_DEPENDENCIES = ["git", "curl", "zsh", "tmux"]
DEFAULT_DOTFILES_URL = "https://github.com/JustasZab/dotfiles"
DEFAULT_CONFIG_FILES = [".zshrc", ".tmux.conf", ".p10k.zsh"]
DEFAULT_INSTALLER_URL = "https://raw.githubusercontent.com/ohmyzsh/ohmyzsh/master/tools/install.sh"
DEFAULT_GITHUB = "https://github.com"

DEFAULT_PLUGINS: List[Dict[str, Any]] = [
    {"repo": "zsh-users/zsh-syntax-highlighting"},
    {"repo": "zsh-users/zsh-autosuggestions"},
    {"repo": "zsh-users/zsh-history-substring-search"},
    {"repo": "MichaelAquilina/zsh-you-should-use", "name": "you-should-use"},
]

DEFAULT_THEME: Dict[str, Any] = {
    "url": "https://github.com/romkatv/powerlevel10k.git",
    "name": "powerlevel10k",
    "shallow": True,
}

DEFAULT_TMUX_PLUGIN_MANAGER: Dict[str, Any] = {
    "url": "https://github.com/tmux-plugins/tpm",
    "dir": "~/.tmux/plugins/tpm",
    "tolerate_update_failure": True,
}


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    val = raw.get(key) or {}
    if not isinstance(val, dict):
        raise ConfigError(f"{key} must be a mapping")
    return val


def _str_list(val: Any, key: str) -> List[str]:
    if not isinstance(val, list) or not all(isinstance(v, str) for v in val):
        raise ConfigError(f"{key} must be a list of strings")
    return list(val)


def _repo_basename(repo: str) -> str:
    base = posixpath.basename(repo.rstrip("/"))
    return base[: -len(".git")] if base.endswith(".git") else base


@dataclass(frozen=True)
class BootstrapConfig:
    raw: Dict[str, Any]

    def expand(self, path: str) -> Path:
        """Resolve ``~/`` against the configured home, not the process $HOME."""
        if path == "~":
            return self.home
        if path.startswith("~/"):
            return self.home / path[2:]
        return Path(path)

    @property
    def home(self) -> Path:
        h = self.raw.get("home")
        return Path(str(h)) if h else Path.home()

    @property
    def dependencies(self) -> List[str]:
        val = self.raw.get("dependencies")
        return DEFAULT_DEPENDENCIES[:] if val is None else _str_list(val, "dependencies")

    @property
    def package_map(self) -> Dict[str, str]:
        val = self.raw.get("package_map") or {}
        if not isinstance(val, dict):
            raise ConfigError("package_map must be a mapping")
        return {str(k): str(v) for k, v in val.items()}

    @property
    def privilege_command(self) -> str:
        val = self.raw.get("privilege_command", "sudo")
        return str(val or "")

    @property
    def dotfiles_url(self) -> str:
        return str(_section(self.raw, "dotfiles").get("url") or DEFAULT_DOTFILES_URL)

    @property
    def dotfiles_dir(self) -> Path:
        return self.expand(str(_section(self.raw, "dotfiles").get("dir") or "~/.dotfiles"))

    @property
    def config_files(self) -> List[str]:
        val = _section(self.raw, "dotfiles").get("files")
        return DEFAULT_CONFIG_FILES[:] if val is None else _str_list(val, "dotfiles.files")

    @property
    def dotfiles_repo(self) -> RepoSpec:
        return RepoSpec(url=self.dotfiles_url, dest=self.dotfiles_dir, name="configuration repository")

    @property
    def framework_dir(self) -> Path:
        return self.expand(str(_section(self.raw, "framework").get("dir") or "~/.oh-my-zsh"))

    @property
    def zsh_custom(self) -> Path:
        custom = _section(self.raw, "framework").get("custom_dir")
        return self.expand(str(custom)) if custom else self.framework_dir / "custom"

    @property
    def framework_installer_url(self) -> str:
        return str(_section(self.raw, "framework").get("installer_url") or DEFAULT_INSTALLER_URL)

    @property
    def tolerate_framework_upgrade_failure(self) -> bool:
        return bool(_section(self.raw, "framework").get("tolerate_upgrade_failure", True))

    @property
    def github_base_url(self) -> str:
        return str(self.raw.get("github_base_url") or DEFAULT_GITHUB).rstrip("/")

    def plugin_repos(self, zsh_custom: Path) -> List[RepoSpec]:
        entries = self.raw.get("plugins")
        if entries is None:
            entries = DEFAULT_PLUGINS
        if not isinstance(entries, list):
            raise ConfigError("plugins must be a list")

        out: List[RepoSpec] = []
        for entry in entries:
            if isinstance(entry, str):
                entry = {"repo": entry}
            if not isinstance(entry, dict):
                raise ConfigError(f"Invalid plugin entry: {entry!r}")
            url: Optional[str] = entry.get("url")
            repo: Optional[str] = entry.get("repo")
            if not url and not repo:
                raise ConfigError(f"Plugin entry needs 'repo' or 'url': {entry!r}")
            if not url:
                url = f"{self.github_base_url}/{repo}"
            name = str(entry.get("name") or _repo_basename(str(repo or url)))
            out.append(
                RepoSpec(
                    url=str(url),
                    dest=zsh_custom / "plugins" / name,
                    name=name,
                    shallow=bool(entry.get("shallow", False)),
                )
            )
        return out

    def theme_repo(self, zsh_custom: Path) -> RepoSpec:
        theme = {**DEFAULT_THEME, **_section(self.raw, "theme")}
        url = str(theme.get("url") or DEFAULT_THEME["url"])
        name = str(theme.get("name") or _repo_basename(url))
        return RepoSpec(
            url=url,
            dest=zsh_custom / "themes" / name,
            name=name,
            shallow=bool(theme.get("shallow", False)),
        )

    @property
    def tmux_plugin_manager_repo(self) -> RepoSpec:
        tpm = {**DEFAULT_TMUX_PLUGIN_MANAGER, **_section(self.raw, "tmux_plugin_manager")}
        return RepoSpec(
            url=str(tpm.get("url") or DEFAULT_TMUX_PLUGIN_MANAGER["url"]),
            dest=self.expand(str(tpm.get("dir") or DEFAULT_TMUX_PLUGIN_MANAGER["dir"])),
            name="Tmux Plugin Manager",
            tolerate_update_failure=tpm.get("tolerate_update_failure") is not False,
        )

    @property
    def login_shell(self) -> str:
        return str(self.raw.get("login_shell") or "zsh")


def load_config(path: Optional[str]) -> BootstrapConfig:
    """Load a YAML config; no path means built-in defaults."""

    if path is None:
        return BootstrapConfig(raw={})

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError("bootstrap config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("PyYAML is required to read the bootstrap config") from e

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{p} must contain a mapping/object")

    return BootstrapConfig(raw=raw)
