from .step_10_check_dependencies import CheckDependenciesStep
from .step_20_sync_dotfiles import SyncDotfilesStep
from .step_30_install_framework import InstallFrameworkStep
from .step_40_install_plugins import InstallPluginsStep
from .step_50_install_theme import InstallThemeStep
from .step_60_install_tmux_plugins import InstallTmuxPluginsStep
from .step_70_link_config_files import LinkConfigFilesStep
from .step_80_switch_shell import SwitchShellStep

__all__ = [
    "CheckDependenciesStep",
    "SyncDotfilesStep",
    "InstallFrameworkStep",
    "InstallPluginsStep",
    "InstallThemeStep",
    "InstallTmuxPluginsStep",
    "LinkConfigFilesStep",
    "SwitchShellStep",
]
