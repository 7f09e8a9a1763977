"""Path constants and directory utilities for imapmaildir-units.

Follows the XDG Base Directory specification:
- Registry: $XDG_CONFIG_HOME/imapmaildir-units/accounts.toml
- Generated units: $XDG_CONFIG_HOME/systemd/user/
- Generated account configs: $XDG_CONFIG_HOME/imapmaildir/accounts/
"""

import os
from pathlib import Path


def config_home() -> Path:
    """Return the user configuration root ($XDG_CONFIG_HOME or ~/.config)."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


CONFIG_HOME = config_home()
CONFIG_DIR = CONFIG_HOME / "imapmaildir-units"
REGISTRY_FILE = CONFIG_DIR / "accounts.toml"

# Relative to CONFIG_HOME. The imapmaildir binary looks its account
# config up under imapmaildir/accounts/, so this must stay in step with it.
SYSTEMD_USER_SUBDIR = Path("systemd") / "user"
ACCOUNT_CONFIG_SUBDIR = Path("imapmaildir") / "accounts"

SYSTEMD_USER_DIR = CONFIG_HOME / SYSTEMD_USER_SUBDIR

# Relative to the output root; lists the files the last generate run wrote.
MANIFEST_PATH = Path("imapmaildir-units") / "generated.toml"


def account_config_path(name: str) -> str:
    """Relative path of the imapmaildir config file for an account."""
    return f"{ACCOUNT_CONFIG_SUBDIR.as_posix()}/{name}.toml"


def ensure_config_dir() -> Path:
    """Create config directory if it doesn't exist.

    Returns the config directory path.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return CONFIG_DIR
