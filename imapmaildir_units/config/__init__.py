"""Registry management module.

Handles loading and initializing the account registry.
The registry is stored at ~/.config/imapmaildir-units/accounts.toml

Usage:
    from imapmaildir_units.config import load_registry, get_account_names

    registry = load_registry()
    names = get_account_names(registry)
"""

import logging
import tomllib
from pathlib import Path

from imapmaildir_units.accounts.errors import RegistryParseError

from .paths import REGISTRY_FILE, account_config_path, ensure_config_dir
from .schema import AccountConfig, RegistryConfig
from .template import REGISTRY_TEMPLATE

__all__ = [
    "load_registry",
    "init_registry",
    "get_account",
    "get_account_names",
    "account_config_path",
    "REGISTRY_FILE",
]

logger = logging.getLogger(__name__)

# Module-level cache for the loaded registry, keyed by path.
# Avoids repeated disk reads during a single CLI invocation.
_cached_registry: tuple[Path, RegistryConfig] | None = None


def load_registry(
    path: Path | None = None, *, force_reload: bool = False
) -> RegistryConfig:
    """Load the account registry from disk.

    Returns empty dict if the registry file doesn't exist.

    Args:
        path: Registry file to read. Defaults to REGISTRY_FILE.
        force_reload: Bypass cache and read from disk.

    Returns:
        The registry dictionary.

    Raises:
        RegistryParseError: If the file is not valid TOML.
    """
    global _cached_registry

    path = path or REGISTRY_FILE

    if _cached_registry is not None and not force_reload:
        cached_path, cached = _cached_registry
        if cached_path == path:
            return cached

    if not path.exists():
        logger.debug("registry %s does not exist", path)
        _cached_registry = (path, {})
        return {}

    try:
        with open(path, "rb") as f:
            registry = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise RegistryParseError(f"{path}: {e}") from e

    logger.debug("loaded registry %s", path)
    _cached_registry = (path, registry)
    return registry


def init_registry(path: Path | None = None, *, overwrite: bool = False) -> bool:
    """Create a template registry file.

    Args:
        path: Registry file to create. Defaults to REGISTRY_FILE.
        overwrite: If True, overwrite an existing registry.

    Returns:
        True if the registry was created, False if it already existed.
    """
    if path is None:
        ensure_config_dir()
        path = REGISTRY_FILE
    else:
        path.parent.mkdir(parents=True, exist_ok=True)

    if path.exists() and not overwrite:
        return False

    path.write_text(REGISTRY_TEMPLATE)
    return True


def get_account(registry: RegistryConfig, name: str) -> AccountConfig | None:
    """Get a raw account entry by name, or None if it isn't registered."""
    return registry.get("accounts", {}).get(name)


def get_account_names(registry: RegistryConfig) -> list[str]:
    """Get list of registered account names, in registry order.

    Args:
        registry: The loaded registry dictionary.

    Returns:
        List of account names, may be empty.
    """
    return list(registry.get("accounts", {}).keys())
