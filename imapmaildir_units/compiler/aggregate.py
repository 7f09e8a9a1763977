"""Aggregate per-account artifacts into keyed collections.

The whole registry is compiled before anything is returned: one invalid
account or one name collision aborts the run, so a half-configured set of
units is never emitted.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from imapmaildir_units.accounts import (
    DuplicateArtifactKey,
    InvalidFieldValue,
    is_enabled,
    normalize_accounts,
)

from .compile import DEFAULT_BINARY, CompiledAccount, compile_account
from .descriptors import ConfigFileDescriptor, ServiceDescriptor, TimerDescriptor

logger = logging.getLogger(__name__)


@dataclass
class ArtifactSet:
    """Services, timers and config files keyed by name, in insertion order.

    Tracks which account contributed each key so collisions can name both
    accounts.
    """

    services: dict[str, ServiceDescriptor] = field(default_factory=dict)
    timers: dict[str, TimerDescriptor] = field(default_factory=dict)
    config_files: dict[str, ConfigFileDescriptor] = field(default_factory=dict)
    _owners: dict[tuple[str, str], str] = field(default_factory=dict, repr=False)

    def add(self, compiled: CompiledAccount) -> None:
        """Add one account's artifacts.

        Raises:
            DuplicateArtifactKey: If any key is already taken. The set is
                left unchanged in that case.
        """
        entries = [
            ("service", compiled.service.key),
            ("timer", compiled.timer.key),
            ("config file", compiled.config_file.path),
        ]
        for kind, key in entries:
            owner = self._owners.get((kind, key))
            if owner is not None:
                raise DuplicateArtifactKey(kind, key, owner, compiled.account)

        for kind, key in entries:
            self._owners[(kind, key)] = compiled.account

        self.services[compiled.service.key] = compiled.service
        self.timers[compiled.timer.key] = compiled.timer
        self.config_files[compiled.config_file.path] = compiled.config_file

    @property
    def accounts(self) -> list[str]:
        """Names of the accounts that contributed artifacts."""
        return list(dict.fromkeys(self._owners.values()))

    def __len__(self) -> int:
        return len(self.services)


def aggregate(compiled: list[CompiledAccount]) -> ArtifactSet:
    """Merge compiled accounts into one ArtifactSet."""
    artifacts = ArtifactSet()
    for item in compiled:
        artifacts.add(item)
    return artifacts


def compile_registry(
    registry: Mapping[str, Any], *, binary: str | None = None
) -> ArtifactSet:
    """Compile every enabled account in the registry.

    Disabled accounts are skipped before validation and produce nothing.

    Args:
        registry: Loaded registry ({"binary": ..., "accounts": {...}}).
        binary: imapmaildir executable for ExecStart. Overrides the
            registry's "binary" key; defaults to "imapmaildir".

    Returns:
        The aggregated ArtifactSet.

    Raises:
        AccountConfigError: If any enabled account is invalid.
        DuplicateArtifactKey: If two accounts generate the same name.
    """
    binary = binary or registry.get("binary") or DEFAULT_BINARY
    if not isinstance(binary, str):
        raise InvalidFieldValue("", "binary", f"must be a string, got {binary!r}")

    raw_accounts = registry.get("accounts") or {}
    if not isinstance(raw_accounts, Mapping):
        raise InvalidFieldValue("", "accounts", "must be a table of accounts")

    enabled = [
        (name, raw) for name, raw in raw_accounts.items() if is_enabled(name, raw)
    ]
    logger.debug(
        "%d of %d accounts enabled", len(enabled), len(raw_accounts)
    )

    accounts = normalize_accounts(enabled)
    artifacts = aggregate([compile_account(account, binary) for account in accounts])

    logger.debug("compiled %d accounts", len(artifacts))
    return artifacts
