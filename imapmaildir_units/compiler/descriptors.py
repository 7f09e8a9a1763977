"""Artifact descriptors produced for each account.

Each descriptor knows how to present itself as the nested mapping that is
emitted: systemd unit sections for services and timers, the imapmaildir
TOML document for config files.
"""

import shlex
from dataclasses import dataclass, field
from typing import Any

from .merge import merge_sections

TIMERS_TARGET = "timers.target"


@dataclass(frozen=True)
class ServiceDescriptor:
    """A systemd user service running one imapmaildir sync."""

    key: str
    description: str
    exec_command: tuple[str, ...]
    extra: dict[str, Any] = field(default_factory=dict)

    def sections(self) -> dict[str, Any]:
        """Unit sections, with extra config beneath the generated fields."""
        return merge_sections(
            self.extra,
            {
                "Unit": {"Description": self.description},
                "Service": {
                    "Type": "exec",
                    "ExecStart": shlex.join(self.exec_command),
                },
            },
        )


@dataclass(frozen=True)
class TimerDescriptor:
    """A systemd user timer re-activating a service after it goes inactive.

    OnUnitInactiveSec counts from the end of the previous run, so syncs are
    spaced by interval rather than pinned to the wall clock.
    """

    key: str
    description: str
    on_unit_inactive_sec: int
    on_startup_sec: int = 0
    wanted_by: tuple[str, ...] = (TIMERS_TARGET,)

    def sections(self) -> dict[str, Any]:
        return {
            "Unit": {"Description": self.description},
            "Timer": {
                "OnStartupSec": self.on_startup_sec,
                "OnUnitInactiveSec": self.on_unit_inactive_sec,
            },
            "Install": {"WantedBy": list(self.wanted_by)},
        }


@dataclass(frozen=True)
class ConfigFileDescriptor:
    """The imapmaildir account config file.

    path is relative to the user configuration root.
    """

    path: str
    content: dict[str, Any]
