"""Normalized account model."""

from dataclasses import dataclass, field
from typing import Any

DEFAULT_IMAP_PORT = 993
DEFAULT_INTERVAL_SEC = 5 * 60
SERVICE_NAME_PREFIX = "imapmaildir-sync-"


@dataclass(frozen=True)
class Account:
    """An account after defaults have been applied and fields validated.

    Downstream code never sees the raw registry shapes: the password command
    is always an argv tuple and every optional field has its default.
    """

    name: str
    host: str
    maildir_abs_path: str
    user_name: str
    password_cmd: tuple[str, ...]
    service_name: str
    port: int = DEFAULT_IMAP_PORT
    mailboxes: tuple[str, ...] = ()
    interval_sec: int = DEFAULT_INTERVAL_SEC
    enabled: bool = True
    extra_config: dict[str, Any] = field(default_factory=dict, compare=False)


def default_service_name(account_name: str) -> str:
    """Service (and timer) name used when service.name is unset."""
    return f"{SERVICE_NAME_PREFIX}{account_name}"
