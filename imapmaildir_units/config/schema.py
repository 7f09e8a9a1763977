"""Registry schema definitions.

Uses TypedDict for type safety without runtime overhead.
These types match the structure of accounts.toml.
"""

from typing import Any, TypedDict


class ImapConfig(TypedDict, total=False):
    """IMAP server connection settings.

    Attributes:
        host: IMAP server hostname.
        port: IMAP server port (defaults to 993).
    """

    host: str
    port: int | None


class ServiceConfig(TypedDict, total=False):
    """Background sync service settings.

    Attributes:
        name: systemd unit name (defaults to "imapmaildir-sync-<account>").
        interval_sec: Seconds between the end of one sync and the next.
        extra_config: Extra unit sections merged beneath the generated ones.
    """

    name: str
    interval_sec: int
    extra_config: dict[str, Any]


class AccountConfig(TypedDict, total=False):
    """Single email account in the registry.

    Attributes:
        enabled: Generate sync artifacts for this account.
        mailboxes: Mailboxes to sync (e.g., ["INBOX", "Sent"]).
        imap: IMAP connection settings.
        maildir_abs_path: Absolute path of the local maildir.
        user_name: IMAP login name.
        password_command: Command (string or argv list) printing the password.
        service: Service and timer settings.
    """

    enabled: bool
    mailboxes: list[str]
    imap: ImapConfig
    maildir_abs_path: str
    user_name: str
    password_command: str | list[str]
    service: ServiceConfig


class RegistryConfig(TypedDict, total=False):
    """Root registry structure.

    Attributes:
        binary: Path to the imapmaildir executable used in ExecStart.
        accounts: Dict mapping account names to their configurations.
    """

    binary: str
    accounts: dict[str, AccountConfig]
