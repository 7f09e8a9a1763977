"""Defaulting and validation of raw registry accounts.

Raw entries come straight from the TOML registry and may omit optional
fields or give the password command as either a string or a list. This
module turns each entry into an Account or raises an AccountConfigError
naming the account and field.
"""

import copy
import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from .errors import (
    InvalidAccountName,
    InvalidFieldValue,
    InvalidInterval,
    MissingCredentialSource,
    MissingRequiredField,
)
from .models import (
    DEFAULT_IMAP_PORT,
    DEFAULT_INTERVAL_SEC,
    Account,
    default_service_name,
)

logger = logging.getLogger(__name__)

MAX_PORT = 65535

# Values a systemd unit file can hold
UNIT_SCALARS = (str, int, float, bool)

# systemd unit name characters; "@" is left out as it would make a template
UNIT_NAME_RE = re.compile(r"[A-Za-z0-9:_.-]+")

# Expanded by systemd inside Description and ExecStart
SPECIFIER_CHARS = ("%", "$")


def is_enabled(name: str, raw: Mapping[str, Any]) -> bool:
    """Return the account's enabled flag (defaults to False).

    Raises:
        InvalidFieldValue: If the entry is not a table or enabled is not a bool.
    """
    if not isinstance(raw, Mapping):
        raise InvalidFieldValue(name, "account", f"must be a table, got {type(raw).__name__}")
    enabled = raw.get("enabled", False)
    if not isinstance(enabled, bool):
        raise InvalidFieldValue(name, "enabled", f"must be true or false, got {enabled!r}")
    return enabled


def normalize_account(name: str, raw: Mapping[str, Any]) -> Account:
    """Apply defaults to a raw account entry and validate it.

    Args:
        name: Account name (registry key).
        raw: Raw account mapping from the registry.

    Returns:
        The normalized Account.

    Raises:
        InvalidAccountName: Name is empty, contains "/", "%", "$" or whitespace,
            or gives an invalid default unit name.
        MissingRequiredField: imap.host, maildir_abs_path or user_name unset.
        MissingCredentialSource: password_command unset.
        InvalidInterval: service.interval_sec not a positive integer.
        InvalidFieldValue: Any other field has the wrong type.
    """
    _check_name(name)
    enabled = is_enabled(name, raw)

    imap = _mapping(name, "imap", raw.get("imap"))
    service = _mapping(name, "service", raw.get("service"))

    extra_config = _extra_config(name, service.get("extra_config"))

    account = Account(
        name=name,
        enabled=enabled,
        host=_required_str(name, "imap.host", imap.get("host")),
        port=_port(name, imap.get("port")),
        mailboxes=_mailboxes(name, raw.get("mailboxes")),
        maildir_abs_path=_required_str(name, "maildir_abs_path", raw.get("maildir_abs_path")),
        user_name=_required_str(name, "user_name", raw.get("user_name")),
        password_cmd=_password_cmd(name, raw.get("password_command")),
        service_name=_service_name(name, service.get("name")),
        interval_sec=_interval(name, service.get("interval_sec", DEFAULT_INTERVAL_SEC)),
        extra_config=copy.deepcopy(extra_config),
    )
    logger.debug(
        "normalized account %s (service=%s, port=%d)",
        name,
        account.service_name,
        account.port,
    )
    return account


def normalize_accounts(
    entries: Iterable[tuple[str, Mapping[str, Any]]],
) -> list[Account]:
    """Normalize a sequence of (name, raw) entries, preserving order.

    Raises:
        InvalidAccountName: If the same name appears twice.
        AccountConfigError: From normalize_account for any invalid entry.
    """
    accounts: list[Account] = []
    seen: set[str] = set()

    for name, raw in entries:
        if name in seen:
            raise InvalidAccountName(name, "account name is used more than once")
        seen.add(name)
        accounts.append(normalize_account(name, raw))

    return accounts


def _check_name(name: object) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidAccountName(str(name or ""), "account name must be a non-empty string")
    if "/" in name or any(c.isspace() or c in SPECIFIER_CHARS for c in name):
        raise InvalidAccountName(
            name, "account name must not contain '/', '%', '$' or whitespace"
        )


def _mapping(name: str, field: str, value: object) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidFieldValue(name, field, f"must be a table, got {type(value).__name__}")
    return value


def _required_str(name: str, field: str, value: object) -> str:
    if value is None or value == "":
        raise MissingRequiredField(name, field)
    if not isinstance(value, str):
        raise InvalidFieldValue(name, field, f"must be a string, got {value!r}")
    return value


def _port(name: str, value: object) -> int:
    if value is None:
        return DEFAULT_IMAP_PORT
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int) or not 0 < value <= MAX_PORT:
        raise InvalidFieldValue(name, "imap.port", f"must be a port number, got {value!r}")
    return value


def _mailboxes(name: str, value: object) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidFieldValue(name, "mailboxes", f"must be a list of strings, got {value!r}")
    for mailbox in value:
        if not isinstance(mailbox, str) or not mailbox:
            raise InvalidFieldValue(
                name, "mailboxes", f"mailbox names must be non-empty strings, got {mailbox!r}"
            )
    return tuple(value)


def _password_cmd(name: str, value: object) -> tuple[str, ...]:
    if value is None or value == "":
        raise MissingCredentialSource(name)
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)) or not value:
        raise InvalidFieldValue(
            name, "password_command", "must be a string or a non-empty list of strings"
        )
    if not all(isinstance(part, str) for part in value):
        raise InvalidFieldValue(name, "password_command", "list entries must be strings")
    return tuple(value)


def _service_name(name: str, value: object) -> str:
    if value is None:
        service_name = default_service_name(name)
        if not UNIT_NAME_RE.fullmatch(service_name):
            raise InvalidAccountName(
                name, f"'{service_name}' is not a valid unit name, set service.name"
            )
        return service_name
    if not isinstance(value, str) or not value:
        raise InvalidFieldValue(name, "service.name", f"must be a non-empty string, got {value!r}")
    if not UNIT_NAME_RE.fullmatch(value):
        raise InvalidFieldValue(
            name, "service.name", "may only contain ASCII letters, digits and ':_.-'"
        )
    return value


def _interval(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidInterval(name, value)
    return value


def _extra_config(name: str, value: object) -> dict[str, Any]:
    """Check extra_config is a table of unit sections holding scalar values."""
    field = "service.extra_config"
    sections = _mapping(name, field, value)

    for section, entries in sections.items():
        if not isinstance(entries, Mapping):
            raise InvalidFieldValue(
                name, f"{field}.{section}", "must be a table of unit settings"
            )
        for key, entry in entries.items():
            values = entry if isinstance(entry, list) else [entry]
            if not all(isinstance(item, UNIT_SCALARS) for item in values):
                raise InvalidFieldValue(
                    name,
                    f"{field}.{section}.{key}",
                    f"must be a string, number, boolean or list of those, got {entry!r}",
                )

    return dict(sections)
