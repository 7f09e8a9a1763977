"""Compile a normalized Account into its three artifacts.

Input is assumed valid (see accounts.normalize); compilation itself
cannot fail and is deterministic.
"""

import logging
from dataclasses import dataclass

from imapmaildir_units.accounts import Account
from imapmaildir_units.config.paths import account_config_path

from .descriptors import ConfigFileDescriptor, ServiceDescriptor, TimerDescriptor

logger = logging.getLogger(__name__)

DEFAULT_BINARY = "imapmaildir"

# imapmaildir only understands plain LOGIN credentials for now
AUTH_TYPE_PLAIN = "Plain"


@dataclass(frozen=True)
class CompiledAccount:
    """All artifacts generated for one account."""

    account: str
    service: ServiceDescriptor
    timer: TimerDescriptor
    config_file: ConfigFileDescriptor


def compile_service(account: Account, binary: str = DEFAULT_BINARY) -> ServiceDescriptor:
    """Build the service running `<binary> --account <name>`."""
    return ServiceDescriptor(
        key=account.service_name,
        description=f"mail sync via imapmaildir for account {account.name}",
        exec_command=(binary, "--account", account.name),
        extra=account.extra_config,
    )


def compile_timer(account: Account) -> TimerDescriptor:
    """Build the timer firing at startup and interval_sec after each run."""
    return TimerDescriptor(
        key=account.service_name,
        description=f"timer for {account.service_name}",
        on_startup_sec=0,
        on_unit_inactive_sec=account.interval_sec,
    )


def compile_config(account: Account) -> ConfigFileDescriptor:
    """Build the imapmaildir TOML config read by `imapmaildir --account`."""
    return ConfigFileDescriptor(
        path=account_config_path(account.name),
        content={
            "host": account.host,
            "port": account.port,
            "mailboxes": list(account.mailboxes),
            "maildir_base_path": account.maildir_abs_path,
            "auth": {
                "type": AUTH_TYPE_PLAIN,
                "user": account.user_name,
                "password_cmd": list(account.password_cmd),
            },
        },
    )


def compile_account(account: Account, binary: str = DEFAULT_BINARY) -> CompiledAccount:
    """Compile service, timer and config file for one account."""
    compiled = CompiledAccount(
        account=account.name,
        service=compile_service(account, binary),
        timer=compile_timer(account),
        config_file=compile_config(account),
    )
    logger.debug(
        "compiled account %s -> %s.service, %s",
        account.name,
        compiled.service.key,
        compiled.config_file.path,
    )
    return compiled
