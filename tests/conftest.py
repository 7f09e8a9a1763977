"""Shared fixtures for imapmaildir-units tests."""

import pytest

import imapmaildir_units.config as config_module


@pytest.fixture(autouse=True)
def reset_registry_cache():
    """Clear the module-level registry cache between tests."""
    config_module._cached_registry = None
    yield
    config_module._cached_registry = None


@pytest.fixture
def raw_account() -> dict:
    """A complete, enabled raw account entry."""
    return {
        "enabled": True,
        "mailboxes": ["INBOX"],
        "imap": {"host": "imap.example.com", "port": None},
        "maildir_abs_path": "/home/u/mail/work",
        "user_name": "u@example.com",
        "password_command": "pass show work",
        "service": {"interval_sec": 120},
    }


@pytest.fixture
def registry(raw_account: dict) -> dict:
    """Registry with one enabled and one disabled account."""
    return {
        "accounts": {
            "work": raw_account,
            "old": {
                "enabled": False,
                "imap": {"host": "imap.old.example.com"},
            },
        }
    }
