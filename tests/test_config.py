"""Tests for registry loading."""

from pathlib import Path

import pytest

from imapmaildir_units.accounts import RegistryParseError
from imapmaildir_units.config import (
    account_config_path,
    get_account,
    get_account_names,
    init_registry,
    load_registry,
)
from imapmaildir_units.config.paths import config_home
from imapmaildir_units.config.template import REGISTRY_TEMPLATE

REGISTRY_TOML = """\
binary = "/usr/bin/imapmaildir"

[accounts.work]
enabled = true
mailboxes = ["INBOX"]
maildir_abs_path = "/home/u/mail/work"
user_name = "u@example.com"
password_command = ["pass", "show", "work"]

[accounts.work.imap]
host = "imap.example.com"

[accounts.home]
enabled = false
"""


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    """Write a registry file to a temporary directory."""
    path = tmp_path / "accounts.toml"
    path.write_text(REGISTRY_TOML)
    return path


class TestLoadRegistry:
    """Tests for load_registry."""

    def test_loads_toml(self, registry_file: Path):
        """Registry file is parsed into nested dicts."""
        registry = load_registry(registry_file)

        assert registry["binary"] == "/usr/bin/imapmaildir"
        assert registry["accounts"]["work"]["imap"]["host"] == "imap.example.com"

    def test_missing_file_is_empty(self, tmp_path: Path):
        """A missing registry loads as an empty dict."""
        assert load_registry(tmp_path / "missing.toml") == {}

    def test_cached_until_reload(self, registry_file: Path):
        """Repeated loads use the cache unless force_reload is set."""
        load_registry(registry_file)
        registry_file.write_text('binary = "other"\n')

        assert load_registry(registry_file)["binary"] == "/usr/bin/imapmaildir"
        assert load_registry(registry_file, force_reload=True)["binary"] == "other"

    def test_invalid_toml(self, tmp_path: Path):
        """Malformed TOML raises RegistryParseError."""
        path = tmp_path / "bad.toml"
        path.write_text("[accounts\n")

        with pytest.raises(RegistryParseError):
            load_registry(path)


class TestInitRegistry:
    """Tests for init_registry."""

    def test_creates_template(self, tmp_path: Path):
        """A template registry is written."""
        path = tmp_path / "sub" / "accounts.toml"

        assert init_registry(path) is True
        assert path.read_text() == REGISTRY_TEMPLATE

    def test_keeps_existing(self, registry_file: Path):
        """An existing registry is not overwritten by default."""
        assert init_registry(registry_file) is False
        assert registry_file.read_text() == REGISTRY_TOML

    def test_overwrite(self, registry_file: Path):
        """overwrite=True replaces the registry."""
        assert init_registry(registry_file, overwrite=True) is True
        assert registry_file.read_text() == REGISTRY_TEMPLATE

    def test_template_is_valid_registry(self, tmp_path: Path):
        """The template parses and has no accounts."""
        path = tmp_path / "accounts.toml"
        init_registry(path)

        assert get_account_names(load_registry(path)) == []


class TestAccessors:
    """Tests for registry accessors and paths."""

    def test_account_names_in_order(self, registry_file: Path):
        """Names come back in file order."""
        assert get_account_names(load_registry(registry_file)) == ["work", "home"]

    def test_get_account(self, registry_file: Path):
        """get_account returns the raw entry or None."""
        registry = load_registry(registry_file)

        assert get_account(registry, "home") == {"enabled": False}
        assert get_account(registry, "nope") is None

    def test_account_config_path(self):
        """Account configs live where imapmaildir looks for them."""
        assert account_config_path("work") == "imapmaildir/accounts/work.toml"

    def test_config_home_honours_xdg(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        """XDG_CONFIG_HOME overrides ~/.config."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert config_home() == tmp_path

    def test_config_home_fallback(self, monkeypatch: pytest.MonkeyPatch):
        """Without XDG_CONFIG_HOME the root is ~/.config."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        assert config_home() == Path.home() / ".config"
