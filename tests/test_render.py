"""Tests for rendering artifacts to unit files and TOML."""

import tomllib

import pytest

from imapmaildir_units.accounts import UnitRenderError
from imapmaildir_units.compiler import compile_registry
from imapmaildir_units.render import render_artifacts, render_config, render_unit


class TestRenderUnit:
    """Tests for render_unit."""

    def test_sections_and_keys(self):
        """Sections are separated by blank lines, keys as Key=value."""
        text = render_unit(
            {
                "Unit": {"Description": "timer for x"},
                "Timer": {"OnStartupSec": 0, "OnUnitInactiveSec": 300},
            }
        )

        assert text == (
            "[Unit]\n"
            "Description=timer for x\n"
            "\n"
            "[Timer]\n"
            "OnStartupSec=0\n"
            "OnUnitInactiveSec=300\n"
        )

    def test_lists_repeat_key(self):
        """List values produce one line per entry."""
        text = render_unit({"Install": {"WantedBy": ["timers.target", "default.target"]}})

        assert text == "[Install]\nWantedBy=timers.target\nWantedBy=default.target\n"

    def test_booleans(self):
        """Booleans render as systemd true/false."""
        text = render_unit({"Service": {"RemainAfterExit": False}})

        assert "RemainAfterExit=false" in text

    def test_nested_table_rejected(self):
        """Values nested deeper than a section can't be rendered."""
        with pytest.raises(UnitRenderError):
            render_unit({"Service": {"Environment": {"A": "1"}}})

    def test_non_table_section_rejected(self):
        """Top-level values must be sections."""
        with pytest.raises(UnitRenderError):
            render_unit({"Nice": 10})


class TestRenderArtifacts:
    """Tests for render_artifacts."""

    def test_paths(self, registry: dict):
        """Units land in systemd/user, configs at their own path."""
        rendered = render_artifacts(compile_registry(registry))

        assert list(rendered) == [
            "systemd/user/imapmaildir-sync-work.service",
            "systemd/user/imapmaildir-sync-work.timer",
            "imapmaildir/accounts/work.toml",
        ]

    def test_service_text(self, registry: dict):
        """Service unit text for the example account."""
        rendered = render_artifacts(compile_registry(registry))

        assert rendered["systemd/user/imapmaildir-sync-work.service"] == (
            "[Unit]\n"
            "Description=mail sync via imapmaildir for account work\n"
            "\n"
            "[Service]\n"
            "Type=exec\n"
            "ExecStart=imapmaildir --account work\n"
        )

    def test_timer_text(self, registry: dict):
        """Timer unit text for the example account."""
        rendered = render_artifacts(compile_registry(registry))

        assert rendered["systemd/user/imapmaildir-sync-work.timer"] == (
            "[Unit]\n"
            "Description=timer for imapmaildir-sync-work\n"
            "\n"
            "[Timer]\n"
            "OnStartupSec=0\n"
            "OnUnitInactiveSec=120\n"
            "\n"
            "[Install]\n"
            "WantedBy=timers.target\n"
        )

    def test_config_is_valid_toml(self, registry: dict):
        """The account config parses back to the expected document."""
        artifacts = compile_registry(registry)
        text = render_config(artifacts.config_files["imapmaildir/accounts/work.toml"])

        assert tomllib.loads(text) == {
            "host": "imap.example.com",
            "port": 993,
            "mailboxes": ["INBOX"],
            "maildir_base_path": "/home/u/mail/work",
            "auth": {
                "type": "Plain",
                "user": "u@example.com",
                "password_cmd": ["pass show work"],
            },
        }
