"""Render artifacts to the text that ends up on disk.

Services and timers become systemd unit files, account configs become
TOML. Output depends only on the ArtifactSet, so rendering the same
registry twice gives byte-identical files.
"""

from collections.abc import Mapping
from pathlib import PurePosixPath
from typing import Any

import tomli_w

from imapmaildir_units.accounts import UnitRenderError
from imapmaildir_units.compiler import ArtifactSet, ConfigFileDescriptor
from imapmaildir_units.config.paths import SYSTEMD_USER_SUBDIR

__all__ = ["render_unit", "render_config", "render_artifacts"]


def render_unit(sections: Mapping[str, Any]) -> str:
    """Render unit sections as a systemd INI file.

    List values become one "Key=value" line per item, which systemd
    treats the same as a space-separated list for keys like WantedBy.

    Raises:
        UnitRenderError: If a section is not a table or a value is nested.
    """
    blocks = []
    for section, entries in sections.items():
        if not isinstance(entries, Mapping):
            raise UnitRenderError(f"unit section [{section}] must be a table")
        lines = [f"[{section}]"]
        for key, value in entries.items():
            values = value if isinstance(value, list) else [value]
            for item in values:
                lines.append(f"{key}={_format_value(section, key, item)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def _format_value(section: str, key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise UnitRenderError(
        f"[{section}] {key}: cannot render {type(value).__name__} in a unit file"
    )


def render_config(config_file: ConfigFileDescriptor) -> str:
    """Render an imapmaildir account config as TOML."""
    return tomli_w.dumps(config_file.content)


def render_artifacts(artifacts: ArtifactSet) -> dict[str, str]:
    """Render every artifact, keyed by path relative to the config root.

    Units go under systemd/user/, account configs under their own path.
    """
    unit_dir = PurePosixPath(SYSTEMD_USER_SUBDIR.as_posix())
    rendered: dict[str, str] = {}

    for key, service in artifacts.services.items():
        rendered[str(unit_dir / f"{key}.service")] = render_unit(service.sections())

    for key, timer in artifacts.timers.items():
        rendered[str(unit_dir / f"{key}.timer")] = render_unit(timer.sections())

    for path, config_file in artifacts.config_files.items():
        rendered[path] = render_config(config_file)

    return rendered
