"""Write rendered artifacts below a configuration root.

The compiler never touches the filesystem; this is the outer layer that
puts unit files and account configs where systemd and imapmaildir look
for them:

- <root>/systemd/user/<service>.service
- <root>/systemd/user/<service>.timer
- <root>/imapmaildir/accounts/<account>.toml

Files are written atomically (tmp file in the same directory, then
renamed) and left alone when their content is already up to date.

A manifest at <root>/imapmaildir-units/generated.toml records what was
generated. Files listed there that a later run no longer produces (the
account was disabled, removed or its service renamed) are deleted.
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

from imapmaildir_units.config.paths import ACCOUNT_CONFIG_SUBDIR, MANIFEST_PATH

logger = logging.getLogger(__name__)

# Account configs name the password command, keep them private
ACCOUNT_CONFIG_MODE = 0o600
UNIT_MODE = 0o644


@dataclass
class WriteResult:
    """Result of writing a set of artifacts."""

    written: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)


class ArtifactWriter:
    """Writes rendered artifacts below a base directory.

    Example:
        writer = ArtifactWriter(CONFIG_HOME)
        result = writer.write(render_artifacts(artifacts))
        print(f"Wrote {len(result.written)} files")
    """

    def __init__(self, base_path: Path):
        """Initialize the writer.

        Args:
            base_path: Configuration root (e.g., ~/.config). Created on
                       first write if it doesn't exist.
        """
        self._base_path = base_path.expanduser().resolve()

    @property
    def base_path(self) -> Path:
        """Get the base path artifacts are written below."""
        return self._base_path

    @property
    def manifest_file(self) -> Path:
        """Path of the manifest of previously generated files."""
        return self._base_path / MANIFEST_PATH

    def target_path(self, relative_path: str) -> Path:
        """Absolute destination of a rendered artifact.

        Raises:
            ValueError: If the path escapes the base directory.
        """
        target = (self._base_path / relative_path).resolve()
        if not target.is_relative_to(self._base_path):
            raise ValueError(f"artifact path escapes output directory: {relative_path}")
        return target

    def load_manifest(self) -> list[str]:
        """Relative paths written by the previous run.

        Returns:
            The recorded paths, or an empty list if there is no manifest.
            A corrupted manifest is treated as missing.
        """
        if not self.manifest_file.exists():
            return []

        try:
            with open(self.manifest_file, "rb") as f:
                files = tomllib.load(f).get("files", [])
        except (tomllib.TOMLDecodeError, OSError) as e:
            logger.warning("ignoring unreadable manifest %s: %s", self.manifest_file, e)
            return []

        return [path for path in files if isinstance(path, str)]

    def write(self, rendered: dict[str, str]) -> WriteResult:
        """Write every rendered artifact and remove stale ones.

        All destinations are resolved before anything is written, so a bad
        path leaves the filesystem untouched. An empty mapping removes
        everything a previous run generated.

        Args:
            rendered: File contents keyed by path relative to base_path.

        Returns:
            WriteResult listing written, unchanged and removed files.
        """
        targets = [
            (self.target_path(relative), relative, content)
            for relative, content in rendered.items()
        ]

        result = WriteResult()
        for target, relative, content in targets:
            mode = _mode_for(relative)
            if target.exists() and target.read_text() == content:
                logger.debug("%s is up to date", target)
                target.chmod(mode)
                result.unchanged.append(target)
                continue

            self._write_file(target, content, mode)
            logger.info("wrote %s", target)
            result.written.append(target)

        for relative in self.load_manifest():
            if relative in rendered:
                continue
            try:
                stale = self.target_path(relative)
            except ValueError:
                logger.warning("manifest entry outside output directory: %s", relative)
                continue
            if stale.exists():
                stale.unlink()
                logger.info("removed %s", stale)
                result.removed.append(stale)

        self._write_file(
            self.manifest_file,
            tomli_w.dumps({"files": sorted(rendered)}),
            UNIT_MODE,
        )
        return result

    def _write_file(self, target: Path, content: str, mode: int) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)

        tmp_path = target.with_name(f".{target.name}.tmp")
        tmp_path.write_text(content)
        tmp_path.chmod(mode)

        # os.replace is atomic on POSIX when src and dest share a filesystem
        os.replace(tmp_path, target)


def _mode_for(relative_path: str) -> int:
    if Path(relative_path).is_relative_to(ACCOUNT_CONFIG_SUBDIR):
        return ACCOUNT_CONFIG_MODE
    return UNIT_MODE
