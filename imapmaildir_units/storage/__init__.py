"""Filesystem output for rendered artifacts."""

from .writer import ArtifactWriter, WriteResult

__all__ = ["ArtifactWriter", "WriteResult"]
