"""Artifact compiler: accounts in, systemd units and imapmaildir configs out."""

from .aggregate import ArtifactSet, aggregate, compile_registry
from .compile import (
    DEFAULT_BINARY,
    CompiledAccount,
    compile_account,
    compile_config,
    compile_service,
    compile_timer,
)
from .descriptors import ConfigFileDescriptor, ServiceDescriptor, TimerDescriptor
from .merge import merge_sections

__all__ = [
    "ArtifactSet",
    "CompiledAccount",
    "ConfigFileDescriptor",
    "ServiceDescriptor",
    "TimerDescriptor",
    "DEFAULT_BINARY",
    "aggregate",
    "compile_account",
    "compile_config",
    "compile_registry",
    "compile_service",
    "compile_timer",
    "merge_sections",
]
