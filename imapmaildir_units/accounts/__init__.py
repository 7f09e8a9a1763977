"""Account defaulting and validation."""

from .errors import (
    AccountConfigError,
    DuplicateArtifactKey,
    ImapmaildirUnitsError,
    InvalidAccountName,
    InvalidFieldValue,
    InvalidInterval,
    MissingCredentialSource,
    MissingRequiredField,
    RegistryParseError,
    UnitRenderError,
)
from .models import Account, default_service_name
from .normalize import is_enabled, normalize_account, normalize_accounts

__all__ = [
    "Account",
    "default_service_name",
    "is_enabled",
    "normalize_account",
    "normalize_accounts",
    "ImapmaildirUnitsError",
    "AccountConfigError",
    "InvalidAccountName",
    "MissingRequiredField",
    "InvalidInterval",
    "MissingCredentialSource",
    "InvalidFieldValue",
    "DuplicateArtifactKey",
    "RegistryParseError",
    "UnitRenderError",
]
