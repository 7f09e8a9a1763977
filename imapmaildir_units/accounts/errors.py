"""Errors raised while turning the account registry into artifacts.

Every error is a configuration-time error: nothing here is transient, so
callers should report and stop rather than retry.
"""


class ImapmaildirUnitsError(Exception):
    """Base error for imapmaildir-units."""

    pass


class AccountConfigError(ImapmaildirUnitsError):
    """An account in the registry is invalid.

    Attributes:
        account: Name of the offending account (may be empty).
        field: Registry field that failed validation.
    """

    def __init__(self, account: str, field: str, message: str):
        self.account = account
        self.field = field
        super().__init__(f"account '{account}': {field}: {message}")


class InvalidAccountName(AccountConfigError):
    """Account name is empty, duplicated or unusable in a path."""

    def __init__(self, account: str, message: str):
        super().__init__(account, "name", message)


class MissingRequiredField(AccountConfigError):
    """A required field (imap.host, maildir_abs_path, ...) is unset."""

    def __init__(self, account: str, field: str):
        super().__init__(account, field, "required field is missing or empty")


class InvalidInterval(AccountConfigError):
    """service.interval_sec is not a positive integer."""

    def __init__(self, account: str, value: object):
        super().__init__(
            account,
            "service.interval_sec",
            f"must be a positive integer, got {value!r}",
        )


class MissingCredentialSource(AccountConfigError):
    """password_command is unset, so imapmaildir could never log in."""

    def __init__(self, account: str):
        super().__init__(account, "password_command", "no password command given")


class InvalidFieldValue(AccountConfigError):
    """A field is present but has the wrong type or an out-of-range value."""

    pass


class DuplicateArtifactKey(ImapmaildirUnitsError):
    """Two accounts compiled to the same service, timer or config file name."""

    def __init__(self, kind: str, key: str, first_account: str, second_account: str):
        self.kind = kind
        self.key = key
        self.first_account = first_account
        self.second_account = second_account
        super().__init__(
            f"duplicate {kind} '{key}' generated by accounts "
            f"'{first_account}' and '{second_account}'"
        )


class RegistryParseError(ImapmaildirUnitsError):
    """Registry file is not valid TOML."""

    pass


class UnitRenderError(ImapmaildirUnitsError):
    """A unit section holds a value systemd unit files cannot express."""

    pass
