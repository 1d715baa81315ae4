"""Error taxonomy for the store, authentication and backup layers."""


class BankStoreError(Exception):
    """Base class for every error raised by this project."""


class QueryFailedError(BankStoreError):
    """A statement could not be executed against the store."""


class ScanFailedError(BankStoreError):
    """A fetched row could not be decoded into its record type."""


class CursorFailedError(BankStoreError):
    """The result cursor failed while it was being drained."""


class TransactionError(BankStoreError):
    """An insert transaction failed at ``stage`` (begin, exec or commit)."""

    def __init__(self, stage: str, message: str):
        super().__init__(f"transaction {stage} failed: {message}")
        self.stage = stage


class PasswordMismatchError(BankStoreError):
    """The login exists but the submitted password does not match."""

    def __init__(self, login: str):
        super().__init__(f"password is not valid for {login!r}")
        self.login = login


class NotFoundError(BankStoreError):
    pass


class FilesystemError(BankStoreError):
    """Opening, creating, copying or writing a backup file failed."""


class ExportFailedError(BankStoreError):
    pass


class SerializationFailedError(BankStoreError):
    """A snapshot could not be encoded to JSON."""
