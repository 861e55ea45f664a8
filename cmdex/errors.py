"""Error kinds raised by the store and the executor."""

from __future__ import annotations

from typing import Optional


class CmdexError(RuntimeError):
    """Base class for every error cmdex reports to the user."""


class StorageError(CmdexError):
    """Base class for failures of the alias store."""


class StorageOpenError(StorageError):
    """Raised when the store file cannot be opened, created or locked."""


class StorageTxError(StorageError):
    """Raised when a single store transaction fails."""


class AliasNotFound(CmdexError, KeyError):
    """Raised when an alias is not present in the store."""

    def __init__(self, alias: str):
        super().__init__(alias)
        self.alias = alias

    def __str__(self) -> str:
        return "alias not found"


class EmptyCommand(CmdexError):
    """Raised when a resolved command has no words to execute."""

    def __init__(self, alias: Optional[str] = None):
        super().__init__(alias)
        self.alias = alias

    def __str__(self) -> str:
        return "Empty command"


class CommandParseError(CmdexError):
    """Raised when quote-aware splitting cannot parse a command."""


class SpawnError(CmdexError):
    """Raised when the child process cannot start or exits abnormally."""

    def __init__(self, message: str, *, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode


__all__ = [
    "AliasNotFound",
    "CmdexError",
    "CommandParseError",
    "EmptyCommand",
    "SpawnError",
    "StorageError",
    "StorageOpenError",
    "StorageTxError",
]
