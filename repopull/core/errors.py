from __future__ import annotations


class RepoPullError(RuntimeError):
    """Base class for errors raised by repopull."""


class RootDirectoryError(RepoPullError):
    """The root directory is unset, missing or not a directory."""


class InvalidEntryError(RepoPullError):
    """A repository or branch list change was rejected."""
