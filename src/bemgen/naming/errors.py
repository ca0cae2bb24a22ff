"""Naming error types."""

from __future__ import annotations


class NamingError(ValueError):
    """Raised when a stylesheet file name does not follow the BEM grammar."""

    def __init__(self, path: str, identifier: str | None = None) -> None:
        self.path = path
        self.identifier = identifier
        super().__init__(f'File "{path}" has incorrect name: not in BEM methodology')


class UnknownConventionError(KeyError):
    """Raised when a naming convention name is not registered."""
