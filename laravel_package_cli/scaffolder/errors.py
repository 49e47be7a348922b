"""Exceptions raised by the package scaffolder.

Every failure surfaces immediately to the caller of the generator (or of the
individual component that raised it).  Nothing is retried: local filesystem
operations either succeed or fail deterministically.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for every scaffolding failure."""


class InvalidPackageNameError(ScaffoldError):
    """Raised when a package identifier is not ``vendor/name``."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__("The given package name is not valid.")


class DirectoryAlreadyExistsError(ScaffoldError):
    """Raised when the package directory exists and ``force`` is not set."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The directory {path!r} already exists.")


class TemplateNotFoundError(ScaffoldError):
    """Raised when a logical template path is not part of the bundle."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Template {path!r} not found.")


class FilesystemError(ScaffoldError):
    """Raised when the target filesystem rejects an operation."""

    def __init__(self, message: str, path: str = "", operation: str = ""):
        self.path = path
        self.operation = operation
        super().__init__(message)


class UnknownLicenseError(ScaffoldError):
    """Raised for an unrecognized license name when strict matching is on."""

    def __init__(self, license_name: str):
        self.license_name = license_name
        super().__init__(f"Unknown license {license_name!r}.")
