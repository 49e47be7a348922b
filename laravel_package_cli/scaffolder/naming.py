"""Package identifier parsing and name casing helpers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import InvalidPackageNameError


class PackageIdentity(BaseModel):
    """A resolved ``vendor/name`` pair."""

    model_config = ConfigDict(frozen=True)

    vendor: str
    name: str

    @field_validator("vendor", "name")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    def __str__(self) -> str:
        return f"{self.vendor}/{self.name}"


def resolve_package_name(identifier: str) -> PackageIdentity:
    """Split *identifier* on ``/`` into a :class:`PackageIdentity`.

    Exactly two non-empty segments are required; anything else (no
    separator, an empty side, ``"dummy/dummy-package/asdf"``) raises
    :class:`InvalidPackageNameError`.  The segments are not otherwise
    validated.
    """
    parts = identifier.split("/")
    if len(parts) != 2 or not all(parts):
        raise InvalidPackageNameError(identifier)
    vendor, name = parts
    return PackageIdentity(vendor=vendor, name=name)


def ucfirst(text: str) -> str:
    """Upper-case the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def kebab_to_capitalize(text: str) -> str:
    """Convert ``dummy-package`` to ``DummyPackage``.

    Inner capitals survive (``my-HTTP-client`` -> ``MyHTTPClient``).
    """
    words = text.replace("-", " ").split(" ")
    return "".join(ucfirst(word) for word in words)
