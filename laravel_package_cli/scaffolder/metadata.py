"""Derivation of the substitution tokens written into every template.

The token names (``namespace``, ``serviceProvider``, ...) are the ones that
appear as ``${token}`` placeholders inside the bundled ``.stub`` files, so
they are exposed as field aliases on :class:`PackageMetadata`.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from .naming import PackageIdentity, kebab_to_capitalize, ucfirst


NAMESPACE_SEPARATOR = "\\"


class PackageMetadata(BaseModel):
    """Immutable token set consumed by every substitution pass."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    namespace: str = Field(..., description="PHP namespace, e.g. Dummy\\DummyPackage")
    service_provider: str = Field(..., alias="serviceProvider")
    package_name: str = Field(..., alias="packageName")
    vendor_name: str = Field(..., alias="vendorName")
    full_package_name: str = Field(..., alias="fullPackageName")
    composer_namespace: str = Field(
        ...,
        alias="composerNamespace",
        description="Namespace with doubled separators for JSON string literals",
    )
    current_year: str = Field(..., alias="currentYear", pattern=r"^\d{4}$")

    def as_tokens(self) -> dict[str, str]:
        """Return the ``{token: value}`` mapping used by the renderer."""
        return self.model_dump(by_alias=True)


def build_metadata(
    identity: PackageIdentity, today: date | None = None
) -> PackageMetadata:
    """Build the :class:`PackageMetadata` for *identity*.

    Args:
        identity: The resolved vendor/name pair.
        today: Date used for ``currentYear``.  Defaults to the current UTC
            date.
    """
    if today is None:
        today = datetime.now(timezone.utc).date()

    vendor = ucfirst(identity.vendor)
    package = kebab_to_capitalize(identity.name)

    return PackageMetadata(
        namespace=f"{vendor}{NAMESPACE_SEPARATOR}{package}",
        service_provider=f"{package}ServiceProvider",
        package_name=identity.name,
        vendor_name=vendor,
        full_package_name=f"{identity.vendor.lower()}/{identity.name.lower()}",
        composer_namespace=f"{vendor}{NAMESPACE_SEPARATOR * 2}{package}",
        current_year=f"{today.year:04d}",
    )
