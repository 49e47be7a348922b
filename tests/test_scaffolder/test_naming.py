"""Tests for package identifier resolution and name casing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from laravel_package_cli.scaffolder.errors import InvalidPackageNameError
from laravel_package_cli.scaffolder.naming import (
    PackageIdentity,
    kebab_to_capitalize,
    resolve_package_name,
    ucfirst,
)


pytestmark = pytest.mark.unit


class TestResolvePackageName:
    def test_vendor_and_name(self):
        identity = resolve_package_name("dummy/dummy-package")
        assert identity.vendor == "dummy"
        assert identity.name == "dummy-package"

    def test_keeps_case(self):
        identity = resolve_package_name("Acme/Blog-Tools")
        assert identity == PackageIdentity(vendor="Acme", name="Blog-Tools")

    @pytest.mark.parametrize(
        "identifier",
        ["dummy", "dummy/dummy-package/asdf", "dummy/", "/dummy-package", "/", ""],
    )
    def test_invalid(self, identifier):
        with pytest.raises(InvalidPackageNameError) as excinfo:
            resolve_package_name(identifier)
        assert excinfo.value.identifier == identifier
        assert str(excinfo.value) == "The given package name is not valid."

    def test_no_character_validation(self):
        identity = resolve_package_name("we ird/na me!")
        assert identity.vendor == "we ird"
        assert identity.name == "na me!"

    def test_str(self):
        assert str(resolve_package_name("dummy/dummy-package")) == "dummy/dummy-package"


class TestPackageIdentity:
    def test_frozen(self):
        identity = PackageIdentity(vendor="dummy", name="pkg")
        with pytest.raises(ValidationError):
            identity.vendor = "other"

    def test_empty_part_rejected(self):
        with pytest.raises(ValidationError):
            PackageIdentity(vendor="", name="pkg")


class TestKebabToCapitalize:
    def test_dummy_package(self):
        assert kebab_to_capitalize("dummy-package") == "DummyPackage"

    def test_single_word(self):
        assert kebab_to_capitalize("blog") == "Blog"

    def test_keeps_inner_capitals(self):
        assert kebab_to_capitalize("my-HTTP-client") == "MyHTTPClient"

    def test_repeated_dashes(self):
        assert kebab_to_capitalize("a--b") == "AB"


class TestUcfirst:
    def test_only_first_letter(self):
        assert ucfirst("aCME") == "ACME"

    def test_empty(self):
        assert ucfirst("") == ""
