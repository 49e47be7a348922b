"""Main scaffolding orchestrator.

Takes a ``vendor/package`` identifier and ``GenerationOptions`` and writes a
Laravel package skeleton (README, changelog, license, config, service
provider, PHPUnit harness and ``composer.json``) into a target filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from laravel_package_cli.config import Config, GenerationOptions
from laravel_package_cli.utils import (
    print_error,
    print_generation_summary,
    print_header,
    print_stage,
    print_success,
    print_warning,
)

from .errors import (
    DirectoryAlreadyExistsError,
    FilesystemError,
    InvalidPackageNameError,
    ScaffoldError,
    UnknownLicenseError,
)
from .filesystem import LocalFilesystem, TargetFilesystem, normalize_path
from .materializer import FileMaterializer, GeneratedFile
from .metadata import PackageMetadata, build_metadata
from .naming import PackageIdentity, resolve_package_name
from .templates import TemplateStore, find_placeholders, render


# ---------------------------------------------------------------------------
# Template routing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileSpec:
    """Routes one template to its destination inside the package.

    ``destination`` is relative to the package directory and may itself
    contain ``${token}`` placeholders; ``requires_token`` names the token it
    depends on.
    """

    stage: str
    template: str
    destination: str
    requires_token: str | None = None


STAGE_BASE = "base"
STAGE_CONFIG = "config"
STAGE_SERVICE_PROVIDER = "service_provider"
STAGE_TESTS = "tests"
STAGE_MANIFEST = "manifest"

FILE_TABLE: tuple[FileSpec, ...] = (
    FileSpec(STAGE_BASE, ".gitignore", ".gitignore"),
    FileSpec(STAGE_BASE, "CHANGELOG.md", "CHANGELOG.md"),
    FileSpec(STAGE_BASE, "README.md", "README.md"),
    FileSpec(STAGE_CONFIG, "config/config.php", "config/${packageName}.php", "packageName"),
    FileSpec(
        STAGE_SERVICE_PROVIDER,
        "src/PackageServiceProvider.php",
        "src/${serviceProvider}.php",
        "serviceProvider",
    ),
    FileSpec(STAGE_TESTS, "tests/TestCase.php", "tests/TestCase.php"),
    FileSpec(STAGE_TESTS, "phpunit.xml", "phpunit.xml"),
    FileSpec(STAGE_MANIFEST, "composer.json", "composer.json"),
)

# Lower-cased license name -> template path
LICENSES: dict[str, str] = {
    "mit": "license/mit",
    "apache 2.0": "license/apache20",
    "gnu gpl v3": "license/gnu_gpl_v3",
}

DATABASE_MARKER = "database/.gitkeep"
LICENSE_FILE = "LICENSE"


@dataclass
class GenerationResult:
    """What a generation run wrote."""

    package_path: str
    metadata: PackageMetadata
    files: list[GeneratedFile] = field(default_factory=list)
    directories: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.files]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class PackageGenerator:
    """Generates a package directory from the bundled templates.

    The identifier is resolved and the destination guard evaluated on
    construction, so an invalid name or an existing directory (without
    ``force``) fails before anything is written.  Each stage is also
    available as a public method.  Stages never roll back each other's
    writes.
    """

    def __init__(
        self,
        filesystem: TargetFilesystem,
        destination_root: str,
        package_name: str,
        options: GenerationOptions | None = None,
        config: Config | None = None,
        today: date | None = None,
    ) -> None:
        self.filesystem = filesystem
        self.config = config or Config()
        self.options = options if options is not None else self.config.defaults
        self.identity: PackageIdentity = resolve_package_name(package_name)
        self._check_directory_name(package_name)
        self.package_path = normalize_path(f"{destination_root}/{self.identity.name}")

        self._guard()

        self.metadata = build_metadata(self.identity, today=today)
        self.store = TemplateStore(self.config.template_dir)
        self.materializer = FileMaterializer(
            filesystem, self.store, staging_suffix=self.config.staging_suffix
        )
        self.result = GenerationResult(package_path=self.package_path, metadata=self.metadata)

    # -- Public API --------------------------------------------------------

    def generate(self) -> GenerationResult:
        """Run every stage in order and return what was written."""
        self._guard()
        if not self.config.quiet:
            print_header(f"Scaffolding {self.metadata.full_package_name}")

        # 1. Create the package directory
        self._create_directory("")

        # 2. Base files
        self.generate_base_files()

        # 3. Config file
        self.generate_config_file()

        # 4. LICENSE
        self.generate_license()

        # 5. Service provider
        self.generate_service_provider()

        # 6. Test harness
        self.generate_test_files()

        # 7. composer.json
        self.generate_composer_json()

        if not self.config.quiet:
            print_generation_summary(self.result)
            print_success(f"Package created at {self.package_path}")
        return self.result

    def generate_base_files(self) -> list[GeneratedFile]:
        """Write ``.gitignore``, ``CHANGELOG.md``, ``README.md`` and ``database/.gitkeep``."""
        self._report("Generating base files")
        written = self._materialize_stage(STAGE_BASE)
        written.append(self._write_empty(DATABASE_MARKER))
        return written

    def generate_config_file(self) -> list[GeneratedFile]:
        """Write ``config/<package>.php`` unless ``skip_config`` is set."""
        if self.options.skip_config:
            self._report("Skipping config file")
            self.result.skipped.append(STAGE_CONFIG)
            return []
        self._report("Generating config file")
        return self._materialize_stage(STAGE_CONFIG)

    def generate_license(self) -> list[GeneratedFile]:
        """Write the ``LICENSE`` selected by the ``license`` option.

        An empty option writes an empty file.  An unrecognized name writes
        nothing (with a warning), or raises :class:`UnknownLicenseError`
        when ``strict_license`` is set.
        """
        name = self.options.license
        if not name:
            self._report("Generating empty LICENSE")
            return [self._write_empty(LICENSE_FILE)]

        template = LICENSES.get(name.lower())
        if template is None:
            if self.options.strict_license:
                raise UnknownLicenseError(name)
            if not self.config.quiet:
                print_warning(f"Unknown license {name!r}; no LICENSE file written")
            self.result.skipped.append(LICENSE_FILE)
            return []

        self._report(f"Generating {name} LICENSE")
        return [self._materialize(template, LICENSE_FILE)]

    def generate_service_provider(self) -> list[GeneratedFile]:
        """Write ``src/<Package>ServiceProvider.php``."""
        self._report(f"Generating {self.metadata.service_provider}")
        return self._materialize_stage(STAGE_SERVICE_PROVIDER)

    def generate_test_files(self) -> list[GeneratedFile]:
        """Create ``tests/`` with ``TestCase.php`` and a root ``phpunit.xml``."""
        self._report("Generating test harness")
        self._create_directory("tests")
        return self._materialize_stage(STAGE_TESTS)

    def generate_composer_json(self) -> list[GeneratedFile]:
        """Write ``composer.json``."""
        self._report("Generating composer.json")
        return self._materialize_stage(STAGE_MANIFEST)

    # -- Internals ---------------------------------------------------------

    def _check_directory_name(self, package_name: str) -> None:
        # The package name becomes exactly one directory below the destination root.
        try:
            directory = normalize_path(self.identity.name)
        except FilesystemError as exc:
            raise InvalidPackageNameError(package_name) from exc
        if not directory or "/" in directory:
            raise InvalidPackageNameError(package_name)

    def _guard(self) -> None:
        if self.filesystem.exists(self.package_path) and not self.options.force:
            raise DirectoryAlreadyExistsError(self.package_path)

    def _report(self, message: str) -> None:
        if not self.config.quiet:
            print_stage(message)

    def _package_file(self, relative: str) -> str:
        return normalize_path(f"{self.package_path}/{relative}")

    def _destination_for(self, spec: FileSpec) -> str:
        tokens = self.metadata.as_tokens()
        if spec.requires_token is not None and spec.requires_token not in tokens:
            raise ScaffoldError(
                f"Destination {spec.destination!r} needs unknown token {spec.requires_token!r}"
            )
        relative = render(spec.destination, tokens)
        leftover = find_placeholders(relative)
        if leftover:
            raise ScaffoldError(
                f"Destination {spec.destination!r} has unresolved tokens: {sorted(leftover)}"
            )
        return relative

    def _materialize_stage(self, stage: str) -> list[GeneratedFile]:
        return [
            self._materialize(spec.template, self._destination_for(spec))
            for spec in FILE_TABLE
            if spec.stage == stage
        ]

    def _materialize(self, template: str, relative: str) -> GeneratedFile:
        generated = self.materializer.materialize(
            template, self._package_file(relative), self.metadata
        )
        self.result.files.append(generated)
        return generated

    def _write_empty(self, relative: str) -> GeneratedFile:
        generated = self.materializer.write_empty(self._package_file(relative))
        self.result.files.append(generated)
        return generated

    def _create_directory(self, relative: str) -> None:
        path = self._package_file(relative) if relative else self.package_path
        self.filesystem.create_directory(path)
        self.result.directories.append(path)


# ---------------------------------------------------------------------------
# Convenience entry point
# ---------------------------------------------------------------------------


def generate_package(
    package_name: str,
    options: GenerationOptions | None = None,
    config: Config | None = None,
    filesystem: TargetFilesystem | None = None,
) -> GenerationResult:
    """Generate *package_name* under ``config.destination_root``.

    Uses a :class:`LocalFilesystem` rooted at the destination unless a
    filesystem is given.  Failures are reported on the console and
    re-raised.
    """
    config = config or Config()
    if filesystem is None:
        filesystem = LocalFilesystem(config.destination_root)
        destination_root = ""
    else:
        destination_root = str(config.destination_root)

    try:
        generator = PackageGenerator(
            filesystem, destination_root, package_name, options=options, config=config
        )
        return generator.generate()
    except ScaffoldError as exc:
        if not config.quiet:
            print_error(f"Could not scaffold {package_name}: {exc}")
        raise
