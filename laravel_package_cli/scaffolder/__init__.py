"""Laravel package scaffolder -- generates package skeletons from templates.

Quick usage::

    from laravel_package_cli.scaffolder import (
        GenerationOptions,
        LocalFilesystem,
        PackageGenerator,
    )

    generator = PackageGenerator(
        LocalFilesystem("/tmp/packages"),
        "",
        "acme/blog-tools",
        GenerationOptions(license="mit"),
    )
    result = generator.generate()
"""

from laravel_package_cli.config import Config, GenerationOptions
from laravel_package_cli.scaffolder.errors import (
    DirectoryAlreadyExistsError,
    FilesystemError,
    InvalidPackageNameError,
    ScaffoldError,
    TemplateNotFoundError,
    UnknownLicenseError,
)
from laravel_package_cli.scaffolder.filesystem import (
    LocalFilesystem,
    MemoryFilesystem,
    TargetFilesystem,
)
from laravel_package_cli.scaffolder.generator import (
    FILE_TABLE,
    LICENSES,
    FileSpec,
    GenerationResult,
    PackageGenerator,
    generate_package,
)
from laravel_package_cli.scaffolder.materializer import FileMaterializer, GeneratedFile
from laravel_package_cli.scaffolder.metadata import PackageMetadata, build_metadata
from laravel_package_cli.scaffolder.naming import (
    PackageIdentity,
    kebab_to_capitalize,
    resolve_package_name,
)
from laravel_package_cli.scaffolder.templates import TemplateAsset, TemplateStore, render

__all__ = [
    "Config",
    "DirectoryAlreadyExistsError",
    "FILE_TABLE",
    "FileMaterializer",
    "FileSpec",
    "FilesystemError",
    "GeneratedFile",
    "GenerationOptions",
    "GenerationResult",
    "InvalidPackageNameError",
    "LICENSES",
    "LocalFilesystem",
    "MemoryFilesystem",
    "PackageGenerator",
    "PackageIdentity",
    "PackageMetadata",
    "ScaffoldError",
    "TargetFilesystem",
    "TemplateAsset",
    "TemplateNotFoundError",
    "TemplateStore",
    "UnknownLicenseError",
    "build_metadata",
    "generate_package",
    "kebab_to_capitalize",
    "render",
    "resolve_package_name",
]
