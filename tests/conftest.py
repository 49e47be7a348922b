"""Shared pytest fixtures for the scaffolder test suite.

Provides reusable fixtures for:
- In-memory and on-disk target filesystems
- A fixed generation date
- Quiet configuration and a ready-made ``dummy/dummy-package`` generator
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from laravel_package_cli.config import Config, GenerationOptions
from laravel_package_cli.scaffolder.filesystem import LocalFilesystem, MemoryFilesystem
from laravel_package_cli.scaffolder.generator import PackageGenerator
from laravel_package_cli.scaffolder.templates import TemplateStore


TEMPLATE_DIR = (
    Path(__file__).resolve().parent.parent / "laravel_package_cli" / "scaffolder" / "templates"
)


# ---------------------------------------------------------------------------
# Filesystems
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    """Empty in-memory target filesystem."""
    return MemoryFilesystem()


@pytest.fixture
def local_fs(tmp_path: Path) -> LocalFilesystem:
    """Target filesystem rooted at a temporary directory."""
    root = tmp_path / "packages"
    root.mkdir()
    return LocalFilesystem(root)


# ---------------------------------------------------------------------------
# Generator inputs
# ---------------------------------------------------------------------------


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def quiet_config() -> Config:
    """Config that keeps the console silent."""
    return Config(quiet=True)


@pytest.fixture
def template_store() -> TemplateStore:
    return TemplateStore()


@pytest.fixture
def read_template():
    """Return the raw text of a bundled template by logical path."""

    def _read(logical_path: str) -> str:
        return (TEMPLATE_DIR / f"{logical_path}.stub").read_text(encoding="utf-8")

    return _read


@pytest.fixture
def make_generator(memory_fs, quiet_config, fixed_today):
    """Factory building a quiet generator over the in-memory filesystem."""

    def _make(
        package_name: str = "dummy/dummy-package",
        options: GenerationOptions | None = None,
        filesystem=None,
        destination_root: str = "/",
    ) -> PackageGenerator:
        return PackageGenerator(
            filesystem if filesystem is not None else memory_fs,
            destination_root,
            package_name,
            options=options,
            config=quiet_config,
            today=fixed_today,
        )

    return _make


@pytest.fixture
def dummy_generator(make_generator) -> PackageGenerator:
    """Generator for ``dummy/dummy-package`` with default options."""
    return make_generator()
