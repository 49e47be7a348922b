"""Target filesystems the scaffolder writes packages into.

Paths are POSIX-style strings relative to the filesystem root
(``"dummy-package/src/Foo.php"``); leading slashes are ignored.  Writes and
copies create missing parent directories.  ``write_file`` (without
``overwrite``), ``copy_file`` and ``rename_file`` refuse to replace an
existing file, so running the generator twice into the same directory fails
instead of merging.
"""

from __future__ import annotations

import shutil
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath

from .errors import FilesystemError


def normalize_path(path: str) -> str:
    """Normalize *path* to a relative POSIX path without ``.`` segments.

    Raises:
        FilesystemError: If the path escapes the root via ``..``.
    """
    parts: list[str] = []
    for part in PurePosixPath(path.replace("\\", "/")).parts:
        if part.strip("/") in ("", "."):
            continue
        if part == "..":
            raise FilesystemError(f"Path escapes the filesystem root: {path}", path=path)
        parts.append(part)
    return "/".join(parts)


def _parents(path: str) -> list[str]:
    parts = path.split("/")[:-1]
    return ["/".join(parts[: i + 1]) for i in range(len(parts))]


class TargetFilesystem(ABC):
    """Operations the generator needs from the place it writes to."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return ``True`` if a file or directory exists at *path*."""

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Return ``True`` if *path* is a directory."""

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """Create *path* and its parents; an existing directory is fine."""

    @abstractmethod
    def read_file(self, path: str) -> bytes:
        """Return the content of the file at *path*."""

    @abstractmethod
    def write_file(self, path: str, content: bytes | str, *, overwrite: bool = False) -> None:
        """Write *content* to *path*."""

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """Copy a file within this filesystem."""

    @abstractmethod
    def rename_file(self, source: str, destination: str) -> None:
        """Move the file at *source* to *destination*."""


# ---------------------------------------------------------------------------
# Local disk
# ---------------------------------------------------------------------------


class LocalFilesystem(TargetFilesystem):
    """A filesystem rooted at a directory on local disk."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def _full(self, path: str) -> Path:
        rel = normalize_path(path)
        return self.root / rel if rel else self.root

    def exists(self, path: str) -> bool:
        return self._full(path).exists()

    def is_dir(self, path: str) -> bool:
        return self._full(path).is_dir()

    def create_directory(self, path: str) -> None:
        target = self._full(path)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(
                f"Cannot create directory {path}: {exc}", path=path, operation="create_directory"
            ) from exc

    def read_file(self, path: str) -> bytes:
        target = self._full(path)
        try:
            return target.read_bytes()
        except OSError as exc:
            raise FilesystemError(
                f"Cannot read {path}: {exc}", path=path, operation="read_file"
            ) from exc

    def write_file(self, path: str, content: bytes | str, *, overwrite: bool = False) -> None:
        target = self._full(path)
        if isinstance(content, str):
            content = content.encode("utf-8")
        if not overwrite and target.exists():
            raise FilesystemError(
                f"File already exists: {path}", path=path, operation="write_file"
            )
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as exc:
            raise FilesystemError(
                f"Cannot write {path}: {exc}", path=path, operation="write_file"
            ) from exc

    def copy_file(self, source: str, destination: str) -> None:
        src = self._full(source)
        dst = self._full(destination)
        if not src.is_file():
            raise FilesystemError(
                f"File not found: {source}", path=source, operation="copy_file"
            )
        if dst.exists():
            raise FilesystemError(
                f"File already exists: {destination}", path=destination, operation="copy_file"
            )
        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, dst)
        except OSError as exc:
            raise FilesystemError(
                f"Cannot copy {source} to {destination}: {exc}",
                path=destination,
                operation="copy_file",
            ) from exc

    def rename_file(self, source: str, destination: str) -> None:
        src = self._full(source)
        dst = self._full(destination)
        if not src.is_file():
            raise FilesystemError(
                f"File not found: {source}", path=source, operation="rename_file"
            )
        if dst.exists():
            raise FilesystemError(
                f"File already exists: {destination}", path=destination, operation="rename_file"
            )
        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
            src.rename(dst)
        except OSError as exc:
            raise FilesystemError(
                f"Cannot rename {source} to {destination}: {exc}",
                path=destination,
                operation="rename_file",
            ) from exc


# ---------------------------------------------------------------------------
# In-memory
# ---------------------------------------------------------------------------


class MemoryFilesystem(TargetFilesystem):
    """A dict-backed filesystem, used by tests and dry runs."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.directories: set[str] = set()

    def _add_parents(self, path: str) -> None:
        self.directories.update(_parents(path))

    def exists(self, path: str) -> bool:
        p = normalize_path(path)
        return p == "" or p in self.files or p in self.directories

    def is_dir(self, path: str) -> bool:
        p = normalize_path(path)
        return p == "" or p in self.directories

    def create_directory(self, path: str) -> None:
        p = normalize_path(path)
        if p in self.files:
            raise FilesystemError(
                f"A file exists at {path}", path=path, operation="create_directory"
            )
        if p:
            self._add_parents(p)
            self.directories.add(p)

    def read_file(self, path: str) -> bytes:
        p = normalize_path(path)
        if p not in self.files:
            raise FilesystemError(f"File not found: {path}", path=path, operation="read_file")
        return self.files[p]

    def write_file(self, path: str, content: bytes | str, *, overwrite: bool = False) -> None:
        p = normalize_path(path)
        if isinstance(content, str):
            content = content.encode("utf-8")
        if p in self.directories or not p:
            raise FilesystemError(
                f"A directory exists at {path}", path=path, operation="write_file"
            )
        if not overwrite and p in self.files:
            raise FilesystemError(
                f"File already exists: {path}", path=path, operation="write_file"
            )
        self._add_parents(p)
        self.files[p] = content

    def copy_file(self, source: str, destination: str) -> None:
        content = self.read_file(source)
        if self.exists(destination):
            raise FilesystemError(
                f"File already exists: {destination}", path=destination, operation="copy_file"
            )
        self.write_file(destination, content)

    def rename_file(self, source: str, destination: str) -> None:
        src = normalize_path(source)
        if src not in self.files:
            raise FilesystemError(
                f"File not found: {source}", path=source, operation="rename_file"
            )
        if self.exists(destination):
            raise FilesystemError(
                f"File already exists: {destination}", path=destination, operation="rename_file"
            )
        dst = normalize_path(destination)
        self._add_parents(dst)
        self.files[dst] = self.files.pop(src)

    def listing(self) -> list[str]:
        """Every file path currently stored, sorted."""
        return sorted(self.files)
