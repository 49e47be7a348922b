"""Copy a template into the target filesystem and render it in place."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import FilesystemError
from .filesystem import TargetFilesystem
from .metadata import PackageMetadata
from .templates import TemplateStore, render


DEFAULT_STAGING_SUFFIX = ".stub"


@dataclass(frozen=True)
class GeneratedFile:
    """A file written by the generator."""

    path: str
    content: str

    @property
    def is_empty(self) -> bool:
        return self.content == ""


class FileMaterializer:
    """Writes rendered templates through a staging file.

    Each materialization is three observable filesystem steps: the raw
    template is copied to ``<destination><suffix>``, the staged copy is read
    back, rendered and overwritten, then renamed to *destination*.  There is
    no rollback; a failure leaves the staged file behind.
    """

    def __init__(
        self,
        filesystem: TargetFilesystem,
        store: TemplateStore,
        staging_suffix: str = DEFAULT_STAGING_SUFFIX,
    ) -> None:
        self.filesystem = filesystem
        self.store = store
        self.staging_suffix = staging_suffix

    def materialize(
        self, template_path: str, destination: str, metadata: PackageMetadata
    ) -> GeneratedFile:
        """Render *template_path* to *destination*.

        Raises:
            TemplateNotFoundError: If the template is not in the store.
            FilesystemError: If any write, read-back or rename fails.
        """
        staging = destination + self.staging_suffix

        # (a) copy the raw template
        self.filesystem.write_file(staging, self.store.read_bytes(template_path))

        # (b) render in place
        if not self.filesystem.exists(staging):
            raise FilesystemError(
                f"Staged file vanished: {staging}", path=staging, operation="read_file"
            )
        raw = self.filesystem.read_file(staging).decode("utf-8")
        content = render(raw, metadata)
        self.filesystem.write_file(staging, content, overwrite=True)

        # (c) finalize the name
        self.filesystem.rename_file(staging, destination)

        return GeneratedFile(path=destination, content=content)

    def write_empty(self, destination: str) -> GeneratedFile:
        """Write an empty, untemplated file (``LICENSE``, ``.gitkeep``)."""
        self.filesystem.write_file(destination, b"")
        return GeneratedFile(path=destination, content="")
