"""Template store and ``${token}`` substitution for package scaffolding.

Templates live under ``laravel_package_cli/scaffolder/templates/`` as
``<logical path>.stub`` files.  They are located through a Jinja2
``FileSystemLoader`` but never compiled: the bundled PHP/JSON/XML bodies are
plain text with ``${token}`` placeholders, and substitution is a literal
string replacement.  There are no conditionals, loops or escaping rules.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from jinja2 import TemplateNotFound as JinjaTemplateNotFound

from .errors import TemplateNotFoundError
from .metadata import PackageMetadata


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".stub"

_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(frozen=True)
class TemplateAsset:
    """A template body addressed by its logical path."""

    path: str
    content: str

    def placeholders(self) -> set[str]:
        return find_placeholders(self.content)


# ---------------------------------------------------------------------------
# TemplateStore
# ---------------------------------------------------------------------------


class TemplateStore:
    """Read-only access to the bundled template set.

    Logical paths omit the ``.stub`` suffix: ``"config/config.php"`` maps to
    ``templates/config/config.php.stub``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.loader = FileSystemLoader(str(self.template_dir), encoding="utf-8")
        self.env = Environment(loader=self.loader, keep_trailing_newline=True)

    def read(self, logical_path: str) -> TemplateAsset:
        """Return the raw template for *logical_path*.

        Raises:
            TemplateNotFoundError: If the path is not part of the bundle.
        """
        name = logical_path.lstrip("/") + TEMPLATE_SUFFIX
        try:
            source, _filename, _uptodate = self.loader.get_source(self.env, name)
        except JinjaTemplateNotFound as exc:
            raise TemplateNotFoundError(logical_path) from exc
        return TemplateAsset(path=logical_path, content=source)

    def read_bytes(self, logical_path: str) -> bytes:
        return self.read(logical_path).content.encode("utf-8")

    def available(self) -> list[str]:
        """List every logical path the store can serve, sorted."""
        return sorted(
            name[: -len(TEMPLATE_SUFFIX)]
            for name in self.loader.list_templates()
            if name.endswith(TEMPLATE_SUFFIX)
        )

    def __contains__(self, logical_path: str) -> bool:
        try:
            self.read(logical_path)
        except TemplateNotFoundError:
            return False
        return True


# ---------------------------------------------------------------------------
# Substitution
# ---------------------------------------------------------------------------


def render(body: str, tokens: PackageMetadata | Mapping[str, str]) -> str:
    """Replace every literal ``${token}`` in *body* with its value.

    Placeholders with no matching token are left untouched.  Token values
    never contain placeholders themselves, so the order of replacement does
    not matter and a rendered body renders to itself.
    """
    if isinstance(tokens, PackageMetadata):
        tokens = tokens.as_tokens()
    for token, value in tokens.items():
        body = body.replace("${" + token + "}", str(value))
    return body


def find_placeholders(body: str) -> set[str]:
    """Return the names of all ``${...}`` placeholders still in *body*."""
    return set(_PLACEHOLDER_RE.findall(body))
