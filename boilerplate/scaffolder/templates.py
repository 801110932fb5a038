"""Template sources for project scaffolding.

Two kinds of content end up in a generated project:

* **Catalogued starter files** -- literal content looked up by a relative
  key such as ``"client/js/app.js"`` or ``"partials/header.ejs"``.  These
  live in a ``TemplateCatalog`` (a plain read-only mapping; a missing key is
  simply empty content).
* **Generated artifacts** -- the server entry point, view markup, model
  schemas and route snippets.  These are Jinja2 templates bundled under
  ``boilerplate/scaffolder/templates/`` and rendered by ``TemplateRenderer``.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml
from jinja2 import Environment, FileSystemLoader, select_autoescape

from boilerplate.utils import write_text


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
_DEFAULT_CATALOG = _DEFAULT_TEMPLATE_DIR / "catalog.json"


# ---------------------------------------------------------------------------
# TemplateCatalog
# ---------------------------------------------------------------------------


class TemplateCatalog(Mapping[str, str]):
    """Read-only lookup table from relative path key to literal file content."""

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = {str(k): str(v) for k, v in (entries or {}).items()}

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, key: str) -> str:
        """Return the content stored under *key*, or ``""`` when absent."""
        return self._entries.get(key, "")

    @classmethod
    def from_file(cls, path: str | Path) -> "TemplateCatalog":
        """Load a catalog from a JSON or YAML mapping file."""
        file_path = Path(path)
        raw = file_path.read_text(encoding="utf-8")
        if file_path.suffix.lower() in (".yml", ".yaml"):
            data = yaml.safe_load(raw) or {}
        else:
            data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"Template catalog must be a mapping: {file_path}")
        return cls(data)

    @classmethod
    def default(cls) -> "TemplateCatalog":
        """The starter catalog shipped with the package."""
        return cls.from_file(_DEFAULT_CATALOG)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the bundled Jinja2 templates for generated artifacts."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["capitalize_first"] = capitalize_first

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"entry/fullstack.js.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.  Existing files are
        overwritten.
        """
        content = self.render(template_path, context)
        return await write_text(Path(output_path), content)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def capitalize_first(value: str) -> str:
    """Upper-case the first character only (``"userPost"`` -> ``"UserPost"``)."""
    return value[:1].upper() + value[1:]

