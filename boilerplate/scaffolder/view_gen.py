"""Per-view artifact generation.

Every requested view ``X`` produces three files and one route:

- ``<views_dir>/X.<ext>`` -- markup linking ``/css/XStyles.css`` and ``/js/XScript.js``
- ``<css_dir>/XStyles.css`` -- placeholder stylesheet
- ``<js_dir>/XScript.js`` -- empty script
- an ``app.get('/X', ...)`` snippet that renders view ``X``
"""

from __future__ import annotations

from pathlib import Path

from boilerplate.utils import write_text

from .layouts import Layout
from .naming import normalize_extension, strip_extension
from .templates import TemplateRenderer


class ViewGenerator:
    """Generates view markup, its stylesheet/script pair, and its route."""

    def __init__(self, renderer: TemplateRenderer, layout: Layout) -> None:
        self.renderer = renderer
        self.layout = layout

    def artifact_paths(self, project_root: Path, view_filename: str) -> tuple[Path, Path, Path]:
        """Return ``(view, stylesheet, script)`` paths for *view_filename*."""
        ext = self.layout.view_extension
        view_file = normalize_extension(view_filename, ext)
        view_name = strip_extension(view_file, ext)
        return (
            project_root / self.layout.views_dir / view_file,
            project_root / self.layout.css_dir / f"{view_name}Styles.css",
            project_root / self.layout.js_dir / f"{view_name}Script.js",
        )

    async def generate_view_artifacts(self, project_root: Path, view_filename: str) -> str:
        """Write the three view artifacts and return the route snippet.

        Args:
            project_root: Root of the generated project.
            view_filename: Requested view name, with or without the view
                extension (``"home"`` and ``"home.ejs"`` are equivalent).

        Returns:
            The Express route registration for ``/<view name>`` without a
            trailing newline.
        """
        view_path, css_path, js_path = self.artifact_paths(project_root, view_filename)
        view_name = strip_extension(view_path.name, self.layout.view_extension)
        context = {
            "view_name": view_name,
            "css_file": css_path.name,
            "js_file": js_path.name,
        }

        await self.renderer.render_to_file("views/view.ejs.j2", view_path, context)
        await self.renderer.render_to_file("views/styles.css.j2", css_path, context)
        await write_text(js_path, "")

        return self.renderer.render("views/route.js.j2", context).rstrip("\n")
