"""Mongoose model generation for layouts with a ``models/`` directory."""

from __future__ import annotations

from pathlib import Path

from .layouts import Layout
from .naming import normalize_extension, strip_extension
from .templates import TemplateRenderer, capitalize_first


class ModelGenerator:
    """Writes one schema module per requested model file."""

    def __init__(self, renderer: TemplateRenderer, layout: Layout) -> None:
        self.renderer = renderer
        self.layout = layout

    @staticmethod
    def model_name(model_filename: str) -> str:
        """``"user.js"`` -> ``"User"``; only the first character changes case."""
        return capitalize_first(strip_extension(model_filename, ".js"))

    async def generate_model_artifact(self, project_root: Path, model_filename: str) -> str:
        """Write the schema file for *model_filename*.

        Returns:
            The ``require`` line the server entry point uses to load the model.
        """
        filename = normalize_extension(model_filename, ".js")
        await self.renderer.render_to_file(
            "models/model.js.j2",
            project_root / self.layout.models_dir / filename,
            {"model_name": strip_extension(filename, ".js")},
        )
        return require_line(self.model_name(filename), self._relative_from_entry(filename))

    def _relative_from_entry(self, filename: str) -> str:
        """Module path of a model file as seen from the entry point's directory."""
        entry_depth = self.layout.entry_point.count("/")
        up = "../" * entry_depth if entry_depth else "./"
        return f"{up}{self.layout.models_dir}/{filename}"


def require_line(identifier: str, module: str) -> str:
    return f"const {identifier} = require('{module}');"
