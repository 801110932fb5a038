"""Server entry point assembly.

The entry point is the layout's bootstrap template with three kinds of
generated lines spliced in: one ``require`` per extra dependency, one per
generated model, and one route per generated view.  Nothing checks the
result for duplicate identifiers or conflicting routes.
"""

from __future__ import annotations

from .layouts import Layout
from .model_gen import require_line
from .naming import js_identifier
from .templates import TemplateRenderer


def require_statements(dependencies: list[str], exclude: list[str] | None = None) -> list[str]:
    """One ``const x = require('x');`` per dependency, in request order.

    Packages listed in *exclude* (already required by the bootstrap
    template) are skipped.
    """
    skip = set(exclude or [])
    return [
        require_line(js_identifier(pkg), pkg)
        for pkg in dependencies
        if pkg not in skip
    ]


def assemble_entry_point(
    renderer: TemplateRenderer,
    layout: Layout,
    dependencies: list[str],
    route_snippets: list[str],
    model_requires: list[str] | None = None,
    db_name: str = "",
) -> str:
    """Render the complete entry point source for *layout*."""
    context = {
        "requires": require_statements(dependencies, layout.builtin_requires),
        "model_requires": model_requires or [],
        "routes": [snippet for snippet in route_snippets if snippet],
        "db_name": db_name,
        "static_dir": layout.static_dir,
    }
    return renderer.render(layout.entry_template, context)
