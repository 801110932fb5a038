"""``package.json`` generation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from boilerplate.utils import save_json

from .layouts import Layout

MANIFEST_NAME = "package.json"


def build_manifest(project_name: str, layout: Layout, dependencies: list[str]) -> dict[str, Any]:
    """Build the package descriptor for a generated project.

    The layout's default dependencies are always present.  User packages are
    added on top; naming a default again neither removes nor re-versions it.
    """
    deps: dict[str, str] = {pkg: "*" for pkg in layout.default_dependencies}
    for pkg in dependencies:
        deps.setdefault(pkg, "*")

    main = layout.manifest_main
    scripts = {"start": f"node {main}"}
    if "nodemon" in layout.dev_dependencies:
        scripts["dev"] = f"nodemon {main}"

    return {
        "name": project_name,
        "version": "1.0.0",
        "description": "Project",
        "main": main,
        "scripts": scripts,
        "dependencies": deps,
        "devDependencies": dict(layout.dev_dependencies),
        "author": "",
        "license": "ISC",
    }


async def write_manifest(
    project_root: Path,
    project_name: str,
    layout: Layout,
    dependencies: list[str],
) -> Path:
    """Write ``package.json`` into the layout's manifest directory."""
    manifest = build_manifest(project_name, layout, dependencies)
    return await save_json(manifest, project_root / layout.manifest_dir / MANIFEST_NAME)
