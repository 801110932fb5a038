"""Declarative project layouts.

A ``Layout`` captures everything that differs between project shapes: the
directory keys to create, which prompts feed which directory, how file names
are normalised, where the entry point and ``package.json`` live, and the
fixed dependency set.  The scaffolding pipeline itself is shared.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


FileRole = Literal["plain", "views", "models"]


class FileGroup(BaseModel):
    """One prompt -> one directory of requested files."""

    key: str = Field(..., description="Answers field holding the file names")
    directory: str = Field(..., description="Directory relative to the project root ('' for the root)")
    prompt: str
    extension: str | None = Field(default=None, description="Extension forced on every name")
    catalog_prefix: str | None = Field(
        default=None,
        description="Catalog key prefix; defaults to the directory, '' means bare file name",
    )
    role: FileRole = "plain"

    @property
    def resolved_prefix(self) -> str:
        return self.directory if self.catalog_prefix is None else self.catalog_prefix


class Layout(BaseModel):
    """Directory and naming conventions for one kind of generated project."""

    name: str
    description: str = ""
    directories: list[str]
    file_groups: list[FileGroup]
    entry_point: str = Field(..., description="Server entry file, relative to the project root")
    entry_template: str = Field(..., description="Jinja2 template for the entry file")
    manifest_dir: str = Field(default="", description="Directory holding package.json")
    views_dir: str = "views"
    css_dir: str = "client/css"
    js_dir: str = "client/js"
    models_dir: str = "models"
    view_extension: str = ".ejs"
    static_dir: str = "client"
    uses_database: bool = False
    default_dependencies: list[str] = Field(default_factory=lambda: ["express"])
    dev_dependencies: dict[str, str] = Field(default_factory=dict)
    builtin_requires: list[str] = Field(default_factory=lambda: ["express"])

    @property
    def manifest_main(self) -> str:
        """Entry point path as seen from the manifest directory."""
        prefix = f"{self.manifest_dir}/" if self.manifest_dir else ""
        if prefix and self.entry_point.startswith(prefix):
            return self.entry_point[len(prefix):]
        return self.entry_point


# ---------------------------------------------------------------------------
# Built-in layouts
# ---------------------------------------------------------------------------

BASIC = Layout(
    name="basic",
    description="Single Express app with data/, public/ and views/ folders",
    directories=["data", "public", "views", "views/partials"],
    file_groups=[
        FileGroup(
            key="root_files",
            directory="",
            prompt="Enter the names of files to create in the root directory (comma separated)",
        ),
        FileGroup(
            key="data_files",
            directory="data",
            prompt="Enter the names of files to create in the data directory (comma separated)",
        ),
        FileGroup(
            key="public_files",
            directory="public",
            prompt="Enter the names of files to create in the public directory (comma separated)",
        ),
        FileGroup(
            key="views_files",
            directory="views",
            prompt="Enter the names of files to create in the views directory (comma separated)",
        ),
    ],
    entry_point="index.js",
    entry_template="entry/basic.js.j2",
    views_dir="views",
    static_dir="public",
)

_CLIENT_SERVER_GROUPS: list[FileGroup] = [
    FileGroup(
        key="server_files",
        directory="server",
        prompt="Enter the names of files to create in the server directory (comma separated)",
        catalog_prefix="",
    ),
    FileGroup(
        key="client_files",
        directory="client",
        prompt="Enter the names of files to create in the client directory (comma separated)",
        catalog_prefix="",
    ),
    FileGroup(
        key="js_files",
        directory="client/js",
        prompt="Enter the names of files to create in the client/js directory (comma separated)",
        extension=".js",
    ),
    FileGroup(
        key="css_files",
        directory="client/css",
        prompt="Enter the names of files to create in the client/css directory (comma separated)",
        extension=".css",
    ),
    FileGroup(
        key="views_files",
        directory="server/views",
        prompt="Enter the names of files to create in the server/views directory (comma separated)",
        role="views",
    ),
    FileGroup(
        key="partials_files",
        directory="server/views/partials",
        prompt=(
            "Enter the names of files to create in the server/views/partials "
            "directory (comma separated)"
        ),
        catalog_prefix="partials",
    ),
]

FULLSTACK = Layout(
    name="fullstack",
    description="client/ + server/ + models/ with EJS views and MongoDB",
    directories=[
        "client",
        "client/js",
        "client/css",
        "server",
        "server/views",
        "server/views/partials",
        "models",
    ],
    file_groups=[
        *_CLIENT_SERVER_GROUPS,
        FileGroup(
            key="model_files",
            directory="models",
            prompt="Enter the names of files to create in the models directory (comma separated)",
            extension=".js",
            role="models",
        ),
    ],
    entry_point="server/index.js",
    entry_template="entry/fullstack.js.j2",
    views_dir="server/views",
    uses_database=True,
    default_dependencies=["express", "ejs", "mongoose"],
    dev_dependencies={"nodemon": "^2.0.12"},
    builtin_requires=["express", "mongoose", "path"],
)

SPLIT = Layout(
    name="split",
    description="client/ + server/ where the server carries its own package.json",
    directories=[
        "client",
        "client/js",
        "client/css",
        "server",
        "server/views",
        "server/views/partials",
    ],
    file_groups=list(_CLIENT_SERVER_GROUPS),
    entry_point="server/index.js",
    entry_template="entry/split.js.j2",
    manifest_dir="server",
    views_dir="server/views",
    default_dependencies=["express", "ejs"],
    dev_dependencies={"nodemon": "^2.0.12"},
    builtin_requires=["express", "path"],
)

LAYOUTS: dict[str, Layout] = {layout.name: layout for layout in (BASIC, FULLSTACK, SPLIT)}


def get_layout(name: str) -> Layout:
    """Look up a registered layout by name.

    Raises:
        ValueError: If no layout with that name exists.
    """
    try:
        return LAYOUTS[name]
    except KeyError:
        known = ", ".join(sorted(LAYOUTS))
        raise ValueError(f"Unknown layout '{name}' (available: {known})") from None
