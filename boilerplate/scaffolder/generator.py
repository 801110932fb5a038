"""Main scaffolding orchestrator.

Takes a ``ScaffoldRequest`` and generates the project tree for its layout:
directories, requested files (catalogued or empty), per-view and per-model
artifacts, the server entry point, and ``package.json``.  Writes happen one
after another in program order; the first filesystem error stops the run and
leaves whatever was already written in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from boilerplate.utils import ensure_dir, split_list, write_text

from .entry_gen import assemble_entry_point
from .layouts import FileGroup, Layout, get_layout
from .manifest_gen import write_manifest
from .model_gen import ModelGenerator
from .naming import normalize_extension
from .templates import TemplateCatalog, TemplateRenderer
from .view_gen import ViewGenerator

__all__ = [
    "ProjectScaffolder",
    "ScaffoldError",
    "ScaffoldRequest",
    "ScaffoldResult",
    "normalize_extension",
]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when a directory or file cannot be written."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


# ---------------------------------------------------------------------------
# Request / result models
# ---------------------------------------------------------------------------


class ScaffoldRequest(BaseModel):
    """Everything needed to generate one project."""

    project_name: str = Field(..., min_length=1)
    root_dir: Path = Field(default_factory=Path.cwd)
    layout: str = Field(default="fullstack")
    dependencies: list[str] = Field(default_factory=list)
    directory_files: dict[str, list[str]] = Field(
        default_factory=dict,
        description="File-group key (e.g. 'server_files') -> requested file names",
    )
    db_name: str = Field(default="")

    @field_validator("project_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be blank")
        return value

    @field_validator("db_name")
    @classmethod
    def _strip_db_name(cls, value: str) -> str:
        return value.strip()

    @field_validator("dependencies")
    @classmethod
    def _clean_dependencies(cls, value: list[str]) -> list[str]:
        seen: list[str] = []
        for pkg in split_list(value):
            if pkg not in seen:
                seen.append(pkg)
        return seen

    @field_validator("directory_files")
    @classmethod
    def _clean_files(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        return {key: split_list(names) for key, names in value.items()}

    @classmethod
    def from_answers(
        cls,
        answers: dict[str, Any],
        layout: Layout,
        root_dir: str | Path | None = None,
    ) -> "ScaffoldRequest":
        """Build a request from a raw answers record.

        Values may be comma-separated strings or lists.  Keys that do not
        belong to *layout* are ignored.
        """
        return cls(
            project_name=str(answers.get("project_name", "")),
            root_dir=Path(root_dir) if root_dir else Path.cwd(),
            layout=layout.name,
            dependencies=split_list(answers.get("packages")),
            directory_files={
                group.key: split_list(answers.get(group.key)) for group in layout.file_groups
            },
            db_name=str(answers.get("db_name") or ""),
        )

    def files_for(self, key: str) -> list[str]:
        return self.directory_files.get(key, [])


class ScaffoldResult(BaseModel):
    """Summary of a finished scaffolding run."""

    project_path: Path
    written_files: list[Path] = Field(default_factory=list)
    routes: list[str] = Field(default_factory=list)
    packages: list[str] = Field(default_factory=list)
    dev_packages: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectScaffolder:
    """Generates a project tree from a ``ScaffoldRequest``.

    Pipeline:
    1. Project directory and the layout's directory tree
    2. Requested files per file group (catalogued content or empty)
    3. View artifacts (markup, stylesheet, script, route)
    4. Model schemas
    5. Server entry point
    6. ``package.json``
    """

    def __init__(
        self,
        catalog: TemplateCatalog | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else TemplateCatalog.default()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self, request: ScaffoldRequest) -> ScaffoldResult:
        """Generate the complete project for *request*.

        Returns:
            A ``ScaffoldResult`` describing the project root and every file
            that was written.

        Raises:
            ScaffoldError: On the first directory or file that cannot be
                written.  Earlier writes are kept.
        """
        layout = get_layout(request.layout)
        project_root = Path(request.root_dir) / request.project_name
        result = ScaffoldResult(project_path=project_root)

        # 1. Directory tree
        await self.create_directory_tree(project_root, ["", *layout.directories])

        # 2. Requested files
        for group in layout.file_groups:
            if group.role != "plain":
                continue
            for filename in request.files_for(group.key):
                path = await self.write_requested_file(
                    project_root,
                    group.directory,
                    _group_filename(group, filename),
                    self.catalog,
                    catalog_prefix=group.resolved_prefix,
                )
                if path is not None:
                    result.written_files.append(path)

        # 3. Views
        views = ViewGenerator(self.renderer, layout)
        for group in _groups_with_role(layout, "views"):
            for filename in request.files_for(group.key):
                route = await self._guard(
                    project_root / layout.views_dir,
                    views.generate_view_artifacts(project_root, filename),
                )
                result.routes.append(route)
                result.written_files.extend(views.artifact_paths(project_root, filename))

        # 4. Models
        models = ModelGenerator(self.renderer, layout)
        model_requires: list[str] = []
        for group in _groups_with_role(layout, "models"):
            for filename in request.files_for(group.key):
                line = await self._guard(
                    project_root / layout.models_dir,
                    models.generate_model_artifact(project_root, filename),
                )
                model_requires.append(line)
                result.written_files.append(
                    project_root / layout.models_dir / normalize_extension(filename, ".js")
                )

        # 5. Entry point
        entry_source = assemble_entry_point(
            self.renderer,
            layout,
            request.dependencies,
            result.routes,
            model_requires=model_requires,
            db_name=request.db_name or request.project_name,
        )
        entry_path = project_root / layout.entry_point
        result.written_files.append(
            await self._guard(entry_path, write_text(entry_path, entry_source))
        )

        # 6. Manifest
        result.written_files.append(
            await self._guard(
                project_root / layout.manifest_dir,
                write_manifest(project_root, request.project_name, layout, request.dependencies),
            )
        )

        result.packages = [*layout.default_dependencies]
        result.packages += [p for p in request.dependencies if p not in result.packages]
        result.dev_packages = list(layout.dev_dependencies)
        return result

    async def create_directory_tree(self, root_path: Path, directory_keys: list[str]) -> list[Path]:
        """Create every directory in *directory_keys* below *root_path*.

        Parents are created as needed and existing directories are left
        alone, so the call is idempotent.
        """
        created: list[Path] = []
        for key in directory_keys:
            target = Path(root_path) / key if key else Path(root_path)
            try:
                created.append(ensure_dir(target))
            except OSError as exc:
                raise ScaffoldError(target, exc.strerror or str(exc)) from exc
            except ValueError as exc:
                raise ScaffoldError(target, str(exc)) from exc
        return created

    async def write_requested_file(
        self,
        base_path: Path,
        relative_dir: str,
        filename: str,
        catalog: TemplateCatalog,
        catalog_prefix: str | None = None,
    ) -> Path | None:
        """Write one requested file with its catalogued content.

        The catalog key is ``<prefix>/<filename>`` where the prefix defaults
        to *relative_dir*; an empty prefix looks up the bare file name.  A
        missing key writes an empty file.  Existing files are overwritten.

        Returns:
            The written path, or ``None`` if *filename* is blank.
        """
        name = filename.strip()
        if not name:
            return None

        prefix = relative_dir if catalog_prefix is None else catalog_prefix
        key = f"{prefix}/{name}" if prefix else name
        target = Path(base_path) / relative_dir / name if relative_dir else Path(base_path) / name
        return await self._guard(target, write_text(target, catalog.lookup(key)))

    # -- Internal ----------------------------------------------------------

    @staticmethod
    async def _guard(path: Path, operation: Any) -> Any:
        """Await *operation*, turning write errors into ``ScaffoldError``.

        ``ValueError`` covers names the OS layer rejects before any syscall,
        such as an embedded NUL byte.
        """
        try:
            return await operation
        except OSError as exc:
            raise ScaffoldError(Path(exc.filename or path), exc.strerror or str(exc)) from exc
        except ValueError as exc:
            raise ScaffoldError(path, str(exc)) from exc


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _groups_with_role(layout: Layout, role: str) -> list[FileGroup]:
    return [group for group in layout.file_groups if group.role == role]


def _group_filename(group: FileGroup, filename: str) -> str:
    """Apply the group's forced extension, if it has one."""
    if group.extension and filename.strip():
        return normalize_extension(filename.strip(), group.extension)
    return filename
