"""Boilerplate scaffolder -- generates Express web-app skeletons.

This module takes a ``ScaffoldRequest`` (built from interactive answers or an
answers file) and writes the project tree for one of the declarative layouts
in :mod:`boilerplate.scaffolder.layouts`.

Quick usage::

    from boilerplate.scaffolder import ProjectScaffolder, ScaffoldRequest

    request = ScaffoldRequest(
        project_name="demo",
        root_dir="/tmp/output",
        layout="fullstack",
        directory_files={"server_files": ["app.js"], "views_files": ["index"]},
    )
    result = await ProjectScaffolder().generate(request)
"""

from boilerplate.scaffolder.generator import (
    ProjectScaffolder,
    ScaffoldError,
    ScaffoldRequest,
    ScaffoldResult,
)
from boilerplate.scaffolder.installer import DependencyInstaller, InstallError
from boilerplate.scaffolder.layouts import LAYOUTS, FileGroup, Layout, get_layout
from boilerplate.scaffolder.naming import normalize_extension
from boilerplate.scaffolder.templates import TemplateCatalog, TemplateRenderer

__all__ = [
    "LAYOUTS",
    "DependencyInstaller",
    "FileGroup",
    "InstallError",
    "Layout",
    "ProjectScaffolder",
    "ScaffoldError",
    "ScaffoldRequest",
    "ScaffoldResult",
    "TemplateCatalog",
    "TemplateRenderer",
    "get_layout",
    "normalize_extension",
]
