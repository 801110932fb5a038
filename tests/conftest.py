"""Shared pytest fixtures for the boilerplate scaffolder test suite.

Provides reusable fixtures for:
- Layouts and template catalogs
- A scaffolder wired to the bundled templates
- The canonical ``demo`` request
- Mock subprocess helpers
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from boilerplate.scaffolder import (
    ProjectScaffolder,
    ScaffoldRequest,
    TemplateCatalog,
    TemplateRenderer,
    get_layout,
)


# ---------------------------------------------------------------------------
# Layouts & templates
# ---------------------------------------------------------------------------

@pytest.fixture
def fullstack_layout():
    return get_layout("fullstack")


@pytest.fixture
def basic_layout():
    return get_layout("basic")


@pytest.fixture
def split_layout():
    return get_layout("split")


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def empty_catalog() -> TemplateCatalog:
    return TemplateCatalog({})


@pytest.fixture
def sample_catalog() -> TemplateCatalog:
    """A small catalog keyed the way the bundled one is."""
    return TemplateCatalog(
        {
            "client/js/app.js": "console.log('app');\n",
            "client/css/main.css": "body { margin: 0; }\n",
            "partials/header.ejs": "<header></header>\n",
            "routes.js": "module.exports = {};\n",
        }
    )


@pytest.fixture
def scaffolder(sample_catalog, renderer) -> ProjectScaffolder:
    return ProjectScaffolder(catalog=sample_catalog, renderer=renderer)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

@pytest.fixture
def demo_request(tmp_path: Path) -> ScaffoldRequest:
    """``demo`` project: one server file, one view, no extra dependencies."""
    return ScaffoldRequest(
        project_name="demo",
        root_dir=tmp_path,
        layout="fullstack",
        directory_files={
            "server_files": ["app.js"],
            "views_files": ["index.ejs"],
        },
    )


# ---------------------------------------------------------------------------
# Subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
