"""Tests for the declarative layout registry."""

from __future__ import annotations

import pytest

from boilerplate.scaffolder.layouts import LAYOUTS, FileGroup, Layout, get_layout


pytestmark = pytest.mark.unit


def _group(layout: Layout, key: str) -> FileGroup | None:
    return next((g for g in layout.file_groups if g.key == key), None)


class TestRegistry:
    def test_builtin_layouts(self):
        assert set(LAYOUTS) == {"basic", "fullstack", "split"}

    def test_get_layout(self):
        assert get_layout("basic").name == "basic"

    def test_unknown_layout(self):
        with pytest.raises(ValueError, match="Unknown layout 'nope'"):
            get_layout("nope")


class TestFullstack:
    def test_directories(self, fullstack_layout):
        assert fullstack_layout.directories == [
            "client",
            "client/js",
            "client/css",
            "server",
            "server/views",
            "server/views/partials",
            "models",
        ]

    def test_group_conventions(self, fullstack_layout):
        assert _group(fullstack_layout, "js_files").extension == ".js"
        assert _group(fullstack_layout, "css_files").extension == ".css"
        assert _group(fullstack_layout, "views_files").role == "views"
        assert _group(fullstack_layout, "model_files").role == "models"

    def test_catalog_prefixes(self, fullstack_layout):
        assert _group(fullstack_layout, "server_files").resolved_prefix == ""
        assert _group(fullstack_layout, "client_files").resolved_prefix == ""
        assert _group(fullstack_layout, "js_files").resolved_prefix == "client/js"
        assert _group(fullstack_layout, "partials_files").resolved_prefix == "partials"

    def test_manifest_at_root(self, fullstack_layout):
        assert fullstack_layout.manifest_dir == ""
        assert fullstack_layout.manifest_main == "server/index.js"

    def test_defaults(self, fullstack_layout):
        assert fullstack_layout.default_dependencies == ["express", "ejs", "mongoose"]
        assert fullstack_layout.uses_database is True


class TestSplit:
    def test_manifest_nested_in_server(self, split_layout):
        assert split_layout.manifest_dir == "server"
        assert split_layout.manifest_main == "index.js"

    def test_no_models(self, split_layout):
        assert _group(split_layout, "model_files") is None
        assert "models" not in split_layout.directories


class TestBasic:
    def test_root_group(self, basic_layout):
        assert _group(basic_layout, "root_files").directory == ""

    def test_all_groups_plain(self, basic_layout):
        assert {g.role for g in basic_layout.file_groups} == {"plain"}


class TestCustomLayout:
    def test_minimal_layout(self):
        layout = Layout(
            name="tiny",
            directories=["src"],
            file_groups=[FileGroup(key="src_files", directory="src", prompt="?")],
            entry_point="src/index.js",
            entry_template="entry/basic.js.j2",
        )
        assert _group(layout, "src_files") is not None
        assert _group(layout, "missing") is None
        assert layout.manifest_main == "src/index.js"
