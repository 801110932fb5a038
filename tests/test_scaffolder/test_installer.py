"""Tests for dependency installation.

Subprocesses are mocked; no package manager is ever invoked.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from boilerplate.config import InstallConfig
from boilerplate.scaffolder.installer import DependencyInstaller, InstallError


pytestmark = pytest.mark.unit


class TestInstallError:
    def test_message(self):
        err = InstallError(["npm", "install", "x"], 1, "E404")
        assert "npm install x" in str(err)
        assert "status 1" in str(err)
        assert err.returncode == 1


class TestInstallDependencies:
    async def test_runs_in_project_directory(self, tmp_path: Path):
        installer = DependencyInstaller()
        with patch(
            "boilerplate.scaffolder.installer.run_command",
            new=AsyncMock(return_value=(0, "added 3 packages", "")),
        ) as run:
            ok = await installer.install_dependencies(tmp_path, ["express", "ejs"])

        assert ok is True
        run.assert_awaited_once_with(
            ["npm", "install", "express", "ejs"], cwd=tmp_path, timeout=600
        )

    async def test_dev_packages_second_command(self, tmp_path: Path):
        installer = DependencyInstaller()
        with patch(
            "boilerplate.scaffolder.installer.run_command",
            new=AsyncMock(return_value=(0, "", "")),
        ) as run:
            await installer.install_dependencies(tmp_path, ["express"], ["nodemon"])

        commands = [call.args[0] for call in run.await_args_list]
        assert commands == [
            ["npm", "install", "express"],
            ["npm", "install", "--save-dev", "nodemon"],
        ]

    async def test_failure_is_reported_not_raised(self, tmp_path: Path):
        installer = DependencyInstaller()
        with patch(
            "boilerplate.scaffolder.installer.run_command",
            new=AsyncMock(return_value=(1, "", "npm ERR! 404")),
        ) as run:
            ok = await installer.install_dependencies(tmp_path, ["nope"], ["nodemon"])

        assert ok is False
        # No retry and no dev install after a failure
        assert run.await_count == 1

    async def test_missing_executable_is_reported(self, tmp_path: Path):
        installer = DependencyInstaller(InstallConfig(package_manager="definitely-not-npm-xyz"))
        with patch(
            "boilerplate.scaffolder.installer.run_command",
            new=AsyncMock(side_effect=FileNotFoundError("definitely-not-npm-xyz")),
        ):
            ok = await installer.install_dependencies(tmp_path, ["express"])
        assert ok is False

    async def test_skip(self, tmp_path: Path):
        installer = DependencyInstaller(InstallConfig(skip=True))
        with (
            patch("boilerplate.scaffolder.installer.run_command", new=AsyncMock()) as run,
            patch("boilerplate.scaffolder.installer.print_warning") as warn,
        ):
            ok = await installer.install_dependencies(tmp_path, ["express"])
        assert ok is True
        run.assert_not_awaited()
        warn.assert_called_once()
        assert "npm install" in warn.call_args.args[0]

    async def test_nothing_to_install(self, tmp_path: Path):
        installer = DependencyInstaller()
        with patch("boilerplate.scaffolder.installer.run_command", new=AsyncMock()) as run:
            assert await installer.install_dependencies(tmp_path, []) is True
        run.assert_not_awaited()

    async def test_does_not_change_working_directory(self, tmp_path: Path, mock_subprocess):
        before = os.getcwd()
        proc = mock_subprocess(stdout="ok")
        with patch("asyncio.create_subprocess_exec", return_value=proc) as create:
            await DependencyInstaller().install_dependencies(tmp_path, ["express"])
        assert os.getcwd() == before
        assert create.call_args.kwargs["cwd"] == str(tmp_path)


class TestDispatch:
    async def test_returns_task(self, tmp_path: Path):
        installer = DependencyInstaller()
        with patch(
            "boilerplate.scaffolder.installer.run_command",
            new=AsyncMock(return_value=(0, "", "")),
        ):
            task = installer.dispatch(tmp_path, ["express"])
            assert isinstance(task, asyncio.Task)
            assert await task is True
