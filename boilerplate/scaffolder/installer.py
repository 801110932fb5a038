"""Package-manager invocation for a freshly generated project.

Installation runs in the project directory through an explicit ``cwd``; the
scaffolder's own working directory is never changed.  A failed install is
reported and left at that: nothing is retried and no generated file is
touched.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.markup import escape

from boilerplate.config import InstallConfig
from boilerplate.utils import console, print_error, print_success, print_warning, run_command


class InstallError(Exception):
    """Raised when the package manager exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"'{' '.join(command)}' exited with status {returncode}: {stderr or 'no output'}"
        )


class DependencyInstaller:
    """Runs the configured package manager inside a project directory."""

    def __init__(self, config: InstallConfig | None = None) -> None:
        self.config = config or InstallConfig()

    async def install_dependencies(
        self,
        project_path: Path,
        package_names: list[str],
        dev_packages: list[str] | None = None,
    ) -> bool:
        """Install *package_names* (and *dev_packages*) into *project_path*.

        Returns:
            ``True`` when every command succeeded, ``False`` otherwise.  Errors
            are printed, never raised.
        """
        if self.config.skip:
            print_warning(
                "Dependency installation skipped; run "
                f"'{self.config.package_manager} install' in {escape(str(project_path))}"
            )
            return True

        try:
            if package_names:
                await self._run(self.config.command(package_names), project_path)
            if dev_packages:
                await self._run(self.config.command(dev_packages, dev=True), project_path)
        except (InstallError, OSError) as exc:
            print_error(f"Error installing packages: {escape(str(exc))}")
            return False

        print_success(f"Installed packages in {project_path}")
        return True

    def dispatch(
        self,
        project_path: Path,
        package_names: list[str],
        dev_packages: list[str] | None = None,
    ) -> asyncio.Task[bool]:
        """Start installation in the background and return the task handle.

        Must be called from a running event loop.
        """
        return asyncio.create_task(
            self.install_dependencies(project_path, package_names, dev_packages)
        )

    async def _run(self, command: list[str], cwd: Path) -> str:
        console.print(f"  [cyan]$[/cyan] {escape(' '.join(command))}")
        returncode, stdout, stderr = await run_command(
            command, cwd=cwd, timeout=self.config.timeout
        )
        if stdout:
            console.print(stdout, style="dim", markup=False, highlight=False)
        if returncode != 0:
            raise InstallError(command, returncode, stderr)
        if stderr:
            console.print(stderr, style="dim", markup=False, highlight=False)
        return stdout
