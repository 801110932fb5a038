"""Boilerplate scaffolder configuration.

Typed settings for a scaffolding run.  All settings use Pydantic v2 models so
they can be validated at construction time and serialised to/from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class InstallConfig(BaseModel):
    """How dependencies are installed into the generated project."""

    package_manager: str = Field(default="npm", description="Executable used to install packages")
    install_args: list[str] = Field(default=["install"])
    dev_flag: str = Field(default="--save-dev")
    timeout: int = Field(default=600, ge=10, description="Per-command timeout in seconds")
    skip: bool = Field(default=False, description="Do not run the package manager at all")

    def command(self, packages: list[str], *, dev: bool = False) -> list[str]:
        """Return the argv that installs *packages*."""
        cmd = [self.package_manager, *self.install_args]
        if dev:
            cmd.append(self.dev_flag)
        return cmd + list(packages)


class Config(BaseModel):
    """Global scaffolder configuration.

    Instances are typically created once by the CLI entry point and then
    passed to the scaffolder and installer.
    """

    layout: str = Field(default="fullstack")
    catalog_path: Path | None = Field(default=None)
    install: InstallConfig = Field(default_factory=InstallConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            BP_LAYOUT, BP_CATALOG, BP_PACKAGE_MANAGER, BP_INSTALL_TIMEOUT,
            BP_SKIP_INSTALL.
        """
        install_kwargs: dict[str, Any] = {}
        if os.environ.get("BP_PACKAGE_MANAGER"):
            install_kwargs["package_manager"] = os.environ["BP_PACKAGE_MANAGER"]
        if os.environ.get("BP_INSTALL_TIMEOUT"):
            install_kwargs["timeout"] = int(os.environ["BP_INSTALL_TIMEOUT"])
        if os.environ.get("BP_SKIP_INSTALL"):
            install_kwargs["skip"] = os.environ["BP_SKIP_INSTALL"].strip().lower() in (
                "1",
                "true",
                "yes",
            )

        catalog = os.environ.get("BP_CATALOG")
        return cls(
            layout=os.environ.get("BP_LAYOUT", "fullstack"),
            catalog_path=Path(catalog) if catalog else None,
            install=InstallConfig(**install_kwargs),
        )
