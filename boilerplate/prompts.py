"""Answer collection for a scaffolding run.

Answers come either from an interactive question flow (Rich prompts) or from
a YAML/JSON answers file.  Both produce the same flat record:

    {"project_name": "...", "packages": "a, b", "db_name": "...",
     "<file group key>": "x.js, y.js", ...}

No validation happens here; blank answers simply mean "nothing requested".
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from rich.prompt import Prompt

from boilerplate.scaffolder.layouts import Layout

AskFn = Callable[..., str]


def questions_for(layout: Layout) -> list[tuple[str, str]]:
    """Return ``(answer key, question)`` pairs in the order they are asked."""
    questions = [
        ("project_name", "Enter the name of the directory"),
        ("packages", "Enter npm packages to install (comma separated)"),
    ]
    if layout.uses_database:
        questions.append(("db_name", "Enter the name of the MongoDB database"))
    questions.extend((group.key, group.prompt) for group in layout.file_groups)
    return questions


def collect_answers(layout: Layout, ask: AskFn | None = None) -> dict[str, str]:
    """Ask every question for *layout* and return the raw answers."""
    ask = ask or Prompt.ask
    answers: dict[str, str] = {}
    for key, question in questions_for(layout):
        answers[key] = ask(question, default="", show_default=False) or ""
    return answers


def load_answers(path: str | Path) -> dict[str, Any]:
    """Read an answers record from a YAML or JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file does not hold a mapping.
    """
    file_path = Path(path)
    data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Answers file must contain a mapping: {file_path}")
    return data
