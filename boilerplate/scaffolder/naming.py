"""File-name and identifier helpers shared by the generators."""

from __future__ import annotations

import re

# Extensions that are swapped for one another instead of stacked.
_SIBLING_EXTENSIONS: dict[str, str] = {
    ".js": ".css",
    ".css": ".js",
}


def normalize_extension(name: str, extension: str) -> str:
    """Return *name* guaranteed to end in *extension*.

    * Already ends in *extension*: unchanged.
    * Ends in the sibling of *extension* (``.js`` <-> ``.css``): the suffix is
      replaced.
    * Otherwise *extension* is appended.

    Examples::

        normalize_extension("app.js", ".js")    -> "app.js"
        normalize_extension("app.css", ".js")   -> "app.js"
        normalize_extension("app", ".css")      -> "app.css"
        normalize_extension("app.min", ".js")   -> "app.min.js"
    """
    if name.endswith(extension):
        return name
    sibling = _SIBLING_EXTENSIONS.get(extension)
    if sibling and name.endswith(sibling):
        return name[: -len(sibling)] + extension
    return name + extension


def strip_extension(name: str, extension: str) -> str:
    """Drop *extension* from the end of *name* if present (``path.basename(f, ext)``)."""
    base = name.replace("\\", "/").rsplit("/", 1)[-1]
    if extension and base.endswith(extension) and base != extension:
        return base[: -len(extension)]
    return base


def js_identifier(package: str) -> str:
    """Turn an npm package name into a usable JavaScript variable name.

    ``"lodash"`` -> ``"lodash"``, ``"body-parser"`` -> ``"bodyParser"``,
    ``"@scope/pkg"`` -> ``"scopePkg"``.
    """
    parts = [p for p in re.split(r"[^A-Za-z0-9]+", package) if p]
    if not parts:
        return "_"
    ident = parts[0] + "".join(p[:1].upper() + p[1:] for p in parts[1:])
    if ident[0].isdigit():
        ident = "_" + ident
    return ident
