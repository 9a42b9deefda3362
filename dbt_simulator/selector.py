"""Node selection (``--select``) over a model set.

Supported token forms, checked in this order:
    path:<substring>     path contains the substring
    <folder>.*           path contains /folder/
    a.b.name             every folder in /a/ and /b/, name equal or contained
    <token>              name equal, name contained, /token/ in path,
                         or token anywhere in the path

Tokens are OR'd: a model is selected when any token matches.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from dbt_simulator.domain import Model

SELECT_FLAGS = ("--select", "-s")
PATH_METHOD = "path:"
FOLDER_WILDCARD = ".*"


def parse_selector_args(args: Sequence[str]) -> list[str]:
    """
    Collect selector tokens from command arguments.

    ``-s a,b --select c`` and ``--select=a,b`` are both accepted; values are
    comma-split and blank tokens dropped. A trailing flag with no value is
    ignored.
    """
    tokens: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        value: str | None = None
        if arg in SELECT_FLAGS:
            if i + 1 < len(args):
                value = args[i + 1]
                i += 1
        elif arg.startswith("--select="):
            value = arg[len("--select=") :]

        if value:
            tokens.extend(t.strip() for t in value.split(",") if t.strip())
        i += 1
    return tokens


def matches_selector(model: Model, selector: str) -> bool:
    sel = selector.strip()
    if not sel:
        return False

    if sel.startswith(PATH_METHOD):
        return sel[len(PATH_METHOD) :] in model.path

    if sel.endswith(FOLDER_WILDCARD):
        folder = sel[: -len(FOLDER_WILDCARD)]
        return f"/{folder}/" in model.path

    if "." in sel:
        parts = [p for p in sel.split(".") if p]
        name = parts[-1] if parts else ""
        folders = parts[:-1]
        folder_match = all(f"/{f}/" in model.path for f in folders)
        name_match = not name or model.name == name or name in model.name
        return folder_match and name_match

    # Name, then folder segment, then raw path
    if model.name == sel or sel in model.name:
        return True
    if f"/{sel}/" in model.path:
        return True
    return sel in model.path


def filter_models(models: Sequence[Model], selectors: Iterable[str]) -> list[Model]:
    """Models matching any selector; every model when there are none."""
    selectors = list(selectors)
    if not selectors:
        return list(models)
    return [m for m in models if any(matches_selector(m, s) for s in selectors)]
