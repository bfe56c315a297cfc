"""Module identifier conversions: `:a:bC` <-> `a/b-c` <-> `projects.a.bC`."""

from __future__ import annotations

from pathlib import PurePosixPath

PROJECTS_PREFIX = "projects."


def to_kebab_case(name: str) -> str:
    """Insert a hyphen before every interior ASCII capital, then lowercase."""
    chars: list[str] = []
    for i, ch in enumerate(name):
        if i > 0 and "A" <= ch <= "Z":
            chars.append("-")
        chars.append(ch)
    return "".join(chars).lower()


def to_camel_case(name: str) -> str:
    head, *rest = name.split("-")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def module_to_path(module: str) -> PurePosixPath:
    """Relative directory of a module, e.g. `:account:accountDomain` -> `account/account-domain`."""
    parts = module.removeprefix(":").split(":")
    return PurePosixPath(*(to_kebab_case(part) for part in parts))


def dot_to_module(token: str) -> str:
    """Convert a `projects.a.bC` accessor into a module id (`:a:b-c`)."""
    parts = token.removeprefix(PROJECTS_PREFIX).split(".")
    module = ":".join(to_kebab_case(part) for part in parts)
    if not module.startswith(":"):
        module = ":" + module
    return module


def module_to_dot(module: str) -> str:
    parts = module.removeprefix(":").split(":")
    return PROJECTS_PREFIX + ".".join(to_camel_case(part) for part in parts)


def normalize_module(raw: str) -> str:
    """Clean up a user-supplied module id; a missing leading colon is added."""
    module = raw.strip()
    if not module or module == ":":
        raise ValueError("Module identifier must not be empty")
    if not module.startswith(":"):
        module = ":" + module
    return module
