"""Parameter parsing for TypeScript and JavaScript parameter lists."""

from __future__ import annotations

from .symbols import Param


def parse_typescript_parameters(params: str) -> list[Param]:
    """Split a parameter list such as ``(name: string, n)`` into params.

    A parameter without a type annotation gets the type ``any``.
    """
    if not params or params == "()":
        return []
    inner = params.lstrip("(").rstrip(")").strip()
    if not inner:
        return []
    result: list[Param] = []
    for raw in inner.split(","):
        part = raw.strip()
        if not part:
            continue
        name, colon, annotation = part.partition(":")
        if colon:
            result.append(Param(name.strip(), annotation.strip()))
        else:
            result.append(Param(part, "any"))
    return result