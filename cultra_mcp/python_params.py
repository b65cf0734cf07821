"""Parameter parsing for Python parameter lists."""

from __future__ import annotations

from .symbols import Param

_IMPLICIT_RECEIVERS = frozenset({"self", "cls"})


def _strip_default(text: str) -> str:
    name, _, _ = text.partition("=")
    return name.strip()


def parse_python_parameters(params: str) -> list[Param]:
    """Split a Python parameter list such as ``(self, x: int = 1)`` into params.

    ``self`` and ``cls`` are skipped, default values are dropped and a
    parameter without an annotation gets the type ``Any``.
    """
    if not params or params == "()":
        return []
    inner = params.lstrip("(").rstrip(")").strip()
    if not inner:
        return []
    result: list[Param] = []
    for raw in inner.split(","):
        part = raw.strip()
        if not part or part in _IMPLICIT_RECEIVERS:
            continue
        name, colon, annotation = part.partition(":")
        if colon:
            result.append(Param(name.strip(), _strip_default(annotation.strip())))
        else:
            result.append(Param(_strip_default(part), "Any"))
    return result