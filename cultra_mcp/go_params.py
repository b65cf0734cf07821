"""Parameter parsing for Go parameter lists."""

from __future__ import annotations

from .symbols import Param


def parse_go_parameters(params: str) -> list[Param]:
    """Split a Go parameter list such as ``(a int, b string)`` into params."""
    if not params or params == "()":
        return []
    inner = params.lstrip("(").rstrip(")").strip()
    if not inner:
        return []
    result: list[Param] = []
    for part in inner.split(","):
        tokens = part.split()
        if not tokens:
            continue
        if len(tokens) == 1:
            result.append(Param("", tokens[0]))
        else:
            result.append(Param(" ".join(tokens[:-1]), tokens[-1]))
    return result