"""Data records describing symbols and files extracted from source code."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Param:
    """A function parameter with its declared type."""

    name: str
    param_type: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.param_type}


@dataclass
class Symbol:
    """A code symbol such as a function, method, type or class."""

    symbol_type: str
    name: str
    line: int
    end_line: int
    scope: str = "public"
    signature: str = ""
    parent: str | None = None
    receiver: str | None = None
    calls: list[str] = field(default_factory=list)
    documentation: str | None = None
    parameters: list[Param] = field(default_factory=list)
    return_type: str | None = None

    def location(self, file_path: str) -> str:
        """Return ``file:line`` or ``file:start-end``."""
        if self.line == self.end_line:
            return f"{file_path}:{self.line}"
        return f"{file_path}:{self.line}-{self.end_line}"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.symbol_type,
            "name": self.name,
            "line": self.line,
            "end_line": self.end_line,
            "scope": self.scope,
            "signature": self.signature,
        }
        if self.parent is not None:
            data["parent"] = self.parent
        if self.receiver is not None:
            data["receiver"] = self.receiver
        if self.calls:
            data["calls"] = list(self.calls)
        if self.documentation is not None:
            data["documentation"] = self.documentation
        if self.parameters:
            data["parameters"] = [p.to_dict() for p in self.parameters]
        if self.return_type is not None:
            data["return_type"] = self.return_type
        return data


@dataclass
class ASTStats:
    """Size metrics of a syntax tree."""

    total_nodes: int = 0
    max_depth: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"total_nodes": self.total_nodes, "max_depth": self.max_depth}


@dataclass
class FileContext:
    """Symbols, imports and tree metrics for a single file."""

    file_path: str
    language: str
    symbols: list[Symbol] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)
    ast_stats: ASTStats = field(default_factory=ASTStats)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": self.file_path,
            "language": self.language,
            "symbols": [s.to_dict() for s in self.symbols],
            "imports": list(self.imports),
            "ast_stats": self.ast_stats.to_dict(),
        }


@dataclass
class FieldInfo:
    """A struct field, with its optional tag."""

    name: str
    field_type: str
    tag: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "type": self.field_type}
        if self.tag is not None:
            data["tag"] = self.tag
        return data


@dataclass
class TypeInfo:
    """Detailed information about a declared type."""

    name: str
    kind: str
    location: str
    fields: list[FieldInfo] = field(default_factory=list)
    methods: list[str] = field(default_factory=list)
    implements: list[str] = field(default_factory=list)
    embedded: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "kind": self.kind}
        if self.fields:
            data["fields"] = [f.to_dict() for f in self.fields]
        if self.methods:
            data["methods"] = list(self.methods)
        if self.implements:
            data["implements"] = list(self.implements)
        if self.embedded:
            data["embedded"] = list(self.embedded)
        data["location"] = self.location
        return data