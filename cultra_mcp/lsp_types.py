"""Language Server Protocol records and JSON-RPC message helpers."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Union

_U32_MAX = 2**32 - 1


def _require(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"expected an object, got: {json.dumps(data)}")
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return data[key]


def _as_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string, got: {json.dumps(value)}")
    return value


def _as_optional_str(value: Any, key: str) -> str | None:
    return None if value is None else _as_str(value, key)


def _as_int(value: Any, key: str, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{key}` must be an integer, got: {json.dumps(value)}")
    if not low <= value <= high:
        raise ValueError(f"field `{key}` out of range: {value}")
    return value


def capability_from_json(value: Any) -> bool | None:
    """Normalise a capability given as a boolean or an options object.

    Absent (None) stays None, a boolean is kept and any object means the
    capability is supported.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, dict):
        return True
    raise ValueError(
        f"expected bool or object for capability, got: {json.dumps(value)}"
    )


@dataclass(frozen=True)
class Position:
    """Zero-based line and character offset in a text document."""

    line: int
    character: int

    @classmethod
    def from_json(cls, data: Any) -> Position:
        return cls(
            line=_as_int(_require(data, "line"), "line", 0, _U32_MAX),
            character=_as_int(_require(data, "character"), "character", 0, _U32_MAX),
        )

    def to_json(self) -> dict[str, int]:
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Range:
    """A span between two positions."""

    start: Position
    end: Position

    @classmethod
    def from_json(cls, data: Any) -> Range:
        return cls(
            start=Position.from_json(_require(data, "start")),
            end=Position.from_json(_require(data, "end")),
        )

    def to_json(self) -> dict[str, Any]:
        return {"start": self.start.to_json(), "end": self.end.to_json()}


@dataclass(frozen=True)
class Location:
    """A range inside the document named by a URI."""

    uri: str
    range: Range

    @classmethod
    def from_json(cls, data: Any) -> Location:
        return cls(
            uri=_as_str(_require(data, "uri"), "uri"),
            range=Range.from_json(_require(data, "range")),
        )

    def to_json(self) -> dict[str, Any]:
        return {"uri": self.uri, "range": self.range.to_json()}


_CAPABILITY_KEYS = {
    "definition_provider": "definitionProvider",
    "references_provider": "referencesProvider",
    "hover_provider": "hoverProvider",
    "document_symbol_provider": "documentSymbolProvider",
    "workspace_symbol_provider": "workspaceSymbolProvider",
}


@dataclass
class ServerCapabilities:
    """The subset of server capabilities this client looks at."""

    definition_provider: bool | None = None
    references_provider: bool | None = None
    hover_provider: bool | None = None
    document_symbol_provider: bool | None = None
    workspace_symbol_provider: bool | None = None

    @classmethod
    def from_json(cls, data: Any) -> ServerCapabilities:
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got: {json.dumps(data)}")
        return cls(
            **{
                attr: capability_from_json(data.get(key))
                for attr, key in _CAPABILITY_KEYS.items()
            }
        )


@dataclass
class InitializeResult:
    """The server's answer to ``initialize``."""

    capabilities: ServerCapabilities

    @classmethod
    def from_json(cls, data: Any) -> InitializeResult:
        return cls(ServerCapabilities.from_json(_require(data, "capabilities")))


@dataclass(frozen=True)
class MarkedString:
    """A plain string or a ``{language, value}`` code block."""

    value: str
    language: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> MarkedString:
        if isinstance(data, str):
            return cls(value=data)
        if isinstance(data, dict):
            language = data.get("language")
            value = data.get("value")
            if isinstance(language, str) and isinstance(value, str):
                return cls(value=value, language=language)
        raise ValueError(f"not a MarkedString: {json.dumps(data)}")

    def text(self) -> str:
        return self.value


@dataclass(frozen=True)
class MarkupContent:
    """Text with a ``plaintext`` or ``markdown`` kind."""

    kind: str
    value: str

    @classmethod
    def from_json(cls, data: Any) -> MarkupContent:
        return cls(
            kind=_as_str(_require(data, "kind"), "kind"),
            value=_as_str(_require(data, "value"), "value"),
        )


HoverContents = Union[MarkupContent, list[MarkedString], MarkedString]


def _hover_contents(data: Any) -> HoverContents:
    try:
        return MarkupContent.from_json(data)
    except ValueError:
        pass
    if isinstance(data, list):
        try:
            return [MarkedString.from_json(item) for item in data]
        except ValueError:
            pass
    try:
        return MarkedString.from_json(data)
    except ValueError:
        raise ValueError(
            f"data did not match any variant of HoverContents: {json.dumps(data)}"
        ) from None


@dataclass
class Hover:
    """The result of a hover request."""

    contents: HoverContents
    range: Range | None = None

    @classmethod
    def from_json(cls, data: Any) -> Hover:
        contents = _hover_contents(_require(data, "contents"))
        raw_range = data.get("range")
        return cls(
            contents=contents,
            range=None if raw_range is None else Range.from_json(raw_range),
        )

    def contents_text(self) -> str:
        """Flatten the contents to text; list entries are joined by blank lines."""
        if isinstance(self.contents, MarkupContent):
            return self.contents.value
        if isinstance(self.contents, list):
            return "\n\n".join(item.text() for item in self.contents)
        return self.contents.text()


class SymbolKind(enum.IntEnum):
    """Kinds of symbols as numbered by the protocol."""

    FILE = 1
    MODULE = 2
    NAMESPACE = 3
    PACKAGE = 4
    CLASS = 5
    METHOD = 6
    PROPERTY = 7
    FIELD = 8
    CONSTRUCTOR = 9
    ENUM = 10
    INTERFACE = 11
    FUNCTION = 12
    VARIABLE = 13
    CONSTANT = 14
    STRING = 15
    NUMBER = 16
    BOOLEAN = 17
    ARRAY = 18
    OBJECT = 19
    KEY = 20
    NULL = 21
    ENUM_MEMBER = 22
    STRUCT = 23
    EVENT = 24
    OPERATOR = 25
    TYPE_PARAMETER = 26


def _parse_kind(value: Any) -> SymbolKind:
    number = _as_int(value, "kind", 0, 255)
    try:
        return SymbolKind(number)
    except ValueError:
        raise ValueError(f"Unknown SymbolKind: {number}") from None


def _kind_label(kind: SymbolKind) -> str:
    return "".join(part.capitalize() for part in kind.name.split("_"))


@dataclass
class SymbolInformation:
    """A flat symbol entry, as returned by workspace symbol queries."""

    name: str
    kind: SymbolKind
    location: Location | None = None
    container_name: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> SymbolInformation:
        kind = _parse_kind(_require(data, "kind"))
        name = _as_str(data["name"], "name") if "name" in data else ""
        raw_location = data.get("location")
        return cls(
            name=name,
            kind=kind,
            location=None if raw_location is None else Location.from_json(raw_location),
            container_name=_as_optional_str(data.get("containerName"), "containerName"),
        )

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "kind": _kind_label(self.kind)}
        if self.location is not None:
            out["location"] = self.location.to_json()
        if self.container_name is not None:
            out["containerName"] = self.container_name
        return out


@dataclass
class DocumentSymbol:
    """A hierarchical symbol inside one document."""

    name: str
    kind: SymbolKind
    range: Range
    selection_range: Range
    detail: str | None = None
    children: list[DocumentSymbol] | None = None

    @classmethod
    def from_json(cls, data: Any) -> DocumentSymbol:
        name = _as_str(_require(data, "name"), "name")
        kind = _parse_kind(_require(data, "kind"))
        full_range = Range.from_json(_require(data, "range"))
        selection = Range.from_json(_require(data, "selectionRange"))
        raw_children = data.get("children")
        if raw_children is None:
            children = None
        elif isinstance(raw_children, list):
            children = [cls.from_json(child) for child in raw_children]
        else:
            raise ValueError("field `children` must be an array")
        return cls(
            name=name,
            kind=kind,
            range=full_range,
            selection_range=selection,
            detail=_as_optional_str(data.get("detail"), "detail"),
            children=children,
        )

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name}
        if self.detail is not None:
            out["detail"] = self.detail
        out["kind"] = _kind_label(self.kind)
        out["range"] = self.range.to_json()
        out["selectionRange"] = self.selection_range.to_json()
        if self.children is not None:
            out["children"] = [child.to_json() for child in self.children]
        return out


@dataclass(frozen=True)
class JsonRpcError:
    """The error object of a JSON-RPC response."""

    code: int
    message: str
    data: Any = None


def _parse_rpc_error(data: Any) -> JsonRpcError:
    return JsonRpcError(
        code=_as_int(_require(data, "code"), "code", -(2**31), 2**31 - 1),
        message=_as_str(_require(data, "message"), "message"),
        data=data.get("data"),
    )


@dataclass
class JsonRpcResponse:
    """A JSON-RPC response; the id may be a number, a string or null."""

    jsonrpc: str
    id: Any
    result: Any = None
    error: JsonRpcError | None = None

    @classmethod
    def from_json(cls, data: Any) -> JsonRpcResponse:
        jsonrpc = _as_str(_require(data, "jsonrpc"), "jsonrpc")
        response_id = _require(data, "id")
        raw_error = data.get("error")
        return cls(
            jsonrpc=jsonrpc,
            id=response_id,
            result=data.get("result"),
            error=None if raw_error is None else _parse_rpc_error(raw_error),
        )


def build_request(request_id: int, method: str, params: Any = None) -> dict[str, Any]:
    """Build a JSON-RPC request object; ``params`` is left out when None."""
    message: dict[str, Any] = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        message["params"] = params
    return message


def build_notification(method: str, params: Any = None) -> dict[str, Any]:
    """Build a JSON-RPC notification object; ``params`` is left out when None."""
    message: dict[str, Any] = {"jsonrpc": "2.0", "method": method}
    if params is not None:
        message["params"] = params
    return message