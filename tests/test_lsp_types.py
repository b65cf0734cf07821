import pytest

from cultra_mcp.lsp_types import (
    DocumentSymbol,
    Hover,
    InitializeResult,
    JsonRpcResponse,
    Location,
    MarkedString,
    MarkupContent,
    Position,
    Range,
    ServerCapabilities,
    SymbolInformation,
    SymbolKind,
    build_notification,
    build_request,
    capability_from_json,
)

RANGE_JSON = {
    "start": {"line": 1, "character": 2},
    "end": {"line": 3, "character": 4},
}


def test_server_capabilities_bool_form():
    caps = ServerCapabilities.from_json(
        {
            "definitionProvider": True,
            "referencesProvider": True,
            "hoverProvider": False,
            "documentSymbolProvider": True,
            "workspaceSymbolProvider": True,
        }
    )
    assert caps.definition_provider is True
    assert caps.references_provider is True
    assert caps.hover_provider is False
    assert caps.document_symbol_provider is True
    assert caps.workspace_symbol_provider is True


def test_server_capabilities_object_form():
    opts = {"workDoneProgress": True}
    caps = ServerCapabilities.from_json(
        {
            "definitionProvider": opts,
            "referencesProvider": opts,
            "hoverProvider": opts,
            "documentSymbolProvider": opts,
            "workspaceSymbolProvider": opts,
        }
    )
    assert caps.definition_provider is True
    assert caps.references_provider is True
    assert caps.hover_provider is True
    assert caps.document_symbol_provider is True
    assert caps.workspace_symbol_provider is True


def test_server_capabilities_mixed_form():
    caps = ServerCapabilities.from_json(
        {
            "definitionProvider": {"workDoneProgress": True},
            "referencesProvider": True,
            "hoverProvider": {"workDoneProgress": True},
            "workspaceSymbolProvider": False,
        }
    )
    assert caps.definition_provider is True
    assert caps.references_provider is True
    assert caps.hover_provider is True
    assert caps.document_symbol_provider is None
    assert caps.workspace_symbol_provider is False


def test_server_capabilities_absent_fields():
    caps = ServerCapabilities.from_json({})
    assert caps == ServerCapabilities(None, None, None, None, None)


def test_full_pyright_initialize_response():
    opts = {"workDoneProgress": True}
    result = InitializeResult.from_json(
        {
            "capabilities": {
                "textDocumentSync": 2,
                "definitionProvider": opts,
                "referencesProvider": opts,
                "documentSymbolProvider": opts,
                "workspaceSymbolProvider": opts,
                "hoverProvider": opts,
                "callHierarchyProvider": True,
                "workspace": {"workspaceFolders": {"supported": True}},
            }
        }
    )
    caps = result.capabilities
    assert caps.definition_provider is True
    assert caps.references_provider is True
    assert caps.hover_provider is True
    assert caps.document_symbol_provider is True
    assert caps.workspace_symbol_provider is True


@pytest.mark.parametrize("value", [5, "yes", [True]])
def test_capability_rejects_other_values(value):
    with pytest.raises(ValueError, match="expected bool or object"):
        capability_from_json(value)


def test_initialize_result_requires_capabilities():
    with pytest.raises(ValueError, match="capabilities"):
        InitializeResult.from_json({})


def test_position_round_trip():
    pos = Position.from_json({"line": 7, "character": 12})
    assert pos == Position(7, 12)
    assert pos.to_json() == {"line": 7, "character": 12}


@pytest.mark.parametrize(
    "data", [{"line": -1, "character": 0}, {"line": 1.5, "character": 0}, {"line": 1}]
)
def test_position_rejects_bad_input(data):
    with pytest.raises(ValueError):
        Position.from_json(data)


def test_location_round_trip():
    data = {"uri": "file:///tmp/a.py", "range": RANGE_JSON}
    loc = Location.from_json(data)
    assert loc.range == Range(Position(1, 2), Position(3, 4))
    assert loc.to_json() == data


def test_hover_markup():
    hover = Hover.from_json(
        {"contents": {"kind": "markdown", "value": "**x**"}, "range": RANGE_JSON}
    )
    assert hover.contents == MarkupContent("markdown", "**x**")
    assert hover.contents_text() == "**x**"
    assert hover.range == Range(Position(1, 2), Position(3, 4))


def test_hover_plain_string():
    hover = Hover.from_json({"contents": "plain text"})
    assert hover.contents_text() == "plain text"
    assert hover.range is None


def test_hover_language_value():
    hover = Hover.from_json({"contents": {"language": "go", "value": "func F()"}})
    assert hover.contents == MarkedString("func F()", "go")
    assert hover.contents_text() == "func F()"


def test_hover_array_joined_with_blank_lines():
    hover = Hover.from_json(
        {"contents": ["first", {"language": "python", "value": "def f(): ..."}]}
    )
    assert hover.contents_text() == "first\n\ndef f(): ..."


def test_hover_rejects_unknown_contents():
    with pytest.raises(ValueError):
        Hover.from_json({"contents": 42})


def test_marked_string_text():
    assert MarkedString.from_json("abc").text() == "abc"
    assert MarkedString.from_json({"language": "rust", "value": "fn x()"}).language == "rust"


def test_symbol_information_parse_and_serialise():
    info = SymbolInformation.from_json(
        {
            "name": "Server",
            "kind": 5,
            "location": {"uri": "file:///tmp/s.ts", "range": RANGE_JSON},
            "containerName": "app",
        }
    )
    assert info.kind is SymbolKind.CLASS
    assert info.to_json() == {
        "name": "Server",
        "kind": "Class",
        "location": {"uri": "file:///tmp/s.ts", "range": RANGE_JSON},
        "containerName": "app",
    }


def test_symbol_information_name_defaults_to_empty():
    info = SymbolInformation.from_json({"kind": 22})
    assert info.name == ""
    assert info.to_json() == {"name": "", "kind": "EnumMember"}


@pytest.mark.parametrize("kind", [0, 27, 99, "5"])
def test_unknown_symbol_kind_rejected(kind):
    with pytest.raises(ValueError):
        SymbolInformation.from_json({"name": "x", "kind": kind})


def test_document_symbol_with_children():
    data = {
        "name": "Calculator",
        "detail": "class",
        "kind": 5,
        "range": RANGE_JSON,
        "selectionRange": RANGE_JSON,
        "children": [
            {"name": "add", "kind": 6, "range": RANGE_JSON, "selectionRange": RANGE_JSON}
        ],
    }
    sym = DocumentSymbol.from_json(data)
    assert sym.children[0].name == "add"
    assert sym.children[0].kind is SymbolKind.METHOD
    out = sym.to_json()
    assert out["kind"] == "Class"
    assert out["selectionRange"] == RANGE_JSON
    assert out["children"] == [
        {"name": "add", "kind": "Method", "range": RANGE_JSON, "selectionRange": RANGE_JSON}
    ]


def test_document_symbol_rejects_flat_symbol():
    with pytest.raises(ValueError):
        DocumentSymbol.from_json(
            {"name": "f", "kind": 12, "location": {"uri": "file:///x", "range": RANGE_JSON}}
        )


def test_response_with_result():
    resp = JsonRpcResponse.from_json({"jsonrpc": "2.0", "id": 3, "result": [1, 2]})
    assert resp.id == 3
    assert resp.result == [1, 2]
    assert resp.error is None


def test_response_with_error():
    resp = JsonRpcResponse.from_json(
        {"jsonrpc": "2.0", "id": "7", "error": {"code": -32600, "message": "Invalid request"}}
    )
    assert resp.id == "7"
    assert resp.error.code == -32600
    assert resp.error.message == "Invalid request"


def test_response_null_result():
    resp = JsonRpcResponse.from_json({"jsonrpc": "2.0", "id": 1, "result": None})
    assert resp.result is None


def test_notification_is_not_a_response():
    with pytest.raises(ValueError, match="id"):
        JsonRpcResponse.from_json({"jsonrpc": "2.0", "method": "window/logMessage"})


def test_build_request():
    assert build_request(4, "textDocument/hover", {"a": 1}) == {
        "jsonrpc": "2.0",
        "id": 4,
        "method": "textDocument/hover",
        "params": {"a": 1},
    }
    assert build_request(5, "shutdown", None) == {
        "jsonrpc": "2.0",
        "id": 5,
        "method": "shutdown",
    }


def test_build_notification():
    assert build_notification("initialized", {}) == {
        "jsonrpc": "2.0",
        "method": "initialized",
        "params": {},
    }
    assert build_notification("exit", None) == {"jsonrpc": "2.0", "method": "exit"}