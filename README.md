# cultra_mcp

Building blocks for a code-intelligence server that speaks JSON-RPC over
standard input and output: configuration loading, message framing on stdio,
records for code symbols, parsing of parameter lists, and data types for the
Language Server Protocol.

The package has no runtime dependencies beyond the Python standard library
and supports Python 3.10 and later.

## What is inside

| Module | Purpose |
| --- | --- |
| `cultra_mcp.config` | `Config` / `APIConfig`: API endpoint and key, loaded from a JSON file or the environment |
| `cultra_mcp.transport` | Reading and writing messages on stdio, framed (`Content-Length`) or one per line |
| `cultra_mcp.symbols` | `Symbol`, `Param`, `FileContext`, `ASTStats`, `TypeInfo`, `FieldInfo` records with `to_dict()` |
| `cultra_mcp.langdetect` | `detect_language`, `format_location` |
| `cultra_mcp.go_params` | `parse_go_parameters` |
| `cultra_mcp.python_params` | `parse_python_parameters` |
| `cultra_mcp.typescript_params` | `parse_typescript_parameters` |
| `cultra_mcp.lsp_types` | Language Server Protocol records and JSON-RPC message helpers |

## Configuration

`Config.load()` looks in this order:

1. the file named by the `CULTRA_MCP_CONFIG` environment variable (it must
   load, otherwise `OSError` or `ValueError` is raised);
2. `~/.config/cultra/mcp.json` (skipped if missing or invalid);
3. the `CULTRA_API_URL` and `CULTRA_API_KEY` environment variables, with the
   URL defaulting to `http://localhost:8080`. An empty key logs a warning.

The file has this shape:

```json
{
  "api": {
    "base_url": "http://localhost:8080",
    "key": "placeholder"
  }
}
```

```python
from cultra_mcp.config import Config

config = Config.load()
print(config.api.base_url)
print(config.api)   # the key is shown as <redacted> or <empty>
```

`Config.load_from_file(path)` reads one file directly.

## Symbol records

```python
from cultra_mcp.symbols import Symbol, Param

sym = Symbol("function", "main", 3, 7, parameters=[Param("argc", "int")])
sym.location("main.go")   # "main.go:3-7"
sym.to_dict()
# {'type': 'function', 'name': 'main', 'line': 3, 'end_line': 7,
#  'scope': 'public', 'signature': '',
#  'parameters': [{'name': 'argc', 'type': 'int'}]}
```

Optional fields (`parent`, `receiver`, `calls`, `documentation`,
`parameters`, `return_type`) are left out of `to_dict()` when empty.

## Parsing parameter lists

```python
from cultra_mcp.python_params import parse_python_parameters
from cultra_mcp.typescript_params import parse_typescript_parameters
from cultra_mcp.go_params import parse_go_parameters

for param in parse_python_parameters("self, name: str, age: int = 18, active"):
    print(param.name, param.param_type)
# name str
# age int
# active Any

[p.to_dict() for p in parse_typescript_parameters("name: string, active")]
# [{'name': 'name', 'type': 'string'}, {'name': 'active', 'type': 'any'}]

[p.to_dict() for p in parse_go_parameters("(ctx context.Context, n int)")]
# [{'name': 'ctx', 'type': 'context.Context'}, {'name': 'n', 'type': 'int'}]
```

The split is on commas, so types that themselves contain commas are not
kept whole.

## Language detection

```python
from cultra_mcp.langdetect import detect_language, format_location

detect_language("component.tsx")   # "tsx"
detect_language("script.jsx")      # "javascript"
detect_language("notes.txt")       # None
format_location(10, 20)            # "10-20"
format_location(10, 10)            # "10"
```

## Language Server Protocol types

`cultra_mcp.lsp_types` turns decoded JSON into records and back:

```python
from cultra_mcp.lsp_types import (
    Hover, InitializeResult, SymbolInformation, build_request,
)

caps = InitializeResult.from_json(
    {"capabilities": {"hoverProvider": {"workDoneProgress": True},
                      "definitionProvider": False}}
).capabilities
caps.hover_provider        # True  (an options object means supported)
caps.definition_provider   # False
caps.references_provider   # None  (absent)

hover = Hover.from_json({"contents": [{"language": "go", "value": "func f()"}, "doc"]})
hover.contents_text()      # "func f()\n\ndoc"

info = SymbolInformation.from_json({"name": "f", "kind": 12})
info.to_json()             # {'name': 'f', 'kind': 'Function'}

build_request(1, "shutdown")
# {'jsonrpc': '2.0', 'id': 1, 'method': 'shutdown'}
```

Also available: `Position`, `Range`, `Location`, `MarkedString`,
`MarkupContent`, `SymbolKind`, `DocumentSymbol`, `JsonRpcResponse`,
`JsonRpcError`, `capability_from_json` and `build_notification`. Malformed
input raises `ValueError`.

## Stdio transport

```python
import sys
from cultra_mcp.transport import detect_transport, read_message

stream = sys.stdin.buffer
mode = detect_transport(stream)
if mode is not None:
    message = read_message(stream, mode)
    if message is not None:
        mode.write_response(sys.stdout.buffer, message)
```

`parse_transport_mode(argv)` reads `--transport=auto|framed|line` (or
`--transport <value>`) from the arguments; unknown values fall back to
`auto`. Framed messages are limited to 64 MiB; a malformed header or body
raises `MessageError`.

## What this package does not do

- It does not parse source files. `Symbol` and `FileContext` are records
  only, and the parameter parsers work on the text of a parameter list.
- It does not start or talk to language-server processes. `lsp_types`
  describes the messages, but sending them is left to the caller.
- It has no command and no server loop: `transport` reads and writes
  messages, and deciding what to answer is up to the caller.

## Tests

The tests use pytest; install the `test` extra to get it.