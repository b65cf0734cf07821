from cultra_mcp.symbols import (
    ASTStats,
    FieldInfo,
    FileContext,
    Param,
    Symbol,
    TypeInfo,
)


def test_symbol_defaults():
    sym = Symbol("function", "main", 1, 5)
    assert sym.scope == "public"
    assert sym.signature == ""
    assert sym.calls == []
    assert sym.parameters == []
    assert sym.parent is None


def test_location_single_line():
    sym = Symbol("function", "f", 7, 7)
    assert sym.location("main.go") == "main.go:7"


def test_location_range():
    sym = Symbol("function", "f", 7, 12)
    assert sym.location("main.go") == "main.go:7-12"


def test_symbol_to_dict_omits_empty_optionals():
    data = Symbol("function", "f", 1, 2).to_dict()
    assert data["type"] == "function"
    assert set(data) == {"type", "name", "line", "end_line", "scope", "signature"}


def test_symbol_to_dict_includes_set_optionals():
    sym = Symbol(
        "method",
        "Greet",
        3,
        4,
        receiver="*Greeter",
        calls=["Sprintf"],
        parameters=[Param("message", "string")],
        return_type="string",
    )
    data = sym.to_dict()
    assert data["receiver"] == "*Greeter"
    assert data["calls"] == ["Sprintf"]
    assert data["parameters"] == [{"name": "message", "type": "string"}]
    assert data["return_type"] == "string"
    assert "parent" not in data
    assert "documentation" not in data


def test_param_to_dict_uses_type_key():
    assert Param("x", "int").to_dict() == {"name": "x", "type": "int"}


def test_file_context_defaults_and_dict():
    ctx = FileContext("/a/b.py", "python")
    assert ctx.ast_stats.total_nodes == 0
    assert ctx.ast_stats.max_depth == 0
    data = ctx.to_dict()
    assert data["symbols"] == []
    assert data["imports"] == []
    assert data["ast_stats"] == {"total_nodes": 0, "max_depth": 0}


def test_file_context_nested_serialisation():
    sym = Symbol("class", "C", 1, 3)
    ctx = FileContext("x.py", "python", [sym], ["os"], ASTStats(10, 4))
    data = ctx.to_dict()
    assert data["symbols"] == [sym.to_dict()]
    assert data["imports"] == ["os"]
    assert data["ast_stats"] == {"total_nodes": 10, "max_depth": 4}


def test_field_info_tag_optional():
    assert "tag" not in FieldInfo("Name", "string").to_dict()
    tagged = FieldInfo("Name", "string", '`json:"name"`').to_dict()
    assert tagged["tag"] == '`json:"name"`'
    assert tagged["type"] == "string"


def test_type_info_to_dict():
    info = TypeInfo(
        "Greeter",
        "struct",
        "main.go:3-5",
        fields=[FieldInfo("name", "string")],
        methods=["Greet"],
    )
    data = info.to_dict()
    assert data["fields"] == [{"name": "name", "type": "string"}]
    assert data["methods"] == ["Greet"]
    assert data["location"] == "main.go:3-5"
    assert "implements" not in data
    assert "embedded" not in data