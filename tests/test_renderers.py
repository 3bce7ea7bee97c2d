from __future__ import annotations

import orjson
import pytest

from graph import DependencyGraph, ImportSpec, ModuleNode
from plugins.renderers import (
    DotRenderer,
    EdgeListRenderer,
    JsonRenderer,
    MermaidRenderer,
    Renderer,
    default_renderers,
)
from settings.config import ModGraphConfig


def _add(graph: DependencyGraph, name: str, *imports: ImportSpec) -> None:
    graph.add_module(
        ModuleNode(
            class_name=name,
            short_name=name.rsplit(".", 1)[-1],
            exports=(f"{name}.Service",),
            imports=imports,
        )
    )


def _graph() -> DependencyGraph:
    graph = DependencyGraph()
    _add(graph, "app.Db")
    _add(
        graph,
        "app.Users",
        ImportSpec.create("app.Db", "Connection", "QueryBuilder", "Schema", "Migrator"),
    )
    _add(
        graph,
        "app.Api",
        ImportSpec.create("app.Users", "UserService"),
        ImportSpec.create("vendor.Mail"),
    )
    return graph


def test_default_renderers_registered_with_metadata() -> None:
    registry = default_renderers()

    assert registry.names() == ["mermaid", "dot", "json", "edgelist"]
    assert [(r.file_extension, r.mime_type) for _, r in registry.items()] == [
        ("mmd", "text/vnd.mermaid"),
        ("dot", "text/vnd.graphviz"),
        ("json", "application/json"),
        ("edgelist", "text/plain"),
    ]
    for _, renderer in registry.items():
        assert isinstance(renderer, Renderer)
        assert renderer.description
        assert not renderer.file_extension.startswith(".")


def test_default_renderers_use_config_separator() -> None:
    config = ModGraphConfig(namespace_separator="\\")
    graph = DependencyGraph()
    graph.add_module(
        ModuleNode(
            class_name="App\\Api",
            short_name="Api",
            imports=(ImportSpec.create("Vendor\\Mail"),),
        )
    )

    output = default_renderers(config).get("mermaid").render(graph)

    assert 'm1["Mail"]' in output


def test_mermaid_renderer() -> None:
    output = MermaidRenderer().render(_graph())

    assert output == (
        "graph LR\n"
        '    m0["Db"]\n'
        '    m1["Users"]\n'
        '    m2["Api"]\n'
        '    m3["Mail"]\n'
        '    m1 ==>|"Connection, QueryBuilder, Schema, Migrator"| m0\n'
        '    m2 -->|"UserService"| m1\n'
        "    m2 --> m3\n"
        "    classDef dangling stroke-dasharray: 5 5\n"
        "    class m3 dangling\n"
    )


def test_mermaid_escapes_quotes() -> None:
    graph = DependencyGraph()
    graph.add_module(ModuleNode(class_name="a", short_name='say "hi"'))

    assert 'm0["say #quot;hi#quot;"]' in MermaidRenderer().render(graph)


def test_mermaid_empty_graph() -> None:
    assert MermaidRenderer().render(DependencyGraph()) == "graph LR\n"


def test_dot_renderer() -> None:
    output = DotRenderer(max_services_length=20).render(_graph())

    assert output == (
        "digraph dependencies {\n"
        "    rankdir=LR;\n"
        "    node [shape=box];\n"
        '    "app.Db" [label="Db"];\n'
        '    "app.Users" [label="Users"];\n'
        '    "app.Api" [label="Api"];\n'
        '    "vendor.Mail" [label="Mail", style=dashed];\n'
        '    "app.Users" -> "app.Db" [label="Connection, Query...", penwidth=2];\n'
        '    "app.Api" -> "app.Users" [label="UserService"];\n'
        '    "app.Api" -> "vendor.Mail";\n'
        "}\n"
    )


def test_dot_escapes_backslashes_and_quotes() -> None:
    graph = DependencyGraph()
    graph.add_module(ModuleNode(class_name='App\\"X"', short_name="X"))

    assert '"App\\\\\\"X\\"" [label="X"];' in DotRenderer().render(graph)


def test_json_renderer() -> None:
    payload = orjson.loads(JsonRenderer().render(_graph()))

    assert payload["module_count"] == 3
    assert payload["edge_count"] == 3
    assert [m["class_name"] for m in payload["modules"]] == ["app.Db", "app.Users", "app.Api"]
    assert payload["modules"][2]["imports"][1] == {
        "module_name": "vendor.Mail",
        "items_to_import": [],
    }
    assert payload["edges"][0] == {
        "from_module": "app.Users",
        "to_module": "app.Db",
        "imported_services": ["Connection", "QueryBuilder", "Schema", "Migrator"],
        "strong_coupling": True,
    }


def test_json_renderer_is_deterministic() -> None:
    renderer = JsonRenderer()

    assert renderer.render(_graph()) == renderer.render(_graph())
    assert renderer.render(_graph()).endswith("\n")


def test_edgelist_renderer() -> None:
    assert EdgeListRenderer().render(_graph()) == (
        "app.Users -> app.Db\napp.Api -> app.Users\napp.Api -> vendor.Mail\n"
    )


@pytest.mark.parametrize("name", ["mermaid", "dot", "json", "edgelist"])
def test_rendering_does_not_mutate_graph(name: str) -> None:
    graph = _graph()
    before = (graph.get_modules(), graph.get_edges())

    default_renderers().get(name).render(graph)

    assert (graph.get_modules(), graph.get_edges()) == before
