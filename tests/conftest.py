"""Shared fixtures for building schema graphs in tests."""

import pytest

from schemadiff.core import (
    Edge,
    EditOperation,
    Mapping,
    SchemaGraph,
    Vertex,
    VertexKind,
    encode_type_label,
)


class GraphBuilder:
    """Small helper to build one schema graph snapshot by hand."""

    def __init__(self, side: str):
        self.side = side
        self.graph = SchemaGraph()

    def _add(self, vertex_id: str, kind: VertexKind, name: str) -> Vertex:
        return self.graph.add_vertex(Vertex(f"{self.side}:{vertex_id}", kind, name))

    def named_type(self, kind: VertexKind, name: str) -> Vertex:
        return self._add(name, kind, name)

    def object(self, name: str) -> Vertex:
        return self.named_type(VertexKind.OBJECT, name)

    def interface(self, name: str) -> Vertex:
        return self.named_type(VertexKind.INTERFACE, name)

    def union(self, name: str, *members: Vertex) -> Vertex:
        union = self.named_type(VertexKind.UNION, name)
        for member in members:
            self.member(union, member)
        return union

    def scalar(self, name: str) -> Vertex:
        return self.named_type(VertexKind.SCALAR, name)

    def directive(self, name: str) -> Vertex:
        return self._add(f"@{name}", VertexKind.DIRECTIVE, name)

    def type_vertex(self, type_ref: str) -> Vertex:
        """Return the vertex for the named type inside a type reference."""
        name = type_ref.strip("[]!")
        vertex = self.graph.get_vertex(f"{self.side}:{name}")
        return vertex if vertex is not None else self.scalar(name)

    def field(self, container: Vertex, name: str, type_ref: str = "String") -> Vertex:
        field = self._add(f"{container.name}.{name}", VertexKind.FIELD, name)
        self.graph.add_edge(Edge(container, field))
        self.graph.add_edge(
            Edge(field, self.type_vertex(type_ref), encode_type_label(type_ref))
        )
        return field

    def argument(
        self,
        owner: Vertex,
        name: str,
        type_ref: str = "Int",
        default_value: str | None = None,
    ) -> Vertex:
        argument = self._add(
            f"{owner.id.split(':', 1)[1]}({name})", VertexKind.ARGUMENT, name
        )
        self.graph.add_edge(Edge(owner, argument))
        self.graph.add_edge(
            Edge(
                argument,
                self.type_vertex(type_ref),
                encode_type_label(type_ref, default_value),
            )
        )
        return argument

    def implements(self, implementer: Vertex, interface: Vertex) -> Edge:
        return self.graph.add_edge(
            Edge(implementer, interface, f"implements {interface.name}")
        )

    def member(self, union: Vertex, member: Vertex) -> Edge:
        return self.graph.add_edge(Edge(union, member))

    def type_edge(self, vertex: Vertex) -> Edge:
        """The single outgoing type edge of a field or argument."""
        (edge,) = [
            edge
            for edge in self.graph.get_adjacent_edges(vertex)
            if edge.label.startswith("type=")
        ]
        return edge

    def edge(self, from_vertex: Vertex, to_vertex: Vertex) -> Edge:
        edge = self.graph.get_edge(from_vertex, to_vertex)
        assert edge is not None
        return edge


class SchemaDiffFixture:
    """Old and new graph builders plus the mapping between them."""

    def __init__(self) -> None:
        self.old = GraphBuilder("old")
        self.new = GraphBuilder("new")
        self.mapping = Mapping()

    def map(self, *pairs: tuple[Vertex, Vertex]) -> None:
        for source, target in pairs:
            self.mapping.put(source, target)

    def map_by_id(self) -> None:
        """Map every old vertex to the new vertex with the same local id."""
        for vertex in self.old.graph.vertices:
            local_id = vertex.id.split(":", 1)[1]
            target = self.new.graph.get_vertex(f"new:{local_id}")
            if target is not None and not self.mapping.contains_target(target):
                self.mapping.put(vertex, target)

    def analyze(self, operations: list[EditOperation]):
        from schemadiff.analysis import analyze_edits

        return analyze_edits(
            self.old.graph, self.new.graph, operations, self.mapping
        )


@pytest.fixture
def schemas() -> SchemaDiffFixture:
    """Empty old/new schema graphs with an empty mapping."""
    return SchemaDiffFixture()
