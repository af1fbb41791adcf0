"""Schema graph data structures consumed by the edit operation analyzer.

A schema graph has one vertex per named schema element (types, fields,
arguments, directives) and labelled edges for the relations between them:
container to field, field to argument, field or argument to its type,
object or interface to implemented interface, union to member.

Graphs are built by an external graph builder; this module only defines
the model and the lookups the analyzer needs.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import InternalConsistencyError


class VertexKind(str, Enum):
    """Kinds of vertices that can appear in a schema graph."""

    OBJECT = "Object"
    INTERFACE = "Interface"
    UNION = "Union"
    INPUT_OBJECT = "InputObject"
    ENUM = "Enum"
    SCALAR = "Scalar"
    FIELD = "Field"
    ARGUMENT = "Argument"
    DIRECTIVE = "Directive"

    @property
    def is_named_type(self) -> bool:
        """Whether vertices of this kind represent top-level schema types."""
        return self in NAMED_TYPE_KINDS


NAMED_TYPE_KINDS = frozenset(
    {
        VertexKind.OBJECT,
        VertexKind.INTERFACE,
        VertexKind.UNION,
        VertexKind.INPUT_OBJECT,
        VertexKind.ENUM,
        VertexKind.SCALAR,
    }
)


@dataclass(frozen=True, eq=False)
class Vertex:
    """A single schema element.

    Vertices compare by identity: two fields called ``id`` on different
    objects are different vertices even though their names match.
    """

    id: str
    kind: VertexKind
    name: str

    def is_of_kind(self, *kinds: VertexKind) -> bool:
        """Check whether this vertex has any of the given kinds."""
        return self.kind in kinds

    def __repr__(self) -> str:
        return f"Vertex({self.id!r}, {self.kind.value}, {self.name!r})"


@dataclass(frozen=True, eq=False)
class Edge:
    """A labelled, directed relation between two vertices."""

    from_vertex: Vertex
    to_vertex: Vertex
    label: str = ""

    def __repr__(self) -> str:
        return (
            f"Edge({self.from_vertex.id!r} -> {self.to_vertex.id!r}, "
            f"label={self.label!r})"
        )


class SchemaGraph:
    """Vertices and edges of one schema snapshot."""

    def __init__(self) -> None:
        self._vertices: dict[str, Vertex] = {}
        self._edges: dict[tuple[str, str], Edge] = {}
        self._outgoing: dict[str, list[Edge]] = {}
        self._incoming: dict[str, list[Edge]] = {}

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices.values())

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges.values())

    def add_vertex(self, vertex: Vertex) -> Vertex:
        """Add a vertex to the graph.

        Raises:
            ValueError: If a different vertex with the same id already exists
        """
        existing = self._vertices.get(vertex.id)
        if existing is not None and existing is not vertex:
            raise ValueError(f"Duplicate vertex id: {vertex.id}")
        self._vertices[vertex.id] = vertex
        self._outgoing.setdefault(vertex.id, [])
        self._incoming.setdefault(vertex.id, [])
        return vertex

    def add_edge(self, edge: Edge) -> Edge:
        """Add an edge between two vertices already in the graph.

        Raises:
            ValueError: If an endpoint is unknown or the edge already exists
        """
        for endpoint in (edge.from_vertex, edge.to_vertex):
            if self._vertices.get(endpoint.id) is not endpoint:
                raise ValueError(f"Edge endpoint not in graph: {endpoint!r}")

        key = (edge.from_vertex.id, edge.to_vertex.id)
        if key in self._edges:
            raise ValueError(f"Duplicate edge: {key[0]} -> {key[1]}")

        self._edges[key] = edge
        self._outgoing[edge.from_vertex.id].append(edge)
        self._incoming[edge.to_vertex.id].append(edge)
        return edge

    def get_vertex(self, vertex_id: str) -> Vertex | None:
        return self._vertices.get(vertex_id)

    def get_edge(self, from_vertex: Vertex, to_vertex: Vertex) -> Edge | None:
        edge = self._edges.get((from_vertex.id, to_vertex.id))
        if edge is None or edge.from_vertex is not from_vertex:
            return None
        return edge

    def get_adjacent_edges(self, vertex: Vertex) -> list[Edge]:
        """Edges leaving the given vertex."""
        return list(self._outgoing.get(vertex.id, []))

    def get_adjacent_edges_inverse(self, vertex: Vertex) -> list[Edge]:
        """Edges arriving at the given vertex."""
        return list(self._incoming.get(vertex.id, []))

    def get_fields_container_for_field(self, field: Vertex) -> Vertex:
        """Return the object or interface declaring the given field.

        Raises:
            InternalConsistencyError: If the field does not have exactly one
                object or interface container
        """
        return self._single_owner(
            field, VertexKind.FIELD, (VertexKind.OBJECT, VertexKind.INTERFACE)
        )

    def get_field_or_directive_for_argument(self, argument: Vertex) -> Vertex:
        """Return the field or directive declaring the given argument.

        Raises:
            InternalConsistencyError: If the argument does not have exactly one
                field or directive owner
        """
        return self._single_owner(
            argument, VertexKind.ARGUMENT, (VertexKind.FIELD, VertexKind.DIRECTIVE)
        )

    def _single_owner(
        self,
        vertex: Vertex,
        expected_kind: VertexKind,
        owner_kinds: tuple[VertexKind, ...],
    ) -> Vertex:
        if not vertex.is_of_kind(expected_kind):
            raise InternalConsistencyError(
                f"Expected a {expected_kind.value} vertex, got {vertex!r}"
            )

        owners = [
            edge.from_vertex
            for edge in self.get_adjacent_edges_inverse(vertex)
            if edge.from_vertex.is_of_kind(*owner_kinds)
        ]
        if len(owners) != 1:
            kinds = "/".join(kind.value for kind in owner_kinds)
            raise InternalConsistencyError(
                f"Expected exactly one {kinds} owning {vertex!r}, found {len(owners)}"
            )
        return owners[0]

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return (
            isinstance(vertex, Vertex) and self._vertices.get(vertex.id) is vertex
        )
