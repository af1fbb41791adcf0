"""Loading of edit scripts from YAML documents.

An edit script bundles everything the analyzer consumes: both schema
graphs, the vertex mapping and the ordered edit operations produced by the
graph matching engine. Vertices are referenced by id; edges by their
``[from, to]`` vertex ids in the graph they belong to (old graph for
sources, new graph for targets)::

    old_graph:
      vertices:
        - {id: foo, kind: Object, name: Foo}
        - {id: foo.id, kind: Field, name: id}
      edges:
        - {from: foo, to: foo.id}
    new_graph: ...
    mapping:
      - {source: foo, target: foo}
    edit_operations:
      - {operation: change_vertex, source: foo.id, target: foo.uid}
      - {operation: delete_edge, source: [foo.bar, String]}
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
import yaml

from .core.edit_operations import EditOperation, Mapping, Operation
from .core.graph import Edge, SchemaGraph, Vertex, VertexKind
from .core.logging import get_logger

logger = get_logger(__name__)

EdgeRef = tuple[str, str]

_VERTEX_OPERATIONS = {
    Operation.INSERT_VERTEX,
    Operation.DELETE_VERTEX,
    Operation.CHANGE_VERTEX,
}


class EditScriptLoadError(Exception):
    """Raised when an edit script cannot be read or resolved."""

    pass


class VertexSpec(BaseModel):
    """A vertex as written in an edit script."""

    model_config = ConfigDict(extra="forbid")

    id: str
    kind: VertexKind
    name: str


class EdgeSpec(BaseModel):
    """An edge as written in an edit script."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    from_id: str = Field(alias="from")
    to_id: str = Field(alias="to")
    label: str = ""


class GraphSpec(BaseModel):
    """One schema graph snapshot."""

    vertices: list[VertexSpec] = Field(default_factory=list)
    edges: list[EdgeSpec] = Field(default_factory=list)


class MappingEntry(BaseModel):
    """Correspondence between an old and a new vertex id."""

    source: str
    target: str


class OperationSpec(BaseModel):
    """One edit operation; vertex operations use ids, edge operations pairs."""

    model_config = ConfigDict(extra="forbid")

    operation: Operation
    source: str | EdgeRef | None = None
    target: str | EdgeRef | None = None


class EditScriptDocument(BaseModel):
    """Top-level structure of an edit script file."""

    old_graph: GraphSpec
    new_graph: GraphSpec
    mapping: list[MappingEntry] = Field(default_factory=list)
    edit_operations: list[OperationSpec] = Field(default_factory=list)


@dataclass
class EditScript:
    """Resolved analyzer inputs."""

    old_graph: SchemaGraph
    new_graph: SchemaGraph
    edit_operations: list[EditOperation]
    mapping: Mapping


def load_edit_script(path: str | Path) -> EditScript:
    """Load and resolve an edit script from a YAML file.

    Args:
        path: Path to the YAML edit script

    Returns:
        EditScript ready to be passed to the analyzer

    Raises:
        EditScriptLoadError: If the file cannot be read, parsed or resolved
    """
    script_path = Path(path)
    try:
        with script_path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as e:
        raise EditScriptLoadError(
            f"Failed to read edit script {script_path}: {e}"
        ) from e

    script = parse_edit_script(data)
    logger.info(
        "Edit script loaded",
        path=str(script_path),
        operations=len(script.edit_operations),
        mapped_vertices=len(script.mapping),
    )
    return script


def parse_edit_script(data: Any) -> EditScript:
    """Validate an edit script document and build the analyzer inputs.

    Raises:
        EditScriptLoadError: If the document is malformed or references
            unknown vertices or edges
    """
    if not isinstance(data, dict):
        raise EditScriptLoadError("Edit script must be a mapping at the top level")

    try:
        document = EditScriptDocument.model_validate(data)
    except ValidationError as e:
        raise EditScriptLoadError(f"Invalid edit script: {e}") from e

    try:
        old_graph = _build_graph(document.old_graph, "old")
        new_graph = _build_graph(document.new_graph, "new")

        mapping = Mapping()
        for entry in document.mapping:
            mapping.put(
                _resolve_vertex(old_graph, entry.source, "old"),
                _resolve_vertex(new_graph, entry.target, "new"),
            )

        operations = [
            _build_operation(spec, old_graph, new_graph)
            for spec in document.edit_operations
        ]
    except ValueError as e:
        raise EditScriptLoadError(str(e)) from e

    return EditScript(
        old_graph=old_graph,
        new_graph=new_graph,
        edit_operations=operations,
        mapping=mapping,
    )


def _build_graph(spec: GraphSpec, side: str) -> SchemaGraph:
    graph = SchemaGraph()
    for vertex_spec in spec.vertices:
        graph.add_vertex(Vertex(vertex_spec.id, vertex_spec.kind, vertex_spec.name))
    for edge_spec in spec.edges:
        graph.add_edge(
            Edge(
                _resolve_vertex(graph, edge_spec.from_id, side),
                _resolve_vertex(graph, edge_spec.to_id, side),
                edge_spec.label,
            )
        )
    return graph


def _build_operation(
    spec: OperationSpec, old_graph: SchemaGraph, new_graph: SchemaGraph
) -> EditOperation:
    if spec.operation in _VERTEX_OPERATIONS:
        return EditOperation(
            spec.operation,
            source_vertex=_vertex_ref(old_graph, spec.source, "old"),
            target_vertex=_vertex_ref(new_graph, spec.target, "new"),
        )
    return EditOperation(
        spec.operation,
        source_edge=_edge_ref(old_graph, spec.source, "old"),
        target_edge=_edge_ref(new_graph, spec.target, "new"),
    )


def _vertex_ref(
    graph: SchemaGraph, ref: str | EdgeRef | None, side: str
) -> Vertex | None:
    if ref is None:
        return None
    if not isinstance(ref, str):
        raise ValueError(f"Vertex operations take vertex ids, got {list(ref)}")
    return _resolve_vertex(graph, ref, side)


def _edge_ref(graph: SchemaGraph, ref: str | EdgeRef | None, side: str) -> Edge | None:
    if ref is None:
        return None
    if isinstance(ref, str):
        raise ValueError(f"Edge operations take [from, to] pairs, got {ref!r}")

    from_id, to_id = ref
    edge = graph.get_edge(
        _resolve_vertex(graph, from_id, side), _resolve_vertex(graph, to_id, side)
    )
    if edge is None:
        raise ValueError(f"Unknown {side} graph edge: {from_id} -> {to_id}")
    return edge


def _resolve_vertex(graph: SchemaGraph, vertex_id: str, side: str) -> Vertex:
    vertex = graph.get_vertex(vertex_id)
    if vertex is None:
        raise ValueError(f"Unknown {side} graph vertex: {vertex_id}")
    return vertex
