"""Edit operations and vertex mapping produced by the graph matching engine."""

from dataclasses import dataclass
from enum import Enum

from .graph import Edge, Vertex


class Operation(str, Enum):
    """Kinds of atomic graph edits."""

    INSERT_VERTEX = "insert_vertex"
    DELETE_VERTEX = "delete_vertex"
    CHANGE_VERTEX = "change_vertex"
    INSERT_EDGE = "insert_edge"
    DELETE_EDGE = "delete_edge"
    CHANGE_EDGE = "change_edge"


@dataclass(frozen=True)
class EditOperation:
    """One atomic edit transforming the old schema graph into the new one.

    Source elements belong to the old graph, target elements to the new one.
    Insertions only carry a target, deletions only a source and changes both.
    Use the named constructors rather than building instances directly.
    """

    operation: Operation
    source_vertex: Vertex | None = None
    target_vertex: Vertex | None = None
    source_edge: Edge | None = None
    target_edge: Edge | None = None

    def __post_init__(self) -> None:
        vertex_operation = self.operation in (
            Operation.INSERT_VERTEX,
            Operation.DELETE_VERTEX,
            Operation.CHANGE_VERTEX,
        )
        if vertex_operation:
            source, target = self.source_vertex, self.target_vertex
            others = (self.source_edge, self.target_edge)
        else:
            source, target = self.source_edge, self.target_edge
            others = (self.source_vertex, self.target_vertex)

        if any(other is not None for other in others):
            raise ValueError(f"{self.operation.value} mixes vertices and edges")

        needs_source = not self.operation.value.startswith("insert")
        needs_target = not self.operation.value.startswith("delete")
        if (source is not None) != needs_source or (
            target is not None
        ) != needs_target:
            raise ValueError(f"{self.operation.value} has the wrong sides set")

    @classmethod
    def insert_vertex(cls, target: Vertex) -> "EditOperation":
        return cls(Operation.INSERT_VERTEX, target_vertex=target)

    @classmethod
    def delete_vertex(cls, source: Vertex) -> "EditOperation":
        return cls(Operation.DELETE_VERTEX, source_vertex=source)

    @classmethod
    def change_vertex(cls, source: Vertex, target: Vertex) -> "EditOperation":
        return cls(Operation.CHANGE_VERTEX, source_vertex=source, target_vertex=target)

    @classmethod
    def insert_edge(cls, target: Edge) -> "EditOperation":
        return cls(Operation.INSERT_EDGE, target_edge=target)

    @classmethod
    def delete_edge(cls, source: Edge) -> "EditOperation":
        return cls(Operation.DELETE_EDGE, source_edge=source)

    @classmethod
    def change_edge(cls, source: Edge, target: Edge) -> "EditOperation":
        return cls(Operation.CHANGE_EDGE, source_edge=source, target_edge=target)

    def __str__(self) -> str:
        parts = [
            repr(element)
            for element in (
                self.source_vertex,
                self.target_vertex,
                self.source_edge,
                self.target_edge,
            )
            if element is not None
        ]
        return f"{self.operation.value}({', '.join(parts)})"


class Mapping:
    """One-to-one correspondence between old (source) and new (target) vertices.

    Only matched vertices are present; inserted vertices have no source and
    deleted vertices have no target.
    """

    def __init__(self) -> None:
        self._target_by_source: dict[Vertex, Vertex] = {}
        self._source_by_target: dict[Vertex, Vertex] = {}

    def put(self, source: Vertex, target: Vertex) -> None:
        """Record that ``source`` in the old graph became ``target``.

        Raises:
            ValueError: If either vertex is already mapped to another partner
        """
        current_target = self._target_by_source.get(source)
        current_source = self._source_by_target.get(target)
        if (current_target is not None and current_target is not target) or (
            current_source is not None and current_source is not source
        ):
            raise ValueError(f"Conflicting mapping for {source!r} -> {target!r}")

        self._target_by_source[source] = target
        self._source_by_target[target] = source

    def get_source(self, target: Vertex) -> Vertex | None:
        """Pre-image of a new-graph vertex, or None if it was inserted."""
        return self._source_by_target.get(target)

    def get_target(self, source: Vertex) -> Vertex | None:
        """Image of an old-graph vertex, or None if it was deleted."""
        return self._target_by_source.get(source)

    def contains_source(self, source: Vertex) -> bool:
        return source in self._target_by_source

    def contains_target(self, target: Vertex) -> bool:
        return target in self._source_by_target

    def __len__(self) -> int:
        return len(self._target_by_source)
