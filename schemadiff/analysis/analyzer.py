"""Semantic analysis of schema graph edit operations.

The graph matching engine describes the difference between two schema
graphs as a flat list of vertex and edge edits plus a vertex mapping. This
module turns that list into per-type difference records (see
``schemadiff.analysis.differences``).

Analysis runs in fixed, ordered passes over the full edit list:

1. Type vertices: seed addition, deletion and modification records.
2. Field vertices: field renames, additions and deletions, argument deletions.
3. Type edges: field type changes, argument type and default value changes.
4. Implements edges: interface implementations added or removed.
5. Union edges: union members added or removed.

Every later pass depends on the records seeded by the first one. Member
level details are never recorded for a type that was added or deleted as a
whole, because the addition or deletion already covers its contents.
"""

from collections.abc import Sequence
from dataclasses import replace
from typing import Any, Generic, TypeVar

from ..core.edge_labels import (
    decode_type_label,
    get_type_from_label,
    is_implements_label,
    is_type_label,
)
from ..core.edit_operations import EditOperation, Mapping, Operation
from ..core.errors import assert_should_never_happen, assert_true
from ..core.graph import Edge, SchemaGraph, Vertex, VertexKind
from ..core.logging import AnalysisPassLogger, get_logger
from ..core.scalars import is_built_in_scalar
from .differences import (
    EditOperationAnalysisResult,
    EnumAddition,
    EnumDeletion,
    EnumModification,
    InputObjectAddition,
    InputObjectDeletion,
    InputObjectModification,
    InterfaceAddition,
    InterfaceDeletion,
    InterfaceFieldAddition,
    InterfaceFieldArgumentDefaultValueModification,
    InterfaceFieldArgumentDeletion,
    InterfaceFieldArgumentTypeModification,
    InterfaceFieldDeletion,
    InterfaceFieldRename,
    InterfaceFieldTypeModification,
    InterfaceInterfaceImplementationAddition,
    InterfaceInterfaceImplementationDeletion,
    InterfaceModification,
    ObjectAddition,
    ObjectDeletion,
    ObjectFieldAddition,
    ObjectFieldArgumentDefaultValueModification,
    ObjectFieldArgumentDeletion,
    ObjectFieldArgumentTypeModification,
    ObjectFieldDeletion,
    ObjectFieldRename,
    ObjectFieldTypeModification,
    ObjectInterfaceImplementationAddition,
    ObjectInterfaceImplementationDeletion,
    ObjectModification,
    ScalarAddition,
    ScalarDeletion,
    ScalarModification,
    UnionAddition,
    UnionDeletion,
    UnionMemberAddition,
    UnionMemberDeletion,
    UnionModification,
)

logger = get_logger(__name__)

R = TypeVar("R")


class _DifferenceLedger(Generic[R]):
    """Insertion-ordered difference records for one type kind.

    A name receives at most one record. Additions and deletions are final;
    modifications collect details until the ledger is frozen.
    """

    def __init__(
        self,
        kind: VertexKind,
        addition: type[Any],
        deletion: type[Any],
        modification: type[Any],
    ):
        self.kind = kind
        self._addition = addition
        self._deletion = deletion
        self._modification = modification
        self._records: dict[str, Any] = {}
        self._details: dict[str, list[Any]] = {}

    def seed_addition(self, name: str, operation: EditOperation) -> None:
        self._seed(name, self._addition(name), operation)

    def seed_deletion(self, name: str, operation: EditOperation) -> None:
        self._seed(name, self._deletion(name), operation)

    def seed_modification(self, name: str, operation: EditOperation) -> None:
        self._seed(name, self._modification(name), operation)

    def _seed(self, name: str, record: Any, operation: EditOperation) -> None:
        existing = self._records.get(name)
        assert_true(
            existing is None,
            f"{self.kind.value} {name!r} already recorded as "
            f"{type(existing).__name__}, cannot record {type(record).__name__}",
            operation,
        )
        self._records[name] = record
        if isinstance(record, self._modification):
            self._details[name] = []

    def was_added(self, name: str) -> bool:
        return isinstance(self._records.get(name), self._addition)

    def was_deleted(self, name: str) -> bool:
        return isinstance(self._records.get(name), self._deletion)

    def details(self, name: str, operation: EditOperation) -> list[Any]:
        """Fetch or create the modification for ``name`` and return its details.

        Raises:
            InternalConsistencyError: If ``name`` is recorded as an addition
                or deletion
        """
        record = self._records.get(name)
        if record is None:
            self._records[name] = self._modification(name)
            self._details[name] = []
        else:
            assert_true(
                isinstance(record, self._modification),
                f"Expected {self.kind.value} {name!r} to be a modification, "
                f"found {type(record).__name__}",
                operation,
            )
        return self._details[name]

    def recorded_details(self, name: str) -> list[Any]:
        """Details recorded so far for ``name``, without creating a record."""
        return list(self._details.get(name, []))

    def freeze(self) -> dict[str, R]:
        frozen: dict[str, R] = {}
        for name, record in self._records.items():
            if isinstance(record, self._modification):
                record = replace(record, details=tuple(self._details[name]))
            frozen[name] = record
        return frozen

    def __len__(self) -> int:
        return len(self._records)


class EditOperationAnalyzer:
    """Assigns schema-level meaning to graph edit operations.

    Instances are single use: create a new analyzer (or call
    ``analyze_edits``) for every pair of schema graphs.

    Usage:
        analyzer = EditOperationAnalyzer(old_graph, new_graph)
        result = analyzer.analyze(edit_operations, mapping)
    """

    def __init__(self, old_graph: SchemaGraph, new_graph: SchemaGraph):
        self.old_graph = old_graph
        self.new_graph = new_graph

        self._objects: _DifferenceLedger = _DifferenceLedger(
            VertexKind.OBJECT, ObjectAddition, ObjectDeletion, ObjectModification
        )
        self._interfaces: _DifferenceLedger = _DifferenceLedger(
            VertexKind.INTERFACE,
            InterfaceAddition,
            InterfaceDeletion,
            InterfaceModification,
        )
        self._unions: _DifferenceLedger = _DifferenceLedger(
            VertexKind.UNION, UnionAddition, UnionDeletion, UnionModification
        )
        self._enums: _DifferenceLedger = _DifferenceLedger(
            VertexKind.ENUM, EnumAddition, EnumDeletion, EnumModification
        )
        self._input_objects: _DifferenceLedger = _DifferenceLedger(
            VertexKind.INPUT_OBJECT,
            InputObjectAddition,
            InputObjectDeletion,
            InputObjectModification,
        )
        self._scalars: _DifferenceLedger = _DifferenceLedger(
            VertexKind.SCALAR, ScalarAddition, ScalarDeletion, ScalarModification
        )
        self._ledgers = {
            ledger.kind: ledger
            for ledger in (
                self._objects,
                self._interfaces,
                self._unions,
                self._enums,
                self._input_objects,
                self._scalars,
            )
        }

        self._analyzed = False
        self._pass: AnalysisPassLogger | None = None

    def analyze(
        self, edit_operations: Sequence[EditOperation], mapping: Mapping
    ) -> EditOperationAnalysisResult:
        """Classify all edit operations into difference records.

        Args:
            edit_operations: Ordered edit operations from the graph matcher
            mapping: Correspondence between old and new graph vertices

        Returns:
            EditOperationAnalysisResult with one mapping per type kind

        Raises:
            InternalConsistencyError: If the edit operations violate the
                matcher's labelling or pairing guarantees
        """
        assert_true(not self._analyzed, "EditOperationAnalyzer is single use")
        self._analyzed = True

        operations = list(edit_operations)
        passes = [
            ("type_vertices", self._handle_type_vertex_changes),
            ("field_vertices", self._handle_field_vertex_changes),
            ("type_edges", self._handle_type_edge_changes),
            ("implements_edges", self._handle_implements_changes),
            ("union_members", self._handle_union_member_changes),
        ]
        for name, run_pass in passes:
            with AnalysisPassLogger(logger, name) as pass_logger:
                self._pass = pass_logger
                run_pass(operations, mapping)
        self._pass = None

        result = EditOperationAnalysisResult.from_dicts(
            object_differences=self._objects.freeze(),
            interface_differences=self._interfaces.freeze(),
            union_differences=self._unions.freeze(),
            enum_differences=self._enums.freeze(),
            input_object_differences=self._input_objects.freeze(),
            scalar_differences=self._scalars.freeze(),
        )
        logger.debug(
            "Edit operation analysis completed",
            operations=len(operations),
            objects=len(self._objects),
            interfaces=len(self._interfaces),
            unions=len(self._unions),
            enums=len(self._enums),
            input_objects=len(self._input_objects),
            scalars=len(self._scalars),
        )
        return result

    # ------------------------------------------------------------------
    # Pass 1: type vertices
    # ------------------------------------------------------------------

    def _handle_type_vertex_changes(
        self, operations: list[EditOperation], _mapping: Mapping
    ) -> None:
        for operation in operations:
            match operation.operation:
                case Operation.INSERT_VERTEX:
                    self._inserted_type_vertex(operation)
                case Operation.DELETE_VERTEX:
                    self._deleted_type_vertex(operation)
                case Operation.CHANGE_VERTEX:
                    self._changed_type_vertex(operation)

    def _inserted_type_vertex(self, operation: EditOperation) -> None:
        vertex = _target_vertex(operation)
        if not vertex.kind.is_named_type:
            return
        if vertex.is_of_kind(VertexKind.SCALAR) and is_built_in_scalar(vertex.name):
            self._skip("built-in scalar", operation)
            return
        self._ledgers[vertex.kind].seed_addition(vertex.name, operation)

    def _deleted_type_vertex(self, operation: EditOperation) -> None:
        vertex = _source_vertex(operation)
        if vertex.kind.is_named_type:
            self._ledgers[vertex.kind].seed_deletion(vertex.name, operation)

    def _changed_type_vertex(self, operation: EditOperation) -> None:
        vertex = _target_vertex(operation)
        if not vertex.kind.is_named_type:
            return
        assert_true(
            _source_vertex(operation).kind == vertex.kind,
            "A changed vertex must keep its kind",
            operation,
        )
        # modifications are keyed by the new name
        self._ledgers[vertex.kind].seed_modification(vertex.name, operation)

    # ------------------------------------------------------------------
    # Pass 2: field and argument vertices
    # ------------------------------------------------------------------

    def _handle_field_vertex_changes(
        self, operations: list[EditOperation], mapping: Mapping
    ) -> None:
        for operation in operations:
            match operation.operation:
                case Operation.CHANGE_VERTEX:
                    if _target_vertex(operation).is_of_kind(VertexKind.FIELD):
                        self._field_changed(operation)
                case Operation.INSERT_VERTEX:
                    if _target_vertex(operation).is_of_kind(VertexKind.FIELD):
                        self._field_added(operation)
                case Operation.DELETE_VERTEX:
                    removed = _source_vertex(operation)
                    if removed.is_of_kind(VertexKind.FIELD):
                        self._field_deleted(operation, mapping)
                    elif removed.is_of_kind(VertexKind.ARGUMENT):
                        self._argument_deleted(operation, mapping)

    def _field_changed(self, operation: EditOperation) -> None:
        field = _target_vertex(operation)
        old_name = _source_vertex(operation).name
        if old_name == field.name:
            return

        container = self.new_graph.get_fields_container_for_field(field)
        if self._container_was_added(container):
            self._skip("container added", operation, container=container.name)
            return

        self._record_member_detail(
            container,
            operation,
            ObjectFieldRename(old_name, field.name),
            InterfaceFieldRename(old_name, field.name),
        )

    def _field_added(self, operation: EditOperation) -> None:
        field = _target_vertex(operation)
        container = self.new_graph.get_fields_container_for_field(field)
        if self._container_was_added(container):
            self._skip("container added", operation, container=container.name)
            return

        self._record_member_detail(
            container,
            operation,
            ObjectFieldAddition(field.name),
            InterfaceFieldAddition(field.name),
        )

    def _field_deleted(self, operation: EditOperation, mapping: Mapping) -> None:
        field = _source_vertex(operation)
        container = self.old_graph.get_fields_container_for_field(field)
        if self._container_was_deleted(container):
            self._skip("container deleted", operation, container=container.name)
            return

        self._record_member_detail(
            container,
            operation,
            ObjectFieldDeletion(field.name),
            InterfaceFieldDeletion(field.name),
            container_name=_current_name(container, mapping),
        )

    def _argument_deleted(self, operation: EditOperation, mapping: Mapping) -> None:
        argument = _source_vertex(operation)
        owner = self.old_graph.get_field_or_directive_for_argument(argument)
        if owner.is_of_kind(VertexKind.DIRECTIVE):
            return

        new_field = mapping.get_target(owner)
        if new_field is None:
            self._skip("field deleted", operation, field=owner.name)
            return

        container = self.old_graph.get_fields_container_for_field(owner)
        if self._container_was_deleted(container):
            self._skip("container deleted", operation, container=container.name)
            return

        self._record_member_detail(
            container,
            operation,
            ObjectFieldArgumentDeletion(new_field.name, argument.name),
            InterfaceFieldArgumentDeletion(new_field.name, argument.name),
            container_name=_current_name(container, mapping),
        )

    # ------------------------------------------------------------------
    # Pass 3: type edges
    # ------------------------------------------------------------------

    def _handle_type_edge_changes(
        self, operations: list[EditOperation], mapping: Mapping
    ) -> None:
        for operation in operations:
            match operation.operation:
                case Operation.INSERT_EDGE:
                    if is_type_label(_target_edge_label(operation)):
                        self._type_edge_inserted(operation, operations, mapping)
                case Operation.CHANGE_EDGE:
                    if is_type_label(_target_edge_label(operation)):
                        self._type_edge_changed(operation)

    def _type_edge_inserted(
        self,
        operation: EditOperation,
        operations: list[EditOperation],
        mapping: Mapping,
    ) -> None:
        edge = operation.target_edge
        assert edge is not None
        if edge.from_vertex.is_of_kind(VertexKind.ARGUMENT):
            self._argument_type_edge_inserted(operation, operations, mapping)
            return
        field = edge.from_vertex
        if not field.is_of_kind(VertexKind.FIELD):
            return

        container = self.new_graph.get_fields_container_for_field(field)
        if self._container_was_added(container):
            self._skip("container added", operation, container=container.name)
            return
        if self._field_was_added(container, field.name):
            self._skip("field added", operation, field=field.name)
            return

        # an existing field changed its type: the old type edge must be deleted
        new_type = get_type_from_label(edge)
        deleted = self._find_deleted_type_edge(field, operations, mapping, operation)
        assert deleted.source_edge is not None
        old_type = get_type_from_label(deleted.source_edge)

        self._record_member_detail(
            container,
            operation,
            ObjectFieldTypeModification(field.name, old_type, new_type),
            InterfaceFieldTypeModification(field.name, old_type, new_type),
        )

    def _argument_type_edge_inserted(
        self,
        operation: EditOperation,
        operations: list[EditOperation],
        mapping: Mapping,
    ) -> None:
        edge = operation.target_edge
        assert edge is not None
        argument = edge.from_vertex
        owner = self.new_graph.get_field_or_directive_for_argument(argument)
        if owner.is_of_kind(VertexKind.DIRECTIVE):
            return

        container = self.new_graph.get_fields_container_for_field(owner)
        if self._container_was_added(container):
            self._skip("container added", operation, container=container.name)
            return
        if self._field_was_added(container, owner.name):
            self._skip("field added", operation, field=owner.name)
            return
        if not mapping.contains_target(argument):
            self._skip("argument added", operation, argument=argument.name)
            return

        deleted = self._find_deleted_type_edge(argument, operations, mapping, operation)
        assert deleted.source_edge is not None
        self._record_argument_type_edge_change(
            container, owner, argument, deleted.source_edge, edge, operation
        )

    def _find_deleted_type_edge(
        self,
        vertex: Vertex,
        operations: list[EditOperation],
        mapping: Mapping,
        operation: EditOperation,
    ) -> EditOperation:
        old_vertex = mapping.get_source(vertex)
        assert_true(
            old_vertex is not None,
            f"{vertex.kind.value} {vertex.name!r} has a new type edge "
            "but no pre-image",
            operation,
        )
        for candidate in operations:
            if candidate.operation is not Operation.DELETE_EDGE:
                continue
            deleted_edge = candidate.source_edge
            assert deleted_edge is not None
            if deleted_edge.from_vertex is old_vertex and is_type_label(
                deleted_edge.label
            ):
                return candidate
        return assert_should_never_happen(
            f"No deleted type edge pairs with the new type of "
            f"{vertex.kind.value.lower()} {vertex.name!r}",
            operation,
        )

    def _type_edge_changed(self, operation: EditOperation) -> None:
        edge = operation.target_edge
        assert edge is not None
        if edge.from_vertex.is_of_kind(VertexKind.FIELD):
            self._field_type_changed(operation)
        elif edge.from_vertex.is_of_kind(VertexKind.ARGUMENT):
            self._argument_type_edge_changed(operation)

    def _field_type_changed(self, operation: EditOperation) -> None:
        source_edge, target_edge = operation.source_edge, operation.target_edge
        assert source_edge is not None and target_edge is not None
        field = target_edge.from_vertex
        container = self.new_graph.get_fields_container_for_field(field)
        if self._container_was_added(container):
            self._skip("container added", operation, container=container.name)
            return

        old_type = get_type_from_label(source_edge)
        new_type = get_type_from_label(target_edge)
        self._record_member_detail(
            container,
            operation,
            ObjectFieldTypeModification(field.name, old_type, new_type),
            InterfaceFieldTypeModification(field.name, old_type, new_type),
        )

    def _argument_type_edge_changed(self, operation: EditOperation) -> None:
        source_edge, target_edge = operation.source_edge, operation.target_edge
        assert source_edge is not None and target_edge is not None
        argument = target_edge.from_vertex
        owner = self.new_graph.get_field_or_directive_for_argument(argument)
        if owner.is_of_kind(VertexKind.DIRECTIVE):
            return

        container = self.new_graph.get_fields_container_for_field(owner)
        if self._container_was_added(container):
            self._skip("container added", operation, container=container.name)
            return

        self._record_argument_type_edge_change(
            container, owner, argument, source_edge, target_edge, operation
        )

    def _record_argument_type_edge_change(
        self,
        container: Vertex,
        owner: Vertex,
        argument: Vertex,
        source_edge: Edge,
        target_edge: Edge,
        operation: EditOperation,
    ) -> None:
        """Record what differs between an argument's old and new type edge."""
        old_type, old_default = decode_type_label(source_edge.label)
        new_type, new_default = decode_type_label(target_edge.label)
        if old_type != new_type:
            self._record_member_detail(
                container,
                operation,
                ObjectFieldArgumentTypeModification(
                    owner.name, argument.name, old_type, new_type
                ),
                InterfaceFieldArgumentTypeModification(
                    owner.name, argument.name, old_type, new_type
                ),
            )
        if old_default != new_default:
            self._record_member_detail(
                container,
                operation,
                ObjectFieldArgumentDefaultValueModification(
                    owner.name, argument.name, old_default, new_default
                ),
                InterfaceFieldArgumentDefaultValueModification(
                    owner.name, argument.name, old_default, new_default
                ),
            )

    # ------------------------------------------------------------------
    # Pass 4: implements edges
    # ------------------------------------------------------------------

    def _handle_implements_changes(
        self, operations: list[EditOperation], mapping: Mapping
    ) -> None:
        for operation in operations:
            match operation.operation:
                case Operation.INSERT_EDGE:
                    if is_implements_label(_target_edge_label(operation)):
                        self._interface_implementation_added(operation)
                case Operation.DELETE_EDGE:
                    if is_implements_label(_source_edge_label(operation)):
                        self._interface_implementation_deleted(operation, mapping)

    def _interface_implementation_added(self, operation: EditOperation) -> None:
        edge = operation.target_edge
        assert edge is not None
        implementer, interface = edge.from_vertex, edge.to_vertex
        self._assert_implementer(implementer, operation)
        if self._container_was_added(implementer):
            self._skip("implementer added", operation, implementer=implementer.name)
            return

        self._record_member_detail(
            implementer,
            operation,
            ObjectInterfaceImplementationAddition(interface.name),
            InterfaceInterfaceImplementationAddition(interface.name),
        )

    def _interface_implementation_deleted(
        self, operation: EditOperation, mapping: Mapping
    ) -> None:
        edge = operation.source_edge
        assert edge is not None
        implementer, interface = edge.from_vertex, edge.to_vertex
        self._assert_implementer(implementer, operation)
        if self._container_was_deleted(implementer):
            self._skip("implementer deleted", operation, implementer=implementer.name)
            return

        self._record_member_detail(
            implementer,
            operation,
            ObjectInterfaceImplementationDeletion(interface.name),
            InterfaceInterfaceImplementationDeletion(interface.name),
            container_name=_current_name(implementer, mapping),
        )

    @staticmethod
    def _assert_implementer(vertex: Vertex, operation: EditOperation) -> None:
        if not vertex.is_of_kind(VertexKind.OBJECT, VertexKind.INTERFACE):
            assert_should_never_happen("expected an implementation edge", operation)

    # ------------------------------------------------------------------
    # Pass 5: union members
    # ------------------------------------------------------------------

    def _handle_union_member_changes(
        self, operations: list[EditOperation], mapping: Mapping
    ) -> None:
        for operation in operations:
            match operation.operation:
                case Operation.INSERT_EDGE:
                    edge = operation.target_edge
                    assert edge is not None
                    if edge.from_vertex.is_of_kind(VertexKind.UNION):
                        self._union_member_added(operation)
                case Operation.DELETE_EDGE:
                    edge = operation.source_edge
                    assert edge is not None
                    if edge.from_vertex.is_of_kind(VertexKind.UNION):
                        self._union_member_deleted(operation, mapping)

    def _union_member_added(self, operation: EditOperation) -> None:
        edge = operation.target_edge
        assert edge is not None
        union = edge.from_vertex
        if self._container_was_added(union):
            self._skip("union added", operation, union=union.name)
            return
        self._unions.details(union.name, operation).append(
            UnionMemberAddition(edge.to_vertex.name)
        )

    def _union_member_deleted(self, operation: EditOperation, mapping: Mapping) -> None:
        edge = operation.source_edge
        assert edge is not None
        union = edge.from_vertex
        if self._container_was_deleted(union):
            self._skip("union deleted", operation, union=union.name)
            return
        self._unions.details(_current_name(union, mapping), operation).append(
            UnionMemberDeletion(edge.to_vertex.name)
        )

    # ------------------------------------------------------------------
    # Suppression predicates and accumulator helpers
    # ------------------------------------------------------------------

    def _container_was_added(self, container: Vertex) -> bool:
        """Whether the container was recorded as a whole-type addition."""
        return self._container_ledger(container).was_added(container.name)

    def _container_was_deleted(self, container: Vertex) -> bool:
        """Whether the container was recorded as a whole-type deletion."""
        return self._container_ledger(container).was_deleted(container.name)

    def _container_ledger(self, container: Vertex) -> _DifferenceLedger:
        match container.kind:
            case VertexKind.OBJECT:
                return self._objects
            case VertexKind.INTERFACE:
                return self._interfaces
            case VertexKind.UNION:
                return self._unions
            case _:
                return assert_should_never_happen(
                    f"{container!r} cannot contain members"
                )

    def _field_was_added(self, container: Vertex, field_name: str) -> bool:
        addition = (
            ObjectFieldAddition
            if container.is_of_kind(VertexKind.OBJECT)
            else InterfaceFieldAddition
        )
        return any(
            isinstance(detail, addition) and detail.name == field_name
            for detail in self._container_ledger(container).recorded_details(
                container.name
            )
        )

    def _record_member_detail(
        self,
        container: Vertex,
        operation: EditOperation,
        object_detail: Any,
        interface_detail: Any,
        container_name: str | None = None,
    ) -> None:
        """Append the Object- or Interface-scoped detail to the container."""
        name = container_name if container_name is not None else container.name
        match container.kind:
            case VertexKind.OBJECT:
                self._objects.details(name, operation).append(object_detail)
            case VertexKind.INTERFACE:
                self._interfaces.details(name, operation).append(interface_detail)
            case _:
                assert_should_never_happen(
                    f"{container!r} is not an object or interface", operation
                )

    def _skip(self, reason: str, operation: EditOperation, **kwargs: Any) -> None:
        if self._pass is not None:
            self._pass.log_skip(reason, operation=str(operation), **kwargs)


def analyze_edits(
    old_graph: SchemaGraph,
    new_graph: SchemaGraph,
    edit_operations: Sequence[EditOperation],
    mapping: Mapping,
) -> EditOperationAnalysisResult:
    """Analyze edit operations with a fresh EditOperationAnalyzer.

    The analyzer logs every pass at debug level through structlog. Library
    users who have not set up logging should call
    ``schemadiff.core.logging.configure_logging`` first, otherwise
    structlog's default configuration prints those events to stdout.
    """
    return EditOperationAnalyzer(old_graph, new_graph).analyze(edit_operations, mapping)


def _current_name(old_vertex: Vertex, mapping: Mapping) -> str:
    """Name of an old-graph vertex in the new graph, if it was matched."""
    new_vertex = mapping.get_target(old_vertex)
    return new_vertex.name if new_vertex is not None else old_vertex.name


def _source_vertex(operation: EditOperation) -> Vertex:
    assert operation.source_vertex is not None
    return operation.source_vertex


def _target_vertex(operation: EditOperation) -> Vertex:
    assert operation.target_vertex is not None
    return operation.target_vertex


def _source_edge_label(operation: EditOperation) -> str:
    assert operation.source_edge is not None
    return operation.source_edge.label


def _target_edge_label(operation: EditOperation) -> str:
    assert operation.target_edge is not None
    return operation.target_edge.label
