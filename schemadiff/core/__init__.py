"""Graph model, edit operations and shared infrastructure."""

from .edge_labels import (
    DEFAULT_VALUE_SEPARATOR,
    IMPLEMENTS_PREFIX,
    TYPE_PREFIX,
    decode_type_label,
    encode_type_label,
    get_default_value_from_label,
    get_type_from_label,
    is_implements_label,
    is_type_label,
)
from .edit_operations import EditOperation, Mapping, Operation
from .errors import InternalConsistencyError, assert_should_never_happen, assert_true
from .graph import NAMED_TYPE_KINDS, Edge, SchemaGraph, Vertex, VertexKind
from .logging import (
    AnalysisPassLogger,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from .scalars import BUILT_IN_SCALARS, is_built_in_scalar

__all__ = [
    # Graph model
    "NAMED_TYPE_KINDS",
    "Edge",
    "SchemaGraph",
    "Vertex",
    "VertexKind",
    # Edit operations
    "EditOperation",
    "Mapping",
    "Operation",
    # Edge labels
    "DEFAULT_VALUE_SEPARATOR",
    "IMPLEMENTS_PREFIX",
    "TYPE_PREFIX",
    "decode_type_label",
    "encode_type_label",
    "get_default_value_from_label",
    "get_type_from_label",
    "is_implements_label",
    "is_type_label",
    # Scalars
    "BUILT_IN_SCALARS",
    "is_built_in_scalar",
    # Errors
    "InternalConsistencyError",
    "assert_should_never_happen",
    "assert_true",
    # Logging
    "AnalysisPassLogger",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
]
