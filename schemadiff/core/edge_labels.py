"""Encoding and decoding of schema graph edge labels.

Type edges (field or argument to its type) carry the printed type
reference and the argument default value in one label::

    type=[String!]!;defaultValue="hello"

An absent default value is encoded as the empty string.
"""

from .errors import assert_true
from .graph import Edge

TYPE_PREFIX = "type="
DEFAULT_VALUE_SEPARATOR = ";defaultValue="
IMPLEMENTS_PREFIX = "implements "


def encode_type_label(type_ref: str, default_value: str | None = None) -> str:
    """Build the label of a type edge."""
    return f"{TYPE_PREFIX}{type_ref}{DEFAULT_VALUE_SEPARATOR}{default_value or ''}"


def decode_type_label(label: str) -> tuple[str, str | None]:
    """Split a type edge label into its type reference and default value.

    Args:
        label: Label of the form ``type=<T>;defaultValue=<V>``

    Returns:
        Tuple of the type reference and the default value (None if absent)

    Raises:
        InternalConsistencyError: If the label is not a type edge label
    """
    assert_true(is_type_label(label), f"Expected a type edge label, got {label!r}")

    end = label.find(";")
    type_ref = label[len(TYPE_PREFIX) : end if end != -1 else len(label)]

    separator_at = label.find(DEFAULT_VALUE_SEPARATOR)
    if separator_at == -1:
        return type_ref, None

    default_value = label[separator_at + len(DEFAULT_VALUE_SEPARATOR) :]
    return type_ref, default_value or None


def get_type_from_label(edge: Edge) -> str:
    return decode_type_label(edge.label)[0]


def get_default_value_from_label(edge: Edge) -> str | None:
    return decode_type_label(edge.label)[1]


def is_type_label(label: str) -> bool:
    return label.startswith(TYPE_PREFIX)


def is_implements_label(label: str) -> bool:
    return label.startswith(IMPLEMENTS_PREFIX)
