"""Scalars defined by the GraphQL specification itself."""

BUILT_IN_SCALARS = frozenset({"Int", "Float", "String", "Boolean", "ID"})


def is_built_in_scalar(name: str) -> bool:
    """Check if a scalar name is one of the specification-defined scalars.

    Built-in scalars show up as inserted vertices whenever the old schema did
    not reference them, so they are never reported as scalar additions.
    """
    return name in BUILT_IN_SCALARS
