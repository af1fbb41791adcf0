"""Presentation helpers for analysis results.

Every function here dispatches over the closed difference unions and ends
in ``assert_never``, so adding a variant fails type checking until it is
handled.
"""

from typing import Any, assert_never

from ..analysis.differences import (
    Detail,
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
    SchemaDifference,
    UnionAddition,
    UnionDeletion,
    UnionMemberAddition,
    UnionMemberDeletion,
    UnionModification,
)

KIND_SECTIONS = (
    ("object", "Objects"),
    ("interface", "Interfaces"),
    ("union", "Unions"),
    ("enum", "Enums"),
    ("input_object", "Input objects"),
    ("scalar", "Scalars"),
)


def _default(value: str | None) -> str:
    return value if value is not None else "<none>"


def describe_detail(detail: Detail) -> str:  # noqa: PLR0911
    """One-line description of a modification detail."""
    match detail:
        case ObjectFieldAddition(name=name) | InterfaceFieldAddition(name=name):
            return f"field '{name}' added"
        case ObjectFieldDeletion(name=name) | InterfaceFieldDeletion(name=name):
            return f"field '{name}' removed"
        case ObjectFieldRename(old_name=old, new_name=new) | InterfaceFieldRename(
            old_name=old, new_name=new
        ):
            return f"field '{old}' renamed to '{new}'"
        case ObjectFieldTypeModification(
            field_name=field, old_type=old, new_type=new
        ) | InterfaceFieldTypeModification(
            field_name=field, old_type=old, new_type=new
        ):
            return f"field '{field}' type changed from {old} to {new}"
        case ObjectFieldArgumentDeletion(
            field_name=field, name=name
        ) | InterfaceFieldArgumentDeletion(field_name=field, name=name):
            return f"argument '{field}.{name}' removed"
        case ObjectFieldArgumentTypeModification(
            field_name=field, argument_name=name, old_type=old, new_type=new
        ) | InterfaceFieldArgumentTypeModification(
            field_name=field, argument_name=name, old_type=old, new_type=new
        ):
            return f"argument '{field}.{name}' type changed from {old} to {new}"
        case ObjectFieldArgumentDefaultValueModification(
            field_name=field, argument_name=name, old_value=old, new_value=new
        ) | InterfaceFieldArgumentDefaultValueModification(
            field_name=field, argument_name=name, old_value=old, new_value=new
        ):
            return (
                f"argument '{field}.{name}' default changed from "
                f"{_default(old)} to {_default(new)}"
            )
        case ObjectInterfaceImplementationAddition(
            name=name
        ) | InterfaceInterfaceImplementationAddition(name=name):
            return f"now implements '{name}'"
        case ObjectInterfaceImplementationDeletion(
            name=name
        ) | InterfaceInterfaceImplementationDeletion(name=name):
            return f"no longer implements '{name}'"
        case UnionMemberAddition(name=name):
            return f"member '{name}' added"
        case UnionMemberDeletion(name=name):
            return f"member '{name}' removed"
        case _:
            assert_never(detail)


def difference_status(difference: SchemaDifference) -> str:
    """Return ``added``, ``removed`` or ``modified`` for a difference record."""
    match difference:
        case (
            ObjectAddition()
            | InterfaceAddition()
            | UnionAddition()
            | EnumAddition()
            | InputObjectAddition()
            | ScalarAddition()
        ):
            return "added"
        case (
            ObjectDeletion()
            | InterfaceDeletion()
            | UnionDeletion()
            | EnumDeletion()
            | InputObjectDeletion()
            | ScalarDeletion()
        ):
            return "removed"
        case (
            ObjectModification()
            | InterfaceModification()
            | UnionModification()
            | EnumModification()
            | InputObjectModification()
            | ScalarModification()
        ):
            return "modified"
        case _:
            assert_never(difference)


def detail_to_dict(detail: Detail) -> dict[str, Any]:
    """Serialise a detail as ``{"type": <class name>, **fields}``."""
    return {"type": type(detail).__name__, **vars(detail)}


def difference_to_dict(difference: SchemaDifference) -> dict[str, Any]:
    """Serialise a difference record for JSON output."""
    status = difference_status(difference)
    data: dict[str, Any] = {"name": difference.name, "status": status}
    if status == "modified":
        data["details"] = [
            detail_to_dict(detail) for detail in getattr(difference, "details", ())
        ]
    return data


def result_to_dict(result: EditOperationAnalysisResult) -> dict[str, Any]:
    """Serialise a full analysis result, keyed by kind then type name."""
    return {
        kind: {
            name: difference_to_dict(difference)
            for name, difference in getattr(result, f"{kind}_differences").items()
        }
        for kind, _label in KIND_SECTIONS
    }
