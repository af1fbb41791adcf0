"""Semantic difference model produced by the edit operation analyzer.

Every named type kind has a closed set of outcomes: the type was added,
deleted, or modified. Modifications carry an ordered tuple of details
describing what changed inside the type. All classes are frozen dataclasses
so that a report can be shared freely once the analysis returns.

The ``*Difference`` and ``*Detail`` aliases are the closed unions consumers
should dispatch on with ``match`` and ``typing.assert_never``.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

D = TypeVar("D")


# ---------------------------------------------------------------------------
# Object details
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ObjectFieldAddition:
    name: str


@dataclass(frozen=True)
class ObjectFieldDeletion:
    name: str


@dataclass(frozen=True)
class ObjectFieldRename:
    old_name: str
    new_name: str


@dataclass(frozen=True)
class ObjectFieldTypeModification:
    field_name: str
    old_type: str
    new_type: str


@dataclass(frozen=True)
class ObjectFieldArgumentDeletion:
    field_name: str
    name: str


@dataclass(frozen=True)
class ObjectFieldArgumentTypeModification:
    field_name: str
    argument_name: str
    old_type: str
    new_type: str


@dataclass(frozen=True)
class ObjectFieldArgumentDefaultValueModification:
    field_name: str
    argument_name: str
    old_value: str | None
    new_value: str | None


@dataclass(frozen=True)
class ObjectInterfaceImplementationAddition:
    name: str


@dataclass(frozen=True)
class ObjectInterfaceImplementationDeletion:
    name: str


ObjectDetail = (
    ObjectFieldAddition
    | ObjectFieldDeletion
    | ObjectFieldRename
    | ObjectFieldTypeModification
    | ObjectFieldArgumentDeletion
    | ObjectFieldArgumentTypeModification
    | ObjectFieldArgumentDefaultValueModification
    | ObjectInterfaceImplementationAddition
    | ObjectInterfaceImplementationDeletion
)


# ---------------------------------------------------------------------------
# Interface details
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InterfaceFieldAddition:
    name: str


@dataclass(frozen=True)
class InterfaceFieldDeletion:
    name: str


@dataclass(frozen=True)
class InterfaceFieldRename:
    old_name: str
    new_name: str


@dataclass(frozen=True)
class InterfaceFieldTypeModification:
    field_name: str
    old_type: str
    new_type: str


@dataclass(frozen=True)
class InterfaceFieldArgumentDeletion:
    field_name: str
    name: str


@dataclass(frozen=True)
class InterfaceFieldArgumentTypeModification:
    field_name: str
    argument_name: str
    old_type: str
    new_type: str


@dataclass(frozen=True)
class InterfaceFieldArgumentDefaultValueModification:
    field_name: str
    argument_name: str
    old_value: str | None
    new_value: str | None


@dataclass(frozen=True)
class InterfaceInterfaceImplementationAddition:
    name: str


@dataclass(frozen=True)
class InterfaceInterfaceImplementationDeletion:
    name: str


InterfaceDetail = (
    InterfaceFieldAddition
    | InterfaceFieldDeletion
    | InterfaceFieldRename
    | InterfaceFieldTypeModification
    | InterfaceFieldArgumentDeletion
    | InterfaceFieldArgumentTypeModification
    | InterfaceFieldArgumentDefaultValueModification
    | InterfaceInterfaceImplementationAddition
    | InterfaceInterfaceImplementationDeletion
)


# ---------------------------------------------------------------------------
# Union details
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UnionMemberAddition:
    name: str


@dataclass(frozen=True)
class UnionMemberDeletion:
    name: str


UnionDetail = UnionMemberAddition | UnionMemberDeletion

Detail = ObjectDetail | InterfaceDetail | UnionDetail


# ---------------------------------------------------------------------------
# Top-level differences
# ---------------------------------------------------------------------------


class _Modification:
    """Shared helpers for modification records."""

    details: tuple

    def details_of(self, detail_type: type[D]) -> list[D]:
        """Return the details of the given type, in discovery order."""
        return [detail for detail in self.details if isinstance(detail, detail_type)]


@dataclass(frozen=True)
class ObjectAddition:
    name: str


@dataclass(frozen=True)
class ObjectDeletion:
    name: str


@dataclass(frozen=True)
class ObjectModification(_Modification):
    name: str
    details: tuple[ObjectDetail, ...] = ()


@dataclass(frozen=True)
class InterfaceAddition:
    name: str


@dataclass(frozen=True)
class InterfaceDeletion:
    name: str


@dataclass(frozen=True)
class InterfaceModification(_Modification):
    name: str
    details: tuple[InterfaceDetail, ...] = ()


@dataclass(frozen=True)
class UnionAddition:
    name: str


@dataclass(frozen=True)
class UnionDeletion:
    name: str


@dataclass(frozen=True)
class UnionModification(_Modification):
    name: str
    details: tuple[UnionDetail, ...] = ()


@dataclass(frozen=True)
class EnumAddition:
    name: str


@dataclass(frozen=True)
class EnumDeletion:
    name: str


@dataclass(frozen=True)
class EnumModification(_Modification):
    name: str
    details: tuple[()] = ()


@dataclass(frozen=True)
class InputObjectAddition:
    name: str


@dataclass(frozen=True)
class InputObjectDeletion:
    name: str


@dataclass(frozen=True)
class InputObjectModification(_Modification):
    name: str
    details: tuple[()] = ()


@dataclass(frozen=True)
class ScalarAddition:
    name: str


@dataclass(frozen=True)
class ScalarDeletion:
    name: str


@dataclass(frozen=True)
class ScalarModification(_Modification):
    name: str
    details: tuple[()] = ()


ObjectDifference = ObjectAddition | ObjectDeletion | ObjectModification
InterfaceDifference = InterfaceAddition | InterfaceDeletion | InterfaceModification
UnionDifference = UnionAddition | UnionDeletion | UnionModification
EnumDifference = EnumAddition | EnumDeletion | EnumModification
InputObjectDifference = (
    InputObjectAddition | InputObjectDeletion | InputObjectModification
)
ScalarDifference = ScalarAddition | ScalarDeletion | ScalarModification

SchemaDifference = (
    ObjectDifference
    | InterfaceDifference
    | UnionDifference
    | EnumDifference
    | InputObjectDifference
    | ScalarDifference
)


@dataclass(frozen=True)
class EditOperationAnalysisResult:
    """Complete analysis result.

    Holds one read-only, insertion-ordered mapping per type kind, keyed by
    type name. Each name appears at most once per kind.
    """

    object_differences: MappingProxyType[str, ObjectDifference]
    interface_differences: MappingProxyType[str, InterfaceDifference]
    union_differences: MappingProxyType[str, UnionDifference]
    enum_differences: MappingProxyType[str, EnumDifference]
    input_object_differences: MappingProxyType[str, InputObjectDifference]
    scalar_differences: MappingProxyType[str, ScalarDifference]

    @classmethod
    def from_dicts(
        cls,
        object_differences: dict[str, ObjectDifference] | None = None,
        interface_differences: dict[str, InterfaceDifference] | None = None,
        union_differences: dict[str, UnionDifference] | None = None,
        enum_differences: dict[str, EnumDifference] | None = None,
        input_object_differences: dict[str, InputObjectDifference] | None = None,
        scalar_differences: dict[str, ScalarDifference] | None = None,
    ) -> "EditOperationAnalysisResult":
        """Build a result from plain dictionaries, copying each of them."""
        return cls(
            object_differences=MappingProxyType(dict(object_differences or {})),
            interface_differences=MappingProxyType(dict(interface_differences or {})),
            union_differences=MappingProxyType(dict(union_differences or {})),
            enum_differences=MappingProxyType(dict(enum_differences or {})),
            input_object_differences=MappingProxyType(
                dict(input_object_differences or {})
            ),
            scalar_differences=MappingProxyType(dict(scalar_differences or {})),
        )

    def all_differences(self) -> list[SchemaDifference]:
        """All difference records, grouped by kind."""
        return [
            *self.object_differences.values(),
            *self.interface_differences.values(),
            *self.union_differences.values(),
            *self.enum_differences.values(),
            *self.input_object_differences.values(),
            *self.scalar_differences.values(),
        ]

    def is_empty(self) -> bool:
        """Check if the analysis found no differences at all."""
        return not self.all_differences()

    def summary(self) -> str:
        """Human-readable count of records per kind."""
        counts = [
            ("Objects", self.object_differences),
            ("Interfaces", self.interface_differences),
            ("Unions", self.union_differences),
            ("Enums", self.enum_differences),
            ("Input objects", self.input_object_differences),
            ("Scalars", self.scalar_differences),
        ]
        return "\n".join(f"{label}: {len(records)}" for label, records in counts)
