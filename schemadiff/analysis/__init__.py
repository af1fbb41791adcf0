"""Edit operation analysis producing semantic schema differences."""

from .analyzer import EditOperationAnalyzer, analyze_edits
from .differences import (
    Detail,
    EditOperationAnalysisResult,
    InterfaceDetail,
    InterfaceDifference,
    ObjectDetail,
    ObjectDifference,
    SchemaDifference,
    UnionDetail,
    UnionDifference,
)

__all__ = [
    "Detail",
    "EditOperationAnalysisResult",
    "EditOperationAnalyzer",
    "InterfaceDetail",
    "InterfaceDifference",
    "ObjectDetail",
    "ObjectDifference",
    "SchemaDifference",
    "UnionDetail",
    "UnionDifference",
    "analyze_edits",
]
