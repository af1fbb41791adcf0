"""schemadiff - semantic analysis of schema graph edit operations."""

__version__ = "0.1.0"

# Re-export the analysis entry points for easy access
# Note: CLI components imported on-demand to avoid pulling in rich at import time
from .analysis import EditOperationAnalysisResult, EditOperationAnalyzer, analyze_edits

__all__ = [
    "EditOperationAnalysisResult",
    "EditOperationAnalyzer",
    "__version__",
    "analyze_edits",
]
