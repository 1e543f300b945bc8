"""Models module - Pydantic data models"""

from .diff import (
    CompareRequest,
    EngineSettings,
    DiffOperation,
    DiffOpType,
    DiffResult,
    DiffStats,
    DiffStreamEvent,
    LCSAlgorithmName,
    RenderResponse,
)

__all__ = [
    # Diff models
    "DiffOpType",
    "DiffOperation",
    "DiffStats",
    "DiffResult",
    "LCSAlgorithmName",
    "EngineSettings",
    # API models
    "CompareRequest",
    "RenderResponse",
    "DiffStreamEvent",
]
