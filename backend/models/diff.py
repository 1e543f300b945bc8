"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DiffOpType(str, Enum):
    """Kind of a single edit script step"""

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


class LCSAlgorithmName(str, Enum):
    """LCS variants selectable per request"""

    HIRSCHBERG = "hirschberg"
    CANDIDATES = "candidates"


class EngineSettings(BaseModel):
    """The ``engine`` section of the backend config"""

    model_config = ConfigDict(populate_by_name=True)

    algorithm: LCSAlgorithmName = LCSAlgorithmName.HIRSCHBERG
    trim_affixes: bool = Field(default=True, alias="trimAffixes")
    parallel_threshold: int = Field(default=250_000, ge=0, alias="parallelThreshold")  # len(a) * len(b) cells
    max_fork_depth: int = Field(default=2, ge=0, alias="maxForkDepth")
    max_workers: int = Field(default=2, ge=1, alias="maxWorkers")


class DiffOperation(BaseModel):
    """One step of the edit script"""

    model_config = ConfigDict(frozen=True)

    operation: DiffOpType
    text: str  # token text, or a joined run of affix tokens

    @classmethod
    def equal(cls, text: str) -> "DiffOperation":
        return cls(operation=DiffOpType.EQUAL, text=text)

    @classmethod
    def delete(cls, text: str) -> "DiffOperation":
        return cls(operation=DiffOpType.DELETE, text=text)

    @classmethod
    def insert(cls, text: str) -> "DiffOperation":
        return cls(operation=DiffOpType.INSERT, text=text)


class DiffStats(BaseModel):
    """Token counts for a computed diff"""

    model_config = ConfigDict(frozen=True)

    tokens_a: int
    tokens_b: int
    lcs_length: int
    equal: int  # tokens kept, affixes included
    deleted: int
    inserted: int


class DiffResult(BaseModel):
    """Complete diff result for a pair of texts"""

    model_config = ConfigDict(frozen=True)

    operations: list[DiffOperation]
    elapsed_ms: float  # display only
    algorithm: LCSAlgorithmName
    identical: bool
    stats: DiffStats


class CompareRequest(BaseModel):
    """Request to compare two texts"""

    text1: str
    text2: str
    algorithm: LCSAlgorithmName | None = None  # None: use configured default


class RenderResponse(BaseModel):
    """HTML rendering of a diff for the compare page"""

    html: str
    message: str | None = None
    deleted_html: str
    inserted_html: str
    time_taken: str
    elapsed_ms: float


class DiffStreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "operation", "done", "error"
    operation: DiffOperation | None = None
    elapsed_ms: float | None = None
    stats: DiffStats | None = None
    error: str | None = None
