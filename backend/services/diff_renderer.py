"""
Diff Renderer Service - HTML views of an edit script for the compare page
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from models.diff import DiffOperation, DiffOpType, DiffResult

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)

IDENTICAL_MESSAGE = "Strings are identical."
ERROR_MESSAGE = "An error occurred while computing differences."


def escape_html(text: str) -> str:
    """Escape token text before it is embedded in markup"""
    return text.translate(_HTML_ESCAPES)


def coalesce(operations: Iterable[DiffOperation]) -> list[DiffOperation]:
    """Merge runs of adjacent operations of the same kind"""
    merged: list[DiffOperation] = []
    for op in operations:
        if merged and merged[-1].operation == op.operation:
            merged[-1] = DiffOperation(operation=op.operation, text=merged[-1].text + op.text)
        else:
            merged.append(op)
    return merged


class RenderedDiff(BaseModel):
    """The two result lines plus timing, ready for the page"""

    deleted_html: str
    inserted_html: str
    time_taken: str
    message: str | None = None

    def to_html(self) -> str:
        if self.message == IDENTICAL_MESSAGE:
            return (
                f'<div class="result-line">{self.message}</div>'
                f'<div class="time-taken">{self.time_taken}</div>'
            )
        return (
            f'<div class="result-line">{self.deleted_html}</div>'
            f'<div class="result-line">{self.inserted_html}</div>'
            f'<div class="time-taken">{self.time_taken}</div>'
        )


class DiffRenderer:
    """Render a DiffResult as a deleted view and an inserted view"""

    def __init__(self, merge_runs: bool = True):
        self.merge_runs = merge_runs

    def render(self, result: DiffResult) -> RenderedDiff:
        time_taken = f"Time taken: {result.elapsed_ms:.2f} ms"

        if result.identical:
            return RenderedDiff(
                deleted_html="", inserted_html="", time_taken=time_taken, message=IDENTICAL_MESSAGE
            )

        operations = coalesce(result.operations) if self.merge_runs else result.operations
        deleted_parts: list[str] = []
        inserted_parts: list[str] = []

        for op in operations:
            text = escape_html(op.text)
            if op.operation == DiffOpType.DELETE:
                deleted_parts.append(f'<span class="deleted">{text}</span>')
                inserted_parts.append(self._placeholder(op.text))
            elif op.operation == DiffOpType.INSERT:
                inserted_parts.append(f'<span class="added">{text}</span>')
                deleted_parts.append(self._placeholder(op.text))
            else:
                deleted_parts.append(text)
                inserted_parts.append(text)

        return RenderedDiff(
            deleted_html="".join(deleted_parts),
            inserted_html="".join(inserted_parts),
            time_taken=time_taken,
        )

    @staticmethod
    def _placeholder(text: str) -> str:
        # Blank of the same length keeps both lines aligned.
        return '<span class="placeholder">' + " " * len(text) + "</span>"
