"""
Tokenizer - Split raw text into diff-comparable tokens
"""

from __future__ import annotations

import re

# Word run, whitespace run, or one character that is neither.
TOKEN_PATTERN = re.compile(r"\w+|\s+|[^\w\s]")


def tokenize(text: str) -> list[str]:
    """Split text into word runs, whitespace runs and single other characters"""
    return TOKEN_PATTERN.findall(text)
