"""Services module - Business logic layer"""

from .tokenizer import tokenize
from .affix import common_prefix_length, common_suffix_length
from .edit_script import build_script
from .config_manager import ConfigManager
from .diff_generator import DiffGenerator
from .diff_renderer import DiffRenderer, coalesce, escape_html

__all__ = [
    "tokenize",
    "common_prefix_length",
    "common_suffix_length",
    "build_script",
    "ConfigManager",
    "DiffGenerator",
    "DiffRenderer",
    "coalesce",
    "escape_html",
]
